"""
Application-wide constants.

Literal markers used to recognize and rewrite dashboard-generated test names.
"""

# Operator Aggregate Tests
OPERATOR_RESULTS_PREFIX = "Operator results test operator "
"""Prefix shared by the synthetic install/upgrade aggregate tests."""

OPERATOR_INSTALL_MARKER = "install install_"
"""Marker following the prefix on install-phase aggregate tests."""

OPERATOR_UPGRADE_MARKER = "upgrade_"
"""Marker following the prefix on upgrade-phase aggregate tests."""

OPERATOR_INSTALL_PREFIX = OPERATOR_RESULTS_PREFIX + OPERATOR_INSTALL_MARKER
OPERATOR_UPGRADE_PREFIX = OPERATOR_RESULTS_PREFIX + OPERATOR_UPGRADE_MARKER

OPERATOR_CONDITIONS_PREFIX = "Operator results.operator conditions"
"""
Grouped name for operator aggregate tests.

Install and upgrade aggregate tests for one operator are reported under
"<OPERATOR_CONDITIONS_PREFIX> <operator>".
"""

# Random Namespaces
RANDOM_NAMESPACE_SENTINEL = "test namespace"
"""Replacement for randomly generated "test-<suffix>" namespaces."""

# Job Runs
OVERALL_TEST_NAME = "Overall"
"""Synthetic test carrying the outcome of the whole job run."""
