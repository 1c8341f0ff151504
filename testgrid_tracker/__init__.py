"""
TestGrid job report normalization and aggregation.

Converts per-job dashboard reports into result tables keyed by canonical
test names so that runs of the same test line up across jobs.
"""
