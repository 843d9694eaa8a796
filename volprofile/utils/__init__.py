"""
Utility functions module.

Time-of-day helpers shared by the parsers, the synthetic generator and the
profile queries. Profiles are defined on wall-clock time of day only; no
dates or time zones are involved.
"""
