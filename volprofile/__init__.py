"""
Volprofile - Intraday Volume Profile Engine

Models an intraday trading-volume profile as a partition of the trading day
into time buckets, each carrying a fraction of expected daily volume. Used to
compute expected cumulative volume and normalized execution-progress targets
for pacing an order against the volume shape of the day.
"""

__version__ = "0.1.0"
__author__ = "Volprofile Team"
