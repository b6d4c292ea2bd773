"""Building blocks for scheduling, configuring and scoring matches between Ataxx engines."""

__version__ = "0.1.0"