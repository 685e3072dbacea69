"""Turn-based package tracking and lost-parcel claim assistant."""

__version__ = "0.1.0"
