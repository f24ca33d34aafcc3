"""peakrank - stored League accounts and live solo-queue rank lookups."""

__version__ = "0.1.0"
