"""PTP launcher — provisions the prebuilt PTP binary and delegates to it."""

__version__ = "0.1.0"
