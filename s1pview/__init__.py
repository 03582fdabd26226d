"""Read one-port Touchstone files, compute log-magnitude data and chart bounds."""

__version__ = "0.1.0"

__all__ = ["__version__"]