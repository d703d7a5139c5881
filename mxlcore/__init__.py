"""Clocks, head index arithmetic, data formats and flow and grain descriptors for media exchange."""

__version__ = "0.6.0"
__all__ = ["dataformat", "flowinfo", "grain", "headindex", "info", "rational", "status", "timing"]