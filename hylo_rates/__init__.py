"""Hylo rates dashboard: APY snapshot normalization and profit calculator."""

__version__ = "0.1.0"
