"""Currency conversion service backed by pluggable exchange rate providers."""

__version__ = "0.1.0"
