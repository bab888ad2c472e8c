"""Build Deribit FIX 4.4 messages for orders, cancels and market data."""

__version__ = "0.1.1"