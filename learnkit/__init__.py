"""Small, test-driven building blocks: helpers, shapes, a wallet, a clock face and a score server."""

__version__ = "0.1.0"