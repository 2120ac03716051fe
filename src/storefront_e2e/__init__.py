"""storefront-e2e - browser tests and price verification for the demo web shop."""

__version__ = "0.1.0"
