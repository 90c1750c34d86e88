"""mono-meta - inventory and diff the services of a monorepo."""

__version__ = "0.3.0"
