"""dartweave: dependency graph and import assembly for generated Flutter sources."""

__version__ = "0.1.0"
