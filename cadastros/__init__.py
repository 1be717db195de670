"""Terminal record keepers and grid-walking robot exercises."""

__version__ = "0.1.0"