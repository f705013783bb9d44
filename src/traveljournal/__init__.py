"""Journal content editor and theming engine for the Travel Journal app."""

__version__ = "0.1.0"
