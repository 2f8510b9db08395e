"""Layout resolution for betting markets: simple outcome rows and compound grids."""

__version__ = "0.1.0"
