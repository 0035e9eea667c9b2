"""Product catalogue browser: categories, products in a category, product detail."""

__version__ = "0.1.0"
