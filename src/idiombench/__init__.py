"""idiombench: compare the relative cost of small Python idioms."""

__version__ = "0.1.0"
