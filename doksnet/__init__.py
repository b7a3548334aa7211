"""Verify that documentation passages still match the code they describe."""

__version__ = "1.1.2"
__all__ = ["__version__"]