"""netabako — trending-topic post idea generator."""

__version__ = "1.0.0"
