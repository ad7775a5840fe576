"""Parsing, arithmetic and comparison of polynomials in sum-of-products form."""

__version__ = "1.0.0"
__all__ = ["multiplicand", "addend", "arithmetic", "parser", "cli"]