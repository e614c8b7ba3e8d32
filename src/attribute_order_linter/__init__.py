"""Attribute order linter: enforce a canonical order of attributes in template start tags."""

__version__ = "0.1.0"
