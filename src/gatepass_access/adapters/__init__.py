"""Adapters – persistence implementations of kernel ports."""
