"""Shared helpers: naming constants, dates and cell coercion."""
