"""Scanning and reporting modules for corsprobe."""
