"""CLI command implementations for corsprobe."""
