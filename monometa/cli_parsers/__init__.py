"""Argument parser builders for the mono-meta CLI."""
