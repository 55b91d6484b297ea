"""Utility package: logging and result handling."""
