"""Shared helpers for MRZ text handling."""
