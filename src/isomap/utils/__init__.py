"""Utility helpers for isomap."""
