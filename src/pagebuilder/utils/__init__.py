"""Utility helpers for pagebuilder."""
