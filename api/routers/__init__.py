"""Routery API."""
