"""Waste Guide Infrastructure Layer."""
