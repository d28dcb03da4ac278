"""Waste Guide Application Layer."""
