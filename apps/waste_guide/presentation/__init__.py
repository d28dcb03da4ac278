"""Waste Guide Presentation Layer."""
