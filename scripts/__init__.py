"""Maintenance scripts for the guide data."""
