"""Packaged recipe data."""
