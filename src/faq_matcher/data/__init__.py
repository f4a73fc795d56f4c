"""Packaged intent catalog data."""
