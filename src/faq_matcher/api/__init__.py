"""HTTP API for the FAQ matcher."""
