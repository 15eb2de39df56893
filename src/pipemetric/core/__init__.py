"""Core metric record, normalization and hashing."""
