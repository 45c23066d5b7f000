"""Vimshottari period tree: lord sequence, builder, point queries."""
