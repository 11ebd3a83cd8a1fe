"""Lessons for querying subgraphs and documenting their schemas."""
