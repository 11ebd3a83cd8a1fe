"""Manifest ingestion exports."""

from .manifest_models import DataSource, Manifest
from .manifest_reader import ManifestError, parse_manifest

__all__ = [
    "DataSource",
    "Manifest",
    "ManifestError",
    "parse_manifest",
]
