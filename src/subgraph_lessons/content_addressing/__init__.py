"""Content addressing exports."""

from .content_identifiers import ContentIdentifier, InvalidContentIdentifierError

__all__ = [
    "ContentIdentifier",
    "InvalidContentIdentifierError",
]
