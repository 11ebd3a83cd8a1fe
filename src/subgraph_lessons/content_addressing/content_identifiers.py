"""Validated content identifiers for the content-addressed document store."""

from __future__ import annotations

import re
from dataclasses import dataclass

_IPFS_PREFIX = "/ipfs/"
_CID_V0_PATTERN = re.compile(r"Qm[1-9A-HJ-NP-Za-km-z]{44}")
_CID_V1_BASE32_PATTERN = re.compile(r"b[a-z2-7]{49,}")


class InvalidContentIdentifierError(ValueError):
    """Raised when a string is not a usable content identifier."""


@dataclass(frozen=True)
class ContentIdentifier:
    """A CIDv0 or base32 CIDv1 naming one stored document."""

    value: str

    def __post_init__(self) -> None:
        if not _is_valid_cid(self.value):
            raise InvalidContentIdentifierError(f"Invalid content identifier: {self.value!r}")

    @classmethod
    def parse(cls, raw: str) -> ContentIdentifier:
        """Normalize and validate raw identifier text such as ``/ipfs/Qm...``."""
        if not isinstance(raw, str):
            raise InvalidContentIdentifierError("Content identifier must be a string.")
        candidate = raw.strip()
        if candidate.startswith(_IPFS_PREFIX):
            candidate = candidate[len(_IPFS_PREFIX) :]
        return cls(candidate)

    def __str__(self) -> str:
        return self.value


def _is_valid_cid(value: str) -> bool:
    return bool(_CID_V0_PATTERN.fullmatch(value) or _CID_V1_BASE32_PATTERN.fullmatch(value))
