"""Content identifier validation tests."""

from __future__ import annotations

import pytest
from subgraph_lessons.content_addressing import ContentIdentifier, InvalidContentIdentifierError

CID_V0 = "QmZ7hfY6Fa1MsPG6sD4Ns8TAd7r3U5vC2LSkbaHfnFe3Fu"
CID_V1 = "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi"


@pytest.mark.parametrize("raw", [CID_V0, CID_V1, f"  {CID_V0}\n", f"/ipfs/{CID_V0}"])
def test_parse_accepts_and_normalizes_identifiers(raw: str) -> None:
    identifier = ContentIdentifier.parse(raw)

    assert str(identifier) in (CID_V0, CID_V1)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "Qm123",
        CID_V0[:-1] + "0",
        CID_V0 + "x",
        "https://example.com/" + CID_V0,
        CID_V1.upper(),
        "../../etc/passwd",
    ],
)
def test_parse_rejects_malformed_identifiers(raw: str) -> None:
    with pytest.raises(InvalidContentIdentifierError):
        ContentIdentifier.parse(raw)


def test_direct_construction_validates_too() -> None:
    with pytest.raises(InvalidContentIdentifierError):
        ContentIdentifier("not-a-cid")
