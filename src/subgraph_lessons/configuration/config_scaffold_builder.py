"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "subgraph-lessons.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Lesson configuration template for subgraph-lessons.
# Replace every <REQUIRED> placeholder before running query, export or document.
# Uncomment optional keys only when your setup needs them.

gateway:
  # GraphQL endpoint of the subgraph to query.
  graphql_url: "<REQUIRED>"
  # Raw document endpoint of the content-addressed store; {cid} is replaced.
  # ipfs_url_template: "https://ipfs.network.thegraph.com/api/v0/cat?arg={cid}"
  # timeout_seconds: 30

query:
  # Provide either inline query text or a path to a .graphql file.
  inline: "<REQUIRED>"
  # path: "queries/tokens.graphql"
  # Top-level field of the response data holding the records.
  collection: "<REQUIRED>"
  # Record fields written as export columns, in order. Dotted paths walk nested objects.
  columns:
    - "<REQUIRED>"

documentation:
  # Directory receiving overview.md and entities.md.
  # output_dir: "docs"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML lesson configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder lesson configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Lesson configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
