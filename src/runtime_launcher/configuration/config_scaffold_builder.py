"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "launcher.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Launcher configuration for runtime-launcher.
# Every key is optional. Remove a key to fall back to the default.

features:
  # Enables the experimental moongres backend executed by rustica-engine.
  moongres: false

runtimes:
  # Explicit executable paths. Relative paths resolve against this file.
  # Leave a runtime unset to search the environment PATH instead.
  # moonrun: "/path/to/moonrun"
  # node: "/path/to/node"
  # rustica_engine: "/path/to/rustica-engine"
"""


def build_placeholder_settings() -> str:
    """Build a YAML launcher configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the placeholder launcher configuration to the requested output path.

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
        raise FileExistsError(
            f"Launcher configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
