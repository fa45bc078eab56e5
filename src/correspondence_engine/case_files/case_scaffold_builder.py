"""Case file scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CASE_FILENAME = "cases.yaml"

_CASE_SCAFFOLD_TEMPLATE = """# Case file template for correspondence-engine.
# Each case pairs an actual list with expected values under a named relation.

cases:
  - id: prefixes
    # Choose one check: contains_exactly, contains or corresponds.
    check: contains_exactly
    # Set in_order: true to also require position-by-position correspondence.
    in_order: false
    relation:
      # Supported kinds: equals, starts_with, ends_with, contains_text,
      # case_insensitive, length, tolerance.
      kind: starts_with
    actual: [foot, barn]
    expected: [foo, bar]

  - id: close-enough
    check: contains
    relation:
      kind: tolerance
      # Required for kind tolerance; must not be negative.
      tolerance: 0.05
    actual: [1.02, 2.04, 3.08]
    # contains and corresponds take a single expected value.
    expected: 2.0
"""


def build_placeholder_case_file() -> str:
    """Build a YAML case file template with inline guidance."""
    return _CASE_SCAFFOLD_TEMPLATE


def write_placeholder_case_file(output_path: Path | str) -> Path:
    """Write the case file template to the requested output path.

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
        raise FileExistsError(f"Case file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_case_file(), encoding="utf-8")
    return destination.resolve()
