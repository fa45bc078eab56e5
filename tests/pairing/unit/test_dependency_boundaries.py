"""Boundary tests for the matching core's internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_matching_core_does_not_import_outer_layers() -> None:
    package_dir = _project_root() / "src" / "correspondence_engine"
    core_modules = (
        *sorted((package_dir / "relations").glob("*.py")),
        *sorted((package_dir / "pairing").glob("*.py")),
    )
    forbidden_import_fragments = (
        "correspondence_engine.failure_reporting",
        "correspondence_engine.case_files",
        "correspondence_engine.run_execution",
        "correspondence_engine.results_writing",
        "import click",
        "import yaml",
        "openpyxl",
    )

    assert core_modules
    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
