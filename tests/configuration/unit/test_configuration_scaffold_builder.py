"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from popover_labels.configuration import load_configuration
from popover_labels.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Settings template for popover-labels" in scaffold
    assert "popover:" in scaffold
    assert "toggle_attribute:" in scaffold
    assert "catalog:" in scaffold
    assert "rendering:" in scaffold


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "popover-labels.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.popover.title_attribute == "data-original-title"
    assert configuration.catalog_path is None


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "popover-labels.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
