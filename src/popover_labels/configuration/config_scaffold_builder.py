"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "popover-labels.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Settings template for popover-labels.
# Every section is optional; remove a key to keep its default.

popover:
  # Markup attributes written onto labels whose field carries a popover annotation.
  toggle_attribute: "data-toggle"
  toggle_value: "popover"
  title_attribute: "data-original-title"
  content_attribute: "data-content"

catalog:
  # YAML file mapping resource keys to text. Direct field annotations always
  # resolve their title and content keys against this catalog.
  # path: "labels.yaml"
  # Class name reported in resolution errors; derived from the file name when omitted.
  # name: "Labels"

rendering:
  # Prefix prepended to field paths when building the label "for" id.
  # html_field_prefix: "form"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML settings template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

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
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
