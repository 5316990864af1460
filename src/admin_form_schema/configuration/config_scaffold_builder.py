"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "admin-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Admin form configuration template for admin-form-schema.
# Replace every <REQUIRED> placeholder before running schema-map.
# Replace <OPTIONAL> placeholders only when your forms need them.

localization:
  default_locale: "en"
  fallback_locale: "<OPTIONAL>"
  translations:
    # Keys are field labels, or field names when no label is set.
    en:
      title: "<OPTIONAL>"

collections:
  # Configure at least one collection or global.
  "<REQUIRED>":
    label: "<OPTIONAL>"
    fields:
      # Leaf types: text, textarea, number, email, checkbox, date, select, radio,
      # relationship, upload, richText, code, json, point, password, ui.
      # Keys other than name, type, label and required are passed to the renderer.
      - name: "title"
        type: "text"
        required: true
      # Containers: group and array nest fields under their name, blocks nests
      # each variant under "<name>.<slug>", array rows share "<name>.*".
      # - name: "sections"
      #   type: "blocks"
      #   blocks:
      #     - slug: "<OPTIONAL>"
      #       fields: []
      # Tabs without a name, rows and collapsibles add no path segment.
      # - type: "tabs"
      #   tabs:
      #     - label: "<OPTIONAL>"
      #       fields: []

globals:
  # "<OPTIONAL>":
  #   fields: []
"""


def build_placeholder_configuration() -> str:
    """Build a YAML admin configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder admin configuration template to the requested output path.

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
        raise FileExistsError(f"Admin configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
