"""Export formats for decks."""

from flashforge_core.exporters.json_deck import DEFAULT_FILENAME, export_json, load_json

__all__ = ["DEFAULT_FILENAME", "export_json", "load_json"]
