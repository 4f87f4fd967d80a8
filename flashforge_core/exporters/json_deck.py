"""JSON deck export and import."""

import json
import os
from pathlib import Path

from flashforge_core.schemas.cards import Deck

DEFAULT_FILENAME = "flashforge-deck.json"


def export_json(
    deck: Deck,
    output: str | Path | None = None,
    indent: int | None = None,
) -> str:
    """Serialize a deck as a JSON array of card objects.

    Card fields are written as-is under their public names (``correctOption``
    in camel case); ``options`` and ``correctOption`` are omitted on cards
    that do not have them.

    Args:
        deck: Deck to export
        output: Optional file or directory path. An existing directory, or a
            path ending in a separator, receives ``flashforge-deck.json``;
            missing parent directories are created.
        indent: Optional pretty-print indent

    Returns:
        JSON content as string
    """
    content = json.dumps(deck.to_payload(), indent=indent, ensure_ascii=False)

    if output:
        path = Path(output)
        if path.is_dir() or str(output).endswith(("/", os.sep)):
            path = path / DEFAULT_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    return content


def load_json(content: str | bytes, source: str = "import") -> Deck:
    """Parse an exported deck, validating each card's shape.

    Raises:
        ValueError: If the content is not a JSON array of valid cards
    """
    payload = json.loads(content)
    if not isinstance(payload, list):
        raise ValueError("Deck JSON must be an array of card objects")
    return Deck.from_payload(payload, source=source)
