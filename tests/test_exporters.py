"""Tests for JSON deck export and import."""

import json
from pathlib import Path

import pytest

from flashforge_core.exporters import DEFAULT_FILENAME, export_json, load_json
from flashforge_core.schemas.cards import Deck


class TestJSONExport:
    """Tests for JSON export."""

    def test_array_of_cards_in_order(self, sample_deck: Deck) -> None:
        """The export is a JSON array in deck order."""
        payload = json.loads(export_json(sample_deck))

        assert [card["id"] for card in payload] == ["card-1", "card-2", "card-3"]

    def test_fields_written_as_is(self, sample_deck: Deck) -> None:
        """Card fields use their public names and values."""
        payload = json.loads(export_json(sample_deck))

        assert payload[1] == {
            "id": "card-2",
            "question": "Which planet is largest?",
            "answer": "Jupiter",
            "type": "multiple-choice",
            "options": ["Mars", "Jupiter", "Venus", "Earth"],
            "correctOption": 1,
        }

    def test_choice_fields_omitted_elsewhere(self, sample_deck: Deck) -> None:
        """Basic and fill-blank cards carry no options keys."""
        payload = json.loads(export_json(sample_deck))

        for card in (payload[0], payload[2]):
            assert "options" not in card
            assert "correctOption" not in card

    def test_write_to_file(self, sample_deck: Deck, tmp_path: Path) -> None:
        """An explicit file path receives the content."""
        path = tmp_path / "deck.json"

        content = export_json(sample_deck, path, indent=2)

        assert path.read_text(encoding="utf-8") == content
        assert content.startswith("[\n  {")

    def test_write_to_directory(self, sample_deck: Deck, tmp_path: Path) -> None:
        """A directory receives the default file name."""
        export_json(sample_deck, tmp_path)

        assert (tmp_path / DEFAULT_FILENAME).exists()
        assert DEFAULT_FILENAME == "flashforge-deck.json"

    def test_non_ascii_preserved(self) -> None:
        """Text is written as UTF-8 rather than escaped."""
        deck = load_json(
            '[{"id": "c1", "question": "Où est Zürich?", "answer": "Suisse",'
            ' "type": "basic"}]'
        )

        assert "Où est Zürich?" in export_json(deck)


class TestJSONImport:
    """Tests for loading exported decks."""

    def test_round_trip(self, sample_deck: Deck) -> None:
        """An exported deck loads back to the same cards."""
        deck = load_json(export_json(sample_deck))

        assert deck.cards == sample_deck.cards
        assert deck.source == "import"

    def test_object_rejected(self) -> None:
        """Only arrays are accepted."""
        with pytest.raises(ValueError, match="array"):
            load_json('{"flashcards": []}')

    def test_invalid_card_rejected(self) -> None:
        """Card shape rules apply to imported decks."""
        content = json.dumps(
            [
                {
                    "id": "c1",
                    "question": "Q?",
                    "answer": "A",
                    "type": "multiple-choice",
                    "options": ["a", "b"],
                    "correctOption": 0,
                }
            ]
        )

        with pytest.raises(ValueError):
            load_json(content)


class TestJSONExportPaths:
    """Tests for resolving the export destination."""

    def test_trailing_separator_creates_directory(
        self, sample_deck: Deck, tmp_path: Path
    ) -> None:
        """A missing directory named with a trailing slash is created."""
        export_json(sample_deck, f"{tmp_path}/decks/")

        written = tmp_path / "decks" / DEFAULT_FILENAME
        assert written.is_file()
        assert len(json.loads(written.read_text(encoding="utf-8"))) == 3

    def test_missing_parents_created_for_file(
        self, sample_deck: Deck, tmp_path: Path
    ) -> None:
        """A file path under missing directories is still written."""
        path = tmp_path / "exports" / "biology" / "deck.json"

        export_json(sample_deck, path)

        assert path.is_file()
