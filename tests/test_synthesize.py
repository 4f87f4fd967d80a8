"""Tests for the fallback generator and the synthesis stage."""

import pytest

from flashforge_core.config import Settings
from flashforge_core.errors import EmptyInputError, NoCardsProducedError
from flashforge_core.generators import (
    FallbackGenerator,
    build_generator,
    candidate_terms,
)
from flashforge_core.pipeline.synthesize import prepare_notes, synthesize
from flashforge_core.schemas.cards import CardType, Deck, Flashcard
from flashforge_core.utils.hashing import content_hash

from conftest import PHOTOSYNTHESIS_NOTES, StaticGenerator


def _assert_well_shaped(deck: Deck) -> None:
    for card in deck.cards:
        if card.type is CardType.MULTIPLE_CHOICE:
            assert len(card.options) == 4
            assert 0 <= card.correct_option < 4
        else:
            assert card.options is None
            assert card.correct_option is None


class TestCandidateTerms:
    """Tests for candidate term selection."""

    def test_photosynthesis_terms(self) -> None:
        """Tokens longer than four characters, punctuation kept, in order."""
        terms = candidate_terms(PHOTOSYNTHESIS_NOTES)

        assert terms == [
            "Photosynthesis",
            "process",
            "which",
            "green",
            "plants",
            "convert",
            "sunlight",
            "energy.",
            "Chlorophyll",
            "absorbs",
            "light.",
        ]

    def test_deduplicates_preserving_first_seen(self) -> None:
        """Repeated tokens appear once, at their first position."""
        assert candidate_terms("alpha beta gamma alpha delta gamma") == [
            "alpha",
            "gamma",
            "delta",
        ]

    def test_case_sensitive(self) -> None:
        """Differently cased tokens are distinct terms."""
        assert candidate_terms("Plant plant PLANT") == ["Plant", "plant", "PLANT"]

    def test_byte_order_mark_not_part_of_first_term(self) -> None:
        """A leading BOM from a decoded file does not stick to term one."""
        terms = candidate_terms("\ufeff" + PHOTOSYNTHESIS_NOTES)

        assert terms[0] == "Photosynthesis"
        assert all("\ufeff" not in term for term in terms)

    def test_limited_to_twenty(self) -> None:
        """At most twenty terms are kept."""
        text = " ".join(f"term{i:03d}" for i in range(50))

        terms = candidate_terms(text)

        assert len(terms) == 20
        assert terms[0] == "term000"
        assert terms[-1] == "term019"


class TestFallbackGenerator:
    """Tests for the deterministic generator."""

    @pytest.mark.asyncio
    async def test_baseline_only_with_few_terms(self) -> None:
        """Fewer than five terms yields the three baseline cards."""
        cards = await FallbackGenerator().generate("short notes about cells only")

        assert [card.id for card in cards] == ["card-1", "card-2", "card-3"]
        assert [card.type for card in cards] == [
            CardType.BASIC,
            CardType.MULTIPLE_CHOICE,
            CardType.FILL_BLANK,
        ]

    @pytest.mark.asyncio
    async def test_baseline_content(self) -> None:
        """The baseline cards are fixed."""
        cards = await FallbackGenerator().generate("x")

        assert cards[0].question == "What is the capital of France?"
        assert cards[0].answer == "Paris"
        assert cards[1].options == ("Red", "Blue", "Green", "Yellow")
        assert cards[1].correct_option == 2
        assert cards[2].answer == "photosynthesis"
        assert "_______" in cards[2].question

    @pytest.mark.asyncio
    async def test_exactly_four_terms_gives_three_cards(self) -> None:
        """Four terms is below the threshold."""
        cards = await FallbackGenerator().generate("alpha bravo charlie delta")

        assert len(cards) == 3

    @pytest.mark.asyncio
    async def test_photosynthesis_scenario(self) -> None:
        """Rich notes add two cards built from the first five terms."""
        cards = await FallbackGenerator().generate(PHOTOSYNTHESIS_NOTES)

        assert len(cards) == 5
        basic, choice = cards[3], cards[4]

        assert basic.id == "card-4"
        assert basic.type is CardType.BASIC
        assert '"Photosynthesis"' in basic.question
        assert '"Photosynthesis"' in basic.answer

        assert choice.id == "card-5"
        assert choice.type is CardType.MULTIPLE_CHOICE
        assert '"process"' in choice.question
        assert choice.options == ("which", "green", "plants", "None of the above")
        assert choice.correct_option == 0
        assert choice.answer.startswith('"which" is most closely related to "process"')

    @pytest.mark.asyncio
    async def test_term_limit_is_configurable(self) -> None:
        """A generator limited to four terms never adds content cards."""
        cards = await FallbackGenerator(max_terms=4).generate(PHOTOSYNTHESIS_NOTES)

        assert len(cards) == 3


class TestSynthesize:
    """Tests for the synthesis stage."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t ", "\ufeff", "\ufeff  \n"])
    async def test_blank_input_rejected(self, text: str, settings: Settings) -> None:
        """Blank notes raise EmptyInputError before generation."""
        generator = StaticGenerator([])

        with pytest.raises(EmptyInputError) as excinfo:
            await synthesize(text, generator=generator, settings=settings)

        assert excinfo.value.kind == "empty_input"
        assert generator.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a", 3),
            ("tiny bits of text", 3),
            (PHOTOSYNTHESIS_NOTES, 5),
            ("lorem ipsum dolor sitamet consectetur adipiscing elit", 5),
        ],
    )
    async def test_deck_is_three_or_five(
        self, text: str, expected: int, settings: Settings
    ) -> None:
        """The fallback deck is never empty and always 3 or 5 cards."""
        deck = await synthesize(text, generator=FallbackGenerator(), settings=settings)

        assert len(deck) == expected
        _assert_well_shaped(deck)

    @pytest.mark.asyncio
    async def test_default_generator_is_fallback(self, settings: Settings) -> None:
        """Without a generator the settings pick the fallback."""
        deck = await synthesize(PHOTOSYNTHESIS_NOTES, settings=settings)

        assert deck.source == "fallback"
        assert deck.source_hash == content_hash(PHOTOSYNTHESIS_NOTES)

    @pytest.mark.asyncio
    async def test_input_truncated_silently(self) -> None:
        """Only the first max_input_chars characters reach the generator."""
        settings = Settings(_env_file=None, max_input_chars=10_000)
        generator = StaticGenerator(
            [Flashcard.basic(id="card-1", question="Q?", answer="A")]
        )

        await synthesize("x" * 25_000, generator=generator, settings=settings)

        assert generator.calls == ["x" * 10_000]

    @pytest.mark.asyncio
    async def test_truncation_cuts_terms(self) -> None:
        """Terms after the cut-off do not count."""
        settings = Settings(_env_file=None, max_input_chars=25)

        deck = await synthesize(
            "alpha bravo charlie delta echoes foxtrot golfer",
            generator=FallbackGenerator(),
            settings=settings,
        )

        assert len(deck) == 3

    @pytest.mark.asyncio
    async def test_empty_generator_output_is_invariant_violation(
        self, settings: Settings
    ) -> None:
        """A generator returning nothing raises NoCardsProducedError."""
        with pytest.raises(NoCardsProducedError):
            await synthesize(
                "real notes", generator=StaticGenerator([]), settings=settings
            )

    @pytest.mark.asyncio
    async def test_bom_prefixed_notes_build_clean_cards(
        self, settings: Settings
    ) -> None:
        """Content cards quote the first term without the BOM."""
        deck = await synthesize(
            "\ufeff" + PHOTOSYNTHESIS_NOTES,
            generator=FallbackGenerator(),
            settings=settings,
        )

        assert '"Photosynthesis"' in deck[3].question
        assert "\ufeff" not in deck[3].question

    def test_prepare_notes_keeps_short_text(self) -> None:
        """Short notes are passed through untouched."""
        assert prepare_notes("  notes  ", 100) == "  notes  "


class TestBuildGenerator:
    """Tests for generator selection from settings."""

    def test_fallback_by_default(self, settings: Settings) -> None:
        """The default backend is the offline generator."""
        assert isinstance(build_generator(settings), FallbackGenerator)

    def test_openai_requires_key(self) -> None:
        """Selecting OpenAI without a key is a configuration error."""
        settings = Settings(_env_file=None, generator_backend="openai")

        with pytest.raises(ValueError, match="API_KEY"):
            build_generator(settings)
