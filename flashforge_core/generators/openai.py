"""OpenAI-backed card generator."""

import asyncio
import json
from typing import Any

from openai import APIConnectionError, APITimeoutError
from openai import RateLimitError as OpenAIRateLimitError
from pydantic import ValidationError as PydanticValidationError

from flashforge_core.errors import GenerationFailedError
from flashforge_core.generators.base import BaseCardGenerator
from flashforge_core.schemas.cards import Flashcard
from flashforge_core.utils.logging import get_logger
from flashforge_core.utils.retry import (
    DEFAULT_MAX_WAIT,
    DEFAULT_MIN_WAIT,
    RateLimitError,
    describe_exception,
    with_retry,
)

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 120.0
DEFAULT_MAX_TOKENS = 2000

GENERATE_CARDS_PROMPT = """Generate flashcards from the following study notes. Create a mix of different card types:
- Basic question and answer
- Multiple choice questions with 4 options
- Fill in the blank questions

For each flashcard, extract key concepts and create effective questions that test understanding.

Study notes:
{notes}

Return a JSON object with the following structure:
{{
  "flashcards": [
    {{
      "id": "unique-id",
      "question": "Question text",
      "answer": "Answer text",
      "type": "basic" | "multiple-choice" | "fill-blank",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctOption": 0
    }}
  ]
}}

Only multiple-choice cards have "options" (exactly 4) and "correctOption" (index of the right option).

Generate 5-10 flashcards depending on the content length.
"""


def _parse_payload(content: str) -> list[dict[str, Any]]:
    """Pull the list of card objects out of a model response.

    Raises:
        GenerationFailedError: If the content is not JSON or has no card list
    """
    if not content:
        raise GenerationFailedError("Generation service returned an empty response")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}. Content: {content[:200]}...")
        raise GenerationFailedError(
            "Generation service returned malformed JSON"
        ) from e

    if isinstance(data, dict):
        data = data.get("flashcards", data.get("cards"))
    if not isinstance(data, list):
        raise GenerationFailedError(
            "Generation service response does not contain a flashcard list"
        )
    return [item for item in data if isinstance(item, dict)]


def _build_cards(items: list[dict[str, Any]]) -> list[Flashcard]:
    """Validate raw card objects, dropping malformed ones.

    Ids are reassigned as ``card-N`` so they are unique within the deck.
    """
    cards: list[Flashcard] = []
    for position, item in enumerate(items, start=1):
        try:
            card = Flashcard.model_validate({**item, "id": f"card-{len(cards) + 1}"})
        except PydanticValidationError as e:
            logger.warning(
                f"Dropping malformed card #{position}: {e.error_count()} error(s)"
            )
            continue
        cards.append(card)
    return cards


class OpenAIGenerator(BaseCardGenerator):
    """Generator that asks an OpenAI chat model for a deck."""

    name = "openai"

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o",
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        temperature: float = 0.7,
        client: Any = None,
        retry_min_wait: float = DEFAULT_MIN_WAIT,
        retry_max_wait: float = DEFAULT_MAX_WAIT,
    ):
        """Initialize the generator.

        Args:
            api_key: OpenAI API key
            model: Chat model name
            base_url: Optional custom base URL
            timeout: Per-attempt timeout in seconds
            max_retries: Maximum attempts for transient failures
            temperature: Sampling temperature
            client: Pre-built async client (skips lazy construction)
            retry_min_wait: Minimum backoff between attempts
            retry_max_wait: Maximum backoff between attempts
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.temperature = temperature
        self.retry_min_wait = retry_min_wait
        self.retry_max_wait = retry_max_wait

        self._client: Any = client
        logger.info(f"Initialized OpenAI generator (model={model})")

    @property
    def client(self) -> Any:
        """Lazy-load the OpenAI client."""
        if self._client is None:
            from openai import AsyncOpenAI

            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                # Retries are handled by with_retry
                max_retries=0,
            )
        return self._client

    async def _request(self, messages: list[dict[str, Any]]) -> str:
        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    max_tokens=DEFAULT_MAX_TOKENS,
                    temperature=self.temperature,
                    response_format={"type": "json_object"},
                ),
                timeout=self.timeout,
            )
        except APITimeoutError as e:
            raise TimeoutError(str(e)) from e
        except APIConnectionError as e:
            raise ConnectionError(str(e)) from e
        except OpenAIRateLimitError as e:
            raise RateLimitError(str(e)) from e
        return response.choices[0].message.content or ""

    async def generate(self, text: str) -> list[Flashcard]:
        logger.info(f"Requesting flashcards for {len(text)} characters of notes")
        messages = [
            {
                "role": "system",
                "content": "You are an expert at creating effective study flashcards. "
                "Output valid JSON only.",
            },
            {"role": "user", "content": GENERATE_CARDS_PROMPT.format(notes=text)},
        ]

        try:
            content = await with_retry(
                self._request,
                messages,
                max_attempts=self.max_retries,
                operation_name="generate_flashcards",
                min_wait=self.retry_min_wait,
                max_wait=self.retry_max_wait,
            )
        except (TimeoutError, asyncio.TimeoutError) as e:
            raise GenerationFailedError(
                f"Generation service timed out after {self.max_retries} attempt(s)"
            ) from e
        except Exception as e:
            raise GenerationFailedError(
                f"Generation service failed: {describe_exception(e)}"
            ) from e

        items = _parse_payload(content)
        cards = _build_cards(items)
        if not cards:
            raise GenerationFailedError(
                "Generation service returned no valid flashcards "
                f"({len(items)} malformed)"
            )
        logger.info(f"Generated {len(cards)} cards")
        return cards
