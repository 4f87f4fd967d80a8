"""Flashcard generation strategies.

- FallbackGenerator: deterministic, offline, 3 or 5 cards
- OpenAIGenerator: chat completion with timeout and bounded retries
"""

from flashforge_core.config import Settings
from flashforge_core.generators.base import BaseCardGenerator
from flashforge_core.generators.fallback import FallbackGenerator, candidate_terms
from flashforge_core.generators.openai import OpenAIGenerator


def build_generator(settings: Settings) -> BaseCardGenerator:
    """Create the generator selected by ``settings.generator_backend``.

    Raises:
        ValueError: If the OpenAI backend is selected without an API key
    """
    if settings.generator_backend == "openai":
        if not settings.openai_api_key:
            raise ValueError(
                "FLASHFORGE_OPENAI_API_KEY is required for the openai generator"
            )
        return OpenAIGenerator(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.generation_timeout,
            max_retries=settings.generation_max_retries,
            temperature=settings.generation_temperature,
        )
    return FallbackGenerator(max_terms=settings.max_candidate_terms)


__all__ = [
    "BaseCardGenerator",
    "FallbackGenerator",
    "OpenAIGenerator",
    "build_generator",
    "candidate_terms",
]
