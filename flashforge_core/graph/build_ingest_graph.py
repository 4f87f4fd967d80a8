"""Build the ingest graph: upload or notes in, deck out.

    validate -> extract -> synthesize     (uploads)
    validate -> synthesize                (pasted notes)

Any stage that fails records its message in ``errors`` and its kind in
``error_kind``, and the graph ends without a deck.
"""

from typing import Annotated, Any, TypedDict

from langgraph.graph import END, StateGraph
from langgraph.types import Checkpointer

from flashforge_core.config import Settings, get_settings
from flashforge_core.generators import BaseCardGenerator, build_generator
from flashforge_core.schemas.cards import Deck


def _keep_last_str(existing: str | None, incoming: str | None) -> str | None:
    """Keep the latest value for progress tracking fields."""
    return incoming if incoming else existing


def _keep_max_int(existing: int, incoming: int) -> int:
    """Progress only moves forward."""
    return max(existing or 0, incoming or 0)


def _merge_errors(existing: list[str], incoming: list[str]) -> list[str]:
    """Combine error lists, deduplicating."""
    return list(dict.fromkeys([*(existing or []), *(incoming or [])]))


class IngestState(TypedDict, total=False):
    """State passed through the ingest graph."""

    source: Any  # ByteSource
    notes: str
    deck: Deck
    current_step: Annotated[str, _keep_last_str]
    progress: Annotated[int, _keep_max_int]
    errors: Annotated[list[str], _merge_errors]
    error_kind: str


def _after_validate(state: IngestState) -> str:
    if state.get("errors"):
        return END
    if state.get("source") is not None:
        return "extract"
    return "synthesize"


def _after_extract(state: IngestState) -> str:
    if state.get("errors"):
        return END
    return "synthesize"


def build_ingest_graph(
    generator: BaseCardGenerator | None = None,
    settings: Settings | None = None,
    checkpointer: Checkpointer | None = None,
) -> StateGraph:
    """Build the ingest pipeline.

    Args:
        generator: Card generation strategy; built from settings when omitted
        settings: Settings override
        checkpointer: Optional LangGraph checkpointer

    Returns:
        Compiled StateGraph ready for invocation
    """
    from flashforge_core.graph.nodes import (
        create_extract_node,
        create_synthesize_node,
        create_validate_node,
    )

    resolved_settings = settings or get_settings()
    resolved_generator = generator or build_generator(resolved_settings)

    graph = StateGraph(IngestState)

    graph.add_node("validate", create_validate_node(resolved_settings))
    graph.add_node("extract", create_extract_node(resolved_settings))
    graph.add_node(
        "synthesize", create_synthesize_node(resolved_generator, resolved_settings)
    )

    graph.set_entry_point("validate")
    graph.add_conditional_edges("validate", _after_validate)
    graph.add_conditional_edges("extract", _after_extract)
    graph.add_edge("synthesize", END)

    return graph.compile(checkpointer=checkpointer)
