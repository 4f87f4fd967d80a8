"""Ingest graph nodes."""

from flashforge_core.graph.nodes.extract import create_extract_node
from flashforge_core.graph.nodes.synthesize import create_synthesize_node
from flashforge_core.graph.nodes.validate import create_validate_node

__all__ = [
    "create_extract_node",
    "create_synthesize_node",
    "create_validate_node",
]
