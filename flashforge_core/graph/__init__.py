"""LangGraph pipeline for ingestion and synthesis.

    >>> graph = build_ingest_graph(FallbackGenerator())
    >>> result = await graph.ainvoke({"source": BytesSource(data, "application/pdf")})
    >>> result["deck"]
"""

from flashforge_core.graph.build_ingest_graph import IngestState, build_ingest_graph

__all__ = ["IngestState", "build_ingest_graph"]
