from __future__ import annotations

import logging

from spellsuggest.api.main import suggest_service
from spellsuggest.common.config import settings
from spellsuggest.spellcheck.engine import distance

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - runtime dependency guard
    raise RuntimeError(
        "FastMCP is required to run the MCP server. Install the project with its dependencies."
    ) from exc


SERVER_TITLE = "SpellSuggest"
SERVER_INSTRUCTIONS = (
    "Use suggest_words to get the closest dictionary words for a possibly misspelled input, "
    "and word_distance to compare two words under the same cost model. Lower is closer."
)

mcp = FastMCP(
    name=SERVER_TITLE,
    instructions=SERVER_INSTRUCTIONS,
    version='1',
)


def _bounded(limit: int) -> int:
    return max(1, min(limit, 100))


def suggest_words(query: str, limit: int = 10) -> str:
    """Rank dictionary words by weighted edit distance to the query."""
    response = suggest_service.suggest(query, _bounded(limit))

    llm_results = ""
    for item in response.suggestions:
        llm_results += f"{item.word} ({item.distance})"
        llm_results += '\n'

    return llm_results.strip()


def word_distance(a: str, b: str) -> int:
    """Weighted edit distance between two words."""
    return distance(a, b)


mcp.tool(name="suggest_words", description="Suggest dictionary words close to a possibly misspelled input.")(suggest_words)
mcp.tool(name="word_distance", description="Weighted edit distance between two words.")(word_distance)


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    mcp.run("http")
