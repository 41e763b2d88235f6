from __future__ import annotations

from spellsuggest.api.main import SuggestResponse, SuggestionItem
from spellsuggest.mcp import server


class _FakeService:
    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def suggest(self, q: str, limit: int = 10) -> SuggestResponse:
        self.calls.append((q, limit))
        return SuggestResponse(
            query=q,
            suggestions=[
                SuggestionItem(word="hello", distance=3),
                SuggestionItem(word="hallo", distance=3),
            ],
        )


def test_suggest_words_tool_delegates_to_service(monkeypatch) -> None:
    fake = _FakeService()
    monkeypatch.setattr(server, "suggest_service", fake)

    result = server.suggest_words(query="hwllo", limit=999)

    assert result == "hello (3)\nhallo (3)"
    assert fake.calls == [("hwllo", 100)]


def test_suggest_words_tool_clamps_low_limit(monkeypatch) -> None:
    fake = _FakeService()
    monkeypatch.setattr(server, "suggest_service", fake)

    server.suggest_words(query="x", limit=-3)

    assert fake.calls == [("x", 1)]


def test_word_distance_tool() -> None:
    assert server.word_distance("cat", "cot") == 1
    assert server.word_distance("", "abc") == 6
