import asyncio
import logging
import os
import threading
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, Query
from fastapi.responses import FileResponse
from pydantic import BaseModel

from spellsuggest.common.config import settings
from spellsuggest.spellcheck.dictionary import Dictionary, load_dictionary
from spellsuggest.spellcheck.engine import distance
from spellsuggest.spellcheck.ranker import Ranker

logger = logging.getLogger(__name__)

MAX_LIMIT = 100


class SuggestionItem(BaseModel):
    word: str
    distance: int


class SuggestResponse(BaseModel):
    query: str
    suggestions: list[SuggestionItem]


class DistanceResponse(BaseModel):
    a: str
    b: str
    distance: int


class DictionaryInfo(BaseModel):
    source: str
    version: str
    size: int


class SuggestService:
    def __init__(
        self,
        *,
        source: str | None = None,
        ranker: Ranker | None = None,
        dictionary: Dictionary | None = None,
    ) -> None:
        self.source = source or settings.dictionary_source
        self.ranker = ranker or Ranker(
            workers=settings.suggest_workers,
            cache_size=settings.suggest_cache_size,
        )
        self._dictionary = dictionary
        self._load_lock = threading.Lock()

    def load(self) -> Dictionary:
        dictionary = load_dictionary(self.source, timeout_s=settings.request_timeout_s)
        with self._load_lock:
            self._dictionary = dictionary
        self.ranker.clear_cache()
        return dictionary

    @property
    def dictionary(self) -> Dictionary:
        if self._dictionary is None:
            with self._load_lock:
                if self._dictionary is None:
                    self._dictionary = load_dictionary(self.source, timeout_s=settings.request_timeout_s)
        return self._dictionary

    def suggest(self, q: str, limit: int = settings.suggest_limit) -> SuggestResponse:
        if not q:
            return SuggestResponse(query=q, suggestions=[])
        ranked = self.ranker.rank(q, self.dictionary, limit)
        return SuggestResponse(
            query=q,
            suggestions=[SuggestionItem(word=item.word, distance=item.distance) for item in ranked],
        )

    def info(self) -> DictionaryInfo:
        dictionary = self.dictionary
        return DictionaryInfo(source=dictionary.source, version=dictionary.version, size=len(dictionary))


suggest_service = SuggestService()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    await asyncio.to_thread(suggest_service.load)
    yield


app = FastAPI(title="Spell Suggest API", lifespan=lifespan)


@app.get("/")
def index():
    return FileResponse(path=Path(os.path.dirname(__file__)) / "suggest.html")


@app.get("/suggest", response_model=SuggestResponse)
def suggest(
    q: str = Query(""),
    limit: int = Query(settings.suggest_limit, ge=1, le=MAX_LIMIT),
) -> SuggestResponse:
    return suggest_service.suggest(q, limit)


@app.get("/distance", response_model=DistanceResponse)
def word_distance(
    a: str = Query(""),
    b: str = Query(""),
) -> DistanceResponse:
    return DistanceResponse(a=a, b=b, distance=distance(a, b))


@app.get("/dictionary", response_model=DictionaryInfo)
def dictionary_info() -> DictionaryInfo:
    return suggest_service.info()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(app, host=settings.host, port=settings.port)
