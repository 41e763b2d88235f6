import logging
import threading
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable

from spellsuggest.spellcheck.dictionary import Dictionary
from spellsuggest.spellcheck.engine import DistanceEngine, distance_engine

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Suggestion:
    word: str
    distance: int


class Ranker:
    """Scores a whole dictionary against one input and keeps the closest words.

    Ties keep dictionary order. With ``workers > 1`` the per-word distances
    are computed on a thread pool and sorted afterwards, which yields the
    same list as the sequential path. ``cache_size`` memoises full rankings
    per input and ``Dictionary`` word tuple; plain iterables are always
    ranked fresh.
    """

    def __init__(
        self,
        *,
        engine: DistanceEngine | None = None,
        workers: int = 1,
        cache_size: int = 0,
    ) -> None:
        self.engine = engine or distance_engine
        self.workers = max(1, workers)
        self.cache_size = max(0, cache_size)
        self._cache: OrderedDict[tuple[str, tuple[str, ...]], list[Suggestion]] = OrderedDict()
        self._cache_lock = threading.Lock()

    def score(self, text: str, words: Iterable[str]) -> list[Suggestion]:
        words = list(words)
        if self.workers > 1 and len(words) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                distances = list(executor.map(lambda word: self.engine.distance(text, word), words))
        else:
            distances = [self.engine.distance(text, word) for word in words]
        return [Suggestion(word, dist) for word, dist in zip(words, distances)]

    def _ranked(self, text: str, dictionary: Dictionary | Iterable[str]) -> list[Suggestion]:
        key: tuple[str, tuple[str, ...]] | None = None
        if self.cache_size and isinstance(dictionary, Dictionary):
            key = (text, dictionary.words)
            with self._cache_lock:
                cached = self._cache.get(key)
                if cached is not None:
                    self._cache.move_to_end(key)
                    return cached

        # sorted() is stable, so equal distances stay in dictionary order.
        ranked = sorted(self.score(text, dictionary), key=lambda item: item.distance)

        if key is not None:
            with self._cache_lock:
                self._cache[key] = ranked
                self._cache.move_to_end(key)
                while len(self._cache) > self.cache_size:
                    self._cache.popitem(last=False)
        return ranked

    def rank(
        self,
        text: str,
        dictionary: Dictionary | Iterable[str],
        limit: int = DEFAULT_LIMIT,
    ) -> list[Suggestion]:
        if not text or limit <= 0:
            return []
        ranked = self._ranked(text, dictionary)
        logger.debug("ranked input=%r candidates=%s limit=%s", text, len(ranked), limit)
        return ranked[:limit]

    def suggest(
        self,
        text: str,
        dictionary: Dictionary | Iterable[str],
        limit: int = DEFAULT_LIMIT,
    ) -> list[str]:
        return [item.word for item in self.rank(text, dictionary, limit)]

    def clear_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()


ranker = Ranker()


def rank(text: str, dictionary: Dictionary | Iterable[str], limit: int = DEFAULT_LIMIT) -> list[Suggestion]:
    return ranker.rank(text, dictionary, limit)


def suggest(text: str, dictionary: Dictionary | Iterable[str], limit: int = DEFAULT_LIMIT) -> list[str]:
    return ranker.suggest(text, dictionary, limit)
