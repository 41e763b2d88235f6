import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import httpx

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_S = 8
USER_AGENT = "spellsuggest-dictionary/1.0"


@dataclass(frozen=True)
class Dictionary:
    """Read-only, ordered word list shared by every ranking call."""

    words: tuple[str, ...] = ()
    source: str = ""
    version: str = ""

    def __post_init__(self) -> None:
        words = tuple(self.words)
        object.__setattr__(self, "words", words)
        if not self.version:
            object.__setattr__(self, "version", snapshot_version(words))

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "") -> "Dictionary":
        return cls(words=tuple(words), source=source)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words


def snapshot_version(words: tuple[str, ...]) -> str:
    digest = hashlib.sha1()
    for word in words:
        encoded = word.encode("utf-8", errors="surrogatepass")
        digest.update(len(encoded).to_bytes(8, "big"))
        digest.update(encoded)
    return digest.hexdigest()[:16]


def parse_words(text: str) -> tuple[str, ...]:
    words: list[str] = []
    for line in text.splitlines():
        word = line.strip()
        if word:
            words.append(word)
    return tuple(words)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_text(url: str, timeout_s: float, client: httpx.Client | None) -> str:
    headers = {"User-Agent": USER_AGENT}
    if client is not None:
        res = client.get(url, headers=headers, timeout=timeout_s)
        res.raise_for_status()
        return res.text

    with httpx.Client(timeout=httpx.Timeout(timeout_s), follow_redirects=True) as owned:
        res = owned.get(url, headers=headers)
        res.raise_for_status()
        return res.text


def load_dictionary(
    source: str,
    *,
    timeout_s: float = REQUEST_TIMEOUT_S,
    client: httpx.Client | None = None,
) -> Dictionary:
    try:
        if _is_url(source):
            text = _fetch_text(source, timeout_s, client)
        else:
            text = Path(source).read_text(encoding="utf-8")
    except (httpx.HTTPError, OSError, UnicodeDecodeError):
        logger.exception("failed to load dictionary from %s; serving no suggestions", source)
        return Dictionary.from_words((), source=source)

    dictionary = Dictionary.from_words(parse_words(text), source=source)
    logger.info(
        "loaded dictionary source=%s words=%s version=%s",
        source,
        len(dictionary),
        dictionary.version,
    )
    if not dictionary.words:
        logger.warning("dictionary %s is empty; serving no suggestions", source)
    return dictionary
