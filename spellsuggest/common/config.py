import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    dictionary_source: str = os.getenv("SPELLSUGGEST_DICTIONARY", "dictionary.txt")
    suggest_limit: int = int(os.getenv("SUGGEST_LIMIT", "10"))
    suggest_workers: int = int(os.getenv("SUGGEST_WORKERS", "1"))
    suggest_cache_size: int = int(os.getenv("SUGGEST_CACHE_SIZE", "256"))
    request_timeout_s: int = int(os.getenv("REQUEST_TIMEOUT_S", "8"))
    log_level: str = os.getenv("SPELLSUGGEST_LOG_LEVEL", "INFO")
    host: str = os.getenv("SPELLSUGGEST_HOST", "127.0.0.1")
    port: int = int(os.getenv("SPELLSUGGEST_PORT", "8000"))


settings = Settings()
