"""
spellfix Configuration
"""
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Corpus
    CORPUS_PATH: str = "data/corpus.pkl"

    # Web service
    HOST: str = "0.0.0.0"
    PORT: int = 3005

    # Correction
    # Words longer than this skip the edit search (edits2 is O(n^2) in candidates)
    # 0 = no limit
    MAX_WORD_LENGTH: int = 0

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def max_word_length(self) -> Optional[int]:
        return self.MAX_WORD_LENGTH or None


@lru_cache()
def get_settings() -> Settings:
    return Settings()
