"""
Corpus Builder - tokenizes raw text into a word frequency table and
persists it for the query side.
"""
import logging
import os
import pickle
import re
import time
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Tuple, Union

logger = logging.getLogger(__name__)

# Underscores belong to the run and are stripped afterwards ("cat_cat" -> "catcat")
WORD_RE = re.compile(r'[A-Za-z_]+')

PathLike = Union[str, os.PathLike]


class CorpusError(Exception):
    """Corpus source or persisted table could not be read or written."""


@dataclass(frozen=True)
class BuildReport:
    path: str
    unique_words: int
    total_words: int
    elapsed_seconds: float


def words(text: str) -> Iterator[str]:
    """Normalized tokens of `text`, in order."""
    for match in WORD_RE.finditer(text):
        token = match.group().replace('_', '').lower()
        if token:
            yield token


def tokenize(text: str) -> Tuple[Counter, int]:
    """Count tokens in `text`. Returns (table, total tokens including repeats)."""
    table = Counter()
    n = 0
    for token in words(text):
        table[token] += 1
        n += 1
    return table, n


def read_corpus(path: PathLike) -> str:
    try:
        with open(path, encoding='utf-8', errors='replace') as f:
            return f.read()
    except OSError as e:
        raise CorpusError(f"Cannot read corpus {path}: {e}") from e


def save_table(table: Dict[str, int], path: PathLike) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'wb') as f:
            pickle.dump(dict(table), f)
    except OSError as e:
        raise CorpusError(f"Cannot write table {path}: {e}") from e


def load_table(path: PathLike) -> Dict[str, int]:
    """Load a table written by `save_table`."""
    path = Path(path)
    if not path.exists():
        raise CorpusError(f"Table not found: {path}")
    try:
        with open(path, 'rb') as f:
            data = pickle.load(f)
    except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ValueError) as e:
        raise CorpusError(f"Corrupt table {path}: {e}") from e

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, int) for k, v in data.items()
    ):
        raise CorpusError(f"Corrupt table {path}: expected a mapping of word to count")

    logger.info(f"📚 Loaded {len(data)} words from {path}")
    return data


def build_corpus(source: PathLike, dest: PathLike) -> BuildReport:
    """Tokenize the text file `source` and save its table to `dest`."""
    text = read_corpus(source)

    start = time.perf_counter()
    table, n = tokenize(text)
    elapsed = time.perf_counter() - start
    logger.info(f"Tokenized {source} in {elapsed:.3f}s")

    save_table(table, dest)
    return BuildReport(
        path=str(dest),
        unique_words=len(table),
        total_words=n,
        elapsed_seconds=elapsed,
    )
