"""
Frequency-Aware Spell Checker
Based on Peter Norvig's approach, weighted by corpus frequency.
"""
import logging
import time
from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Set

logger = logging.getLogger(__name__)

LETTERS = 'abcdefghijklmnopqrstuvwxyz'


@dataclass(frozen=True)
class CorrectionResult:
    correct_word: str
    edits: int
    found: bool

    def to_dict(self) -> Dict:
        return asdict(self)


def edits1(word: str) -> Set[str]:
    """All edits that are one edit away from `word`."""
    splits     = [(word[:i], word[i:])    for i in range(len(word) + 1)]
    deletes    = [L + R[1:]               for L, R in splits if R]
    transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
    replaces   = [L + c + R[1:]           for L, R in splits if R for c in LETTERS]
    inserts    = [L + c + R               for L, R in splits for c in LETTERS]
    return set(deletes + transposes + replaces + inserts)


def edits2(word: str) -> Set[str]:
    """All edits that are two edits away from `word`."""
    return set(e2 for e1 in edits1(word) for e2 in edits1(e1))


class SpellChecker:
    """
    Corrects single words against a frozen frequency table.

    The table is copied on construction and exposed read-only, so one
    instance can be shared by any number of concurrent requests.
    """

    def __init__(self, vocab: Optional[Mapping[str, int]] = None,
                 max_word_length: Optional[int] = None):
        self._vocab = MappingProxyType(dict(vocab or {}))
        self.total_words = sum(self._vocab.values())
        # None = no limit
        self.max_word_length = max_word_length

    @property
    def vocab(self) -> Mapping[str, int]:
        return self._vocab

    def __contains__(self, word: str) -> bool:
        return word in self._vocab

    def __len__(self) -> int:
        return len(self._vocab)

    def P(self, word: str) -> float:
        """Probability of word."""
        N = self.total_words or 1
        return self._vocab.get(word, 0) / N

    def known(self, words: Iterable[str]) -> Set[str]:
        """The subset of `words` that appear in the dictionary."""
        return set(w for w in words if w in self._vocab)

    def best(self, candidates: Set[str]) -> str:
        """Most frequent candidate; equal counts go to the alphabetically first."""
        return min(candidates, key=lambda w: (-self._vocab[w], w))

    def candidates(self, word: str) -> Set[str]:
        """Known candidates of the first tier that has any, else {word}."""
        if word in self._vocab:
            return {word}
        if self._too_long(word):
            return {word}
        return (self.known(edits1(word)) or
                self.known(edits2(word)) or
                {word})

    def correct(self, word: str) -> CorrectionResult:
        """Most probable spelling correction for word, with the tier it came from."""
        # 1. Known word
        if word in self._vocab:
            return CorrectionResult(correct_word=word, edits=0, found=True)

        start = time.perf_counter()
        try:
            if self._too_long(word):
                logger.debug(f"Skipping edit search for {len(word)}-char word")
                return CorrectionResult(correct_word=word, edits=1, found=False)

            # 2. Distance 1
            one_edit = self.known(edits1(word))
            if one_edit:
                return CorrectionResult(correct_word=self.best(one_edit), edits=1, found=True)

            # 3. Distance 2
            two_edit = self.known(edits2(word))
            if two_edit:
                return CorrectionResult(correct_word=self.best(two_edit), edits=2, found=True)

            # 4. Give up
            return CorrectionResult(correct_word=word, edits=1, found=False)
        finally:
            logger.debug(f"Corrected {word!r} in {time.perf_counter() - start:.6f}s")

    def correction(self, word: str) -> str:
        return self.correct(word).correct_word

    def _too_long(self, word: str) -> bool:
        return self.max_word_length is not None and len(word) > self.max_word_length


def correct(word: str, table: Mapping[str, int]) -> CorrectionResult:
    """One-shot correction of `word` against `table`."""
    return SpellChecker(table).correct(word)
