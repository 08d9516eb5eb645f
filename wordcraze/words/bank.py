import json
import logging
from collections import Counter
from typing import Any, Iterable
from wordcraze.game.models import Vocabulary, VocabularyReport

logger = logging.getLogger(__name__)

def load_vocabulary(filepath: str) -> Vocabulary:
    with open(filepath, 'r') as f:
        data = json.load(f)
    return Vocabulary.model_validate(data)

def validate_vocabulary(vocabulary: Vocabulary) -> VocabularyReport:
    """
    Checks every category for duplicates, wrong-length entries and non-strings.
    """
    report = VocabularyReport()
    for length, entries in vocabulary.categories().items():
        non_strings = [e for e in entries if not isinstance(e, str)]
        words = [e for e in entries if isinstance(e, str)]
        wrong_length = [w for w in words if len(w) != length]
        # Index keys are lower-cased, so "Cat" and "cat" collide
        duplicates = sorted(w for w, n in Counter(w.lower() for w in words).items() if n > 1)

        if non_strings:
            report.non_strings[length] = non_strings
        if wrong_length:
            report.wrong_length[length] = wrong_length
        if duplicates:
            report.duplicates[length] = duplicates

    if not report.ok:
        logger.warning(
            f"Vocabulary has {report.problem_count()} problem(s): "
            f"duplicates={report.duplicates}, wrong_length={report.wrong_length}, "
            f"non_strings={report.non_strings}"
        )
    return report

class Dictionary:
    """
    Prefix-indexed word bank with exact-length membership sets.

    Every inserted word is filed under each of its prefixes, from the empty
    string up to the word itself:

        index['']      -> ['camel', 'candy', ...]
        index['c']     -> ['camel', 'candy', ...]
        index['cam']   -> ['camel', ...]
        index['camel'] -> ['camel']
    """

    def __init__(self, words: Iterable[Any] = ()):
        self._prefix_index: dict[str, list[str]] = {}
        self._by_length: dict[int, set[str]] = {}
        for w in words:
            self.insert(w)

    @classmethod
    def from_vocabulary(cls, vocabulary: Vocabulary) -> "Dictionary":
        dictionary = cls()
        skipped = 0
        for length, entries in vocabulary.categories().items():
            for entry in entries:
                if not isinstance(entry, str) or len(entry) != length:
                    skipped += 1
                    continue
                dictionary.insert(entry)
        if skipped:
            logger.debug(f"Skipped {skipped} malformed vocabulary entries")
        return dictionary

    @classmethod
    def from_file(cls, filepath: str) -> "Dictionary":
        return cls.from_vocabulary(load_vocabulary(filepath))

    def insert(self, word: Any):
        if not isinstance(word, str) or not word:
            return
        word = word.lower()
        members = self._by_length.setdefault(len(word), set())
        if word in members:
            return
        members.add(word)
        for i in range(len(word) + 1):
            prefix = word[:i]
            if prefix not in self._prefix_index:
                self._prefix_index[prefix] = []
            self._prefix_index[prefix].append(word)

    def contains_exact(self, word: str, length: int) -> bool:
        return word in self._by_length.get(length, ())

    def lookup_prefix(self, prefix: str) -> list[str]:
        return list(self._prefix_index.get(prefix, []))

    def has_prefix(self, prefix: str) -> bool:
        return prefix in self._prefix_index

    def words_of_length(self, length: int) -> tuple[str, ...]:
        return tuple(sorted(self._by_length.get(length, ())))

    def __len__(self) -> int:
        return sum(len(members) for members in self._by_length.values())
