from typing import Iterable, Optional
from wordcraze.words.bank import Dictionary

def _target_length(word: str, length: Optional[int]) -> int:
    """Missing, non-positive or too-long lengths all mean the whole word, so ("a", 3) gives "a"."""
    if not length or length < 1 or length > len(word):
        return len(word)
    return length

def _walk(word: str, length: int, keep=None) -> list[str]:
    """
    Explicit-stack enumeration over source positions.

    Each stack entry is (letters so far, bitmask of consumed positions), so a
    letter repeated in the source word is still reachable from each of its
    positions. `keep(candidate)` can veto a partial candidate before it is
    recorded or extended.
    """
    generated = []
    for start in range(len(word)):
        seed = (word[start], 1 << start)
        if keep is not None and not keep(seed[0]):
            continue
        if length == 1:
            generated.append(seed[0])
            continue

        stack = [seed]
        while stack:
            letters, used = stack.pop()
            for i in range(len(word)):
                if used & (1 << i):
                    continue
                candidate = letters + word[i]
                if keep is not None and not keep(candidate):
                    continue
                if len(candidate) == length:
                    generated.append(candidate)
                else:
                    stack.append((candidate, used | (1 << i)))
    return generated

def generate_permutations(word: str, length: Optional[int] = None) -> list[str]:
    """
    Every arrangement of `length` distinct positions of `word`.

    A missing or non-positive `length`, or one longer than the word, means the
    full word length. Textual duplicates are kept: "llama" yields 120 strings.
    """
    if not word:
        return []
    return _walk(word, _target_length(word, length))

def generate_permutations_using_dictionary(
    word: str,
    dictionary: Dictionary,
    length: Optional[int] = None
) -> list[str]:
    """
    Like generate_permutations, but stops extending a partial arrangement as
    soon as no dictionary word starts with it. For 'camel', 'ml' has no
    continuation so 'mlc', 'mle', ... are never built.
    """
    if not word:
        return []
    word = word.lower()
    return _walk(word, _target_length(word, length), keep=dictionary.has_prefix)

def distinct(candidates: Iterable[str]) -> list[str]:
    seen = set()
    result = []
    for c in candidates:
        if c not in seen:
            seen.add(c)
            result.append(c)
    return result
