"""String similarity metrics, each returning a value between 0.0 and 1.0."""

from __future__ import annotations

import re

_TRIGRAM_SEPARATORS = re.compile(r"\A|\Z|\W+")


def _levenshtein(a: str, b: str) -> int:
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def normalized_levenshtein(a: str, b: str) -> float:
    """One minus the edit distance divided by the length of the longer string."""
    if not a and not b:
        return 1.0
    return 1.0 - _levenshtein(a, b) / max(len(a), len(b))


def jaro(a: str, b: str) -> float:
    """The Jaro similarity of two strings."""
    a_len, b_len = len(a), len(b)
    if not a_len and not b_len:
        return 1.0
    if not a_len or not b_len:
        return 0.0

    search_range = max(max(a_len, b_len) // 2 - 1, 0)
    a_flags = [False] * a_len
    b_flags = [False] * b_len
    matches = 0

    for i, char_a in enumerate(a):
        low = max(i - search_range, 0)
        high = min(b_len, i + search_range + 1)
        found = next(
            (j for j in range(low, high) if not b_flags[j] and b[j] == char_a),
            None,
        )
        if found is not None:
            a_flags[i] = True
            b_flags[found] = True
            matches += 1

    if matches == 0:
        return 0.0

    a_matched = (char for char, flag in zip(a, a_flags) if flag)
    b_matched = (char for char, flag in zip(b, b_flags) if flag)
    transpositions = sum(x != y for x, y in zip(a_matched, b_matched)) // 2

    return (
        matches / a_len + matches / b_len + (matches - transpositions) / matches
    ) / 3.0


def _trigrams(text: str) -> set[str]:
    padded = _TRIGRAM_SEPARATORS.sub("  ", text)
    grams = ("".join(chars) for chars in zip(padded, padded[1:], padded[2:]))
    # Trigrams that end in two spaces are not counted.
    return {gram for gram in grams if not gram.endswith("  ")}


def trigram_similarity(a: str, b: str) -> float:
    """Jaccard similarity of the word trigrams of two strings.

    Cheap to compute, and used to pre-select pairs for the costlier metrics.
    """
    grams_a = _trigrams(a)
    grams_b = _trigrams(b)
    union = grams_a | grams_b
    if not union:
        return 1.0
    return len(grams_a & grams_b) / len(union)