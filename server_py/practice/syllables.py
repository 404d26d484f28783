"""
Syllable splitting heuristics.

Two strategies are kept side by side because callers rely on each:

- "diphthong-aware": splits at vowel onsets but keeps common vowel pairs
  ("ee", "ou", ...) together and attaches consonants to the preceding vowel.
- "simple": splits before every a/e/i/o/u after the first character.

Neither is phonetically validated. For any input, joining the result gives
back the lowercased word.
"""
from typing import Callable, Dict, List

VOWELS = "aeiouy"
SIMPLE_VOWELS = "aeiou"

DIPHTHONGS = frozenset([
    "ai", "ay", "ea", "ee", "ei", "ey", "ie", "oa",
    "oe", "oi", "oo", "ou", "oy", "ue", "ui",
])

DIPHTHONG_AWARE = "diphthong-aware"
SIMPLE = "simple"
DEFAULT_STRATEGY = DIPHTHONG_AWARE

def split_diphthong_aware(word: str) -> List[str]:
    word_lower = word.lower()
    syllables: List[str] = []
    current = ""
    prev_was_vowel = False

    for i, char in enumerate(word_lower):
        is_vowel = char in VOWELS

        if is_vowel and prev_was_vowel:
            if word_lower[i - 1] + char in DIPHTHONGS:
                current += char
            else:
                syllables.append(current)
                current = char
        elif is_vowel and current:
            # Vowel after a consonant opens a new syllable
            syllables.append(current)
            current = char
        elif not is_vowel and prev_was_vowel:
            current += char
            # A following consonant defers the split to the end of the cluster
            next_is_consonant = i + 1 < len(word_lower) and word_lower[i + 1] not in VOWELS
            if not next_is_consonant:
                syllables.append(current)
                current = ""
        else:
            current += char

        prev_was_vowel = is_vowel

    if current:
        syllables.append(current)
    return syllables

def split_simple(word: str) -> List[str]:
    word_lower = word.lower()
    syllables: List[str] = []
    current = ""
    for char in word_lower:
        if char in SIMPLE_VOWELS and current:
            syllables.append(current)
            current = char
        else:
            current += char
    if current:
        syllables.append(current)
    return syllables

STRATEGIES: Dict[str, Callable[[str], List[str]]] = {
    DIPHTHONG_AWARE: split_diphthong_aware,
    SIMPLE: split_simple,
}

def split_syllables(word: str, strategy: str = DEFAULT_STRATEGY) -> List[str]:
    """Split `word` with the named strategy; raises ValueError for unknown names."""
    try:
        splitter = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown syllable strategy {strategy!r}, expected one of: {', '.join(STRATEGIES)}"
        ) from None
    return splitter(word)
