"""Practice package - exports word generation, reference audio and pronunciation scoring."""

# Word generation
from .word import generate_word

# Reference audio
from .reference_audio import generate_reference_audio, get_reference_audio

# Pronunciation scoring
from .pronunciation import check_pronunciation

# Syllables and comparison
from .syllables import split_syllables, DEFAULT_STRATEGY
from .comparator import compare_syllables, find_mismatches, is_correct_score

__all__ = [
    # Word generation
    "generate_word",
    # Reference audio
    "generate_reference_audio",
    "get_reference_audio",
    # Pronunciation scoring
    "check_pronunciation",
    # Syllables and comparison
    "split_syllables",
    "DEFAULT_STRATEGY",
    "compare_syllables",
    "find_mismatches",
    "is_correct_score",
]
