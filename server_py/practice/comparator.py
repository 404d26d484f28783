"""
Per-syllable comparison of a target word against what the recogniser heard.

Two judgements are made for each target syllable:
- mismatch: the recognised syllable at the same index is missing or differs;
- correctness: not mismatched, and the accuracy of the phonemes that fall
  into the syllable is at least CORRECTNESS_THRESHOLD.

Incorrect syllables come with improvement tips.
"""
from typing import Dict, Any, List, Sequence, Set
from dataclasses import dataclass, field

from .phoneme_tips import get_phoneme_tips

CORRECTNESS_THRESHOLD = 80.0

@dataclass
class PhonemeScore:
    phoneme: str
    accuracy_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"phoneme": self.phoneme, "accuracyScore": self.accuracy_score}

@dataclass
class SyllableAssessment:
    syllable: str
    is_correct: bool
    accuracy_score: float
    tips: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "syllable": self.syllable,
            "isCorrect": self.is_correct,
            "accuracyScore": self.accuracy_score,
            "tips": list(self.tips),
        }

@dataclass
class SyllableBreakdown:
    target: List[str]
    recognized: List[str]
    mismatches: List[str]
    assessments: List[SyllableAssessment]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": list(self.target),
            "recognized": list(self.recognized),
            "mismatches": list(self.mismatches),
            "mispronounced": [a.to_dict() for a in self.assessments],
        }

def is_correct_score(score: float) -> bool:
    return score >= CORRECTNESS_THRESHOLD

def _recognized_at(recognized: Sequence[str], index: int) -> str:
    return recognized[index] if index < len(recognized) else ""

def mismatched_indices(target: Sequence[str], recognized: Sequence[str]) -> List[int]:
    """Indices of target syllables whose recognised counterpart is missing or different."""
    return [
        i for i, syllable in enumerate(target)
        if _recognized_at(recognized, i) != syllable
    ]

def find_mismatches(target: Sequence[str], recognized: Sequence[str]) -> Set[str]:
    return {target[i] for i in mismatched_indices(target, recognized)}

def allocate_phonemes(
    syllables: Sequence[str], phonemes: Sequence[PhonemeScore]
) -> List[List[PhonemeScore]]:
    """
    Split the word's phonemes into contiguous groups, one per syllable,
    sized in proportion to each syllable's length. With fewer phonemes than
    syllables some groups stay empty.
    """
    total_chars = sum(len(s) for s in syllables)
    if not syllables or not phonemes or total_chars == 0:
        return [[] for _ in syllables]

    groups: List[List[PhonemeScore]] = []
    start = 0
    consumed_chars = 0
    for syllable in syllables:
        consumed_chars += len(syllable)
        end = int(len(phonemes) * consumed_chars / total_chars + 0.5)
        groups.append(list(phonemes[start:end]))
        start = end
    return groups

def syllable_tips(syllable: str, phonemes: Sequence[PhonemeScore]) -> List[str]:
    tips = [
        f'Focus on the "{syllable}" sound - try breaking it down into individual sounds',
        f'Listen carefully to how the reference audio pronounces "{syllable}"',
        f'Practice saying "{syllable}" slowly, then gradually increase your speed',
    ]
    for p in phonemes:
        if not is_correct_score(p.accuracy_score):
            tips.extend(get_phoneme_tips(p.phoneme))
    # de-duplicate, keep order
    return list(dict.fromkeys(tips))

def assess_syllables(
    target: Sequence[str],
    recognized: Sequence[str],
    phonemes: Sequence[PhonemeScore] = (),
    fallback_score: float = 0.0,
) -> List[SyllableAssessment]:
    mismatched = set(mismatched_indices(target, recognized))
    groups = allocate_phonemes(target, phonemes)

    assessments = []
    for i, syllable in enumerate(target):
        group = groups[i]
        if group:
            score = sum(p.accuracy_score for p in group) / len(group)
        else:
            score = fallback_score
        correct = i not in mismatched and is_correct_score(score)
        assessments.append(SyllableAssessment(
            syllable=syllable,
            is_correct=correct,
            accuracy_score=score,
            tips=[] if correct else syllable_tips(syllable, group),
        ))
    return assessments

def compare_syllables(
    target: Sequence[str],
    recognized: Sequence[str],
    phonemes: Sequence[PhonemeScore] = (),
    fallback_score: float = 0.0,
) -> SyllableBreakdown:
    """Build the full per-syllable breakdown returned to clients."""
    mismatches = [target[i] for i in mismatched_indices(target, recognized)]
    return SyllableBreakdown(
        target=list(target),
        recognized=list(recognized),
        mismatches=list(dict.fromkeys(mismatches)),
        assessments=assess_syllables(target, recognized, phonemes, fallback_score),
    )
