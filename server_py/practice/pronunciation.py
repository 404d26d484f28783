"""Pronunciation scoring with Azure Speech pronunciation assessment."""
from typing import Dict, Any, List, Optional, Tuple
from dataclasses import dataclass, field
import asyncio
import json
import logging
import os

from config import CONFIG
from errors import ConfigurationError, MissingInputError, UpstreamServiceError
from sessions import get_session
from .audio_utils import write_wav_tempfile
from .comparator import PhonemeScore, compare_syllables
from .feedback import feedback_for_score
from .syllables import DEFAULT_STRATEGY, STRATEGIES, split_syllables

logger = logging.getLogger(__name__)

@dataclass
class WordScore:
    word: str
    accuracy_score: float
    error_type: str = "None"
    phonemes: List[PhonemeScore] = field(default_factory=list)

@dataclass
class AssessmentResult:
    recognized_text: str
    accuracy_score: float
    fluency_score: float
    completeness_score: float
    pronunciation_score: float
    words: List[WordScore] = field(default_factory=list)

    @property
    def phonemes(self) -> List[PhonemeScore]:
        """Phonemes of every assessed word except ones the speaker inserted."""
        return [
            p for w in self.words if w.error_type != "Insertion"
            for p in w.phonemes
        ]

def _score(block: Dict[str, Any], key: str) -> float:
    # Detailed results nest scores under "PronunciationAssessment"; the flat
    # shape puts them on the item itself
    nested = block.get("PronunciationAssessment") or {}
    return float(nested.get(key, block.get(key, 0.0)) or 0.0)

def parse_assessment(payload: Dict[str, Any], recognized_text: str = "") -> AssessmentResult:
    """Parse the SDK's detailed JSON result (NBest[0]) into an AssessmentResult."""
    nbest = payload.get("NBest") or []
    best = nbest[0] if nbest else payload
    summary = best.get("PronunciationAssessment") or {}

    words = []
    for w in best.get("Words") or summary.get("Words") or []:
        nested = w.get("PronunciationAssessment") or {}
        words.append(WordScore(
            word=w.get("Word", ""),
            accuracy_score=_score(w, "AccuracyScore"),
            error_type=nested.get("ErrorType", w.get("ErrorType", "None")),
            phonemes=[
                PhonemeScore(p.get("Phoneme", ""), _score(p, "AccuracyScore"))
                for p in w.get("Phonemes") or []
            ],
        ))

    accuracy = _score(best, "AccuracyScore")
    fluency = _score(best, "FluencyScore")
    completeness = _score(best, "CompletenessScore")
    pron_score = summary.get("PronScore", best.get("PronScore"))
    if pron_score is None:
        # Average of accuracy, fluency, completeness
        pron_score = (accuracy + fluency + completeness) / 3.0

    return AssessmentResult(
        recognized_text=recognized_text or payload.get("DisplayText") or best.get("Display", ""),
        accuracy_score=accuracy,
        fluency_score=fluency,
        completeness_score=completeness,
        pronunciation_score=float(pron_score),
        words=words,
    )

def round_score(score: float) -> int:
    """Round half up, so 84.5 becomes 85."""
    return int(score + 0.5) if score >= 0 else -int(-score + 0.5)

def normalize_text(text: str) -> str:
    """Lowercase letters only: 'Banana.' -> 'banana'."""
    return "".join(ch for ch in text.lower() if ch.isalpha())

def build_pronunciation_response(
    word: str, assessment: AssessmentResult, strategy: str = DEFAULT_STRATEGY
) -> Dict[str, Any]:
    """Assemble the /check-pronunciation payload from a parsed assessment."""
    target_syllables = split_syllables(normalize_text(word), strategy)
    recognized_syllables = split_syllables(normalize_text(assessment.recognized_text), strategy)
    phonemes = assessment.phonemes

    breakdown = compare_syllables(
        target_syllables,
        recognized_syllables,
        phonemes,
        fallback_score=assessment.accuracy_score,
    )
    score = round_score(assessment.pronunciation_score)
    feedback = feedback_for_score(score)

    return {
        "score": score,
        "accuracyScore": round_score(assessment.accuracy_score),
        "completenessScore": round_score(assessment.completeness_score),
        "fluencyScore": round_score(assessment.fluency_score),
        "pronunciationScore": assessment.pronunciation_score,
        "recognizedText": assessment.recognized_text,
        "feedback": feedback["message"],
        "feedbackTier": feedback["tier"],
        "level": feedback["level"],
        "syllableBreakdown": breakdown.to_dict(),
        "phonemeScores": [p.to_dict() for p in phonemes],
    }

def recognize_speech(wav_path: str, reference_text: str) -> Tuple[str, Dict[str, Any]]:
    """
    Run one Azure recognition with pronunciation assessment on a WAV file.
    Blocking; returns (recognized text, detailed JSON result).
    """
    import azure.cognitiveservices.speech as speechsdk

    speech_config = speechsdk.SpeechConfig(
        subscription=CONFIG.AZURE_SPEECH_KEY, region=CONFIG.AZURE_SPEECH_REGION
    )
    audio_config = speechsdk.audio.AudioConfig(filename=wav_path)

    pron_cfg = speechsdk.PronunciationAssessmentConfig(
        reference_text=reference_text,
        grading_system=speechsdk.PronunciationAssessmentGradingSystem.HundredMark,
        granularity=speechsdk.PronunciationAssessmentGranularity.Phoneme,
        enable_miscue=True
    )
    pron_cfg.phoneme_alphabet = "IPA"

    rec = speechsdk.SpeechRecognizer(
        speech_config=speech_config, audio_config=audio_config, language=CONFIG.SPEECH_LANGUAGE
    )
    pron_cfg.apply_to(rec)
    result = rec.recognize_once()

    if result.reason == speechsdk.ResultReason.NoMatch:
        raise UpstreamServiceError("Failed to assess pronunciation: no speech could be recognized")
    if result.reason == speechsdk.ResultReason.Canceled:
        details = result.cancellation_details
        raise UpstreamServiceError(
            f"Failed to assess pronunciation: {details.reason} {details.error_details or ''}".strip()
        )

    raw_json = result.properties.get(speechsdk.PropertyId.SpeechServiceResponse_JsonResult)
    try:
        payload = json.loads(raw_json) if raw_json else {}
    except json.JSONDecodeError as e:
        raise UpstreamServiceError(f"Failed to assess pronunciation: unreadable result ({e})") from e
    return result.text, payload

async def check_pronunciation(
    session_id: str,
    audio_data: Optional[bytes],
    word: Optional[str],
    strategy: str = DEFAULT_STRATEGY,
) -> Dict[str, Any]:
    """
    Score a recording of `word` and record the attempt in the session's stats.
    Without `word`, the session's most recently generated word is the target.
    Returns the payload built by build_pronunciation_response.
    """
    session = get_session(session_id)
    if not word or not word.strip():
        word = session.current_word
    if not audio_data or not word or not word.strip():
        raise MissingInputError("Missing audio or target word")
    if strategy not in STRATEGIES:
        raise MissingInputError(
            f"Unknown syllable strategy {strategy!r}, expected one of: {', '.join(STRATEGIES)}"
        )
    if not CONFIG.AZURE_SPEECH_KEY or not CONFIG.AZURE_SPEECH_REGION:
        raise ConfigurationError("Azure Speech Service credentials not configured")

    word = word.strip()
    # ffmpeg conversion blocks, keep it off the event loop
    wav_path = await asyncio.to_thread(write_wav_tempfile, audio_data)
    try:
        recognized_text, payload = await asyncio.to_thread(recognize_speech, wav_path, word)
    except UpstreamServiceError:
        raise
    except Exception as e:
        raise UpstreamServiceError(f"Failed to assess pronunciation: {e}") from e
    finally:
        try:
            os.unlink(wav_path)
        except OSError as e:
            logger.warning("[Pronunciation] Could not remove %s: %s", wav_path, e)

    assessment = parse_assessment(payload, recognized_text)
    response = build_pronunciation_response(word, assessment, strategy)

    session.stats.record(response["score"])
    logger.info(
        "[Pronunciation] Session %s: %r scored %d (heard %r)",
        session.session_id, word, response["score"], assessment.recognized_text,
    )
    return response
