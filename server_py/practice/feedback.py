"""Score tiers shown to the learner after each attempt."""
from typing import Dict

# (minimum score, tier, message, progress level), highest first
SCORE_TIERS = [
    (90, "excellent", "Outstanding pronunciation! Keep up the excellent work!", "Expert"),
    (80, "great", "Great job! You're getting really good at this!", "Advanced"),
    (70, "good", "Good effort! Practice makes perfect!", "Intermediate"),
]
FALLBACK_TIER = ("keep_practicing", "Keep practicing! You'll improve with time!", "Beginner")

def feedback_for_score(score: float) -> Dict[str, str]:
    """
    Returns: {
        "tier": "excellent|great|good|keep_practicing",
        "message": "...",
        "level": "Expert|Advanced|Intermediate|Beginner"
    }
    """
    for minimum, tier, message, level in SCORE_TIERS:
        if score >= minimum:
            return {"tier": tier, "message": message, "level": level}
    tier, message, level = FALLBACK_TIER
    return {"tier": tier, "message": message, "level": level}
