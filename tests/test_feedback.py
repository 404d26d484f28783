import pytest

from practice.feedback import feedback_for_score

@pytest.mark.parametrize("score,tier,level", [
    (100, "excellent", "Expert"),
    (95, "excellent", "Expert"),
    (90, "excellent", "Expert"),
    (89, "great", "Advanced"),
    (80, "great", "Advanced"),
    (70, "good", "Intermediate"),
    (69, "keep_practicing", "Beginner"),
    (0, "keep_practicing", "Beginner"),
])
def test_score_tiers(score, tier, level):
    feedback = feedback_for_score(score)
    assert feedback["tier"] == tier
    assert feedback["level"] == level

def test_excellent_message():
    assert feedback_for_score(96)["message"] == "Outstanding pronunciation! Keep up the excellent work!"
