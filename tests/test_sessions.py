from sessions import PracticeStats, RecentWords, SessionStore
from tests.conftest import FakeClock

def test_recent_words_evict_oldest():
    recent = RecentWords(limit=10)
    for i in range(11):
        recent.add(f"word{i}")
    assert len(recent) == 10
    assert "word0" not in recent
    assert recent.to_list()[0] == "word1"

def test_re_adding_word_makes_it_newest():
    recent = RecentWords(limit=3)
    for word in ["alpha", "beta", "gamma"]:
        recent.add(word)
    recent.add("alpha")
    recent.add("delta")
    assert recent.to_list() == ["gamma", "alpha", "delta"]

def test_practice_stats_streaks_and_average():
    stats = PracticeStats()
    for score in [90, 70, 85, 95]:
        stats.record(score)
    assert stats.to_dict() == {
        "totalAttempts": 4,
        "successfulAttempts": 3,
        "currentStreak": 2,
        "bestStreak": 2,
        "averageScore": 85.0,
    }

def test_success_threshold_is_inclusive():
    stats = PracticeStats()
    stats.record(80)
    stats.record(79)
    assert stats.successful_attempts == 1
    assert stats.best_streak == 1
    assert stats.current_streak == 0

def test_reference_audio_is_per_session():
    store = SessionStore()
    store.store_audio("alice", b"alice-audio")
    assert store.get_audio("alice") == b"alice-audio"
    assert store.get_audio("bob") is None

def test_new_audio_overwrites_slot():
    store = SessionStore()
    store.store_audio("alice", b"first")
    store.store_audio("alice", b"second")
    assert store.get_audio("alice") == b"second"

def test_least_recently_used_session_is_evicted():
    store = SessionStore(max_sessions=2)
    store.store_audio("a", b"1")
    store.store_audio("b", b"2")
    store.get("a")
    store.get("c")
    assert "b" not in store
    assert "a" in store and "c" in store
    assert len(store) == 2

def test_idle_sessions_expire():
    clock = FakeClock()
    store = SessionStore(session_ttl=60, clock=clock)
    store.get("a").recent_words.add("zephyr")
    clock.now += 61
    assert "zephyr" not in store.get("a").recent_words

def test_reference_audio_expires():
    clock = FakeClock()
    store = SessionStore(session_ttl=3600, audio_ttl=30, clock=clock)
    store.store_audio("a", b"audio")
    clock.now += 29
    assert store.get_audio("a") == b"audio"
    clock.now += 2
    assert store.get_audio("a") is None

def test_missing_session_id_uses_default():
    store = SessionStore()
    assert store.get("").session_id == "default"
