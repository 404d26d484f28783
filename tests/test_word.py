import asyncio
import pytest

from config import CONFIG
from errors import ConfigurationError, UpstreamServiceError
from practice.utils import get_llm
from practice.word import build_word_messages, clean_word, generate_word
from sessions import get_session
from tests.conftest import avoided_words

WORDS = [
    "zephyr", "quixotic", "labyrinth", "mnemonic", "ubiquitous", "serendipity",
    "onomatopoeia", "phenomenon", "worcestershire", "anemone", "squirrel", "colonel",
]

@pytest.mark.parametrize("raw,expected", [
    ("Enthusiasm", "enthusiasm"),
    ("**Enthusiasm.**", "enthusiasm"),
    ('"Vocabulary"\n', "vocabulary"),
    ("Sure! Enthusiasm", "enthusiasm"),
    ("Here is your word: Vocabulary.", "vocabulary"),
    ("Enthusiasm!", "enthusiasm"),
    ('Try "restaurant" today', "restaurant"),
    ("\n\nRestaurant is a good word", ""),
    ("", ""),
])
def test_clean_word(raw, expected):
    assert clean_word(raw) == expected

def test_chatty_multi_word_reply_is_not_recorded(fake_llm):
    fake_llm(["Restaurant is a good word"])
    with pytest.raises(UpstreamServiceError, match="no usable word"):
        asyncio.run(generate_word("s1"))
    session = get_session("s1")
    assert "restaurant" not in session.recent_words
    assert session.current_word is None

def test_prompt_without_recent_words():
    messages = build_word_messages([])
    assert avoided_words(messages[0].content) == []

def test_prompt_lists_recent_words():
    messages = build_word_messages(["zephyr", "quixotic"])
    assert avoided_words(messages[0].content) == ["zephyr", "quixotic"]

def test_generate_word_records_recent_and_current(fake_llm):
    fake_llm(["Zephyr."])
    assert asyncio.run(generate_word("s1")) == {"word": "zephyr"}
    session = get_session("s1")
    assert session.current_word == "zephyr"
    assert "zephyr" in session.recent_words

def test_first_word_leaves_avoid_list_after_eleven_generations(fake_llm):
    llm = fake_llm(WORDS)
    for _ in range(12):
        asyncio.run(generate_word("s1"))

    prompts = llm.system_prompts
    assert avoided_words(prompts[0]) == []
    assert avoided_words(prompts[10]) == WORDS[:10]
    assert avoided_words(prompts[11]) == WORDS[1:11]
    assert WORDS[0] not in avoided_words(prompts[11])

def test_recent_words_are_per_session(fake_llm):
    llm = fake_llm(["zephyr", "quixotic"])
    asyncio.run(generate_word("alice"))
    asyncio.run(generate_word("bob"))
    assert avoided_words(llm.system_prompts[1]) == []

def test_model_failure_is_upstream_error(monkeypatch):
    class BrokenLLM:
        async def ainvoke(self, messages):
            raise RuntimeError("401 invalid api key")

    monkeypatch.setattr("practice.word.get_llm", lambda: BrokenLLM())
    with pytest.raises(UpstreamServiceError, match="invalid api key"):
        asyncio.run(generate_word("s1"))

def test_empty_reply_is_upstream_error(fake_llm):
    fake_llm(["   "])
    with pytest.raises(UpstreamServiceError):
        asyncio.run(generate_word("s1"))
    assert len(get_session("s1").recent_words) == 0

@pytest.mark.parametrize("provider,key", [
    ("deepseek", "DEEPSEEK_API_KEY"),
    ("openai", "OPENAI_API_KEY"),
    ("google", "GOOGLE_API_KEY"),
])
def test_missing_model_key(monkeypatch, provider, key):
    monkeypatch.setattr(CONFIG, "PROVIDER", provider)
    monkeypatch.setattr(CONFIG, key, "")
    with pytest.raises(ConfigurationError, match=key):
        get_llm()

def test_unknown_provider(monkeypatch):
    monkeypatch.setattr(CONFIG, "PROVIDER", "carrier-pigeon")
    with pytest.raises(ConfigurationError, match="Unknown language model provider"):
        get_llm()
