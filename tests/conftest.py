from typing import List
import tempfile
import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from config import CONFIG
from sessions import SESSIONS

# Minimal WAV header; recognition is faked so the body never gets decoded
WAV_BYTES = b"RIFF\x24\x00\x00\x00WAVEfmt " + b"\x00" * 32
# EBML magic, what MediaRecorder produces in browsers
WEBM_BYTES = b"\x1a\x45\xdf\xa3" + b"\x00" * 32

class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

class FakeLLM:
    """Stands in for a LangChain chat model; replies with the queued words in order."""

    def __init__(self, replies: List[str]):
        self.replies = list(replies)
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        return AIMessage(content=self.replies.pop(0))

    @property
    def system_prompts(self) -> List[str]:
        return [messages[0].content for messages in self.calls]

def avoided_words(system_prompt: str) -> List[str]:
    line = system_prompt.split("recently used words: ", 1)[1].splitlines()[0]
    return [] if line == "none" else line.split(", ")

@pytest.fixture(autouse=True)
def reset_sessions():
    SESSIONS.clear()
    yield
    SESSIONS.clear()

@pytest.fixture
def client():
    from server import app
    return TestClient(app)

@pytest.fixture
def fake_llm(monkeypatch):
    def install(replies):
        llm = FakeLLM(replies)
        monkeypatch.setattr("practice.word.get_llm", lambda: llm)
        return llm
    return install

@pytest.fixture
def scratch_tempdir(tmp_path, monkeypatch):
    """Send tempfile output to an empty directory so leftovers can be checked."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch

@pytest.fixture
def fake_ffmpeg(tmp_path, monkeypatch):
    """Install a shell script as ffmpeg; `body` runs before it writes the output file."""
    def install(body=""):
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / "ffmpeg"
        script.write_text(
            "#!/bin/sh\n"
            f"{body}\n"
            "for last; do :; done\n"
            "printf 'RIFF' > \"$last\"\n"
        )
        script.chmod(0o755)
        monkeypatch.setattr("practice.audio_utils.find_ffmpeg", lambda: str(script))
        return script
    return install

@pytest.fixture
def azure_configured(monkeypatch):
    monkeypatch.setattr(CONFIG, "AZURE_SPEECH_KEY", "test-key")
    monkeypatch.setattr(CONFIG, "AZURE_SPEECH_REGION", "eastus")

def azure_payload(word="banana", phoneme_scores=(98, 97, 99, 96, 95, 98), pron_score=96.4,
                  accuracy=97.0, fluency=95.0, completeness=100.0, display="Banana."):
    """Detailed JSON result in the shape the Speech SDK returns."""
    phonemes = ["b", "ə", "n", "æ", "n", "ə"]
    return {
        "RecognitionStatus": "Success",
        "DisplayText": display,
        "NBest": [{
            "Confidence": 0.98,
            "Display": display,
            "PronunciationAssessment": {
                "AccuracyScore": accuracy,
                "FluencyScore": fluency,
                "CompletenessScore": completeness,
                "PronScore": pron_score,
            },
            "Words": [{
                "Word": word,
                "PronunciationAssessment": {"AccuracyScore": accuracy, "ErrorType": "None"},
                "Phonemes": [
                    {"Phoneme": p, "PronunciationAssessment": {"AccuracyScore": s}}
                    for p, s in zip(phonemes, phoneme_scores)
                ],
            }],
        }],
    }
