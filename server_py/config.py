from dotenv import load_dotenv
import logging
import os

load_dotenv()

logger = logging.getLogger(__name__)

class Config:
    PROVIDER = os.getenv("PROVIDER", "deepseek")  # 'deepseek' | 'openai' | 'google'
    DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY", "")
    DEEPSEEK_BASE_URL = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1")
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")

    # Model selection
    DEEPSEEK_MODEL = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    GOOGLE_MODEL = os.getenv("GOOGLE_MODEL", "gemini-2.5-flash-lite")
    WORD_TEMPERATURE = float(os.getenv("WORD_TEMPERATURE", "0.9"))
    WORD_MAX_TOKENS = int(os.getenv("WORD_MAX_TOKENS", "50"))

    # Text-to-speech
    TTS_PROVIDER = os.getenv("TTS_PROVIDER", "elevenlabs")  # 'elevenlabs' | 'google'
    ELEVEN_LABS_API_KEY = os.getenv("ELEVEN_LABS_API_KEY", "")
    ELEVEN_LABS_VOICE_ID = os.getenv("ELEVEN_LABS_VOICE_ID", "21m00Tcm4TlvDq8ikWAM")
    ELEVEN_LABS_MODEL_ID = os.getenv("ELEVEN_LABS_MODEL_ID", "eleven_monolingual_v1")
    GOOGLE_TTS_VOICE = os.getenv("GOOGLE_TTS_VOICE", "en-US-Neural2-F")
    TTS_TIMEOUT_SECONDS = float(os.getenv("TTS_TIMEOUT_SECONDS", "30"))

    # Azure pronunciation assessment
    AZURE_SPEECH_KEY = os.getenv("AZURE_SPEECH_KEY", "")
    AZURE_SPEECH_REGION = os.getenv("AZURE_SPEECH_REGION", "")
    SPEECH_LANGUAGE = os.getenv("SPEECH_LANGUAGE", "en-US")

    # Per-session state
    RECENT_WORDS_LIMIT = int(os.getenv("RECENT_WORDS_LIMIT", "10"))
    MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))
    SESSION_TTL_SECONDS = float(os.getenv("SESSION_TTL_SECONDS", "3600"))
    AUDIO_TTL_SECONDS = float(os.getenv("AUDIO_TTL_SECONDS", "3600"))

    PORT = int(os.getenv("PORT", "3002"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls):
        if cls.PROVIDER == "deepseek" and not cls.DEEPSEEK_API_KEY:
            logger.warning("DEEPSEEK_API_KEY is missing, /generate-word will fail.")
        if cls.PROVIDER == "openai" and not cls.OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY is missing, /generate-word will fail.")
        if cls.PROVIDER == "google" and not cls.GOOGLE_API_KEY:
            logger.warning("GOOGLE_API_KEY is missing, /generate-word will fail.")
        if cls.TTS_PROVIDER == "elevenlabs" and not cls.ELEVEN_LABS_API_KEY:
            logger.warning("ELEVEN_LABS_API_KEY is missing, /generate-audio will fail.")
        if not cls.AZURE_SPEECH_KEY or not cls.AZURE_SPEECH_REGION:
            logger.warning("AZURE_SPEECH_KEY / AZURE_SPEECH_REGION missing, /check-pronunciation will fail.")

CONFIG = Config()
CONFIG.validate()
