"""Shared helpers for the practice package."""
from config import CONFIG
from errors import ConfigurationError
from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI

def get_llm():
    """Initialize the word-generation chat model for the configured provider."""
    if CONFIG.PROVIDER == "google":
        if not CONFIG.GOOGLE_API_KEY:
            raise ConfigurationError("GOOGLE_API_KEY is not configured")
        return ChatGoogleGenerativeAI(
            model=CONFIG.GOOGLE_MODEL,
            temperature=CONFIG.WORD_TEMPERATURE,
            max_output_tokens=CONFIG.WORD_MAX_TOKENS,
            google_api_key=CONFIG.GOOGLE_API_KEY
        )
    if CONFIG.PROVIDER == "openai":
        if not CONFIG.OPENAI_API_KEY:
            raise ConfigurationError("OPENAI_API_KEY is not configured")
        return ChatOpenAI(
            model=CONFIG.OPENAI_MODEL,
            temperature=CONFIG.WORD_TEMPERATURE,
            max_tokens=CONFIG.WORD_MAX_TOKENS,
            openai_api_key=CONFIG.OPENAI_API_KEY
        )
    if CONFIG.PROVIDER == "deepseek":
        # DeepSeek speaks the OpenAI chat-completions protocol
        if not CONFIG.DEEPSEEK_API_KEY:
            raise ConfigurationError("DEEPSEEK_API_KEY is not configured")
        return ChatOpenAI(
            model=CONFIG.DEEPSEEK_MODEL,
            temperature=CONFIG.WORD_TEMPERATURE,
            max_tokens=CONFIG.WORD_MAX_TOKENS,
            openai_api_key=CONFIG.DEEPSEEK_API_KEY,
            openai_api_base=CONFIG.DEEPSEEK_BASE_URL
        )
    raise ConfigurationError(f"Unknown language model provider: {CONFIG.PROVIDER!r}")
