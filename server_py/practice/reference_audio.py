"""Reference audio synthesis for the current practice word."""
from typing import Dict, Any
import asyncio
import logging

import httpx

from config import CONFIG
from errors import AudioNotFoundError, ConfigurationError, MissingInputError, UpstreamServiceError
from sessions import SESSIONS

logger = logging.getLogger(__name__)

ELEVEN_LABS_URL = "https://api.elevenlabs.io/v1/text-to-speech/{voice_id}"

async def _elevenlabs_tts(text: str) -> bytes:
    if not CONFIG.ELEVEN_LABS_API_KEY:
        raise ConfigurationError("ELEVEN_LABS_API_KEY is not configured")

    headers = {
        "Accept": "audio/mpeg",
        "Content-Type": "application/json",
        "xi-api-key": CONFIG.ELEVEN_LABS_API_KEY,
    }
    body = {
        "text": text,
        "model_id": CONFIG.ELEVEN_LABS_MODEL_ID,
        "voice_settings": {"stability": 0.5, "similarity_boost": 0.75},
    }
    url = ELEVEN_LABS_URL.format(voice_id=CONFIG.ELEVEN_LABS_VOICE_ID)

    try:
        async with httpx.AsyncClient(timeout=CONFIG.TTS_TIMEOUT_SECONDS) as client:
            response = await client.post(url, json=body, headers=headers)
    except httpx.HTTPError as e:
        raise UpstreamServiceError(f"Text-to-speech request failed: {e}") from e

    if response.status_code != 200:
        raise UpstreamServiceError(
            f"Text-to-speech request failed ({response.status_code}): {response.text[:200]}"
        )
    return response.content

def _google_tts(text: str) -> bytes:
    # Credentials come from GOOGLE_APPLICATION_CREDENTIALS
    from google.cloud import texttospeech

    client = texttospeech.TextToSpeechClient()
    voice = texttospeech.VoiceSelectionParams(
        language_code=CONFIG.SPEECH_LANGUAGE,
        name=CONFIG.GOOGLE_TTS_VOICE,
    )
    audio_cfg = texttospeech.AudioConfig(
        audio_encoding=texttospeech.AudioEncoding.MP3,
        speaking_rate=1.0,
        pitch=0.0,
    )
    audio = client.synthesize_speech(
        input=texttospeech.SynthesisInput(text=text), voice=voice, audio_config=audio_cfg
    )
    return audio.audio_content

async def synthesize_speech(text: str) -> bytes:
    """Synthesize `text` to MP3 bytes with the configured provider."""
    if CONFIG.TTS_PROVIDER == "elevenlabs":
        return await _elevenlabs_tts(text)
    if CONFIG.TTS_PROVIDER == "google":
        try:
            return await asyncio.to_thread(_google_tts, text)
        except Exception as e:
            raise UpstreamServiceError(f"Text-to-speech request failed: {e}") from e
    raise ConfigurationError(f"Unknown text-to-speech provider: {CONFIG.TTS_PROVIDER!r}")

async def generate_reference_audio(session_id: str, text: str) -> Dict[str, Any]:
    """
    Synthesize reference audio for `text` and keep it in the session's audio slot,
    replacing whatever was there.
    Returns: {"success": True}
    """
    if not text or not text.strip():
        raise MissingInputError("Missing text")

    audio = await synthesize_speech(text.strip())
    SESSIONS.store_audio(session_id, audio)
    logger.info("[TTS] Session %s: stored %d bytes of reference audio", session_id, len(audio))
    return {"success": True}

def get_reference_audio(session_id: str) -> bytes:
    audio = SESSIONS.get_audio(session_id)
    if not audio:
        raise AudioNotFoundError("No audio available")
    return audio
