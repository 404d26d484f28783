from typing import Optional
from fastapi import APIRouter, FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
import logging

from config import CONFIG
from errors import PracticeError
from sessions import DEFAULT_SESSION_ID, get_session

logger = logging.getLogger(__name__)

app = FastAPI(title="Pronunciation Practice")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(PracticeError)
async def practice_error_handler(request: Request, exc: PracticeError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

router = APIRouter()

class GenerateWordRequest(BaseModel):
    sessionId: str = DEFAULT_SESSION_ID

class GenerateAudioRequest(BaseModel):
    text: Optional[str] = None
    sessionId: str = DEFAULT_SESSION_ID

@router.get("/health")
async def health():
    return {"ok": True}

@router.post("/generate-word")
async def generate_word_route(request: Optional[GenerateWordRequest] = None):
    """Generate a new practice word, avoiding the session's recent words."""
    session_id = request.sessionId if request else DEFAULT_SESSION_ID
    try:
        from practice import generate_word

        logger.info("[Word] Session %s, generating word", session_id)
        return await generate_word(session_id)
    except PracticeError:
        raise
    except Exception:
        logger.exception("[Word Error] Session %s", session_id)
        raise PracticeError("Failed to generate word")

@router.post("/generate-audio")
async def generate_audio_route(request: GenerateAudioRequest):
    """Synthesize reference audio for the text and cache it for playback."""
    try:
        from practice import generate_reference_audio

        logger.info("[TTS] Session %s, synthesizing %r", request.sessionId, (request.text or "")[:30])
        return await generate_reference_audio(request.sessionId, request.text)
    except PracticeError:
        raise
    except Exception:
        logger.exception("[TTS Error] Session %s", request.sessionId)
        raise PracticeError("Failed to generate audio")

@router.get("/play-reference")
async def play_reference_route(sessionId: str = DEFAULT_SESSION_ID):
    """Serve the session's cached reference audio."""
    try:
        from practice import get_reference_audio

        audio = get_reference_audio(sessionId)
        return Response(content=audio, media_type="audio/mpeg")
    except PracticeError:
        raise
    except Exception:
        logger.exception("[TTS Error] Session %s, serving audio", sessionId)
        raise PracticeError("Failed to serve audio")

@router.post("/check-pronunciation")
async def check_pronunciation_route(
    audio: Optional[UploadFile] = File(None),
    word: Optional[str] = Form(None),
    sessionId: str = Form(DEFAULT_SESSION_ID),
    strategy: Optional[str] = Form(None),
):
    """Score a recording of the target word."""
    try:
        from practice import check_pronunciation, DEFAULT_STRATEGY

        audio_data = await audio.read() if audio is not None else None
        logger.info(
            "[Pronunciation] Session %s, checking %r (%d bytes)",
            sessionId, word, len(audio_data or b""),
        )
        return await check_pronunciation(sessionId, audio_data, word, strategy or DEFAULT_STRATEGY)
    except PracticeError:
        raise
    except Exception:
        logger.exception("[Pronunciation Error] Session %s", sessionId)
        raise PracticeError("Failed to check pronunciation")

@router.get("/stats")
async def stats_route(sessionId: str = DEFAULT_SESSION_ID):
    """Running practice stats for the session."""
    return get_session(sessionId).stats.to_dict()

app.include_router(router)
# The browser client calls the same routes under /api
app.include_router(router, prefix="/api", include_in_schema=False)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=CONFIG.PORT)
