#!/usr/bin/env python3
"""Run the pronunciation practice server."""
import logging
import uvicorn
from config import CONFIG

if __name__ == "__main__":
    logging.basicConfig(
        level=CONFIG.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        "Starting pronunciation practice server on port %s (LLM: %s, TTS: %s)",
        CONFIG.PORT, CONFIG.PROVIDER, CONFIG.TTS_PROVIDER,
    )
    uvicorn.run(
        "server:app",
        host="0.0.0.0",
        port=CONFIG.PORT,
        reload=True
    )
