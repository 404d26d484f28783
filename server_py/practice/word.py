"""Practice word generator."""
from typing import Dict, Any, Iterable, List
from langchain_core.messages import BaseMessage, SystemMessage, HumanMessage
import logging
import re

from errors import UpstreamServiceError
from prompts import WORD_GENERATION_PROMPT, WORD_GENERATION_REQUEST
from sessions import get_session
from .utils import get_llm

logger = logging.getLogger(__name__)

def build_word_messages(recent_words: Iterable[str]) -> List[BaseMessage]:
    avoid = ", ".join(recent_words) or "none"
    return [
        SystemMessage(content=WORD_GENERATION_PROMPT.format(recent_words=avoid)),
        HumanMessage(content=WORD_GENERATION_REQUEST),
    ]

EMPHASIZED_WORD = re.compile(r'\*\*([^*\s]+)\*\*|"([^"\s]+)"')

def _letters_only(token: str) -> str:
    return re.sub(r"[^\w'-]|_|\d", "", token).strip("'-").lower()

def clean_word(raw: str) -> str:
    """
    Reduce a model reply to a single lowercase word.

    '**Enthusiasm.**' and 'Sure! Enthusiasm' both give 'enthusiasm'. A reply
    that still has several words after its last ':', '!' or '?' gives ''.
    """
    lines = [line for line in raw.strip().splitlines() if line.strip()]
    if not lines:
        return ""
    line = lines[0].strip()

    emphasized = EMPHASIZED_WORD.search(line)
    if emphasized:
        return _letters_only(emphasized.group(1) or emphasized.group(2))

    tail = re.split(r"[:!?]", line.rstrip(".!?:;, "))[-1]
    tokens = [t for t in (_letters_only(t) for t in tail.split()) if t]
    return tokens[0] if len(tokens) == 1 else ""

async def generate_word(session_id: str) -> Dict[str, Any]:
    """
    Ask the language model for a new practice word the session has not seen recently.
    Returns: {"word": "..."}
    """
    session = get_session(session_id)
    llm = get_llm()
    messages = build_word_messages(session.recent_words)

    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        raise UpstreamServiceError(f"Language model request failed: {e}") from e

    word = clean_word(response.content if isinstance(response.content, str) else str(response.content))
    if not word:
        raise UpstreamServiceError("Language model returned no usable word")

    session.recent_words.add(word)
    session.current_word = word
    logger.info("[Word] Session %s: generated %r (%d recent)", session.session_id, word, len(session.recent_words))
    return {"word": word}
