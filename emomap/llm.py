# emomap/llm.py
from google import generativeai as genai
from config import settings
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)


def _response_text(response: Any) -> str:
    # `response.text` raises when the candidate has no text part (e.g. blocked)
    try:
        return response.text or ""
    except ValueError as e:
        logger.debug(f"Gemini returned no text part: {e}")
        return ""


async def generate_structured_json_async(
    prompt: str,
    response_schema: Any,
    *,
    system_instruction: str,
    api_key: str,
    model_name: Optional[str] = None,
) -> str:
    """Single JSON-mode generation; returns the raw text payload."""
    model_name = model_name or settings.GEMINI_MODEL

    # The model binds its async client on the first request. Nothing below
    # awaits before that, so concurrent calls keep their own key.
    genai.configure(api_key=api_key)
    model = genai.GenerativeModel(
        model_name=model_name,
        system_instruction=system_instruction,
    )
    response = await model.generate_content_async(
        [{"role": "user", "parts": [prompt]}],
        generation_config=genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=response_schema,
        ),
    )
    return _response_text(response)
