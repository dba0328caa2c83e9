# emomap/emotional_map/agent.py
import logging
from typing import Awaitable, Callable, Optional
from config import Settings, settings as default_settings
from emomap.llm import generate_structured_json_async
from emomap.emotional_map.models import EmotionalMapAnalysis, UserInput
from emomap.emotional_map.schema import ANALYSIS_SCHEMA, SYSTEM_INSTRUCTION
from emomap.emotional_map.utils import parse_analysis
from emomap.errors import EmptyResponseError, MissingCredentialsError, ProviderError

logger = logging.getLogger(__name__)

GenerateFn = Callable[..., Awaitable[str]]


def build_prompt(user_input: UserInput) -> str:
    return f'''
    Analyze the following situation to generate an emotional map.
    Situation: "{user_input.situation}"
    User Context: Age {user_input.age}, Location {user_input.country}, Language Preference: {user_input.language}.
    '''


async def analyze_emotional_map(
    user_input: UserInput,
    api_key: Optional[str] = None,
    *,
    generate: GenerateFn = generate_structured_json_async,
    settings: Optional[Settings] = None,
) -> EmotionalMapAnalysis:
    settings = settings or default_settings

    resolved_key = settings.resolve_api_key(api_key)
    if not resolved_key:
        raise MissingCredentialsError()

    prompt = build_prompt(user_input)
    logger.debug(f"Requesting emotional map from {settings.GEMINI_MODEL}")

    try:
        text = await generate(
            prompt,
            ANALYSIS_SCHEMA,
            system_instruction=SYSTEM_INSTRUCTION,
            api_key=resolved_key,
            model_name=settings.GEMINI_MODEL,
        )
    except Exception as e:
        logger.exception(f"Gemini API Error: {e}")
        raise ProviderError(str(e)) from e

    if not text:
        raise EmptyResponseError()

    return parse_analysis(text)
