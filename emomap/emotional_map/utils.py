# emomap/emotional_map/utils.py
import json
import re
import logging
from typing import Any
from pydantic import ValidationError
from emomap.emotional_map.models import EmotionalMapAnalysis
from emomap.errors import MalformedResponseError

logger = logging.getLogger(__name__)

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?")


def clean_json_string(text: str) -> str:
    """Strip code fences and keep only the outermost {...} block, if any."""
    cleaned = CODE_FENCE_PATTERN.sub("", text).strip()
    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")
    if first_brace != -1 and last_brace != -1:
        cleaned = cleaned[first_brace:last_brace + 1]
    return cleaned


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Model response is not plain JSON, retrying after cleanup")

    try:
        return json.loads(clean_json_string(text))
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Could not parse model response as JSON: {e}") from e


def parse_analysis(text: str) -> EmotionalMapAnalysis:
    data = _load_json(text)
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}")

    if not data.get("svg_flowchart"):
        data["svg_flowchart"] = ""

    try:
        return EmotionalMapAnalysis.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Model response does not match the analysis schema: {e}") from e
