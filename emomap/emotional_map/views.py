# emomap/emotional_map/views.py
from fastapi import APIRouter, Header, HTTPException
from typing import Optional
from .models import EmotionalMapAnalysis, UserInput
from emomap.emotional_map.agent import analyze_emotional_map
from emomap.errors import EmotionalMapError, MissingCredentialsError

router = APIRouter(prefix="/emotional-map", tags=["Emotional Map"])


@router.post("/", response_model=EmotionalMapAnalysis, response_model_by_alias=True)
async def emotional_map_llm(
    req: UserInput,
    x_gemini_api_key: Optional[str] = Header(default=None),
):
    try:
        return await analyze_emotional_map(req, x_gemini_api_key)
    except MissingCredentialsError as e:
        raise HTTPException(401, str(e))
    except EmotionalMapError as e:
        raise HTTPException(502, f"Emotional map analysis failed: {str(e)}")
