# emomap/emotional_map/models.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Union


class UserInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    situation: str = Field(..., description="Free-text description of what happened")
    age: Union[int, float] = Field(..., description="User age")
    country: str = Field(..., description="Where the user lives")
    language: str = Field(..., description="Preferred language for the response")


class CoreEmotion(BaseModel):
    emotion: str
    intensity: int = Field(..., description="Intensity from 0 to 100")


class EmotionalTransition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from")
    to: str
    description: str


class EmotionalMapAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    core_emotions: List[CoreEmotion]
    emotional_transitions: List[EmotionalTransition]
    triggers: List[str]
    psychological_interpretations: List[str]
    healing_suggestions: List[str]
    empathetic_message: str
    mermaid_code: str
    svg_flowchart: str = Field(default="", description="Deprecated, always empty")

    @field_validator("svg_flowchart", mode="before")
    @classmethod
    def _empty_flowchart(cls, value: Any) -> Any:
        return value or ""
