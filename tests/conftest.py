import json

import pytest


SAMPLE_ANALYSIS = {
    "core_emotions": [
        {"emotion": "Anxiety", "intensity": 80},
        {"emotion": "Hope", "intensity": 35},
    ],
    "emotional_transitions": [
        {"from": "Anxiety", "to": "Hope", "description": "Talking to a friend eased the pressure."},
    ],
    "triggers": ["Missed deadline"],
    "psychological_interpretations": ["Fear of letting the team down."],
    "healing_suggestions": ["Break the work into smaller steps."],
    "empathetic_message": "It makes sense that you feel this way.",
    "mermaid_code": (
        "graph LR\n"
        "Deadline((\"⏰ Deadline\")) --> Anxiety(\"😟 Anxiety\")\n"
        "Anxiety --> Calm{{\"🌱 Small steps\"}}\n"
        "class Deadline negative;\nclass Anxiety neutral;\nclass Calm resolution;"
    ),
}


@pytest.fixture
def sample_analysis() -> dict:
    return json.loads(json.dumps(SAMPLE_ANALYSIS))


@pytest.fixture
def sample_json(sample_analysis) -> str:
    return json.dumps(sample_analysis, ensure_ascii=False)


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
