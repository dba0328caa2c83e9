# emomap/emotional_map/schema.py
"""Response schema and instructions sent to Gemini for an emotional map.

ANALYSIS_SCHEMA uses the OpenAPI subset Gemini accepts as ``response_schema``.
It mirrors ``EmotionalMapAnalysis`` in models.py; keep the two in step.
"""

MERMAID_RULES = """A valid Mermaid.js flowchart string.

RULES:
1. START with "graph LR"
2. DEFINE CLASSES - HIGH CONTRAST MINIMALIST:
   classDef negative fill:#fff0f0,stroke:#d32f2f,stroke-width:3px,color:#000000;
   classDef neutral fill:#ffffff,stroke:#000000,stroke-width:2px,color:#000000;
   classDef resolution fill:#f0f7ff,stroke:#000000,stroke-width:3px,color:#000000;
3. SYNTAX:
   Trigger(("Trigger")) --> Emotion1("Emotion")
   Emotion1 --> Emotion2("Emotion")
   Emotion2 --> Resolution{{"Resolution"}}
4. APPLY CLASSES:
   class Trigger negative;
   class Emotion1,Emotion2 neutral;
   class Resolution resolution;
5. LABELS:
   Keep labels SHORT (max 3 words). Use EMOJIS.
6. Return ONLY the code.
"""

SYSTEM_INSTRUCTION = (
    "You are an empathetic emotional intelligence expert. "
    "Your goal is to break down situations into emotional components, identify triggers, "
    "and suggest healing paths. Generate a Mermaid.js flowchart code that visualizes this "
    "journey using high-contrast, minimalist aesthetics."
)

REQUIRED_FIELDS = [
    "core_emotions",
    "emotional_transitions",
    "triggers",
    "psychological_interpretations",
    "healing_suggestions",
    "empathetic_message",
    "mermaid_code",
]

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "core_emotions": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "emotion": {"type": "STRING", "description": "Name of the emotion"},
                    "intensity": {"type": "INTEGER", "description": "Intensity from 0 to 100"},
                },
                "required": ["emotion", "intensity"],
            },
            "description": "List of core emotions identified in the situation.",
        },
        "emotional_transitions": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "from": {"type": "STRING"},
                    "to": {"type": "STRING"},
                    "description": {"type": "STRING", "description": "Explanation of the transition"},
                },
                "required": ["from", "to", "description"],
            },
            "description": "The journey from one emotional state to another.",
        },
        "triggers": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Key triggers identified in the text.",
        },
        "psychological_interpretations": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Insights into why the user might be feeling this way.",
        },
        "healing_suggestions": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Actionable advice for the user.",
        },
        "empathetic_message": {
            "type": "STRING",
            "description": "A kind, supportive message summarizing the analysis.",
        },
        "mermaid_code": {
            "type": "STRING",
            "description": MERMAID_RULES,
        },
        "svg_flowchart": {
            "type": "STRING",
            "description": "Leave empty or return null, we are using mermaid_code now.",
        },
    },
    "required": REQUIRED_FIELDS,
}
