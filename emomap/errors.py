# emomap/errors.py


class EmotionalMapError(Exception):
    """Base class for failures surfaced by the emotional map analyzer."""


class MissingCredentialsError(EmotionalMapError):
    def __init__(self, message: str = "API Key is missing. Please enter your Google Gemini API Key in the settings."):
        super().__init__(message)


class EmptyResponseError(EmotionalMapError):
    def __init__(self, message: str = "No response generated."):
        super().__init__(message)


class MalformedResponseError(EmotionalMapError, ValueError):
    """Model text could not be parsed into an analysis, even after cleanup."""


class ProviderError(EmotionalMapError):
    """The Gemini call itself failed (auth, quota, connectivity, server)."""

    DEFAULT_MESSAGE = "Failed to analyze the situation."

    def __init__(self, message: str = ""):
        super().__init__(message or self.DEFAULT_MESSAGE)
