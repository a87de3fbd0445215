"""CS Tutor relay: forwards student questions to Gemini and returns plain text for browser TTS."""

__version__ = "1.0.0"
