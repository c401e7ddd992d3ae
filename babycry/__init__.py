"""Baby Cry Gateway: relays audio and chat requests to Google Gemini."""

__version__ = "1.0.0"
