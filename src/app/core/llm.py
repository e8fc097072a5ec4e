from google import genai

from app.core.config import get_settings


def get_gemini_client() -> genai.Client | None:
    """Create a Gemini API client, or None when no API key is configured."""
    settings = get_settings()
    if not settings.google_ai_api_key:
        return None
    return genai.Client(api_key=settings.google_ai_api_key)
