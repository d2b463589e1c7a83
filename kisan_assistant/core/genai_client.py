from google.genai.client import Client

from .config import settings

_raw_google_client: Client | None = None


def get_raw_google_client() -> Client:
    global _raw_google_client
    if _raw_google_client is None:
        _raw_google_client = Client(api_key=settings.GEMINI_API_KEY)
    return _raw_google_client
