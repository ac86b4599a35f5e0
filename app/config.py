import os

from dotenv import load_dotenv

load_dotenv()

GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta/models")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "30"))

# fixed generation settings
TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 800

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))


def gemini_api_key() -> str | None:
    # read per request so a key added to the environment later is picked up
    return os.getenv("GEMINI_API_KEY") or None
