import os
from dotenv import load_dotenv
import logging

from .exceptions import ConfigurationError

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Load .env file if it exists (for local development)
env_path = os.path.join(os.path.dirname(__file__), "..", ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
    logger.info("Loaded .env file for local development")
else:
    logger.info("No .env file found, using environment variables")

# API_KEY is the name the browser build used; GEMINI_API_KEY wins when both are set.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "") or os.getenv("API_KEY", "")
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")

GENERATION_MODEL = os.getenv("GENERATION_MODEL", "gemini-2.5-flash")
GUIDANCE_MODEL = os.getenv("GUIDANCE_MODEL", "gemini-2.5-flash")

GUIDANCE_MAX_TOKENS = int(os.getenv("GUIDANCE_MAX_TOKENS", "100"))
GUIDANCE_TEMPERATURE = float(os.getenv("GUIDANCE_TEMPERATURE", "0.8"))
GUIDANCE_THINKING_BUDGET = int(os.getenv("GUIDANCE_THINKING_BUDGET", "50"))

# Form thresholds: inputs must be strictly longer than these after trimming.
MIN_SCRIPT_CHARS = 10
MIN_THEME_CHARS = 3

# Comma-separated list of allowed origins for CORS (e.g., "https://app.example.com,http://localhost:4200").
_allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "").strip()
if _allowed_origins_env:
    ALLOWED_ORIGINS = [o.strip() for o in _allowed_origins_env.split(",") if o.strip()]
else:
    ALLOWED_ORIGINS = ["*"]

def has_all_keys() -> bool:
    if not GEMINI_API_KEY:
        logger.warning("Missing API keys: GEMINI_API_KEY")
        return False
    return True

def require_api_key() -> str:
    """Return the configured credential or fail hard; there is no way to recover at runtime."""
    if not GEMINI_API_KEY:
        raise ConfigurationError("GEMINI_API_KEY environment variable not set; please configure your .env")
    return GEMINI_API_KEY
