"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Input guard (applied by hosts, never by the core parser) ---
MAX_INPUT_CHARS: int = int(os.getenv("MAX_INPUT_CHARS", "1000000"))

# --- Locale extension ---
QUOTE_HEADERS_FILE: str = os.getenv("QUOTE_HEADERS_FILE", "")

# --- Observability ---
METRICS_ENABLED: bool = os.getenv("METRICS_ENABLED", "true").lower() == "true"
