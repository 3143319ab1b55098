"""Configuration for stepline providers and logging."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# ============================================================================
# OpenRouter Configuration
# ============================================================================

# OpenRouter API key
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")

# OpenRouter API base URL (chat/completions is appended)
OPENROUTER_BASE_URL = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")

# Optional attribution headers sent to OpenRouter
OPENROUTER_APP_NAME = os.getenv("OPENROUTER_APP_NAME")
OPENROUTER_REFERER = os.getenv("OPENROUTER_REFERER")


def get_float(env_var: str, default: float) -> float:
    """Get float from environment or return default."""
    try:
        return float(os.getenv(env_var, default))
    except ValueError:
        logging.getLogger(__name__).warning(
            "Invalid %s, using default %s", env_var, default
        )
        return default


# Request timeout in seconds
OPENROUTER_TIMEOUT = get_float("OPENROUTER_TIMEOUT", 120.0)

# Model used by LLM steps that do not configure one
DEFAULT_MODEL = os.getenv("DEFAULT_MODEL")

# ============================================================================
# Logging Configuration
# ============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for applications embedding stepline.

    The library never calls this itself; it only emits records through
    module-level loggers.
    """
    logging.basicConfig(format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel((level or LOG_LEVEL).upper())
