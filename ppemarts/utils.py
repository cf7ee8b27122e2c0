# Filename: ppemarts/utils.py
# Shared runtime config (read from env / .env via decouple) and the app logger.

import logging

from decouple import config

# OpenAI completion service; an empty key means "always use the keyword fallback"
OPENAI_API_KEY = config("OPENAI_API_KEY", default="")
OPENAI_MODEL = config("OPENAI_MODEL", default="gpt-3.5-turbo")
OPENAI_MAX_TOKENS = config("OPENAI_MAX_TOKENS", cast=int, default=500)
OPENAI_TEMPERATURE = config("OPENAI_TEMPERATURE", cast=float, default=0.7)
OPENAI_TIMEOUT = config("OPENAI_TIMEOUT", cast=float, default=15.0)

# "random" samples the catalog when no keyword matched, "none" returns nothing
RECOMMENDATION_FALLBACK = config("RECOMMENDATION_FALLBACK", default="random")

LOG_LEVEL = config("LOG_LEVEL", default="INFO")

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("ppemarts")
