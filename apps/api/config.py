import os
import logging
from dotenv import load_dotenv

load_dotenv()  # must run before the settings below are read

API_TITLE = os.getenv("TRAVEL_API_TITLE", "Travel Planner API")
API_VERSION = "0.1.0"

LOG_LEVEL = os.getenv("TRAVEL_API_LOG_LEVEL", "INFO").upper()

# Sample catalogue (destinations, hotels, guides, one demo trip)
SEED_SAMPLE_DATA = os.getenv("TRAVEL_API_SEED_DATA", "1").strip().lower() not in ("0", "false", "no", "off")

CORS_ORIGINS = [o.strip() for o in os.getenv("TRAVEL_API_CORS_ORIGINS", "").split(",") if o.strip()]


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    logger.propagate = False
    return logger
