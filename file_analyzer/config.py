import os
from dotenv import load_dotenv

load_dotenv()


def _split(raw: str) -> tuple:
    return tuple(token.strip() for token in raw.split(",") if token.strip())


PREVIEW_ROWS = int(os.getenv("PREVIEW_ROWS", "50"))
TOP_VALUES = int(os.getenv("TOP_VALUES", "5"))
def numeric_threshold(raw: str) -> float:
    value = float(raw)
    # at 0 every column, text included, would classify as numeric
    if not 0 < value <= 1:
        raise ValueError(f"NUMERIC_THRESHOLD must be in (0, 1], got {raw!r}")
    return value


NUMERIC_THRESHOLD = numeric_threshold(os.getenv("NUMERIC_THRESHOLD", "0.8"))

# Compared case-insensitively against the stripped cell
MISSING_TOKENS = _split(os.getenv("MISSING_TOKENS", "NA"))

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
CORS_ORIGINS = list(_split(os.getenv("CORS_ORIGINS", "http://localhost:3000")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
