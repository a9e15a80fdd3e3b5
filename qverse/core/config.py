# qverse/core/config.py
import os

from dotenv import load_dotenv

# Load .env
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# ---- QURAN API ----
QURAN_API_BASE_URL = os.getenv("QURAN_API_BASE_URL", "https://api.quran.com/api/v4")

# Translation resources, in order of preference. The first one present on
# a verse is the one shown to the user.
QURAN_TRANSLATION_IDS = [
    int(t) for t in os.getenv("QURAN_TRANSLATION_IDS", "21,20,19,131,85").split(",") if t.strip()
]

QURAN_REQUEST_TIMEOUT = int(os.getenv("QURAN_REQUEST_TIMEOUT", "15"))
QURAN_MAX_RETRIES = int(os.getenv("QURAN_MAX_RETRIES", "3"))

# ---- ALIASES ----
QURAN_ALIAS_FILE = os.getenv(
    "QURAN_ALIAS_FILE",
    os.path.join(BASE_DIR, "config", "quran_aliases.yml"),
)

# ---- SERVER ----
SECRET_KEY = os.getenv("QVERSE_SECRET_KEY", "change-me")
HOST = os.getenv("QVERSE_HOST", "127.0.0.1")
PORT = int(os.getenv("QVERSE_PORT", "5065"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
