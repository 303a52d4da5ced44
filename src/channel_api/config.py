# config.py
import os
from dotenv import load_dotenv

load_dotenv()

# ---- MONGO ----
MONGO_URI = os.getenv("MONGO_URI")
MONGO_DB = os.getenv("MONGO_DB", "channel")

# ---- GROQ ----
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")
COMPLETION_TIMEOUT = float(os.getenv("COMPLETION_TIMEOUT", "30"))
COMPLETION_MAX_TOKENS = int(os.getenv("COMPLETION_MAX_TOKENS", "512"))

# ---- APP ----
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def require(name: str, value: str | None) -> str:
    if not value:
        raise RuntimeError(f"Error: {name} not found.")
    return value
