"""
Configuration settings for vectorqa.
Values are read from environment variables, optionally via a .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _get_int(key: str, default: int) -> int:
    value = os.getenv(key, str(default))
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} value is not a valid number: {value}")


# =============================================================================
# Vector Index
# =============================================================================
INDEX_NAME = os.getenv("INDEX_NAME", "vectorqa-index")
INDEX_INIT_TIMEOUT = _get_int("INDEX_INIT_TIMEOUT", 80)  # seconds

CHROMA_HOST = os.getenv("CHROMA_HOST")
CHROMA_PORT = os.getenv("CHROMA_PORT")
CHROMA_DB_PATH = os.getenv("CHROMA_DB_PATH", "data/vektordb/")

# =============================================================================
# Documents & Chunking
# =============================================================================
DOCUMENTS_DIR = os.getenv("DOCUMENTS_DIR", "documents")
DOCUMENT_EXTENSIONS = [
    ext.strip() for ext in os.getenv("DOCUMENT_EXTENSIONS", ".txt,.md").split(",")
]

CHUNK_SIZE = _get_int("CHUNK_SIZE", 1000)
CHUNK_OVERLAP = _get_int("CHUNK_OVERLAP", 200)
UPSERT_BATCH_SIZE = _get_int("UPSERT_BATCH_SIZE", 100)

# =============================================================================
# Models
# =============================================================================
EMBEDDING_MODEL = os.getenv("EMBEDDING_MODEL", "sentence-transformers/all-MiniLM-L6-v2")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")

# =============================================================================
# Retrieval
# =============================================================================
TOP_K = _get_int("TOP_K", 10)

# =============================================================================
# UI
# =============================================================================
API_URL = os.getenv("API_URL", "http://localhost:8000")
