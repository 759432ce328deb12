import logging
import chromadb
from vectorqa import config

logger = logging.getLogger(__name__)


def get_client(host: str = None, port: str = None, path: str = None):
    """
    Initializes a ChromaDB client.
    Connects to a Chroma server when host and port are configured,
    otherwise opens a local persistent database.
    """
    chroma_host = host or config.CHROMA_HOST
    chroma_port = port or config.CHROMA_PORT
    chroma_path = path or config.CHROMA_DB_PATH

    if chroma_host and chroma_port:
        logger.info(f"Connecting to ChromaDB Server at {chroma_host}:{chroma_port}...")
        try:
            client = chromadb.HttpClient(
                host=chroma_host,
                port=int(chroma_port),
                settings=chromadb.config.Settings(anonymized_telemetry=False),
            )
            client.heartbeat()
            return client
        except Exception as e:
            logger.warning(
                f"Could not connect to ChromaDB Server at {chroma_host}:{chroma_port} ({e}). Falling back to Local Mode."
            )

    logger.info(f"Running in Local Mode. Database path: {chroma_path}")
    return chromadb.PersistentClient(path=chroma_path)
