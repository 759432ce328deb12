import logging
from typing import Dict, Any
from vectorqa import config
from vectorqa.database.index_manager import create_index
from vectorqa.database.storage_manager import IndexUpdater
from vectorqa.ingestion.loader import load_documents

logger = logging.getLogger(__name__)


def setup_index(
    updater: IndexUpdater,
    index_name: str,
    docs_dir: str,
    timeout: float = config.INDEX_INIT_TIMEOUT,
) -> Dict[str, Any]:
    """
    Ensures the index exists, then embeds and upserts every document in docs_dir.
    """
    docs = load_documents(docs_dir, config.DOCUMENT_EXTENSIONS)

    created = create_index(
        updater.client, index_name, updater.embedder.dimension, timeout=timeout
    )
    vectors_upserted = updater.update_index(index_name, docs)

    return {
        "index_name": index_name,
        "created": created,
        "documents": len(docs),
        "vectors_upserted": vectors_upserted,
    }
