import logging
from typing import List
from tenacity import RetryError, retry_if_result, stop_after_delay, Retrying, wait_fixed

logger = logging.getLogger(__name__)

INDEX_METRIC = "cosine"


def list_index_names(client) -> List[str]:
    """Returns collection names; newer Chroma clients return names, older ones Collection objects."""
    return [c if isinstance(c, str) else c.name for c in client.list_collections()]


def create_index(client, index_name: str, vector_dimension: int, timeout: float = 80) -> bool:
    """
    Makes sure the index exists, creating it with a cosine metric when missing.

    Args:
        client: Chroma client.
        index_name: Name of the collection.
        vector_dimension: Length of the vectors stored in the index.
        timeout: Seconds to wait for a new index to become visible.

    Returns:
        True if the index was created, False if it already existed.
    """
    if (
        not isinstance(vector_dimension, int)
        or isinstance(vector_dimension, bool)
        or vector_dimension <= 0
    ):
        raise ValueError(f"vector_dimension must be a positive integer, got {vector_dimension!r}")

    logger.info(f'Checking "{index_name}"...')
    existing_indexes = list_index_names(client)

    if index_name in existing_indexes:
        logger.info(f'"{index_name}" already exists')
        return False

    logger.info(f'Creating "{index_name}"...')
    client.create_collection(
        name=index_name,
        metadata={"hnsw:space": INDEX_METRIC, "dimension": vector_dimension},
    )
    logger.info("Index creation initiated. Please wait...")
    _wait_until_ready(client, index_name, timeout)
    return True


def _wait_until_ready(client, index_name: str, timeout: float):
    """Polls the collection list until the new index shows up."""
    retryer = Retrying(
        retry=retry_if_result(lambda ready: not ready),
        stop=stop_after_delay(timeout),
        wait=wait_fixed(1),
    )
    try:
        retryer(lambda: index_name in list_index_names(client))
    except RetryError:
        raise TimeoutError(f'Index "{index_name}" was not ready after {timeout} seconds')
    logger.info(f'"{index_name}" is ready')
