import logging
from typing import List, Dict, Any
from vectorqa.indexing.embedder import Embedder

logger = logging.getLogger(__name__)


class IndexRetriever:
    """
    Retrieves the nearest chunks for a question from a Chroma collection.
    """

    def __init__(self, client, embedder: Embedder):
        self.client = client
        self.embedder = embedder

    def retrieve(
        self, index_name: str, question: str, top_k: int = 10
    ) -> List[Dict[str, Any]]:
        """
        Retrieves top_k chunks matching the question.

        Returns:
            List of dictionaries with 'id', 'content', 'metadata', 'score'.
        """
        logger.info(f"Retrieving top {top_k} for query: {question}")
        collection = self.client.get_collection(name=index_name)
        query_embedding = self.embedder.embed_query(question)

        results = collection.query(
            query_embeddings=[query_embedding],
            n_results=top_k,
            include=["documents", "metadatas", "distances"],
        )

        if not results.get("ids") or not results["ids"][0]:
            return []

        # Chroma returns list of lists (batch query support), we sent 1 query
        ids = results["ids"][0]
        docs = (results.get("documents") or [[None] * len(ids)])[0]
        metas = (results.get("metadatas") or [[{}] * len(ids)])[0]
        distances = (results.get("distances") or [[None] * len(ids)])[0]

        parsed_results = []
        for i in range(len(ids)):
            metadata = metas[i] or {}
            parsed_results.append(
                {
                    "id": ids[i],
                    "content": docs[i] or metadata.get("pageContent", ""),
                    "metadata": metadata,
                    "score": distances[i],
                }
            )
        return parsed_results
