import logging
from typing import Any, Dict, List
from tqdm import tqdm
from langchain_core.documents import Document
from vectorqa.indexing.chunker import DocumentChunker
from vectorqa.indexing.embedder import Embedder
from vectorqa.indexing.utils import flatten_metadata

logger = logging.getLogger(__name__)


class IndexUpdater:
    """
    Chunks documents, embeds the chunks and upserts them into a Chroma collection.
    """

    def __init__(
        self,
        client,
        embedder: Embedder,
        chunker: DocumentChunker = None,
        batch_size: int = 100,
    ):
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.client = client
        self.embedder = embedder
        self.chunker = chunker if chunker else DocumentChunker()
        self.batch_size = batch_size

    def update_index(self, index_name: str, docs: List[Document]) -> int:
        """
        Upserts every document's chunks into the index.

        Returns:
            Number of vectors upserted.
        """
        collection = self.client.get_collection(name=index_name)
        logger.info(f"Index retrieved: {index_name}")
        expected_dimension = (collection.metadata or {}).get("dimension")

        total_upserted = 0
        for doc in tqdm(docs, desc="Indexing Documents"):
            txt_path = doc.metadata["source"]
            chunks = self.chunker.split(doc)
            if not chunks:
                logger.warning(f"Skipped empty document: {txt_path}")
                continue

            embeddings = self.embedder.embed_documents([c.page_content for c in chunks])
            logger.info("Finished embedding documents")
            logger.info(
                f"Creating {len(chunks)} vectors array with id, values, and metadata..."
            )

            batch: List[Dict[str, Any]] = []
            for idx, chunk in enumerate(chunks):
                values = embeddings[idx]
                if expected_dimension and len(values) != expected_dimension:
                    raise ValueError(
                        f"Embedding dimension {len(values)} does not match index dimension {expected_dimension}"
                    )
                batch.append(self._build_vector(txt_path, idx, chunk, values))

                if len(batch) == self.batch_size or idx == len(chunks) - 1:
                    self._upsert(collection, batch)
                    total_upserted += len(batch)
                    batch = []

        logger.info(f"Indexing complete. Total vectors: {total_upserted}")
        return total_upserted

    def _build_vector(
        self, txt_path: str, idx: int, chunk: Document, values: List[float]
    ) -> Dict[str, Any]:
        metadata = flatten_metadata(chunk.metadata)
        metadata["pageContent"] = chunk.page_content
        metadata["txtPath"] = txt_path
        return {
            "id": f"{txt_path}_{idx}",
            "values": values,
            "metadata": metadata,
            "document": chunk.page_content,
        }

    def _upsert(self, collection, batch: List[Dict[str, Any]]):
        collection.upsert(
            ids=[v["id"] for v in batch],
            embeddings=[v["values"] for v in batch],
            metadatas=[v["metadata"] for v in batch],
            documents=[v["document"] for v in batch],
        )
