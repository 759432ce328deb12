import logging
import torch
from typing import List
from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)


class Embedder:
    """
    Wraps a SentenceTransformer model for document and query embeddings.
    """

    def __init__(self, model_name: str = "sentence-transformers/all-MiniLM-L6-v2"):
        self.device = "cuda" if torch.cuda.is_available() else "cpu"
        self.model_name = model_name
        logger.info(f"Loading embedding model {model_name} on {self.device}...")
        try:
            self.model = SentenceTransformer(model_name, device=self.device)
        except Exception as e:
            logger.critical(f"Failed to load model: {e}")
            raise e

    @property
    def dimension(self) -> int:
        return self.model.get_sentence_embedding_dimension()

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        """Embeds texts with newlines flattened to spaces."""
        if not texts:
            return []
        cleaned = [text.replace("\n", " ") for text in texts]
        embeddings = self.model.encode(cleaned, show_progress_bar=False)
        return embeddings.tolist()

    def embed_query(self, text: str) -> List[float]:
        return self.model.encode(text, convert_to_tensor=False).tolist()
