import logging
from typing import Dict, Any
from langchain_core.documents import Document
from vectorqa.rag.retriever import IndexRetriever
from vectorqa.rag.generator import GeminiGenerator

logger = logging.getLogger(__name__)


class QueryPipeline:
    """
    Orchestrates the query flow: Retrieve -> Concatenate -> Generate.
    """

    def __init__(self, retriever: IndexRetriever, generator: GeminiGenerator, top_k: int = 10):
        self.retriever = retriever
        self.generator = generator
        self.top_k = top_k

    def run(self, index_name: str, question: str) -> Dict[str, Any]:
        """
        End-to-end query execution. The answer is None when nothing matched.
        """
        # 1. Retrieve
        matches = self.retriever.retrieve(index_name, question, top_k=self.top_k)
        logger.info(f"Found {len(matches)} matches...")
        logger.info(f"Asking question: {question}...")

        if not matches:
            logger.info("Since there are no matches, the LLM will not be queried.")
            return {"answer": None, "source_documents": []}

        # 2. Concatenate
        concatenated_page_content = " ".join(
            m["metadata"].get("pageContent") or m["content"] for m in matches
        )

        # 3. Generate
        answer = self.generator.generate_answer(
            question, [Document(page_content=concatenated_page_content)]
        )
        logger.info(f"Answer: {answer}")

        return {"answer": answer, "source_documents": matches}
