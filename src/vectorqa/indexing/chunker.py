from typing import List
from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter
from vectorqa.indexing.utils import TokenHelper


class DocumentChunker:
    """
    Splits documents into overlapping character chunks.
    Each chunk keeps its parent's metadata plus its start offset and token count.
    """

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200):
        self.token_helper = TokenHelper()
        self.text_splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
        )

    def split(self, document: Document) -> List[Document]:
        if not document.page_content.strip():
            return []

        chunks = self.text_splitter.create_documents(
            [document.page_content], metadatas=[dict(document.metadata)]
        )
        for chunk in chunks:
            chunk.metadata["token_count"] = self.token_helper.count_tokens(chunk.page_content)
        return chunks
