import pytest
from langchain_core.documents import Document
from vectorqa.indexing.chunker import DocumentChunker


@pytest.fixture
def chunker():
    return DocumentChunker(chunk_size=1000, chunk_overlap=200)


def test_long_document_is_split(chunker):
    """Should split text larger than chunk_size into bounded chunks."""
    doc = Document(page_content="word " * 600, metadata={"source": "a.txt"})

    chunks = chunker.split(doc)

    assert len(chunks) > 1
    assert all(len(c.page_content) <= 1000 for c in chunks)


def test_chunks_carry_metadata(chunker):
    doc = Document(page_content="word " * 600, metadata={"source": "a.txt"})

    chunks = chunker.split(doc)

    assert all(c.metadata["source"] == "a.txt" for c in chunks)
    assert chunks[0].metadata["start_index"] == 0
    assert chunks[1].metadata["start_index"] > 0
    assert all(c.metadata["token_count"] > 0 for c in chunks)


def test_short_document_single_chunk(chunker):
    doc = Document(page_content="Hello world", metadata={"source": "a.txt"})

    chunks = chunker.split(doc)

    assert len(chunks) == 1
    assert chunks[0].page_content == "Hello world"


def test_blank_document_yields_nothing(chunker):
    doc = Document(page_content=" \n\n ", metadata={"source": "a.txt"})
    assert chunker.split(doc) == []


def test_does_not_mutate_source_metadata(chunker):
    meta = {"source": "a.txt"}
    chunker.split(Document(page_content="Hello world", metadata=meta))
    assert meta == {"source": "a.txt"}
