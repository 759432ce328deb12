import pytest
from unittest.mock import MagicMock
from vectorqa.rag.pipeline import QueryPipeline

MATCHES = [
    {"id": "a.txt_0", "content": "First part.", "metadata": {"pageContent": "First part."}, "score": 0.1},
    {"id": "a.txt_1", "content": "Second part.", "metadata": {"pageContent": "Second part."}, "score": 0.2},
]


@pytest.fixture
def retriever():
    return MagicMock()


@pytest.fixture
def generator():
    mock_generator = MagicMock()
    mock_generator.generate_answer.return_value = "The answer."
    return mock_generator


def test_no_matches_skips_llm(retriever, generator):
    retriever.retrieve.return_value = []
    pipeline = QueryPipeline(retriever, generator, top_k=10)

    result = pipeline.run("docs", "Anything?")

    assert result == {"answer": None, "source_documents": []}
    generator.generate_answer.assert_not_called()


def test_matches_are_concatenated_into_one_document(retriever, generator):
    retriever.retrieve.return_value = MATCHES
    pipeline = QueryPipeline(retriever, generator, top_k=10)

    result = pipeline.run("docs", "What?")

    assert result["answer"] == "The answer."
    assert result["source_documents"] == MATCHES
    retriever.retrieve.assert_called_once_with("docs", "What?", top_k=10)
    question, documents = generator.generate_answer.call_args.args
    assert question == "What?"
    assert len(documents) == 1
    assert documents[0].page_content == "First part. Second part."


def test_generator_errors_propagate(retriever, generator):
    retriever.retrieve.return_value = MATCHES
    generator.generate_answer.side_effect = RuntimeError("LLM down")
    pipeline = QueryPipeline(retriever, generator)

    with pytest.raises(RuntimeError):
        pipeline.run("docs", "What?")
