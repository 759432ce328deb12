import pytest
from unittest.mock import patch
from vectorqa import cli


@pytest.fixture
def mock_components():
    with patch("vectorqa.cli.get_client") as get_client, patch(
        "vectorqa.cli.Embedder"
    ) as embedder_cls, patch("vectorqa.cli.GeminiGenerator") as generator_cls:
        yield {
            "get_client": get_client,
            "embedder_cls": embedder_cls,
            "generator_cls": generator_cls,
        }


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_setup_command(mock_components, capsys):
    result = {"index_name": "docs", "created": True, "documents": 2, "vectors_upserted": 4}
    with patch("vectorqa.cli.setup_index", return_value=result) as mock_setup:
        exit_code = cli.main(["setup", "--docs", "my_docs", "--index", "docs"])

    assert exit_code == 0
    updater, index_name, docs_dir = mock_setup.call_args.args
    assert (index_name, docs_dir) == ("docs", "my_docs")
    assert updater.client is mock_components["get_client"].return_value
    assert "4 vectors from 2 documents" in capsys.readouterr().out


def test_ask_command_prints_answer(mock_components, capsys):
    with patch("vectorqa.cli.QueryPipeline") as pipeline_cls:
        pipeline_cls.return_value.run.return_value = {"answer": "42", "source_documents": []}
        exit_code = cli.main(["ask", "What is it?", "--index", "docs", "--top-k", "3"])

    assert exit_code == 0
    assert pipeline_cls.call_args.kwargs["top_k"] == 3
    pipeline_cls.return_value.run.assert_called_once_with("docs", "What is it?")
    assert "42" in capsys.readouterr().out


def test_ask_command_without_matches(mock_components, capsys):
    with patch("vectorqa.cli.QueryPipeline") as pipeline_cls:
        pipeline_cls.return_value.run.return_value = {"answer": None, "source_documents": []}
        exit_code = cli.main(["ask", "What is it?"])

    assert exit_code == 1
    assert "No matches found." in capsys.readouterr().out
