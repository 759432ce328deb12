import argparse
import logging
import sys
from vectorqa import config
from vectorqa.database.client import get_client
from vectorqa.database.run_manager import setup_index
from vectorqa.database.storage_manager import IndexUpdater
from vectorqa.indexing.chunker import DocumentChunker
from vectorqa.indexing.embedder import Embedder
from vectorqa.rag.generator import GeminiGenerator
from vectorqa.rag.pipeline import QueryPipeline
from vectorqa.rag.retriever import IndexRetriever

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vectorqa", description="Index documents and ask questions against them"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup", help="Create the index and upsert documents")
    setup_parser.add_argument("--docs", default=config.DOCUMENTS_DIR, help="Directory with documents")
    setup_parser.add_argument("--index", default=config.INDEX_NAME, help="Index name")

    ask_parser = subparsers.add_parser("ask", help="Ask a question against the index")
    ask_parser.add_argument("question", help="Question to answer")
    ask_parser.add_argument("--index", default=config.INDEX_NAME, help="Index name")
    ask_parser.add_argument("--top-k", type=int, default=config.TOP_K, help="Matches to retrieve")

    return parser


def run_setup(args) -> int:
    updater = IndexUpdater(
        client=get_client(),
        embedder=Embedder(config.EMBEDDING_MODEL),
        chunker=DocumentChunker(config.CHUNK_SIZE, config.CHUNK_OVERLAP),
        batch_size=config.UPSERT_BATCH_SIZE,
    )
    result = setup_index(updater, args.index, args.docs)
    print(
        f"Index '{result['index_name']}': {result['vectors_upserted']} vectors "
        f"from {result['documents']} documents"
    )
    return 0


def run_ask(args) -> int:
    pipeline = QueryPipeline(
        retriever=IndexRetriever(get_client(), Embedder(config.EMBEDDING_MODEL)),
        generator=GeminiGenerator(config.GEMINI_MODEL),
        top_k=args.top_k,
    )
    result = pipeline.run(args.index, args.question)
    if result["answer"] is None:
        print("No matches found.")
        return 1
    print(result["answer"])
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "setup":
        return run_setup(args)
    return run_ask(args)


if __name__ == "__main__":
    sys.exit(main())
