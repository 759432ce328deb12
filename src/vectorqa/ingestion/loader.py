import logging
from pathlib import Path
from typing import Iterable, List
from tqdm import tqdm
from langchain_core.documents import Document

logger = logging.getLogger(__name__)


def load_documents(directory: str, extensions: Iterable[str] = (".txt", ".md")) -> List[Document]:
    """
    Reads every matching file under directory into a Document.
    metadata["source"] holds the file path.
    """
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"Documents directory not found: {directory}")

    suffixes = {ext.lower() for ext in extensions}
    files = sorted(p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in suffixes)
    logger.info(f"Found {len(files)} documents in {directory}.")

    docs = []
    for file_path in tqdm(files, desc="Loading documents"):
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()
        docs.append(Document(page_content=text, metadata={"source": str(file_path)}))
    return docs
