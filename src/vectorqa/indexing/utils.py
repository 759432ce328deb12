import tiktoken
from typing import Any, Dict, Optional


class TokenHelper:
    """Counts tokens with a tiktoken encoding."""

    def __init__(self, encoding_name: str = "cl100k_base"):
        try:
            self.tokenizer = tiktoken.get_encoding(encoding_name)
        except ValueError:
            self.tokenizer = tiktoken.get_encoding("cl100k_base")

    def count_tokens(self, text: Optional[str]) -> int:
        if not text:
            return 0
        return len(self.tokenizer.encode(text, disallowed_special=()))


def flatten_metadata(raw_metadata: Dict[str, Any]) -> Dict[str, Any]:
    """
    Formats metadata for ChromaDB compatibility.
    Keeps scalars, joins lists into strings and drops None values.
    """
    formatted = {}
    if not raw_metadata:
        return formatted

    for key, value in raw_metadata.items():
        if isinstance(value, (str, int, float, bool)):
            formatted[key] = value
        elif isinstance(value, (list, tuple)):
            formatted[key] = ", ".join(map(str, value))
        elif isinstance(value, dict):
            formatted.update(
                {f"{key}.{k}": v for k, v in flatten_metadata(value).items()}
            )
    return formatted
