"""Text utilities shared across the answer engine.

Text handling contract
----------------------
* Incoming documents and user inputs have BOM markers stripped so downstream
  processing does not see spurious characters.
* Internal layers assume text is already clean and avoid repeated
  sanitization.
"""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str, *, normalize: bool = True, ascii_only: bool = False) -> str:
    """Remove BOM markers and optionally normalize/ASCII-fold text.

    Args:
        text: Input text that may contain BOM or special characters.
        normalize: Whether to apply NFKC normalization. Enabled by default.
        ascii_only: Whether to discard non-ASCII characters.

    Returns:
        Cleaned text with BOMs removed and optional normalization applied.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    if normalize:
        cleaned = unicodedata.normalize("NFKC", cleaned)
    if ascii_only:
        cleaned = cleaned.encode("ascii", errors="ignore").decode("ascii")
    return cleaned


def normalize_text(text: str) -> str:
    """Clean text and collapse all whitespace runs into single spaces."""
    return _WHITESPACE_RE.sub(" ", clean_text(text)).strip()


def clean_content(text: str) -> str:
    """Tidy extracted page text line by line.

    Runs of spaces and tabs collapse to one space, each line is trimmed and
    empty lines are dropped. Paragraph breaks are kept as single newlines.
    """
    lines = (re.sub(r"[ \t\f\v]+", " ", line).strip() for line in clean_text(text).splitlines())
    return "\n".join(line for line in lines if line)


def chunk_paragraphs(content: str, max_chunk_size: int = 1000) -> list[str]:
    """Pack paragraphs greedily into chunks of at most ``max_chunk_size`` chars.

    Paragraphs are separated by blank lines and joined back with one. A
    single paragraph longer than the limit becomes a chunk of its own.

    Args:
        content: Text to split.
        max_chunk_size: Target maximum chunk size (must be positive).

    Returns:
        List of chunks, empty when content is blank.

    Raises:
        ValueError: If max_chunk_size is not positive.
    """
    if max_chunk_size <= 0:
        raise ValueError("max_chunk_size must be positive")

    paragraphs = [p.strip() for p in re.split(r"\n\s*\n", content or "") if p.strip()]
    chunks: list[str] = []
    current = ""

    for paragraph in paragraphs:
        candidate = f"{current}\n\n{paragraph}" if current else paragraph
        if len(candidate) <= max_chunk_size:
            current = candidate
        else:
            if current:
                chunks.append(current)
            current = paragraph

    if current:
        chunks.append(current)
    return chunks
