"""
Utility functions for namesearch.
"""

from pathlib import Path


def read_names(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """
    Read a candidate list from a text file, one name per line.

    Blank lines are skipped and surrounding whitespace is stripped. Order and
    duplicates are preserved.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        The names in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    text = Path(path).read_text(encoding=encoding)
    return [line.strip() for line in text.splitlines() if line.strip()]
