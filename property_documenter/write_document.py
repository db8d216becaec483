"""Logic for writing the rendered document to disk."""

from pathlib import Path

from property_documenter.errors import OutputWriteError


def write_document(output: Path, text: str) -> None:
    """Write the document as UTF-8, replacing any existing file.

    The parent directory must already exist.
    """
    try:
        with open(output, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        msg = "Error writing documentation file"
        raise OutputWriteError(msg, output) from e
