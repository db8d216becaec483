"""Utility for making text safe inside a Markdown table cell."""


def md_cell(v: object) -> str:
    """Collapse line breaks and escape pipes so text stays in one cell."""
    if v is None:
        return ""
    text = " ".join(str(v).split())
    return text.replace("|", "\\|")
