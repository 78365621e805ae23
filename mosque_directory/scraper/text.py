import re

_LINE_BREAKS = re.compile(r"[\n\t]")
_WHITESPACE_RUN = re.compile(r"\s\s+")


def clean_text(text: str, collapse_to: str = "") -> str:
    """Strip newlines and tabs, replace runs of 2+ whitespace with collapse_to, trim.

    With the default collapse_to="" a run like "a    b" becomes "ab"; existing
    mosques.json/csv output was produced this way. Pass " " to keep words apart.
    """
    text = _LINE_BREAKS.sub("", text)
    text = _WHITESPACE_RUN.sub(collapse_to, text)
    return text.strip()
