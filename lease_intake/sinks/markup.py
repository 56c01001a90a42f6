"""Emphasis markup used by generated summaries.

Summaries mark emphasis with double asterisks (``**Título**``). This module
splits lines into runs for renderers and produces the plain-text and print
(HTML) exports.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

EMPHASIS_PATTERN = re.compile(r"(\*\*.*?\*\*)")

DEFAULT_PRINT_TITLE = "Resumo Locação"

PRINT_TEMPLATE = """<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
      body {{ font-family: 'Inter', sans-serif; padding: 40px; color: #1e293b; }}
      h1 {{ color: #002F6C; font-size: 24px; border-bottom: 2px solid #E30613; padding-bottom: 10px; }}
      strong {{ color: #002F6C; }}
      .content {{ font-family: monospace; font-size: 14px; line-height: 1.5; white-space: pre-wrap; }}
    </style>
  </head>
  <body>
    <h1>{title}</h1>
    <div class="content">{content}</div>
  </body>
</html>
"""


@dataclass(frozen=True)
class TextRun:
    """Contiguous piece of a line with a single emphasis state."""

    text: str
    bold: bool = False


def split_emphasis(line: str) -> list[TextRun]:
    """Split one line into plain and bold runs.

    An unmatched ``**`` is kept as literal text. Empty runs are dropped.
    """
    runs = []
    for part in EMPHASIS_PATTERN.split(line):
        if not part:
            continue
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            if part[2:-2]:
                runs.append(TextRun(part[2:-2], bold=True))
        else:
            runs.append(TextRun(part))
    return runs


def parse_summary(text: str) -> list[list[TextRun]]:
    """Split a whole summary into lines of runs."""
    return [split_emphasis(line) for line in text.split("\n")]


def strip_emphasis(text: str) -> str:
    """Plain-text export: the delimiters are removed, the text is kept."""
    return "\n".join(
        "".join(run.text for run in runs) for runs in parse_summary(text)
    )


def to_html_fragment(text: str) -> str:
    """Escape the summary and turn emphasis into ``<strong>`` runs."""
    lines = []
    for runs in parse_summary(text):
        parts = []
        for run in runs:
            escaped = html.escape(run.text)
            parts.append(f"<strong>{escaped}</strong>" if run.bold else escaped)
        lines.append("".join(parts))
    return "<br>".join(lines)


def to_print_html(text: str, title: str = DEFAULT_PRINT_TITLE) -> str:
    """Standalone HTML document for printing a summary."""
    return PRINT_TEMPLATE.format(title=html.escape(title), content=to_html_fragment(text))
