"""Normalization utilities for film text."""

import re

# \r\n and \n\r pairs count as a single break; lone \r is a break too
LINE_BREAK_PATTERN = re.compile(r"\r\n|\n\r|\r")


def normalize_line_endings(text: str) -> str:
    """Convert every line break style in `text` to '\\n'."""
    return LINE_BREAK_PATTERN.sub("\n", text)


def crawl_paragraphs(text: str) -> list[str]:
    """Split an opening crawl into paragraphs, joining each paragraph's lines."""
    paragraphs = []
    for block in re.split(r"\n\s*\n", normalize_line_endings(text)):
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if lines:
            paragraphs.append(" ".join(lines))
    return paragraphs
