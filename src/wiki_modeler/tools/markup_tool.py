"""Markup tool - turn a wiki page body into plain paragraph text."""

import regex

# Top-level '=' characters per flushed paragraph ("== Heading ==" has four).
EQUALS_PER_PARAGRAPH = 4

# Unicode Alphabetic covers combining vowel signs and letter numbers, not just L*.
_KEEP = regex.compile(r"[\p{Alphabetic}\p{Nd}]")


def _filter_char(ch: str) -> str:
    """Keep letters and digits, map whitespace to one space, drop the rest."""
    if _KEEP.match(ch):
        return ch
    if ch.isspace():
        return " "
    return ""


def extract_paragraphs(text: str) -> list[str]:
    """
    Split a page body into paragraphs at section headings.

    Template content ({{...}}, nested included) is discarded. Every fourth
    top-level '=' flushes the buffer, so the letters of a heading title end
    up as the trailing words of the paragraph before it. Text after the
    last flush is not returned.
    """
    paragraphs: list[str] = []
    buf: list[str] = []
    brace_depth = 0
    equals_count = 0

    for ch in text:
        if ch == "{":
            brace_depth += 1
        elif ch == "}":
            brace_depth -= 1
        if brace_depth > 0:
            continue
        if ch == "=":
            equals_count += 1
            if equals_count == EQUALS_PER_PARAGRAPH:
                paragraphs.append("".join(buf))
                buf = []
                equals_count = 0
        buf.append(_filter_char(ch))

    return paragraphs


def normalize(text: str) -> str:
    """Filter text the same way as extract_paragraphs, stopping at the first '=='."""
    buf: list[str] = []
    brace_depth = 0
    prev = ""

    for ch in text:
        if brace_depth <= 0 and prev == "=" and ch == "=":
            break
        if ch == "{":
            brace_depth += 1
        elif ch == "}":
            brace_depth -= 1
        if brace_depth > 0:
            prev = ""
            continue
        prev = ch
        buf.append(_filter_char(ch))

    return "".join(buf)
