"""Link tool - extract category tags and anchor targets from [[...]] wiki links."""

from enum import Enum

CATEGORY_PREFIX = "Category:"


class LinkKind(str, Enum):
    """Which kind of wiki link to extract."""

    CATEGORY = "categories"
    ANCHOR = "anchors"


def classify_link(raw: str, kind: LinkKind | str) -> str:
    """
    Reduce raw link content to a category name or anchor target.

    Returns "" when the link is not of the requested kind.
    """
    kind = LinkKind(kind)
    if kind is LinkKind.CATEGORY:
        if raw.startswith(CATEGORY_PREFIX):
            return raw[len(CATEGORY_PREFIX):]
        return ""
    if raw.startswith(CATEGORY_PREFIX):
        return ""
    target, _, _ = raw.partition("|")
    return target


def extract_links(text: str, kind: LinkKind | str) -> list[str]:
    """
    Collect links of one kind in document order.

    Brackets opened inside a template are ignored; once a bracket is open
    its content is captured verbatim, braces included, up to the next ']]'.
    """
    kind = LinkKind(kind)
    links: list[str] = []
    buf: list[str] = []
    reading = False
    brace_depth = 0
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if not reading:
            if ch == "{":
                brace_depth += 1
            elif ch == "}":
                brace_depth -= 1
            if brace_depth > 0:
                i += 1
                continue
        if ch == "[" and nxt == "[":
            buf = []
            reading = True
            i += 2
            continue
        if ch == "]" and nxt == "]":
            if reading:
                link = classify_link("".join(buf), kind)
                if link:
                    links.append(link)
                reading = False
            i += 2
            continue
        if reading:
            buf.append(ch)
        i += 1

    return links
