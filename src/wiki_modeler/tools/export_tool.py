"""Export tool - convert Wikipedia Special:Export files to refined XML and read them back."""

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from ..models.page_extraction import PageExtraction
from .link_tool import LinkKind, extract_links
from .markup_tool import extract_paragraphs

logger = logging.getLogger(__name__)

REFINED_ROOT = "ProcessedSpecialExportData"


def _load_xml(path: str | Path) -> BeautifulSoup | None:
    """Parse an XML file, logging and returning None when it cannot be read."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            return BeautifulSoup(f.read(), "xml")
    except (OSError, ValueError, ParserRejectedMarkup) as e:
        logger.error("Could not parse XML file %s: %s", path, e)
        return None


def scan_page(title: str, body: str) -> PageExtraction:
    """Run the markup scanners over one page body."""
    return PageExtraction(
        title=title.strip(),
        categories=extract_links(body, LinkKind.CATEGORY),
        anchors=extract_links(body, LinkKind.ANCHOR),
        paragraphs=extract_paragraphs(body),
    )


def parse_special_export(path: str | Path) -> list[PageExtraction] | None:
    """Scan every <page> of a Special:Export file. None if the file is unreadable."""
    soup = _load_xml(path)
    if soup is None:
        return None

    pages: list[PageExtraction] = []
    for page in soup.find_all("page"):
        title = page.find("title")
        text = page.find("text")
        if title is None or text is None:
            logger.warning("Skipping page without title/text in %s", path)
            continue
        pages.append(scan_page(title.get_text(), text.get_text()))
    logger.debug("Scanned %d pages from %s", len(pages), path)
    return pages


def _join_items(items: list[str]) -> str:
    return "".join(" " + item for item in items)


def build_refined_xml(pages: list[PageExtraction]) -> BeautifulSoup:
    """Build the refined document: one <page> with title, texts, categories, anchors."""
    soup = BeautifulSoup("", "xml")
    root = soup.new_tag(REFINED_ROOT)
    soup.append(root)

    for extraction in pages:
        page = soup.new_tag("page")
        root.append(page)

        title = soup.new_tag("title")
        title.string = extraction.title
        page.append(title)

        for paragraph in extraction.paragraphs:
            text = soup.new_tag("text")
            text.string = paragraph
            page.append(text)

        categories = soup.new_tag("categories")
        categories.string = _join_items(extraction.categories)
        page.append(categories)

        anchors = soup.new_tag("anchors")
        anchors.string = _join_items(extraction.anchors)
        page.append(anchors)

    return soup


def write_refined_xml(pages: list[PageExtraction], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    soup = build_refined_xml(pages)
    with open(path, "w", encoding="utf-8") as f:
        f.write(str(soup))
    logger.debug("Wrote %d pages to %s", len(pages), path)


def convert_special_export(export_path: str | Path, xml_path: str | Path) -> bool:
    """Convert one export file to refined XML. Returns False if the export could not be read."""
    pages = parse_special_export(export_path)
    if pages is None:
        return False
    try:
        write_refined_xml(pages, xml_path)
    except OSError as e:
        logger.error("Could not write refined XML %s: %s", xml_path, e, exc_info=True)
        return False
    return True


def get_texts_from_refined_xml(path: str | Path, depth: int) -> list[str] | None:
    """First `depth` paragraph texts of every page in a refined XML file."""
    soup = _load_xml(path)
    if soup is None:
        return None

    texts: list[str] = []
    for page in soup.find_all("page"):
        for text in page.find_all("text")[:depth]:
            texts.append(text.get_text())
    return texts


def determine_category(file_name: str | Path, categories: list[str]) -> str | None:
    """First configured category whose name occurs in the (lower-cased) file name."""
    name = str(file_name).lower()
    for category in categories:
        if category.lower() in name:
            return category
    return None
