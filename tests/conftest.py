"""Shared fixtures for wiki modeler tests."""

from pathlib import Path
from xml.sax.saxutils import escape

import pytest

from wiki_modeler.config.loader import Config, PathsConfig

PERSONAL = {"i", "you", "he", "she", "it", "we", "they", "him", "them"}
POSSESSIVE = {"my", "your", "his", "her", "its", "our", "their"}


class FakeTagger:
    """Deterministic stand-in for a POS tagger: pronouns get Penn tags, the rest NN."""

    def __init__(self):
        self.calls: list[str] = []

    def tag(self, text: str) -> str:
        self.calls.append(text)
        units = []
        for word in text.split():
            lower = word.lower()
            if lower in POSSESSIVE:
                tag = "PRP$"
            elif lower in PERSONAL:
                tag = "PRP"
            else:
                tag = "NN"
            units.append(f"{word}_{tag}")
        return " ".join(units)


def make_export(pages: list[tuple[str, str]]) -> str:
    """Minimal Special:Export document with one revision per page."""
    body = "".join(
        f"<page><title>{escape(title)}</title><ns>0</ns>"
        f"<revision><text xml:space=\"preserve\">{escape(text)}</text></revision></page>"
        for title, text in pages
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<mediawiki xmlns="http://www.mediawiki.org/xml/export-0.10/" xml:lang="en">'
        f"{body}</mediawiki>"
    )


@pytest.fixture
def fake_tagger() -> FakeTagger:
    return FakeTagger()


@pytest.fixture
def write_export():
    def _write(path: Path, pages: list[tuple[str, str]]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(make_export(pages), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def pipeline_config(tmp_path: Path) -> Config:
    return Config(
        paths=PathsConfig(
            special_exports_dir=str(tmp_path / "special_exports"),
            refined_xml_dir=str(tmp_path / "refined_xml"),
            tagged_text_dir=str(tmp_path / "tagged_text"),
            model_files_dir=str(tmp_path / "model_files"),
        )
    )
