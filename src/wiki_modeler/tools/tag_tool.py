"""Tag tool - part-of-speech tag normalized paragraph text."""

import logging
from pathlib import Path
from typing import Protocol

from ..models.term_model import TermFrequencyModel

logger = logging.getLogger(__name__)


class Tagger(Protocol):
    """Anything that turns plain text into whitespace-separated `token_TAG` units."""

    def tag(self, text: str) -> str:
        ...


class TaggerUnavailableError(RuntimeError):
    """The tagger backend is installed but its model data is missing."""


class NltkTagger:
    """Penn Treebank tagger backed by nltk.pos_tag (pronouns come out as _PRP / _PRP$)."""

    def __init__(self, language: str = "eng"):
        import nltk

        self._nltk = nltk
        self.language = language

    def tag(self, text: str) -> str:
        tokens = text.split()
        try:
            tagged = self._nltk.pos_tag(tokens, lang=self.language)
        except LookupError as e:
            raise TaggerUnavailableError(
                "NLTK tagger data not found. Download it with: "
                f"python -m nltk.downloader averaged_perceptron_tagger_{self.language}"
            ) from e
        return " ".join(f"{word}_{tag}" for word, tag in tagged)


def create_tagger(provider: str = "nltk", language: str = "eng") -> Tagger:
    if provider == "nltk":
        return NltkTagger(language=language)
    raise ValueError(f"Unknown tagger provider: {provider}")


def tag_text(
    text: str,
    tagger: Tagger,
    counter: TermFrequencyModel | None = None,
) -> str:
    """Tag text; every tagged token is also pushed into counter when one is given."""
    tagged = tagger.tag(text)
    if counter is not None:
        for token in tagged.split():
            counter.push_term(token)
    return tagged


def tag_and_save_texts(
    texts: list[str],
    directory: str | Path,
    tagger: Tagger,
    counter: TermFrequencyModel | None = None,
    digits: int = 7,
) -> list[Path]:
    """
    Tag each text and write it to its own file in directory.
    Files are named by zero-padded index so they sort in input order.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for idx, text in enumerate(texts):
        path = directory / str(idx).zfill(digits)
        tagged = tag_text(text, tagger, counter)
        with open(path, "w", encoding="utf-8") as f:
            f.write(tagged)
        written.append(path)
    logger.debug("Tagged %d texts into %s", len(written), directory)
    return written
