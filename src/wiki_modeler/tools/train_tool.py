"""Train tool - build term models from tagged text."""

import logging
from pathlib import Path

from ..models.term_model import TermFrequencyModel

logger = logging.getLogger(__name__)

PRONOUN_SUFFIXES = ("_PRP", "_PRP$")


def push_tagged_tokens(
    model: TermFrequencyModel,
    tagged_text: str,
    suffixes: tuple[str, ...] | list[str] = PRONOUN_SUFFIXES,
) -> int:
    """Push every token ending in one of suffixes. Returns the number pushed."""
    suffixes = tuple(suffixes)
    pushed = 0
    for token in tagged_text.split():
        if token.endswith(suffixes):
            model.push_term(token)
            pushed += 1
    return pushed


def model_from_tagged_text(
    tagged_text: str,
    suffixes: tuple[str, ...] | list[str] = PRONOUN_SUFFIXES,
) -> TermFrequencyModel:
    """Computed model over the matching tokens of one tagged text."""
    model = TermFrequencyModel()
    push_tagged_tokens(model, tagged_text, suffixes)
    model.compute_probabilities()
    return model


def train_model_from_directory(
    directory: str | Path,
    suffixes: tuple[str, ...] | list[str] = PRONOUN_SUFFIXES,
) -> TermFrequencyModel:
    """
    Train one model from every tagged text file in directory.
    Unreadable files are logged and skipped. Probabilities are computed
    before returning.
    """
    directory = Path(directory)
    model = TermFrequencyModel()
    for path in sorted(p for p in directory.iterdir() if p.is_file()):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable tagged file %s: %s", path, e)
            continue
        pushed = push_tagged_tokens(model, content, suffixes)
        logger.debug("Pushed %d terms from %s", pushed, path)
    model.compute_probabilities()
    logger.info(
        "Trained model from %s: %d terms, %d total",
        directory,
        model.get_model_size(),
        model.total_term_count,
    )
    return model
