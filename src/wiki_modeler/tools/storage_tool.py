"""Storage tool - persist trained models and word count reports."""

import logging
import os
from pathlib import Path

from ..models.term_model import TermFrequencyModel

logger = logging.getLogger(__name__)


def init_storage(directory: str | Path) -> Path:
    """Create an output directory if needed and return its absolute path."""
    path = Path(directory).resolve()
    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Storage ready at %s", path)
    return path


def save_model(model: TermFrequencyModel, output_path: str | Path) -> None:
    """Persist model; write failures are logged by the model and re-raised."""
    path = Path(output_path).resolve()
    logger.info("Storing model (%d terms) to %s", model.get_model_size(), path)
    model.serialize(path)


def load_model(path: str | Path) -> TermFrequencyModel:
    """Load a model; an unreadable file yields an empty model."""
    model = TermFrequencyModel.deserialize(path)
    if model.get_model_size() == 0:
        logger.warning("Model at %s is empty or could not be loaded", path)
    return model


def load_models(directory: str | Path, suffix: str = ".mdl") -> dict[str, TermFrequencyModel]:
    """Load every model file in directory, keyed by file stem."""
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Model directory %s does not exist", directory)
        return {}
    return {
        path.stem: load_model(path)
        for path in sorted(directory.glob(f"*{suffix}"))
    }


def write_word_count_report(model: TermFrequencyModel, output_path: str | Path) -> None:
    """Write one `term -> count` line per term, most frequent first."""
    path = Path(output_path).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    terms = sorted(
        model.get_vocabulary(),
        key=lambda t: (-model.get_term_count(t), t),
    )
    with open(path, "w", encoding="utf-8") as f:
        for term in terms:
            f.write(f"{term} -> {model.get_term_count(term)}\n")
        f.flush()
        try:
            os.fsync(f.fileno())
        except OSError:
            pass
    logger.debug("Wrote word count report (%d terms) to %s", len(terms), path)
