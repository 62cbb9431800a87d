"""Modeler Agent - control plane for the export → tag → train pipeline."""

import logging
from enum import Enum
from pathlib import Path

from ..config.loader import Config
from ..models.term_model import TermFrequencyModel
from ..tools.export_tool import (
    convert_special_export,
    determine_category,
    get_texts_from_refined_xml,
)
from ..tools.storage_tool import init_storage, load_models, save_model, write_word_count_report
from ..tools.tag_tool import Tagger, create_tagger, tag_and_save_texts
from ..tools.train_tool import model_from_tagged_text, train_model_from_directory

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    """Pipeline stages; each maps to its own process exit status on failure."""

    CONVERT = "convert"
    TAG = "tag"
    TRAIN = "train"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    PipelineStage.CONVERT: 1,
    PipelineStage.TAG: 2,
    PipelineStage.TRAIN: 3,
}


class EmptyDirectoryError(Exception):
    """A stage's input directory is missing or empty. Fatal for the run."""

    def __init__(self, stage: PipelineStage, directory: str | Path):
        self.stage = stage
        self.directory = Path(directory)
        super().__init__(f"Directory empty or missing for stage {stage.value}: {self.directory}")


def _list_files(directory: Path, stage: PipelineStage) -> list[Path]:
    files = sorted(p for p in directory.iterdir() if p.is_file()) if directory.is_dir() else []
    if not files:
        raise EmptyDirectoryError(stage, directory)
    return files


class ModelerAgent:
    """
    Runs the pipeline stages in order: convert special exports to refined
    XML, tag the refined paragraphs, train one model per category.
    Does NOT scan markup or compute probabilities itself.
    """

    def __init__(self, config: Config, tagger: Tagger | None = None):
        self.config = config
        self._tagger = tagger
        self.paths = config.paths

    @property
    def tagger(self) -> Tagger:
        if self._tagger is None:
            tagger_config = self.config.tagger
            self._tagger = create_tagger(tagger_config.provider, tagger_config.language)
        return self._tagger

    def run(self) -> dict[str, TermFrequencyModel]:
        """Run full pipeline: convert → tag → train. Returns trained models by category."""
        logger.info("Processing export files ...")
        self.convert_exports()
        logger.info("Tagging refined XML ...")
        self.tag_refined_exports()
        models: dict[str, TermFrequencyModel] = {}
        for category in self.config.categories:
            logger.info("Training the %s model", category)
            models[category] = self.train_category(category)
        logger.info("Training complete: %d models", len(models))
        return models

    def convert_exports(self) -> list[Path]:
        """Stage 1: one refined XML per recognised export file."""
        exports = _list_files(Path(self.paths.special_exports_dir), PipelineStage.CONVERT)
        out_dir = init_storage(self.paths.refined_xml_dir)
        written: list[Path] = []
        for export in exports:
            category = determine_category(export.name, self.config.categories)
            if category is None:
                logger.error("Export file not processed (no category): %s", export)
                continue
            xml_path = out_dir / f"{category}.xml"
            logger.info("Processing export file %s", export)
            if convert_special_export(export, xml_path):
                logger.info("Processing complete -> %s", xml_path)
                written.append(xml_path)
        return written

    def tag_refined_exports(self) -> dict[str, list[Path]]:
        """Stage 2: tag the first paragraphs of every page, one file per paragraph."""
        refined = _list_files(Path(self.paths.refined_xml_dir), PipelineStage.TAG)
        training = self.config.training
        tagged_root = init_storage(self.paths.tagged_text_dir)
        counter = TermFrequencyModel()
        tagged: dict[str, list[Path]] = {}

        for xml_path in refined:
            category = determine_category(xml_path.name, self.config.categories)
            if category is None:
                logger.error("XML file not parsed (no category): %s", xml_path)
                continue
            texts = get_texts_from_refined_xml(xml_path, training.paragraphs_per_page)
            if texts is None:
                continue
            logger.info("Parsing and tagging %s (%d texts)", xml_path, len(texts))
            counter.reset()
            tagged[category] = tag_and_save_texts(
                texts,
                tagged_root / category,
                self.tagger,
                counter=counter,
                digits=training.tagged_file_digits,
            )
            if self.config.output.word_count_report:
                write_word_count_report(counter, tagged_root / f"{category}_word_counts.txt")
        return tagged

    def train_category(self, category: str) -> TermFrequencyModel:
        """Stage 3: train and persist the model for one category."""
        tagged_dir = Path(self.paths.tagged_text_dir) / category
        _list_files(tagged_dir, PipelineStage.TRAIN)
        training = self.config.training
        model = train_model_from_directory(tagged_dir, training.term_suffixes)
        logger.debug("Model for %s:\n%s", category, model)
        save_model(model, Path(self.paths.model_files_dir) / f"{category}{training.model_suffix}")
        return model

    def classify_tagged_file(self, path: str | Path) -> list[tuple[str, float]]:
        """Score a tagged text file against every persisted model, best first."""
        training = self.config.training
        text = Path(path).read_text(encoding="utf-8")
        sample = model_from_tagged_text(text, training.term_suffixes)
        models = load_models(self.paths.model_files_dir, training.model_suffix)
        scores = [(name, model.classify(sample)) for name, model in models.items()]
        return sorted(scores, key=lambda item: item[1], reverse=True)
