"""Processing tools for the wiki export modeler."""

from .markup_tool import extract_paragraphs, normalize
from .link_tool import LinkKind, classify_link, extract_links
from .export_tool import (
    convert_special_export,
    determine_category,
    get_texts_from_refined_xml,
    parse_special_export,
    write_refined_xml,
)
from .tag_tool import (
    Tagger,
    NltkTagger,
    TaggerUnavailableError,
    create_tagger,
    tag_text,
    tag_and_save_texts,
)
from .train_tool import model_from_tagged_text, train_model_from_directory
from .storage_tool import save_model, load_model, load_models, write_word_count_report

__all__ = [
    "extract_paragraphs",
    "normalize",
    "LinkKind",
    "classify_link",
    "extract_links",
    "convert_special_export",
    "determine_category",
    "get_texts_from_refined_xml",
    "parse_special_export",
    "write_refined_xml",
    "Tagger",
    "NltkTagger",
    "TaggerUnavailableError",
    "create_tagger",
    "tag_text",
    "tag_and_save_texts",
    "model_from_tagged_text",
    "train_model_from_directory",
    "save_model",
    "load_model",
    "load_models",
    "write_word_count_report",
]
