"""Configuration loader for the wiki export modeler."""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class PathsConfig(BaseModel):
    """Pipeline directories, one per stage."""

    special_exports_dir: str = Field(default="files/special_exports")
    refined_xml_dir: str = Field(default="files/refined_xml")
    tagged_text_dir: str = Field(default="files/tagged_text")
    model_files_dir: str = Field(default="files/model_files")

    def resolve(self, root: Path) -> None:
        """Make relative directories absolute against root."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if not Path(value).is_absolute():
                setattr(self, name, str(root / value))


class TrainingConfig(BaseModel):
    """Model training configuration."""

    paragraphs_per_page: int = Field(default=1, ge=1)
    term_suffixes: list[str] = Field(default_factory=lambda: ["_PRP", "_PRP$"])
    model_suffix: str = Field(default=".mdl")
    tagged_file_digits: int = Field(default=7, ge=1)


class TaggerConfig(BaseModel):
    """Part-of-speech tagger configuration."""

    provider: str = Field(default="nltk")
    language: str = Field(default="eng")


class OutputConfig(BaseModel):
    """Output configuration."""

    word_count_report: bool = Field(default=True)


class Config(BaseModel):
    """Full system configuration."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    # Matched against file names in order, so "women" must precede "men".
    categories: list[str] = Field(default_factory=lambda: ["objects", "women", "men"])
    training: TrainingConfig = Field(default_factory=TrainingConfig)
    tagger: TaggerConfig = Field(default_factory=TaggerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load config from YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Load config from dictionary."""
        return cls(**data)


def load_config(path: str | Path) -> Config:
    """Load configuration from file (YAML or JSON)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(content) or {}
    else:
        data = json.loads(content)

    return Config.from_dict(data)
