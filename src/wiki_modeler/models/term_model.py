"""Term count / probability model used to train and compare tagged-token distributions."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

# Probability of a term that has not been through compute_probabilities() yet.
UNCOMPUTED = -1.0


class TermEntry(BaseModel):
    """Count and probability of one term."""

    count: int = Field(1, ge=1)
    probability: float = UNCOMPUTED

    def __str__(self) -> str:
        return f"{{C: {self.count} && P: {self.probability}}}"


class ModelSnapshot(BaseModel):
    """Persisted form of a TermFrequencyModel."""

    total_term_count: int = Field(0, ge=0)
    terms: dict[str, TermEntry] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _total_matches_counts(self) -> "ModelSnapshot":
        counted = sum(entry.count for entry in self.terms.values())
        if self.total_term_count != counted:
            raise ValueError(
                f"total_term_count {self.total_term_count} does not match summed counts {counted}"
            )
        return self


class TermFrequencyModel:
    """
    Mutable accumulator of term counts.

    total_term_count always equals the number of push_term() calls since the
    model was created, loaded or reset. Probabilities are only refreshed by
    compute_probabilities(); pushes made afterwards leave them stale.
    Not thread-safe: one writer per instance.
    """

    def __init__(self) -> None:
        self._terms: dict[str, TermEntry] = {}
        self._total_term_count = 0

    @property
    def total_term_count(self) -> int:
        return self._total_term_count

    def push_term(self, term: str) -> None:
        """Add term with count 1 (probability uncomputed) or increment its count."""
        entry = self._terms.get(term)
        if entry is None:
            self._terms[term] = TermEntry()
        else:
            entry.count += 1
        self._total_term_count += 1

    def compute_probabilities(self) -> None:
        """Set every entry's probability to count / total_term_count."""
        if self._total_term_count == 0:
            return
        for entry in self._terms.values():
            entry.probability = entry.count / self._total_term_count

    def get_term_probability(self, term: str) -> float:
        """
        Stored probability of term.

        Returns -1 for a known term whose probability was never computed,
        and 0 for a term that is not in the model.
        """
        entry = self._terms.get(term)
        if entry is None:
            return 0
        return entry.probability

    def get_term_count(self, term: str) -> int:
        entry = self._terms.get(term)
        return entry.count if entry is not None else 0

    def get_vocabulary(self) -> set[str]:
        return set(self._terms)

    def get_model_size(self) -> int:
        return len(self._terms)

    def reset(self) -> None:
        """Clear all entries and zero the total."""
        self._terms.clear()
        self._total_term_count = 0

    def classify(self, other: "TermFrequencyModel") -> float:
        """
        Similarity score of other against this model.

        Each term of other multiplies the score by the product of both
        models' probabilities when this model knows the term, otherwise by
        1 / (vocabulary size + total term count) of this model. The result
        is not a normalized probability and underflows for large vocabularies.
        """
        smoothing = self.get_model_size() + self._total_term_count
        score = 1.0
        for term, entry in other._terms.items():
            mine = self._terms.get(term)
            if mine is not None:
                score *= mine.probability * entry.probability
            elif smoothing:
                score *= 1.0 / smoothing
            else:
                # Empty base model: the denominator is 0. Score 0.0 rather than
                # raising ZeroDivisionError (or the +inf an IEEE 1.0/0 would give).
                return 0.0
        return score

    def to_snapshot(self) -> ModelSnapshot:
        return ModelSnapshot(
            total_term_count=self._total_term_count,
            terms={term: entry.model_copy() for term, entry in self._terms.items()},
        )

    @classmethod
    def from_snapshot(cls, snapshot: ModelSnapshot) -> "TermFrequencyModel":
        model = cls()
        model._total_term_count = snapshot.total_term_count
        model._terms = {term: entry.model_copy() for term, entry in snapshot.terms.items()}
        return model

    def serialize(self, target: str | Path) -> None:
        """Write a JSON snapshot of this model to target."""
        path = Path(target)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.to_snapshot().model_dump(mode="json")
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            logger.error("Failed to serialize model to %s: %s", path, e, exc_info=True)
            raise
        logger.debug("Serialized model (%d terms) to %s", len(self._terms), path)

    @classmethod
    def deserialize(cls, target: str | Path) -> "TermFrequencyModel":
        """
        Load a model written by serialize().

        Any failure yields a fresh empty model; callers can detect it with
        get_model_size() == 0.
        """
        path = Path(target)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            snapshot = ModelSnapshot.model_validate(data)
        except (OSError, ValueError) as e:
            logger.error("Failed to deserialize model from %s: %s", path, e)
            return cls()
        return cls.from_snapshot(snapshot)

    def __str__(self) -> str:
        return "".join(f"{term} => {entry}\n" for term, entry in self._terms.items())
