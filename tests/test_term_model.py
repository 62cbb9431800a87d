"""Tests for the term frequency model."""

import json
import random

import pytest

from wiki_modeler.models.term_model import (
    ModelSnapshot,
    TermEntry,
    TermFrequencyModel,
    UNCOMPUTED,
)


@pytest.fixture
def pronoun_model() -> TermFrequencyModel:
    model = TermFrequencyModel()
    for _ in range(3):
        model.push_term("he_PRP")
    for _ in range(2):
        model.push_term("his_PRP$")
    model.compute_probabilities()
    return model


def test_term_entry_defaults_and_display():
    entry = TermEntry()
    assert entry.count == 1
    assert entry.probability == UNCOMPUTED
    assert str(entry) == "{C: 1 && P: -1.0}"


def test_push_term_counts_and_total():
    model = TermFrequencyModel()
    model.push_term("he_PRP")
    model.push_term("he_PRP")
    model.push_term("anything at all")

    assert model.get_term_count("he_PRP") == 2
    assert model.get_term_count("anything at all") == 1
    assert model.total_term_count == 3
    assert model.get_model_size() == 2
    assert model.get_vocabulary() == {"he_PRP", "anything at all"}


def test_probability_uncomputed_until_compute():
    model = TermFrequencyModel()
    model.push_term("she_PRP")

    assert model.get_term_probability("she_PRP") == -1


def test_absent_term_returns_zero():
    model = TermFrequencyModel()
    model.push_term("she_PRP")
    model.compute_probabilities()

    assert model.get_term_count("never_PRP") == 0
    assert model.get_term_probability("never_PRP") == 0


def test_compute_on_empty_model_is_noop():
    model = TermFrequencyModel()
    model.compute_probabilities()

    assert model.get_model_size() == 0
    assert model.total_term_count == 0


def test_concrete_probabilities(pronoun_model):
    assert pronoun_model.get_term_probability("he_PRP") == pytest.approx(0.6)
    assert pronoun_model.get_term_probability("his_PRP$") == pytest.approx(0.4)


def test_probabilities_stale_after_push(pronoun_model):
    pronoun_model.push_term("he_PRP")
    pronoun_model.push_term("she_PRP")

    assert pronoun_model.get_term_probability("he_PRP") == pytest.approx(0.6)
    assert pronoun_model.get_term_probability("she_PRP") == -1
    assert pronoun_model.total_term_count == 7

    pronoun_model.compute_probabilities()
    assert pronoun_model.get_term_probability("he_PRP") == pytest.approx(4 / 7)
    assert pronoun_model.get_term_probability("she_PRP") == pytest.approx(1 / 7)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_probability_is_count_over_total(seed):
    rng = random.Random(seed)
    terms = [f"w{i}_PRP" for i in range(12)]
    model = TermFrequencyModel()
    pushes = rng.randint(1, 200)
    for _ in range(pushes):
        model.push_term(rng.choice(terms))
    model.compute_probabilities()

    vocabulary = model.get_vocabulary()
    assert sum(model.get_term_count(t) for t in vocabulary) == model.total_term_count == pushes
    for term in vocabulary:
        expected = model.get_term_count(term) / model.total_term_count
        assert model.get_term_probability(term) == pytest.approx(expected)


def test_reset_clears_everything(pronoun_model):
    pronoun_model.reset()

    assert pronoun_model.get_model_size() == 0
    assert pronoun_model.total_term_count == 0
    assert pronoun_model.get_term_count("he_PRP") == 0


def test_classify_against_itself(pronoun_model):
    assert pronoun_model.classify(pronoun_model) == pytest.approx(0.0576)


def test_classify_unmatched_term_uses_smoothing(pronoun_model):
    other = TermFrequencyModel()
    other.push_term("she_PRP")
    other.push_term("he_PRP")
    other.compute_probabilities()

    # he_PRP matched: 0.6 * 0.5; she_PRP unmatched: 1 / (2 terms + 5 pushes)
    expected = (0.6 * 0.5) * (1.0 / 7)
    assert pronoun_model.classify(other) == pytest.approx(expected)


def test_classify_is_asymmetric(pronoun_model):
    other = TermFrequencyModel()
    other.push_term("she_PRP")
    other.compute_probabilities()

    assert pronoun_model.classify(other) == pytest.approx(1.0 / 7)
    # he_PRP and his_PRP$ are both unknown to other: 1 / (1 + 1) each
    assert other.classify(pronoun_model) == pytest.approx(0.25)


def test_classify_edge_cases(pronoun_model):
    assert pronoun_model.classify(TermFrequencyModel()) == 1.0
    assert TermFrequencyModel().classify(pronoun_model) == 0.0


def test_serialize_round_trip(pronoun_model, tmp_path):
    pronoun_model.push_term("third_PRP")  # left uncomputed on purpose
    target = tmp_path / "models" / "men.mdl"

    pronoun_model.serialize(target)
    loaded = TermFrequencyModel.deserialize(target)

    assert loaded.get_vocabulary() == pronoun_model.get_vocabulary()
    assert loaded.total_term_count == pronoun_model.total_term_count
    for term in pronoun_model.get_vocabulary():
        assert loaded.get_term_count(term) == pronoun_model.get_term_count(term)
        assert loaded.get_term_probability(term) == pronoun_model.get_term_probability(term)


def test_round_trip_keeps_exact_floats(tmp_path):
    model = TermFrequencyModel()
    for term in ["a", "b", "b", "c", "c", "c", "c"]:
        model.push_term(term)
    model.compute_probabilities()
    target = tmp_path / "thirds.mdl"

    model.serialize(target)
    loaded = TermFrequencyModel.deserialize(target)

    assert loaded.get_term_probability("a") == 1 / 7
    assert loaded.get_term_probability("c") == 4 / 7


def test_serialized_layout(pronoun_model, tmp_path):
    target = tmp_path / "m.mdl"
    pronoun_model.serialize(target)

    data = json.loads(target.read_text(encoding="utf-8"))
    snapshot = ModelSnapshot.model_validate(data)

    assert data["total_term_count"] == 5
    assert snapshot.terms["he_PRP"].count == 3


def test_snapshot_total_must_match_counts():
    with pytest.raises(ValueError):
        ModelSnapshot.model_validate(
            {"total_term_count": 0, "terms": {"a": {"count": 5, "probability": -1}}}
        )


@pytest.mark.parametrize(
    "content",
    [
        None,
        "",
        "not json",
        "[1, 2, 3]",
        '{"total_term_count": 1, "terms": {"x": {"count": 0}}}',
        '{"total_term_count": 0, "terms": {"a": {"count": 5, "probability": -1}}}',
    ],
)
def test_deserialize_failure_yields_empty_model(tmp_path, content):
    target = tmp_path / "broken.mdl"
    if content is not None:
        target.write_text(content, encoding="utf-8")

    model = TermFrequencyModel.deserialize(target)

    assert model.get_model_size() == 0
    assert model.total_term_count == 0


def test_loaded_model_is_independent(pronoun_model):
    copy = TermFrequencyModel.from_snapshot(pronoun_model.to_snapshot())
    copy.push_term("he_PRP")

    assert pronoun_model.get_term_count("he_PRP") == 3
    assert copy.get_term_count("he_PRP") == 4


def test_str_lists_every_term(pronoun_model):
    lines = str(pronoun_model).splitlines()

    assert sorted(lines) == [
        "he_PRP => {C: 3 && P: 0.6}",
        "his_PRP$ => {C: 2 && P: 0.4}",
    ]
