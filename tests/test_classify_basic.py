import pytest

from sentinel.models import Document
from sentinel.stages.classify import DUPLICATE_THRESHOLD, RECOMMEND_THRESHOLD, classify, is_duplicate

REFS = [
    Document(title="Irrigation", abstract="smart irrigation controller soil moisture sensors"),
    Document(title="No abstract", abstract=None),
    Document(title="Empty abstract", abstract=""),
    Document(title="Lost and found", abstract="campus lost and found portal students"),
]


def test_defaults_are_independent_constants():
    assert DUPLICATE_THRESHOLD == 0.6
    assert RECOMMEND_THRESHOLD == 0.5


@pytest.mark.parametrize("batch", [False, True])
def test_tie_break_first_maximum_wins(batch):
    refs = [{"title": "X", "abstract": "alpha beta"}, {"title": "Y", "abstract": "alpha beta"}]
    v = classify("alpha beta", refs, 0.6, batch=batch)
    assert v.matched_title == "X"
    assert v.matched_index == 0
    assert v.score == 1.0
    assert v.is_duplicate is True


@pytest.mark.parametrize("batch", [False, True])
def test_no_references(batch):
    v = classify("any text", [], 0.6, batch=batch)
    assert v.score == 0.0
    assert v.is_duplicate is False
    assert v.matched_title is None
    assert v.scored == 0


@pytest.mark.parametrize("batch", [False, True])
def test_references_without_abstract_are_skipped(batch):
    refs = [Document(title="A"), {"title": "B", "abstract": ""}]
    v = classify("alpha", refs, batch=batch)
    assert v.score == 0.0
    assert v.matched_title is None
    assert v.scored == 0


@pytest.mark.parametrize("batch", [False, True])
def test_best_match_and_scored_count(batch):
    v = classify("An irrigation controller using soil sensors", REFS, batch=batch)
    assert v.matched_title == "Irrigation"
    assert v.scored == 2
    assert 0.0 < v.score < 1.0


@pytest.mark.parametrize("batch", [False, True])
def test_no_overlap_leaves_title_empty(batch):
    v = classify("quantum chromodynamics", REFS, batch=batch)
    assert v.score == 0.0
    assert v.matched_title is None
    assert v.matched_index is None


def test_threshold_boundary_is_strict():
    assert is_duplicate(0.6, 0.6) is False
    assert is_duplicate(0.6000001, 0.6) is True
    # computed score of exactly 0.6: {alpha: 3, gamma: 4} vs {alpha: 1}
    refs = [Document(title="P", abstract="alpha alpha alpha gamma gamma gamma gamma")]
    v = classify("alpha", refs, 0.6)
    assert v.score == 0.6
    assert v.is_duplicate is False
    assert classify("alpha", refs, 0.59).is_duplicate is True


def test_batch_and_loop_agree():
    cand = "portal for campus students to report lost items"
    a = classify(cand, REFS)
    b = classify(cand, REFS, batch=True)
    assert (a.score, a.matched_title, a.scored) == (b.score, b.matched_title, b.scored)


def test_inputs_not_mutated():
    refs = [{"title": "X", "abstract": "alpha beta"}]
    classify("alpha", refs)
    assert refs == [{"title": "X", "abstract": "alpha beta"}]


@pytest.mark.parametrize("batch", [False, True])
def test_dict_reference_with_null_title(batch):
    refs = [{"title": None, "abstract": "alpha beta"}, {"title": "B", "abstract": 42}]
    v = classify("alpha beta", refs, batch=batch)
    assert v.matched_title == ""
    assert v.matched_index == 0
    assert v.scored == 1
