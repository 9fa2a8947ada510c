from sentinel.stages.keywords import top_keywords


def test_top_keywords_by_frequency():
    assert top_keywords("data data data model model pipeline", 2) == ["data", "model"]


def test_top_keywords_ties_follow_first_occurrence():
    assert top_keywords("zeta alpha zeta alpha beta", 3) == ["zeta", "alpha", "beta"]
    assert top_keywords("beta alpha", 5) == ["beta", "alpha"]


def test_top_keywords_fewer_than_limit_and_empty():
    assert top_keywords("one two", 10) == ["one", "two"]
    assert top_keywords("", 3) == []
    assert top_keywords("the and of", 3) == []
    assert top_keywords("data model", 0) == []


def test_top_keywords_default_limit():
    text = "a1 a1 b2 b2 c3 c3 d4 d4 e5 e5 f6"
    assert top_keywords(text) == ["a1", "b2", "c3", "d4", "e5"]
