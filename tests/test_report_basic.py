from sentinel.models import Verdict
from sentinel.rendering.markdown import render_md
from sentinel.report import build_report, recommendation


def _verdict(score, title=None, dup=False):
    return Verdict(score=score, matched_title=title, matched_index=0 if title else None,
                   is_duplicate=dup, threshold=0.6, scored=3)


def test_recommendation_uses_its_own_bound():
    assert recommendation(_verdict(0.5, "P")) is None
    msg = recommendation(_verdict(0.55, "P"))
    assert msg is not None and '"P"' in msg
    assert recommendation(_verdict(0.55, "P"), recommend_threshold=0.7) is None


def test_recommendation_unknown_title():
    assert '"Unknown Project"' in recommendation(_verdict(0.9, None))


def test_build_report_duplicate():
    rep = build_report(_verdict(0.8123, "Irrigation", dup=True), file_name="p.txt",
                       keywords=["soil", "sensor"], references_total=4)
    assert rep["status"] == "DUPLICATE DETECTED"
    assert rep["clearance"] == "DENIED"
    assert rep["similarity_pct"] == 81.2
    assert rep["verdict"]["matched_title"] == "Irrigation"
    assert rep["references"] == {"total": 4, "scored": 3}
    assert rep["recommendation"]


def test_build_report_unique_and_markdown():
    rep = build_report(_verdict(0.0), file_name="p.txt", keywords=["alpha"], references_total=0)
    assert rep["status"] == "UNIQUE PROJECT"
    assert rep["clearance"] == "GRANTED"
    assert rep["recommendation"] is None
    md = render_md(rep)
    assert "# Scan: p.txt" in md
    assert "UNIQUE PROJECT" in md
    assert "`alpha`" in md
    assert "Recommendation" not in md
