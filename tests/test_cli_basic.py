import cli


def test_cli_compare(tmp_path, capsys):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("alpha beta", encoding="utf-8")
    b.write_text("Beta, alpha!", encoding="utf-8")
    assert cli.main(["compare", str(a), str(b)]) == 0
    assert capsys.readouterr().out.strip() == "1.000000"


def test_cli_keywords(tmp_path, capsys):
    f = tmp_path / "doc.txt"
    f.write_text("data data data model model pipeline", encoding="utf-8")
    assert cli.main(["keywords", str(f), "--limit", "2"]) == 0
    assert capsys.readouterr().out.split() == ["data", "model"]
