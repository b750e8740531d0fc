"""
CLI argument handling and command output against the fixture store.
"""
import argparse
import json

import pytest

from wine_agent import cli


@pytest.fixture
def run(monkeypatch, store, capsys):
    monkeypatch.setattr(cli, "_load_store", lambda: store)

    def _run(*argv):
        monkeypatch.setattr("sys.argv", ["wine-agent", *argv])
        cli.main()
        return capsys.readouterr().out

    return _run


def test_parse_where():
    assert cli.parse_where(["rating=>4", "mainVarietal=Pinot Noir", "price=<=30"]) == {
        "rating": ">4", "mainVarietal": "Pinot Noir", "price": "<=30",
    }
    assert cli.parse_where(None) == {}
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_where(["rating"])


def test_search_json(run):
    out = run("search", "oak", "--sort-by", "rating", "--json")
    assert [w["id"] for w in json.loads(out)] == ["2", "1", "5"]


def test_filter_table(run):
    out = run("filter", "--where", "region=oregon", "--where", "rating=>4")
    assert "WINES (1)" in out
    assert "Acme Estate Pinot Noir" in out


def test_details_not_found(run):
    assert "No wine matching 'riesling'" in run("details", "riesling")


def test_columns(run):
    out = run("columns")
    assert "COLUMNS (17)" in out
    assert "mainVarietal" in out


def test_bad_where_exits(run):
    with pytest.raises(SystemExit):
        run("filter", "--where", "oops")


def test_export(run, tmp_path):
    target = tmp_path / "pinot.xlsx"
    out = run("export", "--query", "pinot", "--output", str(target))
    assert target.exists()
    assert '2 wines  |  "pinot"' in out
