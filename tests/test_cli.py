import io

import pytest

from genalgo.candidate import ProductCandidate, ProductPlusCandidate, SumCandidate
from genalgo.cli import main, make_candidate


@pytest.mark.parametrize(
    "kind, expected",
    [(1, ProductCandidate), (2, ProductPlusCandidate), (3, SumCandidate), (7, ProductCandidate), (-1, ProductCandidate)],
)
def test_make_candidate(kind, expected):
    assert type(make_candidate(kind)) is expected


def test_main_with_kind_argument(capsys):
    assert main(["2", "--max-populations", "3"]) == 0
    text = capsys.readouterr().out
    assert "Algorithm stopped after" in text
    assert "Best value found:" in text
    assert "Choose candidate type" not in text


def test_main_reads_kind_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--max-populations", "2"]) == 0
    text = capsys.readouterr().out
    assert "Choose candidate type" in text
    assert "x3:" in text


def test_main_bad_input_falls_back(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["--max-populations", "2"]) == 0
    text = capsys.readouterr().out
    assert "x2:" in text
    assert "x3:" not in text