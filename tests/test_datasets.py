from pathlib import Path

import pytest
from wordle_minimax.datasets import load_vocabulary, pretty_summary, validate_vocabulary
from wordle_minimax.engine import decode
from wordle_minimax.errors import VocabularyLoadFailure


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_vocabulary_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "shine", "plant"])
    assert load_vocabulary(p) == [decode("crane"), decode("shine"), decode("plant")]


def test_missing_file_is_load_failure(tmp_path: Path):
    with pytest.raises(VocabularyLoadFailure, match="not found"):
        load_vocabulary(tmp_path / "nope.txt")


def test_empty_file_is_load_failure(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("", encoding="utf-8")
    with pytest.raises(VocabularyLoadFailure, match="no words"):
        load_vocabulary(p)


@pytest.mark.parametrize("bad,line_no", [
    (["crane", "cranes"], 2),
    (["crane", "", "plant"], 2),
    (["Crane"], 1),
    (["crane", "shine", "pl@nt"], 3),
])
def test_malformed_line_is_load_failure(tmp_path: Path, bad, line_no):
    p = tmp_path / "words.txt"
    _write(p, bad)
    with pytest.raises(VocabularyLoadFailure) as exc:
        load_vocabulary(p)
    assert exc.value.line_no == line_no
    assert f":{line_no}:" in str(exc.value)


def test_validate_vocabulary_report(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "shine", "crane"])
    rep = validate_vocabulary(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("| OK")


def test_validate_vocabulary_flags_errors(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nCRANE\n???\n", encoding="utf-8")
    rep = validate_vocabulary(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])

    missing = validate_vocabulary(str(tmp_path / "nope.txt"))
    assert missing["passed"] is False and missing["exists"] is False
    assert "FAIL" in pretty_summary(missing)


def test_duplicates_are_dropped_in_first_seen_order(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "shine", "crane", "plant", "shine"])
    assert load_vocabulary(p) == [decode("crane"), decode("shine"), decode("plant")]


@pytest.mark.parametrize("raw", [
    b"crane\r\nshine\r\nplant\r\n",
    b"crane\r\nshine\r\nplant",
    b"crane\nshine\r\nplant\n",
])
def test_crlf_line_endings_are_accepted(tmp_path: Path, raw):
    p = tmp_path / "words.txt"
    p.write_bytes(raw)
    assert load_vocabulary(p) == [decode("crane"), decode("shine"), decode("plant")]
    rep = validate_vocabulary(str(p))
    assert rep["passed"] is True and rep["invalid_lines"] == 0


def test_unreadable_file_is_load_failure(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"cr\xffne\n")
    with pytest.raises(VocabularyLoadFailure, match="cannot read"):
        load_vocabulary(p)
    with pytest.raises(VocabularyLoadFailure, match="cannot read"):
        load_vocabulary(tmp_path)

    rep = validate_vocabulary(str(p))
    assert rep["passed"] is False
    assert any("cannot read" in msg for msg in rep["issues"])
    assert validate_vocabulary(str(tmp_path))["passed"] is False
