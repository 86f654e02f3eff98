import json

import pytest

from backend.core.errors import SourceNotFound, ReadFailure, ParseFailure
from backend.core.loaders import load_thresholds, parse_min_score


def _write(tmp_path, content, name="skor.json"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_parse_min_score_normalizes_parens_and_comma():
    assert parse_min_score("(650,25)") == 650.25
    assert parse_min_score("(650,50)") == 650.5
    assert parse_min_score("700") == 700.0
    assert parse_min_score(612.5) == 612.5


def test_parse_min_score_falls_back_to_zero():
    assert parse_min_score(None) == 0.0
    assert parse_min_score("abc") == 0.0
    assert parse_min_score("-") == 0.0
    assert parse_min_score("nan") == 0.0


def test_load_keeps_valid_records_in_order(tmp_path):
    path = _write(tmp_path, json.dumps([
        {"Universitas": "X", "JURUSAN": "Y", "SKOR UTBK": "(650,25)"},
        {"Universitas": "A", "JURUSAN": "B", "SKOR UTBK": "(700,00)"},
    ]))
    records = load_thresholds(path)
    assert [(r.university, r.major, r.min_score) for r in records] == [
        ("X", "Y", 650.25),
        ("A", "B", 700.0),
    ]


def test_load_drops_incomplete_and_non_positive(tmp_path):
    path = _write(tmp_path, json.dumps([
        {"Universitas": "X", "JURUSAN": "", "SKOR UTBK": "(650,25)"},
        {"Universitas": "", "JURUSAN": "Y", "SKOR UTBK": "(650,25)"},
        {"JURUSAN": "Y", "SKOR UTBK": "(650,25)"},
        {"Universitas": "X", "JURUSAN": "Y", "SKOR UTBK": "0"},
        {"Universitas": "X", "JURUSAN": "Y", "SKOR UTBK": "(-5,00)"},
        {"Universitas": "X", "JURUSAN": "Y"},
        "not a record",
        {"Universitas": "Kept", "JURUSAN": "Major", "SKOR UTBK": "(500,10)"},
    ]))
    records = load_thresholds(path)
    assert len(records) == 1
    assert records[0].university == "Kept"
    assert records[0].min_score == 500.1


def test_load_missing_file(tmp_path):
    with pytest.raises(SourceNotFound) as exc:
        load_thresholds(str(tmp_path / "missing.json"))
    assert "missing.json" in exc.value.message


def test_load_empty_file(tmp_path):
    with pytest.raises(ReadFailure):
        load_thresholds(_write(tmp_path, ""))
    with pytest.raises(ReadFailure):
        load_thresholds(_write(tmp_path, "  \n", name="blank.json"))


def test_load_invalid_json(tmp_path):
    with pytest.raises(ParseFailure) as exc:
        load_thresholds(_write(tmp_path, "{not json"))
    assert exc.value.message.startswith("Error saat mengurai JSON")


def test_load_requires_a_list(tmp_path):
    with pytest.raises(ParseFailure):
        load_thresholds(_write(tmp_path, '{"Universitas": "X"}'))


def test_load_empty_list_is_not_an_error(tmp_path):
    assert load_thresholds(_write(tmp_path, "[]")) == []


def test_load_undecodable_file(tmp_path):
    path = tmp_path / "skor.json"
    path.write_bytes(b"\xff\xfe[")
    with pytest.raises(ReadFailure) as exc:
        load_thresholds(str(path))
    assert "codec can't decode" in exc.value.message
