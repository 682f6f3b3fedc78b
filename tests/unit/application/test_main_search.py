"""Tests for the command-line entry point."""

import json

import pytest

from application.cli import main_search


@pytest.fixture
def local_root(tmp_path, alpha_record):
    data = tmp_path / "data"
    data.mkdir()
    busan = dict(alpha_record, name="Busan Steel", region="Busan Haeundae-gu", contact="051-333-4444")
    (data / "companies.json").write_text(json.dumps([alpha_record, busan], ensure_ascii=False), encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["DIRECTORY_HOST", "DIRECTORY_BASE_URL", "DIRECTORY_PUBLISHED_URL",
                 "DIRECTORY_LOCAL_ROOT", "DIRECTORY_LABEL_THRESHOLD", "DIRECTORY_TIMEOUT"]:
        monkeypatch.delenv(name, raising=False)


def test_lists_matching_cards(local_root, capsys):
    rc = main_search.main(["--host", "localhost", "--local-root", str(local_root), "--query", "busan"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "Busan Steel" in out
    assert "Alpha Gas Co" not in out


def test_no_match_message(local_root, capsys):
    rc = main_search.main(["--local-root", str(local_root), "--query", "jeju"])
    assert rc == 0
    assert "No companies match." in capsys.readouterr().out


def test_reveal_prints_full_region(local_root, capsys):
    rc = main_search.main(["--local-root", str(local_root), "--reveal", "Alpha Gas Co"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Seoul Gang..." in out
    assert "Alpha Gas Co: Seoul Gangnam-gu Teheran-ro 123" in out


def test_reveal_unknown_name(local_root, capsys):
    rc = main_search.main(["--local-root", str(local_root), "--query", "busan", "--reveal", "Alpha Gas Co"])
    assert rc == 2


def test_missing_file_reports_failure(tmp_path, capsys):
    rc = main_search.main(["--local-root", str(tmp_path)])
    assert rc == 1
    assert "Error fetching data" in capsys.readouterr().err


def test_csv_export(local_root, tmp_path):
    out_csv = tmp_path / "out" / "cards.csv"
    rc = main_search.main(["--local-root", str(local_root), "--threshold", "7", "--csv", str(out_csv)])
    assert rc == 0
    text = out_csv.read_text(encoding="utf-8-sig")
    assert "tel:010-1111-2222" in text
    assert "Seoul G..." in text


@pytest.mark.parametrize("value", ["-1", "ten", "2.5"])
def test_bad_threshold_flag_is_usage_error(local_root, capsys, value):
    with pytest.raises(SystemExit) as exc:
        main_search.main(["--local-root", str(local_root), "--threshold", value])
    assert exc.value.code == 2
    assert "non-negative integer" in capsys.readouterr().err


def test_bad_threshold_env_is_usage_error(local_root, capsys, monkeypatch):
    monkeypatch.setenv("DIRECTORY_LABEL_THRESHOLD", "wide")
    with pytest.raises(SystemExit) as exc:
        main_search.main(["--local-root", str(local_root)])
    assert exc.value.code == 2
    assert "invalid environment setting" in capsys.readouterr().err
