import json
from pathlib import Path

import pytest
from conftest import HOME_DEPOT_RECEIPT

from nestkeeper.cli.main import main


@pytest.fixture
def inventory_file(tmp_path: Path) -> Path:
    path = tmp_path / "inventory.toml"
    path.write_text(
        '[[items]]\nid = "1"\nname = "Refrigerator"\n\n[[items]]\nid = "2"\nname = "Washing Machine"\n',
        encoding="utf-8",
    )
    return path


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "Available commands" in capsys.readouterr().out


def test_extract_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text_file = tmp_path / "receipt.txt"
    text_file.write_text(HOME_DEPOT_RECEIPT, encoding="utf-8")

    assert main(["extract", str(text_file), "--confidence", "85"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "succeeded"
    assert payload["confidence"] == 85
    assert payload["purchase_date"] == "2025-11-12"
    assert payload["purchase_price"] == "394.39"
    assert payload["store_name"] == "HOME DEPOT"


def test_extract_uses_configured_warranty_years(
    tmp_path: Path, isolated_project_home: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_dir = isolated_project_home / "config"
    config_dir.mkdir()
    (config_dir / "settings.toml").write_text("[extraction]\nwarranty_years = 3\n", encoding="utf-8")
    text_file = tmp_path / "receipt.txt"
    text_file.write_text("11/12/2025", encoding="utf-8")

    assert main(["extract", str(text_file)]) == 0

    assert json.loads(capsys.readouterr().out)["warranty_expiration"] == "2028-11-12"


def test_extract_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["extract", str(tmp_path / "nope.txt")]) == 1
    assert "not found" in capsys.readouterr().out


def test_match_query(inventory_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["match", "Refirgerator", str(inventory_file)]) == 0

    assert capsys.readouterr().out.strip() == "Match: Refrigerator (id 1, 83% via levenshtein)"


def test_match_ocr_text(inventory_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["match", "I cleaned the washing machine today", str(inventory_file), "--ocr-text"]) == 0

    assert capsys.readouterr().out.startswith("Match: Washing Machine (id 2,")


def test_match_without_result(inventory_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["match", "Garden hose", str(inventory_file)]) == 0
    assert capsys.readouterr().out.strip() == "No match"


def test_scan_missing_image(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", str(tmp_path / "missing.jpg")]) == 1
    assert "not found" in capsys.readouterr().out
