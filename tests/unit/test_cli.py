"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from trigger_codegen.main import main
from trigger_codegen.model.spec_model import ComponentModel


@pytest.fixture(autouse=True)
def _isolated_cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Keep a developer's .env out of the CLI settings and undo its logging setup.
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def model_file(tmp_path: Path, test_component: ComponentModel) -> Path:
    path = tmp_path / "test_component.json"
    path.write_text(test_component.model_dump_json(indent=2), encoding="utf-8")
    return path


def test_trigger_id_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["trigger-id", "Test", "testTriggerMethod1"]) == 0
    assert capsys.readouterr().out.strip() == "-773082596"


def test_generate_writes_module_to_stdout(
    model_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["generate", str(model_file)]) == 0

    out = capsys.readouterr().out
    assert "class Test[T: str](Component):" in out
    assert "        case -773082596:" in out
    compile(out, "<cli output>", "exec")


def test_generate_members_only_to_file(model_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "members.py"

    assert main(["generate", str(model_file), "--members-only", "-o", str(output)]) == 0

    source = output.read_text(encoding="utf-8")
    assert source.startswith("def can_accept_trigger(self) -> bool:\n")
    assert "class " not in source


def test_verify_reports_ok(model_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["verify", str(model_file)]) == 0
    assert "Test: 2 trigger method(s) OK" in capsys.readouterr().out


def test_verify_reports_collisions(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "collide.json"
    path.write_text(
        json.dumps({"name": "X", "trigger_methods": [{"name": "Aa"}, {"name": "BB"}]}),
        encoding="utf-8",
    )

    assert main(["verify", str(path)]) == 3
    assert "duplicate_identifier: BB" in capsys.readouterr().err


def test_verify_checks_names_against_configured_lookup(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("TRIGGER_CODEGEN_TRIGGER_LOOKUP", "Registry.lookup")
    path = tmp_path / "row.json"
    path.write_text(
        json.dumps(
            {
                "name": "Row",
                "trigger_methods": [
                    {
                        "name": "select",
                        "parameters": [
                            {"name": "Registry", "type": "str", "origin": "caller"}
                        ],
                    }
                ],
            }
        ),
        encoding="utf-8",
    )

    assert main(["verify", str(path)]) == 3
    assert "reserved_parameter_name: select" in capsys.readouterr().err


def test_generate_fails_on_collision(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "collide.json"
    path.write_text(
        json.dumps({"name": "X", "trigger_methods": [{"name": "Aa"}, {"name": "BB"}]}),
        encoding="utf-8",
    )

    assert main(["generate", str(path)]) == 3
    captured = capsys.readouterr()
    assert "share identifier 519897088" in captured.err
    assert "def " not in captured.out


def test_invalid_model_exits_with_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"trigger_methods": []}), encoding="utf-8")

    assert main(["generate", str(path)]) == 2
    assert "Invalid component model" in capsys.readouterr().err


def test_missing_model_file_exits_with_1(tmp_path: Path) -> None:
    assert main(["verify", str(tmp_path / "missing.json")]) == 1
