import json
from pathlib import Path

import pytest

from delivery_checker import cli
from delivery_checker.persistence.filesystem import FileStorage
from delivery_checker.services.validation import service as validation_service


def test_cli_prints_pretty_success(capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main(["[[1,3],[2,5]]", "[1,2,3,4,5]"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith('{\n  "status": "success",\n  "steps": [\n')
    payload = json.loads(out)
    assert payload["steps"][3] == {"address": 4, "action": None}
    assert [step["action"] for step in payload["steps"]] == ["pickup", "pickup", "dropoff", None, "dropoff"]


@pytest.mark.parametrize("argv", [[], ["[[1,2]]"], ["[[1,2]]", "[1,2]", "[3]"]])
def test_cli_rejects_wrong_argument_count(argv, capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main(argv)

    assert exit_code == 1
    out = capsys.readouterr().out
    assert out == (
        '{"status":"error","error_code":"invalid_arguments",'
        '"error_message":"Expected exactly 2 arguments: deliveries and path"}\n'
    )


@pytest.mark.parametrize(
    ("deliveries", "path", "error_code"),
    [
        ("[[1,2],[3,4]]", "[1,2,4]", "delivery_address_not_in_path"),
        ("[[1,3],[2,4]]", "[1,4,2,3]", "delivery_dropoff_before_pickup"),
        ("[[1,2]", "[1,2]", "invalid_input"),
        ("[[1],[2,3,4]]", "[1,2,3,4]", "invalid_input"),
    ],
)
def test_cli_check_errors_exit_zero(deliveries, path, error_code, capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main([deliveries, path])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "error"
    assert payload["error_code"] == error_code


def test_cli_persist_writes_run_directory(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys):
    original_storage = FileStorage
    monkeypatch.setattr(validation_service, "FileStorage", lambda: original_storage(root=tmp_path))

    exit_code = cli.main(["--persist", "[[1,2]]", "[1,2]"])

    assert exit_code == 0
    run_dirs = list((tmp_path / "outputs").iterdir())
    assert len(run_dirs) == 1
    assert (run_dirs[0] / "summary.json").exists()
    assert (run_dirs[0] / "steps.csv").exists()
    assert json.loads(capsys.readouterr().out)["status"] == "success"


@pytest.mark.parametrize(
    "argv",
    [["[[1,2]]", "[1,2]", "--extra"], ["-x", "[[1,2]]", "[1,2]"], ["--persist", "[[1,2]]"]],
)
def test_cli_counts_unknown_options_as_arguments(argv, capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main(argv)

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["error_code"] == "invalid_arguments"


def test_cli_prints_integral_floats_as_ints(capsys: pytest.CaptureFixture[str]):
    exit_code = cli.main(["[[1.0,2]]", "[1.0,2]"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert '"address": 1,' in out
    assert "1.0" not in out
