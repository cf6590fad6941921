import json
from pathlib import Path

from delivery_checker.persistence.filesystem import STEPS_FILE, SUMMARY_FILE, FileStorage


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="check_test")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"
    assert run_dir.name.startswith("check_test_")


def test_file_storage_run_directories_do_not_collide(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    first = storage.make_run_directory(prefix="check_test")
    second = storage.make_run_directory(prefix="check_test")

    assert first != second
    assert second.is_dir()


def test_file_storage_writes_summary_and_steps(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="check_test")

    summary_path = storage.write_summary(run_dir, {"status": "success", "steps": []})
    steps_path = storage.write_steps(run_dir, "sequence,address,action\n0,1,pickup\n")

    assert summary_path == run_dir / SUMMARY_FILE
    assert json.loads(summary_path.read_text(encoding="utf-8")) == {"status": "success", "steps": []}
    assert steps_path == run_dir / STEPS_FILE
    assert steps_path.read_text(encoding="utf-8") == "sequence,address,action\n0,1,pickup\n"
