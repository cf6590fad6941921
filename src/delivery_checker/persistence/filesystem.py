"""Run directories for persisted delivery checks."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from ..config import settings

SUMMARY_FILE = "summary.json"
STEPS_FILE = "steps.csv"


class FileStorage:
    """Stores each delivery check under ``<data_root>/outputs/<prefix>_<UTC timestamp>``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.output_root.mkdir(parents=True, exist_ok=True)

    def make_run_directory(self, prefix: str = "check") -> Path:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        run_dir = self.output_root / f"{prefix}_{stamp}"
        attempt = 1
        # several checks can land within the same second
        while run_dir.exists():
            run_dir = self.output_root / f"{prefix}_{stamp}_{attempt}"
            attempt += 1
        run_dir.mkdir(parents=True)
        return run_dir

    def write_summary(self, run_dir: Path, document: dict) -> Path:
        target = run_dir / SUMMARY_FILE
        target.write_text(
            json.dumps(document, ensure_ascii=False, indent=settings.json_indent),
            encoding="utf-8",
        )
        return target

    def write_steps(self, run_dir: Path, table: str) -> Path:
        target = run_dir / STEPS_FILE
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(table)
        return target
