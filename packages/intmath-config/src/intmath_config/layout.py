from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class VerifyLayout:
    reports_root: Path
    run_root: Path
    summary_json: Path
    cases_jsonl: Path
    summary_md: Path
    latest_run_json: Path



def build_layout(*, reports_root: Path, run_id: str) -> VerifyLayout:
    run_root = reports_root / "runs" / run_id
    return VerifyLayout(
        reports_root=reports_root,
        run_root=run_root,
        summary_json=run_root / "summary.json",
        cases_jsonl=run_root / "cases.jsonl",
        summary_md=run_root / "summary.md",
        latest_run_json=reports_root / "latest_run.json",
    )
