from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from intmath_config import VerifyLayout


def _atomic_write_json(path: Path, payload: dict[str, Any]) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    tmp.replace(path)


def _fmt_float(v: float | None, digits: int = 2) -> str:
    if v is None:
        return "n/a"
    return f"{float(v):.{digits}f}"


def write_reports(layout: VerifyLayout, config: dict[str, Any], result: dict[str, Any]) -> dict[str, str]:
    layout.run_root.mkdir(parents=True, exist_ok=True)
    aggregate = result["aggregate"]

    payload = {
        "run_id": result["run_id"],
        "config": config,
        "queries": result["queries"],
        "aggregate": aggregate,
    }
    _atomic_write_json(layout.summary_json, payload)

    with layout.cases_jsonl.open("w", encoding="utf-8") as f:
        for row in result["cases"]:
            f.write(json.dumps(row, ensure_ascii=True) + "\n")

    lines = [
        "# Integer Math Verification Summary",
        "",
        f"- run: `{result['run_id']}`",
        f"- cases checked: {aggregate['num_cases']}",
        f"- failures: **{aggregate['num_failed']}**",
        "",
        "## Operations",
    ]
    for op in aggregate["operations"]:
        lines.append(
            f"- {op['operation']}: cases={op['num_cases']}, failed={op['num_failed']}, "
            f"attempts_mean={_fmt_float(op['attempts_mean'])}, attempts_max={op['attempts_max']}"
        )
    if result["queries"]:
        lines.extend(["", "## Queries"])
        for q in result["queries"]:
            args = ", ".join(f"{k}={v}" for k, v in q["inputs"].items())
            answer = q["output"] if q["error"] is None else f"error: {q['error']}"
            lines.append(f"- {q['operation']}({args}) -> {answer}")
    if aggregate["failures"]:
        lines.extend(["", "## Failures"])
        for row in aggregate["failures"]:
            lines.append(f"- {row['operation']} {row['inputs']}: output={row['output']} ({row['detail']})")
    layout.summary_md.write_text("\n".join(lines) + "\n", encoding="utf-8")

    _atomic_write_json(
        layout.latest_run_json,
        {
            "run_id": result["run_id"],
            "summary_json": str(layout.summary_json),
            "num_failed": aggregate["num_failed"],
        },
    )

    return {
        "summary_json": str(layout.summary_json),
        "cases_jsonl": str(layout.cases_jsonl),
        "summary_md": str(layout.summary_md),
        "latest_run_json": str(layout.latest_run_json),
    }
