from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest

from intmath_config import build_layout, load_intmath_config
from intmath_verify import (
    CaseResult,
    boundary_values,
    check_perfect_square,
    check_search,
    check_sqrt,
    check_triangular,
    make_rng,
    run_verification,
    sample_integers,
    sample_search_cases,
    write_reports,
)
from intmath_verify.cli import main


def _config_payload(samples: int = 50) -> dict:
    return {
        "paths": {"reports_root": "reports"},
        "run": {"run_id": "test-run", "seed": 3},
        "queries": {
            "sqrt": [8, -4],
            "triangular": [5],
            "search": [{"n": 10, "target": 6}, {"n": 10, "target": 11}],
        },
        "verify": {"enabled": True, "samples": samples, "max_bits": 96, "search_max_n": 2**40},
    }


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_property_checks_pass_on_boundaries() -> None:
    assert check_sqrt(2147395599).passed
    assert check_sqrt(2**52 + 1).detail == "integer"
    assert check_perfect_square(3037000499).passed
    assert check_triangular(2**31 - 1).output == 65535
    res = check_search(10, 6)
    assert res.passed
    assert res.attempts == 1


def test_check_search_reports_unreachable_target() -> None:
    res = check_search(5, 9)
    assert not res.passed
    assert res.output is None
    assert "never answered exact" in res.detail


def test_sampling_is_seeded_and_bounded() -> None:
    a = sample_integers(make_rng(11), 200, 130)
    b = sample_integers(make_rng(11), 200, 130)
    assert a == b
    assert all(0 <= v < 2**130 for v in a)
    assert any(v >= 2**64 for v in a)

    cases = sample_search_cases(make_rng(5), 100, 1000)
    assert all(1 <= t <= n <= 1000 for n, t in cases)


def test_boundary_values_are_sorted_and_within_width() -> None:
    values = boundary_values(40)
    assert values == sorted(set(values))
    assert values[0] == 0
    assert all(v < 2**40 for v in values)
    assert 2147395599 in values
    assert 2**52 not in values


def test_run_verification_has_no_failures(tmp_path) -> None:
    cfg = load_intmath_config(_write_config(tmp_path, _config_payload()))
    result = run_verification(cfg)

    aggregate = result["aggregate"]
    assert aggregate["num_failed"] == 0
    assert aggregate["num_cases"] > 0
    ops = {row["operation"]: row for row in aggregate["operations"]}
    assert ops["search"]["attempts_max"] <= 42

    answers = [(q["operation"], q["output"], q["error"]) for q in result["queries"]]
    assert answers[0] == ("sqrt", 2, None)
    assert answers[1][0] == "sqrt" and answers[1][1] is None and ">= 0" in answers[1][2]
    assert answers[2] == ("triangular", 2, None)
    assert answers[3] == ("search", 6, None)
    assert answers[4][1] is None


def test_run_verification_skips_cases_when_disabled(tmp_path) -> None:
    payload = _config_payload()
    payload["verify"]["enabled"] = False
    cfg = load_intmath_config(_write_config(tmp_path, payload))
    result = run_verification(cfg)
    assert result["cases"] == []
    assert result["aggregate"]["num_cases"] == 0
    assert len(result["queries"]) == 5


def test_write_reports_creates_all_artifacts(tmp_path) -> None:
    cfg = load_intmath_config(_write_config(tmp_path, _config_payload(samples=5)))
    layout = build_layout(reports_root=cfg.paths["reports_root"], run_id=cfg.run["run_id"])
    result = run_verification(cfg)
    reports = write_reports(layout, config={"verify": cfg.verify}, result=result)

    summary = json.loads(Path(reports["summary_json"]).read_text(encoding="utf-8"))
    assert summary["run_id"] == "test-run"
    assert summary["aggregate"]["num_failed"] == 0

    lines = Path(reports["cases_jsonl"]).read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(result["cases"])

    md = Path(reports["summary_md"]).read_text(encoding="utf-8")
    assert md.startswith("# Integer Math Verification Summary")
    assert "sqrt(x=8) -> 2" in md

    latest = json.loads(layout.latest_run_json.read_text(encoding="utf-8"))
    assert latest["run_id"] == "test-run"


def test_cli_prints_sections_and_writes_reports(tmp_path, capsys) -> None:
    path = _write_config(tmp_path, _config_payload(samples=5))
    main(["--config", str(path)])

    out = capsys.readouterr().out
    assert "Queries" in out
    assert "- sqrt(x=8) = 2" in out
    assert "- failures: 0" in out
    assert (tmp_path / "reports" / "runs" / "test-run" / "summary.md").exists()


def test_cli_exits_nonzero_on_failed_case(tmp_path, monkeypatch, capsys) -> None:
    pipeline = importlib.import_module("intmath_verify.pipeline")
    monkeypatch.setattr(
        pipeline,
        "check_sqrt",
        lambda x: CaseResult("sqrt", {"x": x}, -1, False, "forced failure"),
    )
    path = _write_config(tmp_path, _config_payload(samples=2))

    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path)])
    assert exc.value.code == 2
    assert "CHECK FAILED: sqrt" in capsys.readouterr().out
