from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import json
from pathlib import Path
from typing import Any


_ALLOWED_TOP = {
    "paths",
    "run",
    "queries",
    "verify",
}


@dataclass(frozen=True, slots=True)
class IntMathConfig:
    config_path: Path
    config_root: Path
    paths: dict[str, Any]
    run: dict[str, Any]
    queries: dict[str, Any]
    verify: dict[str, Any]



def _expect_dict(payload: Any, where: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValueError(f"{where} must be an object")
    return payload



def _expect_keys(obj: dict[str, Any], allowed: set[str], where: str, required: set[str] | None = None) -> None:
    extra = sorted(set(obj) - allowed)
    if extra:
        raise ValueError(f"unknown keys in {where}: {extra}")
    req = required if required is not None else set()
    missing = sorted(req - set(obj))
    if missing:
        raise ValueError(f"missing required keys in {where}: {missing}")



def _expect_int(value: Any, where: str, minimum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where} must be an integer")
    if minimum is not None and value < minimum:
        raise ValueError(f"{where} must be >= {minimum}")
    return value



def _expect_int_list(value: Any, where: str) -> list[int]:
    if not isinstance(value, list):
        raise ValueError(f"{where} must be a list")
    return [_expect_int(v, f"{where}[{i}]") for i, v in enumerate(value)]



def _resolve_path(config_root: Path, raw: str | Path) -> Path:
    p = Path(raw)
    if not p.is_absolute():
        p = (config_root / p).resolve()
    else:
        p = p.resolve()
    return p



def _normalize_run(run: dict[str, Any]) -> dict[str, Any]:
    seed = _expect_int(run.get("seed", 42), "run.seed", minimum=0)
    run_id = str(run.get("run_id") or datetime.now(timezone.utc).strftime("run-%Y%m%d-%H%M%S"))
    return {
        "seed": seed,
        "run_id": run_id,
    }



def _normalize_queries(queries: dict[str, Any]) -> dict[str, Any]:
    search_rows: list[dict[str, int]] = []
    raw_search = queries.get("search", [])
    if not isinstance(raw_search, list):
        raise ValueError("queries.search must be a list")
    for i, row in enumerate(raw_search):
        where = f"queries.search[{i}]"
        row = _expect_dict(row, where)
        _expect_keys(row, {"n", "target"}, where, required={"n", "target"})
        search_rows.append(
            {
                "n": _expect_int(row["n"], f"{where}.n"),
                "target": _expect_int(row["target"], f"{where}.target"),
            }
        )
    return {
        "sqrt": _expect_int_list(queries.get("sqrt", []), "queries.sqrt"),
        "triangular": _expect_int_list(queries.get("triangular", []), "queries.triangular"),
        "search": search_rows,
    }



def _normalize_verify(verify: dict[str, Any]) -> dict[str, Any]:
    max_bits = _expect_int(verify["max_bits"], "verify.max_bits", minimum=1)
    search_max_n = _expect_int(verify.get("search_max_n", 2**31 - 1), "verify.search_max_n", minimum=1)
    include_boundaries = verify.get("include_boundaries", True)
    enabled = verify["enabled"]
    if not isinstance(enabled, bool) or not isinstance(include_boundaries, bool):
        raise ValueError("verify.enabled and verify.include_boundaries must be booleans")
    return {
        "enabled": enabled,
        "samples": _expect_int(verify["samples"], "verify.samples", minimum=0),
        "max_bits": max_bits,
        "search_max_n": search_max_n,
        "include_boundaries": include_boundaries,
    }



def load_intmath_config(path: Path | str = "config.json") -> IntMathConfig:
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"config not found: {config_path}")

    payload = json.loads(config_path.read_text(encoding="utf-8"))
    payload = _expect_dict(payload, "config")
    _expect_keys(payload, _ALLOWED_TOP, "config", required=set(_ALLOWED_TOP))

    config_root = config_path.parent

    paths = _expect_dict(payload.get("paths", {}), "paths")
    _expect_keys(paths, {"reports_root"}, "paths", required={"reports_root"})
    reports_root = _resolve_path(config_root, str(paths["reports_root"]))

    run = _expect_dict(payload.get("run", {}), "run")
    _expect_keys(run, {"seed", "run_id"}, "run")
    run_norm = _normalize_run(run)

    queries = _expect_dict(payload.get("queries", {}), "queries")
    _expect_keys(queries, {"sqrt", "triangular", "search"}, "queries")
    queries_norm = _normalize_queries(queries)

    verify = _expect_dict(payload.get("verify", {}), "verify")
    _expect_keys(
        verify,
        {"enabled", "samples", "max_bits", "search_max_n", "include_boundaries"},
        "verify",
        required={"enabled", "samples", "max_bits"},
    )
    verify_norm = _normalize_verify(verify)

    return IntMathConfig(
        config_path=config_path,
        config_root=config_root,
        paths={"reports_root": reports_root},
        run=run_norm,
        queries=queries_norm,
        verify=verify_norm,
    )
