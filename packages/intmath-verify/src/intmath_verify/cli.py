from __future__ import annotations

import argparse
from pathlib import Path

from intmath_config import build_layout, load_intmath_config

from .pipeline import run_verification
from .reporting import write_reports


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Answer integer math queries and verify exactness properties")
    parser.add_argument("--config", type=Path, default=Path("config.json"))
    args = parser.parse_args(argv)

    shared = load_intmath_config(args.config)
    layout = build_layout(reports_root=shared.paths["reports_root"], run_id=str(shared.run["run_id"]))

    result = run_verification(shared)
    reports = write_reports(
        layout,
        config={
            "run": shared.run,
            "queries": shared.queries,
            "verify": shared.verify,
        },
        result=result,
    )
    aggregate = result["aggregate"]

    print("Queries")
    if not result["queries"]:
        print("- none")
    for q in result["queries"]:
        args_str = ", ".join(f"{k}={v}" for k, v in q["inputs"].items())
        answer = q["output"] if q["error"] is None else f"error: {q['error']}"
        print(f"- {q['operation']}({args_str}) = {answer}")
    print("")
    print("Verification")
    print(f"- enabled: {'yes' if shared.verify['enabled'] else 'no'}")
    print(f"- cases_checked: {aggregate['num_cases']}")
    print(f"- failures: {aggregate['num_failed']}")
    for op in aggregate["operations"]:
        print(f"- {op['operation']}: {op['num_cases'] - op['num_failed']}/{op['num_cases']} passed")
    print("")
    print("Artifacts")
    print(f"- summary_json: {reports['summary_json']}")
    print(f"- cases_jsonl: {reports['cases_jsonl']}")
    print(f"- summary_md: {reports['summary_md']}")

    if aggregate["num_failed"] > 0:
        for row in aggregate["failures"]:
            print(f"CHECK FAILED: {row['operation']} {row['inputs']} -> {row['output']} ({row['detail']})")
        raise SystemExit(2)


if __name__ == "__main__":
    main()
