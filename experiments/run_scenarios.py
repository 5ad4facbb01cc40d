import argparse
from pathlib import Path
from typing import Any, Dict, List

from experiments.metrics import timed, write_csv
from experiments.scenarios import SCENARIOS
from ledger.host import CredentialLedger
from ledger.result import Err

OUT = Path("experiments/results")
CSV_PATH = OUT / "scenarios.csv"

def run_scenario(name: str, scenario: Dict[str, Any]) -> Dict[str, Any]:
    ledger = CredentialLedger("contract-owner", max_disclosure_fields=None)
    result = None
    total_ms = 0.0
    for op, caller, args in scenario["steps"]:
        method = getattr(ledger, op)
        call = (lambda: method(*args)) if caller is None else (lambda: method(caller, *args))
        result, ms = timed(call)
        total_ms += ms

    ok = not isinstance(result, Err)
    value = result.value if ok else result.code
    expected = scenario["expect"]
    return {
        "scenario": name,
        "ok": ok,
        "value": value,
        "passed": ok == expected["ok"] and value == expected["value"],
        "steps": len(scenario["steps"]),
        "total_ms": round(total_ms, 4),
    }

def main(n: int = 10) -> List[Dict[str, Any]]:
    rows = []
    for _ in range(n):
        for name, scenario in SCENARIOS.items():
            rows.append(run_scenario(name, scenario))

    write_csv(rows, CSV_PATH)
    failed = [r for r in rows if not r["passed"]]
    print("Wrote:", CSV_PATH)
    print("Rows:", len(rows), "Failed:", len(failed))
    return rows

if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("-n", type=int, default=10)
    args = p.parse_args()
    main(n=args.n)
