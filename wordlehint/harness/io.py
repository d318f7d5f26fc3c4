"""
Run outputs: per-game CSV, JSON manifest, run ids.

One CSV row per simulated game; the guess history is spread over fixed
guess_i / patt_i columns so runs with the same turn budget line up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple
import csv
import json
import subprocess
import datetime as dt

BASE_FIELDS = ["solver", "answer", "success", "guesses", "time_ms", "error"]


def history_fields(max_turns: int) -> List[str]:
    fields: List[str] = []
    for i in range(1, max_turns + 1):
        fields.extend((f"guess_{i}", f"patt_{i}"))
    return fields


def _history_row(history: Sequence[Tuple[str, str]], max_turns: int) -> Dict[str, str]:
    row = dict.fromkeys(history_fields(max_turns), "")
    for i, (guess, pattern) in enumerate(history[:max_turns], 1):
        row[f"guess_{i}"] = guess
        row[f"patt_{i}"] = pattern
    return row


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """Write `results` (from run_case/run_batch) to `path`; returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=BASE_FIELDS + history_fields(max_turns))
        w.writeheader()
        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error") or "",
            }
            row.update(_history_row(r.get("history", []), max_turns))
            w.writerow(row)

    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over solved games."""
    n = len(results)
    wins = [r for r in results if r["success"]]
    return {
        "games": n,
        "solved": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else None,
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump `manifest` as indented JSON; returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC timestamp for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash, or 'unknown' outside a git checkout."""
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
