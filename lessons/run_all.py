#!/usr/bin/env python3
"""
Parallel Bootstrap Workshop Runner
Runs every lesson, prints a timing summary, draws a comparison graph and
writes the workshop document.
"""

import subprocess
import sys
from pathlib import Path

from parboot.report import format_summary, generate_graph, parse_times, render_markdown
from parboot.settings import TIMEOUT

# Lesson files
LESSONS = [
    ("01_bootstrap_sequential", "Bootstrap"),
    ("02_parallel_map", "Parallel map"),
    ("03_foreach_backend", "Foreach loop"),
    ("04_overhead", "Tiny tasks"),
]


def get_script_dir():
    return Path(__file__).parent.absolute()


def run_lesson(path, cwd, timeout=TIMEOUT):
    """Run a lesson and return its output, or None if it failed."""
    try:
        result = subprocess.run(
            [sys.executable, str(path)],
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        print(f"  Timed out after {timeout}s")
        return None

    if result.returncode != 0:
        print(f"  Error: {result.stderr.strip().splitlines()[-1] if result.stderr.strip() else result.returncode}")
        return None
    return result.stdout


def run_all_lessons(script_dir):
    """Run all lessons; return (results, lesson records)."""
    results = {"sequential": {}, "parallel": {}}
    records = []

    print("=" * 64)
    print("            PARALLEL BOOTSTRAP WORKSHOP")
    print("=" * 64)
    print()

    for lesson_id, lesson_name in LESSONS:
        path = script_dir / f"{lesson_id}.py"
        if not path.exists():
            continue

        print(f"[{lesson_name}]", end=" ", flush=True)
        output = run_lesson(path, script_dir)
        if output is None:
            print("FAILED")
            records.append({"path": path, "output": None, "times": {}})
            print()
            continue

        times = parse_times(output)
        if "Sequential" in times:
            results["sequential"][lesson_name] = times["Sequential"]
        if "Parallel" in times:
            results["parallel"][lesson_name] = times["Parallel"]
        records.append({"path": path, "output": output, "times": times})
        print(f"{times.get('Time', 0):.2f}ms")
        print()

    return results, records


def main():
    script_dir = get_script_dir()
    graph_path = script_dir / "workshop_results.png"
    report_path = script_dir / "workshop_report.md"

    results, records = run_all_lessons(script_dir)

    print()
    print(format_summary(results))

    report_path.write_text(render_markdown(records), encoding="utf-8")
    print(f"\n✓ Report saved to: {report_path}")

    generate_graph(results, graph_path)


if __name__ == "__main__":
    main()
