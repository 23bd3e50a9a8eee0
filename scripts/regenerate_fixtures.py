#!/usr/bin/env python3
"""
Regenerate test fixtures from current arbor implementation.

Usage:
    python scripts/regenerate_fixtures.py [fixture_name]

If fixture_name is provided, only that fixture is regenerated.
Otherwise, all fixtures are regenerated.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from arbor import TraversalOrder, build_report, render_report_json


FIXTURES_DIR = Path(__file__).parent.parent / "test" / "fixtures"


def regenerate_fixture(fixture_dir: Path) -> None:
    """Regenerate a fixture (input.json -> expected.json)."""
    input_file = fixture_dir / "input.json"

    if not input_file.exists():
        print(f"  Skipping {fixture_dir.name}: no input.json")
        return

    scenario = json.loads(input_file.read_text())
    report = build_report(scenario["values"], scenario["remove"], tuple(TraversalOrder))

    (fixture_dir / "expected.json").write_text(render_report_json(report) + "\n")

    print(f"  {fixture_dir.name}: {report.count} values after {len(report.removals)} removals")


def main() -> int:
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else None

    print("Regenerating fixtures...")

    for fixture_dir in sorted(FIXTURES_DIR.iterdir()):
        if not fixture_dir.is_dir():
            continue

        if target and fixture_dir.name != target:
            continue

        regenerate_fixture(fixture_dir)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
