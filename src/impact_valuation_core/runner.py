"""
impact-valuation-core CLI Runner

Minimal CLI for valuing and scoring a portfolio of projects.

Usage:
    python -m impact_valuation_core.runner --projects data/projects.json
    python -m impact_valuation_core.runner --projects data/ --output-dir results --run-id 20260101_120000
"""

from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from impact_valuation_core.engine_config import load_config
from impact_valuation_core.project_loader import load_projects
from impact_valuation_core.use_cases.portfolio import evaluate_portfolio


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="impact-valuation-core: Value and score public-sector AI projects",
    )
    parser.add_argument(
        "--projects",
        required=True,
        help="Path to a projects JSON file or a directory of JSON files",
    )
    parser.add_argument(
        "--run-id",
        default=None,
        help="Run ID used in the output file name (default: current timestamp)",
    )
    parser.add_argument(
        "--output-dir",
        default="results",
        help="Directory for output CSV files (default: results)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    # Load config
    config = load_config()

    # Determine run_id
    run_id = args.run_id if args.run_id else datetime.now().strftime("%Y%m%d_%H%M%S")

    # Output paths
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    summary_path = output_dir / f"summary_{run_id}.csv"

    # Load projects
    print(f"\n=== Loading projects: {args.projects} ===\n")
    projects = load_projects(args.projects)
    print(f"  Projects: {len(projects)}")
    print(f"  Legacy monthly annualization: {config.annualization.legacy_monthly_multiplier}")
    print(f"  Run ID: {run_id}")
    print()

    # Evaluate
    print(f"=== Evaluating Projects ({len(projects)} total) ===\n")
    summary_df = evaluate_portfolio(projects, config)

    # Display summary
    print(f"  {'Project':<40} {'Cost':>12} {'Value':>12} {'ROI':>8} {'Payback':>8} {'Score':>6}  Level")
    print(f"  {'-'*40} {'-'*12} {'-'*12} {'-'*8} {'-'*8} {'-'*6}  {'-'*14}")
    for _, row in summary_df.iterrows():
        name = row["title"] or row["project_id"] or "-"
        if row["error"]:
            print(f"  {name[:40]:<40} {row['error']}")
            continue
        print(
            f"  {name[:40]:<40} "
            f"{row['total_cost']:>12,.0f} "
            f"{row['total_monetary_value']:>12,.0f} "
            f"{row['economic_roi']:>8.1%} "
            f"{row['payback_period_years']:>8.1f} "
            f"{row['percentage']:>5}%  "
            f"{row['level']}"
        )
    print()

    failed = int((summary_df["error"] != "").sum()) if not summary_df.empty else 0
    if failed:
        print(f"WARNING: {failed} project(s) could not be evaluated.\n")

    # Save CSV
    summary_df.to_csv(summary_path, index=False)

    print("=== Output ===\n")
    print(f"  Summary: {summary_path}")
    print()


if __name__ == "__main__":
    main()
