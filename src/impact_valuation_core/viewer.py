"""
impact-valuation-core Result Viewer

Minimal Streamlit dashboard for viewing portfolio summaries.
Displays cost vs. value, ROI per project and data completeness.

Usage:
    pip install -e ".[viewer]"
    streamlit run src/impact_valuation_core/viewer.py
    streamlit run src/impact_valuation_core/viewer.py -- --results-dir results

Requires the package to be installed (e.g. via ``pip install -e .``).
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from impact_valuation_core.domain.constants import SCORE_LEVELS, TOP_SCORE_LEVEL

# -- Colors --
COST_COLOR = "#ea4335"
VALUE_COLOR = "#34a853"
LEVEL_COLORS = {
    "Grundläggande": "#ea4335",
    "Utvecklad": "#e8710a",
    "Avancerad": "#fbbc04",
    "Komplett": "#1a73e8",
    "Exemplarisk": "#34a853",
}
LEVEL_ORDER = [level for _, level in SCORE_LEVELS] + [TOP_SCORE_LEVEL]


def _find_summaries(results_dir: Path) -> list[dict]:
    """Find summary CSVs in results_dir, newest run first."""
    return [
        {"run_id": path.stem.replace("summary_", ""), "path": path}
        for path in sorted(results_dir.glob("summary_*.csv"), reverse=True)
    ]


def _load_summary(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path)
    for column in ("project_id", "title", "level", "missing_high_value", "error"):
        if column in df.columns:
            df[column] = df[column].fillna("").astype(str)
    df["name"] = df["title"].where(df["title"] != "", df["project_id"])
    return df


def _render_cost_vs_value(df: pd.DataFrame) -> None:
    """Render grouped cost / value bars per project."""
    st.header("Cost vs. Value")

    fig = go.Figure()
    fig.add_trace(go.Bar(x=df["name"], y=df["total_cost"], name="Kostnad", marker_color=COST_COLOR))
    fig.add_trace(go.Bar(
        x=df["name"], y=df["total_monetary_value"], name="Ekonomiskt värde", marker_color=VALUE_COLOR,
    ))
    fig.update_layout(
        barmode="group",
        yaxis_title="SEK",
        template="plotly_white",
        height=450,
    )
    st.plotly_chart(fig, use_container_width=True)


def _render_roi(df: pd.DataFrame) -> None:
    """Render economic ROI per project with a break-even line."""
    st.header("Economic ROI")

    colors = [VALUE_COLOR if roi >= 0 else COST_COLOR for roi in df["economic_roi"]]
    fig = go.Figure(go.Bar(
        x=df["name"],
        y=df["economic_roi"] * 100,
        marker_color=colors,
        text=[f"{roi:.0%}" for roi in df["economic_roi"]],
        textposition="outside",
    ))
    fig.add_hline(y=0, line_color="#5f6368", line_width=1)
    fig.update_layout(
        yaxis_title="ROI (%)",
        template="plotly_white",
        height=400,
    )
    st.plotly_chart(fig, use_container_width=True)


def _render_completeness(df: pd.DataFrame) -> None:
    """Render completeness percentage per project, colored by level."""
    st.header("Data Completeness")

    fig = go.Figure(go.Bar(
        x=df["percentage"],
        y=df["name"],
        orientation="h",
        marker_color=[LEVEL_COLORS.get(level, "#546e7a") for level in df["level"]],
        text=df["level"],
        textposition="auto",
    ))
    fig.update_layout(
        xaxis_title="Completeness (%)",
        xaxis_range=[0, 100],
        template="plotly_white",
        height=max(300, 40 * len(df)),
    )
    st.plotly_chart(fig, use_container_width=True)

    levels = df["level"].value_counts().reindex(LEVEL_ORDER, fill_value=0)
    st.dataframe(
        levels.rename("Projects").rename_axis("Level").reset_index(),
        use_container_width=True,
        hide_index=True,
    )

    missing = df[df["missing_high_value"] != ""][["name", "missing_high_value"]]
    if not missing.empty:
        st.subheader("Missing High-Value Information")
        st.dataframe(
            missing.rename(columns={"name": "Project", "missing_high_value": "Missing"}),
            use_container_width=True,
            hide_index=True,
        )


def _render_summary_table(df: pd.DataFrame) -> None:
    st.header("Summary")
    columns = [
        "name", "total_cost", "total_monetary_value", "economic_roi", "qualitative_roi",
        "payback_period_years", "total_effects", "total_score", "percentage", "level", "risk_level",
    ]
    existing = [c for c in columns if c in df.columns]
    st.dataframe(df[existing].rename(columns={"name": "Project"}), use_container_width=True, hide_index=True)


def main() -> None:
    # Parse --results-dir from Streamlit args (after --)
    parser = argparse.ArgumentParser()
    parser.add_argument("--results-dir", default="results")
    args, _ = parser.parse_known_args()

    results_dir = Path(args.results_dir)

    st.set_page_config(page_title="impact-valuation-core", layout="wide")
    st.title("impact-valuation-core Portfolio")

    run_hint = "Run a valuation first:\n```\npython -m impact_valuation_core.runner --projects data/projects.json\n```"
    if not results_dir.exists():
        st.error(f"Results directory not found: `{results_dir}`")
        st.info(run_hint)
        return

    summaries = _find_summaries(results_dir)
    if not summaries:
        st.warning(f"No summary files found in `{results_dir}/`")
        st.info(run_hint)
        return

    # Run selector
    run_ids = [s["run_id"] for s in summaries]
    selected_run_id = st.sidebar.selectbox("Run", run_ids, index=0)
    selected = next(s for s in summaries if s["run_id"] == selected_run_id)

    df = _load_summary(selected["path"])
    failed = df[df["error"] != ""]
    df = df[df["error"] == ""]

    # Sidebar info
    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**Projects**: {len(df)}")
    st.sidebar.markdown(f"**Total cost**: {df['total_cost'].sum():,.0f} SEK".replace(",", " "))
    st.sidebar.markdown(f"**Total value**: {df['total_monetary_value'].sum():,.0f} SEK".replace(",", " "))
    if not failed.empty:
        st.sidebar.markdown(f"**Failed**: {len(failed)}")

    if df.empty:
        st.warning("No successfully evaluated projects in this run.")
        st.dataframe(failed, use_container_width=True)
        return

    # Render sections
    _render_cost_vs_value(df)
    _render_roi(df)
    _render_completeness(df)
    _render_summary_table(df)


if __name__ == "__main__":
    main()
