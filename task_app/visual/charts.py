"""Chart builders (Altair) for workload views."""

from __future__ import annotations

import altair as alt
import pandas as pd

from task_app.core.config import UNASSIGNED_LABEL

COLORS = [
    "#2563eb",
    "#16a34a",
    "#ea580c",
    "#dc2626",
    "#9333ea",
    "#0891b2",
    "#c026d3",
    "#65a30d",
    "#db2777",
    "#f59e0b",
]
UNASSIGNED_COLOR = "#9ca3af"
OTHERS_COLOR = "#6b7280"


def _bar_color(name: str, index: int) -> str:
    if name == UNASSIGNED_LABEL:
        return UNASSIGNED_COLOR
    if name.startswith("Others"):
        return OTHERS_COLOR
    return COLORS[index % len(COLORS)]


def assignee_breakdown_chart(breakdown: pd.DataFrame):
    """Bar chart of open tasks per assignee (output of ``top_assignees``)."""
    if breakdown.empty:
        return None
    chart_df = breakdown.reset_index(drop=True).copy()
    chart_df["label"] = [
        name if name == UNASSIGNED_LABEL or name.startswith("Others") else f"@{name}"
        for name in chart_df["assignee"]
    ]
    chart_df["color"] = [_bar_color(name, i) for i, name in enumerate(chart_df["assignee"])]
    chart = (
        alt.Chart(chart_df)
        .mark_bar(cornerRadiusTopLeft=8, cornerRadiusTopRight=8)
        .encode(
            x=alt.X("label:N", title=None, sort=None, axis=alt.Axis(labelAngle=-45)),
            y=alt.Y("count:Q", title="Open Tasks"),
            color=alt.Color("color:N", scale=None, legend=None),
            tooltip=[
                alt.Tooltip("assignee:N", title="Assignee"),
                alt.Tooltip("count:Q", title="Tasks"),
                alt.Tooltip("percentage:Q", title="% of open", format=".1f"),
            ],
        )
        .properties(height=300)
    )
    return chart
