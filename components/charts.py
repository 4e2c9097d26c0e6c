"""Plotly chart builders for the Zoo Enclosure Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List


def enclosure_occupancy_bar(
    utilization: List[dict],
    title: str = "Occupancy by Enclosure",
) -> go.Figure:
    """Stacked bar of used vs free space per enclosure."""
    df = pd.DataFrame(utilization)
    df["enclosure"] = df["enclosure_id"].map(lambda i: f"Recinto {i}")
    fig = px.bar(
        df, x="enclosure", y=["used_space", "free_space"],
        labels={"value": "Space", "enclosure": "Enclosure", "variable": ""},
        title=title,
        hover_data=["biome"],
        color_discrete_map={"used_space": "#E8734A", "free_space": "#4A90D9"},
    )
    fig.update_layout(legend_title_text="", height=400, barmode="stack")
    return fig


def utilization_donut(used: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart showing overall space occupancy."""
    available = total - used
    fig = go.Figure(data=[go.Pie(
        labels=["Used", "Free"],
        values=[used, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def placement_bar(viable: List[dict]) -> go.Figure:
    """Free space left in each viable enclosure after the hypothetical placement."""
    df = pd.DataFrame(viable)
    df["enclosure"] = df["enclosure_id"].map(lambda i: f"Recinto {i}")
    fig = go.Figure()
    fig.add_trace(go.Bar(
        name="Total",
        x=df["enclosure"],
        y=df["total_capacity"],
        marker_color="#4A90D9",
    ))
    fig.add_trace(go.Bar(
        name="Free after placement",
        x=df["enclosure"],
        y=df["free_space"],
        marker_color="#E8734A",
    ))
    fig.update_layout(
        barmode="group",
        title="Viable Enclosures",
        xaxis_title="Enclosure",
        yaxis_title="Space",
        height=350,
    )
    return fig
