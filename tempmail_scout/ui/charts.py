from typing import List

import plotly.express as px
import plotly.graph_objects as go

from ..models import LatencyPoint
from ..stats import stats_frame
from .theme import COLORS


def latency_chart(points: List[LatencyPoint]) -> go.Figure:
    df = stats_frame(points)
    fig = px.area(df, x="time", y="latency", hover_data=["requests"],
                  labels={"time": "", "latency": "Latency (ms)", "requests": "Requests"})
    fig.update_traces(line_color=COLORS["inbox"], line_width=2, fillcolor="rgba(59, 130, 246, 0.2)")
    fig.update_layout(
        height=300,
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font_color=COLORS["muted"],
    )
    fig.update_yaxes(ticksuffix="ms", gridcolor=COLORS["border"])
    fig.update_xaxes(showgrid=False)
    return fig
