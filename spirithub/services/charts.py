# spirithub/services/charts.py
"""Grafice Plotly pentru bioritm."""

from datetime import date
from typing import Optional
import logging

import pandas as pd
import plotly.graph_objects as go

from ..config import BIORHYTHM_CYCLES, CYCLE_ORDER, CRITICAL_THRESHOLD

logger = logging.getLogger("spirithub.services.charts")
logger.addHandler(logging.NullHandler())


def biorhythm_figure(series: pd.DataFrame, highlight: Optional[date] = None,
                     height: int = 420) -> go.Figure:
    """
    Linii pentru cele trei cicluri dintr-o serie biorhythm_series(...).
    Banda ±prag critic este umbrită; `highlight` marchează ziua selectată.
    """
    fig = go.Figure()
    band = CRITICAL_THRESHOLD * 100
    fig.add_hrect(y0=-band, y1=band, fillcolor="rgba(148,163,184,0.2)", line_width=0,
                  annotation_text="zonă critică", annotation_position="top left")
    for key in CYCLE_ORDER:
        if key not in series.columns:
            continue
        cfg = BIORHYTHM_CYCLES[key]
        fig.add_trace(go.Scatter(
            x=series["date"], y=series[key], mode="lines", name=cfg["name"],
            line=dict(color=cfg["color"], width=3, shape="spline"),
            hovertemplate="%{x|%d.%m.%Y}: %{y:.0f}%<extra>" + cfg["name"] + "</extra>",
        ))
    if highlight is not None:
        fig.add_vline(x=pd.Timestamp(highlight).to_pydatetime(), line_dash="dash", line_color="#9F2BFF")
    fig.update_layout(
        height=height,
        margin=dict(l=20, r=20, t=30, b=20),
        yaxis=dict(range=[-105, 105], ticksuffix="%", zeroline=True, zerolinecolor="#94a3b8"),
        xaxis=dict(tickformat="%d.%m"),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        hovermode="x unified",
    )
    return fig
