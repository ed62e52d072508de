"""plotly figure builders for the Streamlit UI."""

from __future__ import annotations

import plotly.graph_objects as go  # type: ignore[import-untyped]

from lib_feedback.competencies import COMPETENCY_SCALE_MAX
from lib_feedback.engine.profile import ParticipantProfile
from lib_feedback.engine.team_stats import AGREEMENT_TOLERANCE, HIGH_AGREEMENT_THRESHOLD
from lib_feedback.participant_models import TeamAggregate


_YOU_COLOR = "#4f46e5"
_TEAM_COLOR = "#94a3b8"
_HIGH_COLOR = "#10b981"
_DIVERSE_COLOR = "#f59e0b"


def build_radar_figure(profile: ParticipantProfile, height: int = 360) -> go.Figure:
    """Radar chart of the participant's competencies against the team average."""
    labels = [c.short for c in profile.competencies]
    you = [c.participant_value for c in profile.competencies]
    team = [c.team_average for c in profile.competencies]

    fig = go.Figure()
    # close the polygon by repeating the first point
    fig.add_trace(go.Scatterpolar(
        r=[*team, team[0]],
        theta=[*labels, labels[0]],
        fill="toself",
        name="Team Average",
        line={"color": _TEAM_COLOR},
        opacity=0.5,
    ))
    fig.add_trace(go.Scatterpolar(
        r=[*you, you[0]],
        theta=[*labels, labels[0]],
        fill="toself",
        name="You",
        line={"color": _YOU_COLOR},
        opacity=0.6,
    ))
    fig.update_layout(
        polar={"radialaxis": {"visible": True, "range": [0, COMPETENCY_SCALE_MAX]}},
        title="Your Teamwork Competency Profile",
        showlegend=True,
        height=height,
    )
    return fig


def build_agreement_figure(team_stats: dict[str, TeamAggregate], height: int = 350) -> go.Figure:
    """Bar chart of agreement percentage per team, with the high-agreement line."""
    names = list(team_stats)
    values = [t.agreement_percentage for t in team_stats.values()]

    fig = go.Figure(go.Bar(
        x=names,
        y=values,
        text=[f"{v:.0f}%" for v in values],
        textposition="outside",
        marker_color=[
            _HIGH_COLOR if t.is_high_agreement else _DIVERSE_COLOR
            for t in team_stats.values()
        ],
    ))
    fig.add_hline(
        y=HIGH_AGREEMENT_THRESHOLD,
        line_dash="dash",
        annotation_text=f"High agreement ({HIGH_AGREEMENT_THRESHOLD:.0f}%)",
    )
    fig.update_layout(
        title=f"Members within ±{AGREEMENT_TOLERANCE} of team mean overall",
        yaxis_range=[0, 110],
        height=height,
    )
    return fig
