"""Feedback profile projection: what a participant's card shows.

Pure projection over the parsed participant and its team aggregate; no new
statistics are computed here beyond per-participant fallbacks.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from lib_feedback.competencies import (
    COMPETENCIES,
    SATISFACTION_KEY,
    SATISFACTION_MAX,
    Factor,
    factor_keys,
)
from lib_feedback.engine.team_stats import calc_interpersonal, calc_self_management
from lib_feedback.participant_models import (
    Participant,
    TeamAggregate,
    resolve_team_name,
)
from lib_feedback.researcher_config import ResearcherConfig


HIGH_AGREEMENT_LABEL = "High Agreement Team"
DIVERSE_LABEL = "Diverse Competency Team"

DISCLAIMER_TEXT = (
    "This profile is provided as part of a research study conducted through the University "
    "of Nevada, Las Vegas. The information presented reflects your individual responses and "
    "your team’s aggregated data from the Teamwork Competency Test and post-session "
    "satisfaction survey. Scores represent self-reported behavioral tendencies and are not "
    "evaluative assessments of job performance or professional capability."
)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class CompetencyComparison(BaseModel):
    """One competency: participant value vs team average."""

    key: str
    short: str
    label: str
    description: str = ""
    participant_value: float
    team_average: float


class FactorSummary(BaseModel):
    """Factor-level composite, participant vs team."""

    factor: Literal["Interpersonal", "Self-Management"]
    components: str  # e.g. "CR + CPS + COM"
    participant_score: float
    team_score: float


class ParticipantProfile(BaseModel):
    """Everything needed to render one feedback card."""

    participant_id: int
    display_name: str
    team: str
    is_high_agreement: bool
    team_label: str
    competencies: list[CompetencyComparison]
    factors: list[FactorSummary]
    satisfaction: float
    satisfaction_percent: float = Field(ge=0.0, le=100.0)
    contact_lines: list[str] = Field(default_factory=list)
    disclaimer: str = DISCLAIMER_TEXT


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build_competency_comparison(
    participant: Participant,
    team: TeamAggregate | None,
) -> list[CompetencyComparison]:
    """Per-competency (short, label, you, team average) rows for charting.

    A missing team (stats not computed) yields zero team averages.
    """
    averages = team.averages if team is not None else {}
    return [
        CompetencyComparison(
            key=key,
            short=comp.short,
            label=comp.name,
            description=comp.description,
            participant_value=participant.score(key),
            team_average=averages.get(key, 0.0),
        )
        for key, comp in COMPETENCIES.items()
    ]


def build_participant_profile(
    participant: Participant,
    team_stats: dict[str, TeamAggregate],
    config: ResearcherConfig | None = None,
) -> ParticipantProfile:
    """Project a participant and their team's statistics into a profile."""
    team_name = resolve_team_name(participant.team)
    team = team_stats.get(team_name)
    high = team.is_high_agreement if team is not None else False

    interpersonal = (
        participant.interpersonal_score
        if participant.interpersonal_score is not None
        else calc_interpersonal(participant)
    )
    self_mgmt = (
        participant.self_management_score
        if participant.self_management_score is not None
        else calc_self_management(participant)
    )

    factors = [
        FactorSummary(
            factor="Interpersonal",
            components=_components("Interpersonal"),
            participant_score=interpersonal,
            team_score=team.interpersonal_avg if team is not None else 0.0,
        ),
        FactorSummary(
            factor="Self-Management",
            components=_components("Self-Management"),
            participant_score=self_mgmt,
            team_score=team.self_management_avg if team is not None else 0.0,
        ),
    ]

    satisfaction = participant.score(SATISFACTION_KEY)

    return ParticipantProfile(
        participant_id=participant.id,
        display_name=participant.display_name,
        team=team_name,
        is_high_agreement=high,
        team_label=HIGH_AGREEMENT_LABEL if high else DIVERSE_LABEL,
        competencies=build_competency_comparison(participant, team),
        factors=factors,
        satisfaction=satisfaction,
        satisfaction_percent=satisfaction_percent(satisfaction),
        contact_lines=config.contact_lines() if config is not None else [],
    )


def satisfaction_percent(value: float) -> float:
    """Share of the 0–5 satisfaction scale, clamped to [0, 100] for the bar."""
    return max(0.0, min(100.0, value / SATISFACTION_MAX * 100))


def _components(factor: Factor) -> str:
    return " + ".join(COMPETENCIES[k].short for k in factor_keys(factor))
