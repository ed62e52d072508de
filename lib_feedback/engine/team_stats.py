"""Team aggregation — competency averages, factor scores and agreement.

Grouping keeps the dataset's Participant objects (no copies) and attaches the
derived factor scores to them. Everything else is recomputed from scratch on
each call.
"""

from __future__ import annotations

import logging

from lib_feedback.competencies import (
    COMPETENCY_KEYS,
    INTERPERSONAL_KEYS,
    SELF_MANAGEMENT_KEYS,
)
from lib_feedback.participant_models import Participant, TeamAggregate, resolve_team_name


logger = logging.getLogger(__name__)

AGREEMENT_TOLERANCE = 0.3
HIGH_AGREEMENT_THRESHOLD = 70.0


# ---------------------------------------------------------------------------
# Per-participant factor scores
# ---------------------------------------------------------------------------
def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def calc_interpersonal(p: Participant) -> float:
    """Mean of the participant's CR, CPS and COM scores."""
    return _mean([p.score(k) for k in INTERPERSONAL_KEYS])


def calc_self_management(p: Participant) -> float:
    """Mean of the participant's GSPM and PTC scores."""
    return _mean([p.score(k) for k in SELF_MANAGEMENT_KEYS])


def score_participant(p: Participant) -> None:
    """Attach interpersonal, self-management and overall scores to *p*."""
    p.interpersonal_score = calc_interpersonal(p)
    p.self_management_score = calc_self_management(p)
    p.overall_score = (p.interpersonal_score + p.self_management_score) / 2


def is_in_agreement(overall: float, team_mean: float) -> bool:
    return abs(overall - team_mean) <= AGREEMENT_TOLERANCE


# ---------------------------------------------------------------------------
# Team scoring
# ---------------------------------------------------------------------------
def _score_team(t: TeamAggregate) -> None:
    t.averages = {c: t.competency_totals[c] / t.count for c in COMPETENCY_KEYS}
    t.interpersonal_avg = _mean([t.averages[k] for k in INTERPERSONAL_KEYS])
    t.self_management_avg = _mean([t.averages[k] for k in SELF_MANAGEMENT_KEYS])

    for member in t.members:
        score_participant(member)

    overall = [m.overall_score or 0.0 for m in t.members]
    t.team_mean_overall = _mean(overall)

    agreeing = sum(1 for o in overall if is_in_agreement(o, t.team_mean_overall))
    t.agreement_percentage = agreeing * 100 / t.count
    t.is_high_agreement = t.agreement_percentage >= HIGH_AGREEMENT_THRESHOLD


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_team_stats(participants: list[Participant]) -> dict[str, TeamAggregate]:
    """Group *participants* by team and compute every team statistic.

    Side effect: each participant's derived scores are (re)computed.
    """
    teams: dict[str, TeamAggregate] = {}

    for p in participants:
        name = resolve_team_name(p.team)
        team = teams.get(name)
        if team is None:
            team = TeamAggregate(team=name)
            teams[name] = team
        team.members.append(p)
        for c, value in p.competency_scores().items():
            team.competency_totals[c] += value

    for team in teams.values():
        _score_team(team)

    logger.info(
        "Aggregated %d participant(s) into %d team(s) (%d high agreement)",
        len(participants),
        len(teams),
        sum(1 for t in teams.values() if t.is_high_agreement),
    )
    return teams
