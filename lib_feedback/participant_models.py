"""Pydantic models for survey participants and per-team aggregates."""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, Field, field_validator

from lib_feedback.competencies import COMPETENCY_KEYS


DEFAULT_TEAM = "Unassigned"
DEFAULT_DISPLAY_NAME = "Participant"

# Cell value as produced by the CSV parser: a number, or the raw text when the
# cell did not parse as one.
CellValue = float | str
ScoreValue = float | str | None


def resolve_team_name(team: object) -> str:
    """Return the team name, falling back to ``"Unassigned"`` when blank/missing."""
    if team is None:
        return DEFAULT_TEAM
    name = str(team).strip()
    return name or DEFAULT_TEAM


# Plain ASCII decimal/exponent notation only; float() alone would also take
# "3_2", "inf", "nan" and non-ASCII digits.
_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_number(text: str) -> float | None:
    """Return the finite number *text* spells, or ``None`` when it is not one."""
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    num = float(text)
    return num if math.isfinite(num) else None


def coerce_score(value: object) -> float:
    """Coerce a raw cell to a number; anything non-numeric counts as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        num = parse_number(value)
        return num if num is not None else 0.0
    if isinstance(value, (int, float)):
        num = float(value)
        return num if math.isfinite(num) else 0.0
    return 0.0


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class Participant(BaseModel):
    """One survey respondent.

    Competency and satisfaction fields keep whatever the parser produced: a
    float, the raw string when the cell was not numeric, or ``None`` when the
    column was absent. Use :meth:`score` for arithmetic.
    """

    id: int = Field(..., ge=0)
    name: str = ""
    team: str = DEFAULT_TEAM

    conflict_resolution: ScoreValue = None
    collaborative_problem_solving: ScoreValue = None
    communication: ScoreValue = None
    goal_setting: ScoreValue = None
    planning_coordination: ScoreValue = None
    satisfaction: ScoreValue = None

    # Derived, attached by calculate_team_stats()
    interpersonal_score: float | None = None
    self_management_score: float | None = None
    overall_score: float | None = None

    # Unrecognised columns, passed through untouched
    extra_fields: dict[str, CellValue] = Field(default_factory=dict)

    @field_validator("team", mode="before")
    @classmethod
    def default_team(cls, v: object) -> str:
        return resolve_team_name(v)

    @field_validator("name", mode="before")
    @classmethod
    def name_as_text(cls, v: object) -> str:
        return "" if v is None else str(v)

    @property
    def display_name(self) -> str:
        return self.name.strip() or DEFAULT_DISPLAY_NAME

    def score(self, key: str) -> float:
        """Numeric value of a known score field (0 when missing or non-numeric)."""
        return coerce_score(getattr(self, key, None))

    def competency_scores(self) -> dict[str, float]:
        return {k: self.score(k) for k in COMPETENCY_KEYS}


class TeamAggregate(BaseModel):
    """Statistics for one team.

    ``members`` holds the same Participant objects as the dataset list.
    """

    team: str
    members: list[Participant] = Field(default_factory=list)
    competency_totals: dict[str, float] = Field(
        default_factory=lambda: {k: 0.0 for k in COMPETENCY_KEYS}
    )
    averages: dict[str, float] = Field(default_factory=dict)
    interpersonal_avg: float = 0.0
    self_management_avg: float = 0.0
    team_mean_overall: float = 0.0
    agreement_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    is_high_agreement: bool = False

    @property
    def count(self) -> int:
        return len(self.members)
