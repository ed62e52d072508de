"""Teamwork competency catalog.

Defines the 5 measured competencies and the 2 factors that group them
(Interpersonal: CR, CPS, COM / Self-Management: GSPM, PTC).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Factor enum
# ---------------------------------------------------------------------------
Factor = Literal["Interpersonal", "Self-Management"]


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class Competency(BaseModel):
    """A single measured teamwork competency."""

    key: str = Field(..., min_length=1, max_length=60)
    name: str = Field(..., min_length=1, max_length=60)
    short: str = Field(..., min_length=1, max_length=6)
    description: str = Field(..., min_length=5)
    factor: Factor


# ---------------------------------------------------------------------------
# Pre-defined 5 competencies (canonical order)
# ---------------------------------------------------------------------------
COMPETENCIES: dict[str, Competency] = {
    "conflict_resolution": Competency(
        key="conflict_resolution",
        name="Conflict Resolution",
        short="CR",
        description=(
            "The ability to recognize different types and sources of conflict, encourage "
            "constructive disagreement while discouraging destructive conflict, and integrate "
            "diverse viewpoints during negotiation processes."
        ),
        factor="Interpersonal",
    ),
    "collaborative_problem_solving": Competency(
        key="collaborative_problem_solving",
        name="Collaborative Problem Solving",
        short="CPS",
        description=(
            "Involves identifying when group approaches are needed, participating appropriately "
            "in collective problem solving activities, and recognizing obstacles to effective "
            "collaboration."
        ),
        factor="Interpersonal",
    ),
    "communication": Competency(
        key="communication",
        name="Communication",
        short="COM",
        description=(
            "Includes listening actively, providing clear and timely information, and adapting "
            "communication style to different audiences and contexts."
        ),
        factor="Interpersonal",
    ),
    "goal_setting": Competency(
        key="goal_setting",
        name="Goal Setting and Performance Management",
        short="GSPM",
        description=(
            "Involves establishing specific and challenging team objectives, monitoring progress "
            "toward goals, and providing constructive feedback on team activities."
        ),
        factor="Self-Management",
    ),
    "planning_coordination": Competency(
        key="planning_coordination",
        name="Planning and Task Coordination",
        short="PTC",
        description=(
            "Requires coordinating activities and information between team members, establishing "
            "appropriate role assignments, and managing workload distribution effectively."
        ),
        factor="Self-Management",
    ),
}

COMPETENCY_KEYS: tuple[str, ...] = tuple(COMPETENCIES)
INTERPERSONAL_KEYS: tuple[str, ...] = tuple(
    k for k, c in COMPETENCIES.items() if c.factor == "Interpersonal"
)
SELF_MANAGEMENT_KEYS: tuple[str, ...] = tuple(
    k for k, c in COMPETENCIES.items() if c.factor == "Self-Management"
)

SATISFACTION_KEY = "satisfaction"
SATISFACTION_MAX = 5.0
COMPETENCY_SCALE_MAX = 4.0


def factor_keys(factor: Factor) -> tuple[str, ...]:
    """Return the competency keys belonging to *factor*, in canonical order."""
    return INTERPERSONAL_KEYS if factor == "Interpersonal" else SELF_MANAGEMENT_KEYS
