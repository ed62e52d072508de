"""Built-in sample dataset: 12 fictitious participants across 3 teams.

Names are obviously made up so demo profiles can be shared without being
mistaken for real participants.
"""

from __future__ import annotations

from lib_feedback.participant_models import Participant


# ---------------------------------------------------------------------------
# 12 sample participants
# ---------------------------------------------------------------------------
_SAMPLE_ROWS: list[dict[str, str | int | float]] = [
    # Sample Team A: scores clustered tightly
    {"id": 0, "name": "John Q. Sample", "team": "Sample Team A", "conflict_resolution": 3.4, "collaborative_problem_solving": 3.1, "communication": 3.6, "goal_setting": 2.9, "planning_coordination": 3.2, "satisfaction": 4.2},
    {"id": 1, "name": "Jane A. Placeholder", "team": "Sample Team A", "conflict_resolution": 3.2, "collaborative_problem_solving": 3.3, "communication": 3.1, "goal_setting": 3.0, "planning_coordination": 3.1, "satisfaction": 4.5},
    {"id": 2, "name": "Fakename McNotreal", "team": "Sample Team A", "conflict_resolution": 3.0, "collaborative_problem_solving": 2.9, "communication": 3.4, "goal_setting": 3.2, "planning_coordination": 2.8, "satisfaction": 3.8},
    {"id": 3, "name": "Demo P. Participant", "team": "Sample Team A", "conflict_resolution": 3.3, "collaborative_problem_solving": 3.2, "communication": 3.2, "goal_setting": 3.1, "planning_coordination": 3.0, "satisfaction": 4.0},
    # Sample Team B: individual competencies spread widely
    {"id": 4, "name": "Testy McTestface", "team": "Sample Team B", "conflict_resolution": 2.4, "collaborative_problem_solving": 3.5, "communication": 2.8, "goal_setting": 3.6, "planning_coordination": 3.4, "satisfaction": 3.5},
    {"id": 5, "name": "Nora T. Real", "team": "Sample Team B", "conflict_resolution": 3.8, "collaborative_problem_solving": 2.6, "communication": 3.2, "goal_setting": 2.4, "planning_coordination": 2.9, "satisfaction": 3.8},
    {"id": 6, "name": "Definitely Notaperson", "team": "Sample Team B", "conflict_resolution": 2.9, "collaborative_problem_solving": 3.1, "communication": 2.5, "goal_setting": 3.0, "planning_coordination": 3.7, "satisfaction": 3.2},
    {"id": 7, "name": "Example B. Data", "team": "Sample Team B", "conflict_resolution": 3.1, "collaborative_problem_solving": 2.8, "communication": 3.6, "goal_setting": 2.7, "planning_coordination": 2.6, "satisfaction": 2.8},
    # Sample Team C: mixed spread of overall scores
    {"id": 8, "name": "Placeholder Person", "team": "Sample Team C", "conflict_resolution": 3.9, "collaborative_problem_solving": 3.7, "communication": 3.8, "goal_setting": 3.6, "planning_coordination": 3.5, "satisfaction": 3.5},
    {"id": 9, "name": "Anon Y. Mous", "team": "Sample Team C", "conflict_resolution": 2.1, "collaborative_problem_solving": 2.3, "communication": 2.0, "goal_setting": 2.2, "planning_coordination": 2.4, "satisfaction": 2.2},
    {"id": 10, "name": "Ima G. Nary", "team": "Sample Team C", "conflict_resolution": 3.2, "collaborative_problem_solving": 2.8, "communication": 3.0, "goal_setting": 2.9, "planning_coordination": 3.1, "satisfaction": 2.8},
    {"id": 11, "name": "Fakey S. Fakerson", "team": "Sample Team C", "conflict_resolution": 1.8, "collaborative_problem_solving": 2.0, "communication": 2.2, "goal_setting": 1.9, "planning_coordination": 2.1, "satisfaction": 1.9},
]

SAMPLE_TEAM_NAMES: tuple[str, ...] = ("Sample Team A", "Sample Team B", "Sample Team C")

CSV_TEMPLATE = (
    "name,team,conflict_resolution,collaborative_problem_solving,communication,"
    "goal_setting,planning_coordination,satisfaction\n"
    "\n"
    "Alice,Team A,3.2,2.8,3.5,3.1,2.9,4.5\n"
    "Bob,Team A,2.9,3.1,3.0,3.4,3.2,3.8"
)


def create_sample_participants() -> list[Participant]:
    """Return a fresh copy of the 12 sample participants.

    Each call builds new objects, so aggregating one copy never touches
    another.
    """
    return [Participant(**row) for row in _SAMPLE_ROWS]  # type: ignore[arg-type]
