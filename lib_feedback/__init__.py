"""Participant feedback library: CSV ingestion, team statistics and profiles."""

from .csv_parser import parse_csv
from .engine.team_stats import calculate_team_stats
from .participant_models import Participant, TeamAggregate
from .session import FeedbackSession

__all__ = [
    "FeedbackSession",
    "Participant",
    "TeamAggregate",
    "calculate_team_stats",
    "parse_csv",
]
