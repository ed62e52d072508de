"""Per-user session state for the feedback generator UI.

One FeedbackSession per loaded dataset. Loading a new file or the sample data
builds a new session; nothing carries over except the researcher config.
Streamlit keeps the current session in ``st.session_state``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from lib_feedback.csv_parser import parse_csv
from lib_feedback.engine.profile import ParticipantProfile, build_participant_profile
from lib_feedback.engine.team_stats import calculate_team_stats
from lib_feedback.participant_models import Participant, TeamAggregate
from lib_feedback.researcher_config import ResearcherConfig
from lib_feedback.sample_data import create_sample_participants


logger = logging.getLogger(__name__)

# Delay between rendering every card and opening the print dialog, so charts
# have settled.
PRINT_SETTLE_DELAY_MS = 600


@dataclass
class FeedbackSession:
    participants: list[Participant] = field(default_factory=list)
    team_stats: dict[str, TeamAggregate] = field(default_factory=dict)
    config: ResearcherConfig = field(default_factory=ResearcherConfig)
    selected_index: int | None = None
    batch_print_mode: bool = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_participants(
        cls,
        participants: list[Participant],
        config: ResearcherConfig | None = None,
    ) -> FeedbackSession:
        team_stats = calculate_team_stats(participants)
        return cls(
            participants=participants,
            team_stats=team_stats,
            config=config if config is not None else ResearcherConfig(),
        )

    @classmethod
    def from_csv(cls, text: str, config: ResearcherConfig | None = None) -> FeedbackSession:
        """Parse *text* and aggregate it into a new session."""
        return cls.from_participants(parse_csv(text), config)

    @classmethod
    def from_sample_data(cls, config: ResearcherConfig | None = None) -> FeedbackSession:
        logger.info("Loading built-in sample data")
        return cls.from_participants(create_sample_participants(), config)

    def reset(self) -> FeedbackSession:
        """Empty session that keeps the researcher config."""
        return FeedbackSession(config=self.config)

    # ------------------------------------------------------------------
    # Selection / printing
    # ------------------------------------------------------------------
    @property
    def has_data(self) -> bool:
        return bool(self.participants)

    @property
    def selected_participant(self) -> Participant | None:
        if self.selected_index is None:
            return None
        if not 0 <= self.selected_index < len(self.participants):
            return None
        return self.participants[self.selected_index]

    def toggle_selection(self, index: int) -> None:
        """Select *index*, or deselect it when it is already selected."""
        self.batch_print_mode = False
        self.selected_index = None if self.selected_index == index else index

    def start_batch_print(self) -> None:
        self.selected_index = None
        self.batch_print_mode = True

    def finish_batch_print(self) -> None:
        self.batch_print_mode = False

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------
    def profile_for(self, participant: Participant) -> ParticipantProfile:
        return build_participant_profile(participant, self.team_stats, self.config)

    def profiles(self) -> list[ParticipantProfile]:
        """Profiles for every participant, in dataset order."""
        return [self.profile_for(p) for p in self.participants]
