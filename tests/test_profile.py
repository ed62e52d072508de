"""Tests for lib_feedback/engine/profile.py."""

import pytest

from lib_feedback.engine.profile import (
    DISCLAIMER_TEXT,
    DIVERSE_LABEL,
    HIGH_AGREEMENT_LABEL,
    build_competency_comparison,
    build_participant_profile,
    satisfaction_percent,
)
from lib_feedback.engine.team_stats import calculate_team_stats
from lib_feedback.participant_models import Participant
from lib_feedback.researcher_config import ResearcherConfig
from lib_feedback.sample_data import create_sample_participants


@pytest.fixture
def sample():
    participants = create_sample_participants()
    return participants, calculate_team_stats(participants)


class TestCompetencyComparison:
    def test_rows_per_competency(self, sample):
        participants, teams = sample
        rows = build_competency_comparison(participants[0], teams["Sample Team A"])
        assert [r.short for r in rows] == ["CR", "CPS", "COM", "GSPM", "PTC"]
        assert rows[0].label == "Conflict Resolution"
        assert rows[0].participant_value == 3.4
        assert rows[0].team_average == pytest.approx((3.4 + 3.2 + 3.0 + 3.3) / 4)

    def test_missing_team_gives_zero_averages(self):
        rows = build_competency_comparison(Participant(id=0, communication=3.0), None)
        assert all(r.team_average == 0.0 for r in rows)
        assert rows[2].participant_value == 3.0


class TestParticipantProfile:
    def test_high_agreement_label(self, sample):
        participants, teams = sample
        profile = build_participant_profile(participants[0], teams)
        assert profile.display_name == "John Q. Sample"
        assert profile.team == "Sample Team A"
        assert profile.is_high_agreement is True
        assert profile.team_label == HIGH_AGREEMENT_LABEL

    def test_diverse_label(self, sample):
        participants, teams = sample
        profile = build_participant_profile(participants[8], teams)
        assert profile.is_high_agreement is False
        assert profile.team_label == DIVERSE_LABEL

    def test_factor_summaries(self, sample):
        participants, teams = sample
        profile = build_participant_profile(participants[0], teams)
        interpersonal, self_mgmt = profile.factors
        assert interpersonal.components == "CR + CPS + COM"
        assert self_mgmt.components == "GSPM + PTC"
        assert interpersonal.participant_score == pytest.approx(participants[0].interpersonal_score)
        assert interpersonal.team_score == pytest.approx(teams["Sample Team A"].interpersonal_avg)
        assert self_mgmt.team_score == pytest.approx(teams["Sample Team A"].self_management_avg)

    def test_satisfaction(self, sample):
        participants, teams = sample
        profile = build_participant_profile(participants[0], teams)
        assert profile.satisfaction == 4.2
        assert profile.satisfaction_percent == pytest.approx(84.0)

    def test_missing_satisfaction_is_zero(self):
        p = Participant(id=0)
        profile = build_participant_profile(p, calculate_team_stats([p]))
        assert profile.satisfaction == 0.0
        assert profile.satisfaction_percent == 0.0

    def test_without_team_stats(self):
        p = Participant(id=0, name="", conflict_resolution=3.0, collaborative_problem_solving=3.0,
                        communication=3.0, goal_setting=2.0, planning_coordination=2.0)
        profile = build_participant_profile(p, {})
        assert profile.display_name == "Participant"
        assert profile.team_label == DIVERSE_LABEL
        assert profile.factors[0].participant_score == pytest.approx(3.0)
        assert profile.factors[1].participant_score == pytest.approx(2.0)
        assert profile.factors[0].team_score == 0.0

    def test_contact_lines_from_config(self, sample):
        participants, teams = sample
        config = ResearcherConfig(researcher_name="Dr. R", researcher_email="r@example.edu", pi_name="Dr. P")
        profile = build_participant_profile(participants[0], teams, config)
        assert profile.contact_lines == [
            "Researcher: Dr. R — r@example.edu",
            "Principal Investigator: Dr. P",
        ]

    def test_no_config_no_contact(self, sample):
        participants, teams = sample
        profile = build_participant_profile(participants[0], teams)
        assert profile.contact_lines == []
        assert profile.disclaimer == DISCLAIMER_TEXT


class TestSatisfactionPercent:
    def test_scale(self):
        assert satisfaction_percent(2.5) == pytest.approx(50.0)

    def test_clamped(self):
        assert satisfaction_percent(7.0) == 100.0
        assert satisfaction_percent(-1.0) == 0.0
