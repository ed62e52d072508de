"""Tests for lib_feedback/session.py."""

import pytest

from lib_feedback.researcher_config import ResearcherConfig
from lib_feedback.session import PRINT_SETTLE_DELAY_MS, FeedbackSession


@pytest.fixture
def config():
    return ResearcherConfig(researcher_name="Dr. R")


@pytest.fixture
def sample_session(config):
    return FeedbackSession.from_sample_data(config=config)


class TestConstruction:
    def test_empty_default(self):
        session = FeedbackSession()
        assert not session.has_data
        assert session.team_stats == {}
        assert session.selected_participant is None

    def test_from_csv(self):
        session = FeedbackSession.from_csv("name,team,communication\nA,T,3\nB,U,2")
        assert session.has_data
        assert [p.name for p in session.participants] == ["A", "B"]
        assert set(session.team_stats) == {"T", "U"}
        assert session.participants[0].overall_score is not None

    def test_from_csv_empty(self):
        session = FeedbackSession.from_csv("")
        assert not session.has_data
        assert session.team_stats == {}

    def test_from_sample_data(self, sample_session, config):
        assert len(sample_session.participants) == 12
        assert len(sample_session.team_stats) == 3
        assert sample_session.config == config

    def test_sample_sessions_independent(self):
        a = FeedbackSession.from_sample_data()
        b = FeedbackSession.from_sample_data()
        assert a.participants[0] is not b.participants[0]
        a.participants[0].communication = 1.0
        assert b.participants[0].communication == 3.6

    def test_reset_keeps_config(self, sample_session, config):
        sample_session.toggle_selection(2)
        fresh = sample_session.reset()
        assert not fresh.has_data
        assert fresh.selected_index is None
        assert fresh.config == config


class TestSelection:
    def test_toggle(self, sample_session):
        sample_session.toggle_selection(3)
        assert sample_session.selected_participant is sample_session.participants[3]
        sample_session.toggle_selection(3)
        assert sample_session.selected_participant is None

    def test_switch(self, sample_session):
        sample_session.toggle_selection(1)
        sample_session.toggle_selection(4)
        assert sample_session.selected_index == 4

    def test_out_of_range(self, sample_session):
        sample_session.selected_index = 99
        assert sample_session.selected_participant is None

    def test_selection_leaves_batch_mode(self, sample_session):
        sample_session.start_batch_print()
        sample_session.toggle_selection(0)
        assert sample_session.batch_print_mode is False


class TestBatchPrint:
    def test_start_clears_selection(self, sample_session):
        sample_session.toggle_selection(0)
        sample_session.start_batch_print()
        assert sample_session.batch_print_mode is True
        assert sample_session.selected_index is None

    def test_finish(self, sample_session):
        sample_session.start_batch_print()
        sample_session.finish_batch_print()
        assert sample_session.batch_print_mode is False

    def test_settle_delay(self):
        assert PRINT_SETTLE_DELAY_MS == 600


class TestProfiles:
    def test_profiles_in_order(self, sample_session):
        profiles = sample_session.profiles()
        assert [p.participant_id for p in profiles] == list(range(12))

    def test_profile_uses_config(self, sample_session):
        profile = sample_session.profile_for(sample_session.participants[0])
        assert profile.contact_lines == ["Researcher: Dr. R"]
