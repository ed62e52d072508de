"""Tests for lib_feedback/researcher_config.py."""

import pytest

from lib_feedback.researcher_config import (
    ENV_PI_EMAIL,
    ENV_PI_NAME,
    ENV_RESEARCHER_EMAIL,
    ENV_RESEARCHER_NAME,
    ResearcherConfig,
    load_researcher_config,
)


@pytest.fixture
def clean_env(monkeypatch):
    for var in (ENV_RESEARCHER_NAME, ENV_RESEARCHER_EMAIL, ENV_PI_NAME, ENV_PI_EMAIL):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestContactLines:
    def test_empty(self):
        config = ResearcherConfig()
        assert config.contact_lines() == []
        assert not config.has_contact

    def test_name_and_email(self):
        config = ResearcherConfig(researcher_name="Ana", researcher_email="ana@example.edu")
        assert config.contact_lines() == ["Researcher: Ana — ana@example.edu"]

    def test_email_without_name_ignored(self):
        config = ResearcherConfig(pi_email="pi@example.edu")
        assert config.contact_lines() == []

    def test_both_roles(self):
        config = ResearcherConfig(researcher_name="Ana", pi_name="Ben", pi_email="ben@example.edu")
        assert config.contact_lines() == [
            "Researcher: Ana",
            "Principal Investigator: Ben — ben@example.edu",
        ]


class TestLoadResearcherConfig:
    def test_unset_env(self, clean_env):
        config = load_researcher_config()
        assert config == ResearcherConfig()

    def test_from_env(self, clean_env):
        clean_env.setenv(ENV_RESEARCHER_NAME, " Ana ")
        clean_env.setenv(ENV_RESEARCHER_EMAIL, "ana@example.edu")
        clean_env.setenv(ENV_PI_NAME, "Ben")
        config = load_researcher_config()
        assert config.researcher_name == "Ana"
        assert config.researcher_email == "ana@example.edu"
        assert config.pi_name == "Ben"
        assert config.pi_email == ""
        assert config.has_contact
