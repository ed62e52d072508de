"""Researcher contact configuration shown on every feedback profile.

Defaults come from environment variables (load a ``.env`` with python-dotenv
before calling :func:`load_researcher_config`); the settings form edits the
session's copy. Nothing is written back to disk.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)

ENV_RESEARCHER_NAME = "FEEDBACK_RESEARCHER_NAME"
ENV_RESEARCHER_EMAIL = "FEEDBACK_RESEARCHER_EMAIL"
ENV_PI_NAME = "FEEDBACK_PI_NAME"
ENV_PI_EMAIL = "FEEDBACK_PI_EMAIL"


class ResearcherConfig(BaseModel):
    """Study contact details."""

    researcher_name: str = Field(default="", max_length=100)
    researcher_email: str = Field(default="", max_length=200)
    pi_name: str = Field(default="", max_length=100)
    pi_email: str = Field(default="", max_length=200)

    @property
    def has_contact(self) -> bool:
        return bool(self.researcher_name or self.pi_name)

    def contact_lines(self) -> list[str]:
        """Human-readable contact lines; a line only appears when its name is set."""
        lines: list[str] = []
        if self.researcher_name:
            lines.append(_contact_line("Researcher", self.researcher_name, self.researcher_email))
        if self.pi_name:
            lines.append(_contact_line("Principal Investigator", self.pi_name, self.pi_email))
        return lines


def _contact_line(role: str, name: str, email: str) -> str:
    return f"{role}: {name} — {email}" if email else f"{role}: {name}"


def load_researcher_config() -> ResearcherConfig:
    """Build a ResearcherConfig from ``FEEDBACK_*`` environment variables.

    Missing variables leave the corresponding field empty.
    """
    config = ResearcherConfig(
        researcher_name=os.getenv(ENV_RESEARCHER_NAME, "").strip(),
        researcher_email=os.getenv(ENV_RESEARCHER_EMAIL, "").strip(),
        pi_name=os.getenv(ENV_PI_NAME, "").strip(),
        pi_email=os.getenv(ENV_PI_EMAIL, "").strip(),
    )
    if not config.has_contact:
        logger.info("No researcher contact configured (set %s or %s)", ENV_RESEARCHER_NAME, ENV_PI_NAME)
    return config
