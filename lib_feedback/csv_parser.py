"""CSV ingestion: raw survey text → ordered list of Participant records.

The format is deliberately naive: one header line, comma-separated values,
no quoting. Parsing never fails; odd rows degrade to missing fields.
"""

from __future__ import annotations

import logging
import re

from lib_feedback.competencies import COMPETENCY_KEYS, SATISFACTION_KEY
from lib_feedback.participant_models import CellValue, Participant, parse_number


logger = logging.getLogger(__name__)

DELIMITER = ","

# Columns mapped onto Participant fields; anything else lands in extra_fields.
TEXT_KEYS: frozenset[str] = frozenset({"name", "team"})
SCORE_KEYS: frozenset[str] = frozenset({*COMPETENCY_KEYS, SATISFACTION_KEY})

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def normalize_header(token: str) -> str:
    """``" Conflict  Resolution "`` → ``"conflict_resolution"``."""
    return _WHITESPACE_RE.sub("_", token.strip().lower())


def coerce_value(value: str) -> CellValue:
    """Return a float when *value* is a plain finite number, else the text itself."""
    num = parse_number(value)
    return value if num is None else num


def _build_participant(idx: int, headers: list[str], values: list[str]) -> Participant:
    fields: dict[str, CellValue] = {}
    extra: dict[str, CellValue] = {}

    for header, value in zip(headers, values):
        if not header or not value:
            continue
        if header in TEXT_KEYS:
            fields[header] = value
        elif header in SCORE_KEYS:
            fields[header] = coerce_value(value)
        else:
            extra[header] = coerce_value(value)

    return Participant(id=idx, extra_fields=extra, **fields)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def parse_csv(text: str) -> list[Participant]:
    """Parse delimited survey text into Participant records.

    Blank lines are skipped and do not consume an id. Rows shorter than the
    header leave the trailing fields unset; values beyond the last header
    have no key and are dropped.
    """
    lines = text.split("\n")
    headers = [normalize_header(h) for h in lines[0].split(DELIMITER)]

    participants: list[Participant] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = [v.strip() for v in line.split(DELIMITER)]
        idx = len(participants)
        if len(values) != len(headers):
            logger.debug(
                "Row %d has %d values for %d headers", idx, len(values), len(headers)
            )
        participants.append(_build_participant(idx, headers, values))

    logger.info("Parsed %d participant(s) from %d header column(s)", len(participants), len(headers))
    return participants


def decode_upload(data: bytes) -> str:
    """Decode an uploaded file's bytes (UTF-8, optional BOM).

    Raises:
        ValueError: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Failed to decode uploaded file: {exc}") from exc
