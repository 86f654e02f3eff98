# backend/core/loaders.py
import json
import logging
import math
import os
from typing import Any, List

from backend.core.errors import SourceNotFound, ReadFailure, ParseFailure
from backend.core.models import ThresholdRecord

logger = logging.getLogger(__name__)


def _read(path: str) -> Any:
    if not os.path.isfile(path):
        raise SourceNotFound(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(path, str(e)) from e
    if not content.strip():
        raise ReadFailure(path)
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseFailure(path, e.msg) from e


def parse_min_score(raw: Any) -> float:
    """
    "SKOR UTBK" comes as text like "(650,50)": drop the parentheses,
    use a period as the decimal separator and parse. Anything unparseable is 0.0.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    text = str(raw).replace("(", "").replace(")", "").replace(",", ".")
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def load_thresholds(source: str) -> List[ThresholdRecord]:
    raw = _read(os.fspath(source))
    if not isinstance(raw, list):
        raise ParseFailure(source, "expected a list of records")

    records: List[ThresholdRecord] = []
    dropped = 0
    for item in raw:
        if not isinstance(item, dict):
            dropped += 1
            continue
        university = item.get("Universitas")
        major = item.get("JURUSAN")
        min_score = parse_min_score(item.get("SKOR UTBK"))

        if not isinstance(university, str) or not university:
            dropped += 1
            continue
        if not isinstance(major, str) or not major:
            dropped += 1
            continue
        if min_score <= 0:
            logger.debug("Dropping %s / %s: invalid score %r", university, major, item.get("SKOR UTBK"))
            dropped += 1
            continue

        records.append(ThresholdRecord(university=university, major=major, min_score=min_score))

    logger.info("Loaded %d threshold records from %s (%d dropped)", len(records), source, dropped)
    return records
