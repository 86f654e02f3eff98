import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from backend.core.errors import IncompleteInput, EMPTY_THRESHOLD_DATA
from backend.core.models import SUBJECTS, Subject, ThresholdRecord, Match, EvaluationResult
from backend.core.rules import MinScoreRule, round_half_up

SCORE_MIN = 0
SCORE_MAX = 1000
MAX_MATCHES = 10

_NON_NUMERIC_WORDS = {"inf", "infinity", "nan"}

logger = logging.getLogger(__name__)


def parse_score(raw: Any) -> Optional[int]:
    """
    Returns the clamped integer score, or None when the value is not numeric.
    None means "not submitted" and must never be counted as a zero.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        # ints may be too large for float()
        return max(SCORE_MIN, min(SCORE_MAX, raw))
    if isinstance(raw, float):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not text or "_" in text or text.lstrip("+-").lower() in _NON_NUMERIC_WORDS:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(value):
        return None
    # clamp first, then truncate; overflowing literals like "1e400" clamp to the bounds
    return int(max(SCORE_MIN, min(SCORE_MAX, value)))


def format_difference(diff: float) -> str:
    amount = Decimal(repr(abs(float(diff)))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "+" if diff >= 0 else "-"
    return f"{sign} {amount:,} Poin"


class ScoreEvaluator:
    def __init__(self, subjects: Sequence[Subject] = SUBJECTS, max_matches: int = MAX_MATCHES):
        self.subjects: Tuple[Subject, ...] = tuple(subjects)
        self.max_matches = max_matches

    def normalize_scores(self, raw_scores: Optional[Mapping[str, Any]]) -> Dict[str, Optional[int]]:
        raw_scores = raw_scores or {}
        return {s.id: parse_score(raw_scores.get(s.id)) for s in self.subjects}

    def evaluate(self, raw_scores: Optional[Mapping[str, Any]],
                 thresholds: Sequence[ThresholdRecord]) -> EvaluationResult:
        scores = self.normalize_scores(raw_scores)
        valid = [v for v in scores.values() if v is not None]
        required = len(self.subjects)
        if len(valid) != required:
            raise IncompleteInput(required)

        average = round_half_up(sum(valid) / required, 2)
        warning = EMPTY_THRESHOLD_DATA if not thresholds else None

        matches: List[Match] = []
        for record in thresholds:
            rr = MinScoreRule(record).evaluate(average)
            logger.debug("%s / %s: %s", record.university, record.major, rr.explanation)
            if rr.passed:
                matches.append(Match(
                    university=record.university,
                    major=record.major,
                    min_score=record.min_score,
                    diff=rr.diff,
                ))

        # sorted() is stable: equal min_score keeps the dataset order
        matches = sorted(matches, key=lambda m: m.min_score, reverse=True)[: self.max_matches]
        return EvaluationResult(average=average, matches=matches, scores=scores, warning=warning)
