from decimal import Decimal, ROUND_HALF_UP
from backend.core.models import ThresholdRecord, RuleResult


def round_half_up(value: float, places: int = 2) -> float:
    # Round on the decimal repr, so 12.345 -> 12.35 rather than float's 12.34
    quant = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quant, rounding=ROUND_HALF_UP))


class MinScoreRule:
    def __init__(self, record: ThresholdRecord):
        self.record = record

    def evaluate(self, average: float) -> RuleResult:
        diff = round_half_up(average - self.record.min_score, 2)
        passed = average - self.record.min_score >= 0
        return RuleResult(
            passed,
            diff,
            f"avg={average:.2f} {'≥' if passed else '<'} min_score={self.record.min_score}",
        )
