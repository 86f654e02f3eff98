from dataclasses import dataclass, field
from typing import List, Optional, Dict, Tuple

@dataclass(frozen=True)
class Subject:
    id: str
    label: str

# Fixed UTBK components, in form order
SUBJECTS: Tuple[Subject, ...] = (
    Subject("PU", "Penalaran Umum"),
    Subject("PPU", "Pengetahuan dan Pemahaman Umum"),
    Subject("PM", "Penalaran Matematika"),
    Subject("PBM", "Pemahaman Bacaan dan Menulis"),
    Subject("LITERASI_INDO", "Literasi dalam Bahasa Indonesia"),
    Subject("LITERASI_INGGRIS", "Literasi dalam Bahasa Inggris"),
    Subject("PK", "Pengetahuan Kuantitatif"),
)

@dataclass(frozen=True)
class ThresholdRecord:
    university: str
    major: str
    min_score: float

@dataclass
class RuleResult:
    passed: bool
    diff: float
    explanation: str

@dataclass
class Match:
    university: str
    major: str
    min_score: float
    diff: float

@dataclass
class EvaluationResult:
    average: float
    matches: List[Match] = field(default_factory=list)
    scores: Dict[str, Optional[int]] = field(default_factory=dict)
    warning: Optional[str] = None
