import logging
from typing import Any, Dict, List, Literal, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse, JSONResponse
from pydantic import BaseModel, Field

from backend.core.config import get_settings
from backend.core.engine import ScoreEvaluator, format_difference
from backend.core.errors import ThresholdLoadError, IncompleteInput
from backend.core.models import SUBJECTS, EvaluationResult
from backend.core.repositories import (
    ThresholdRepository,
    JsonThresholdRepository,
    CachedThresholdRepository,
)

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

evaluator = ScoreEvaluator()

# One cached repository per data file, only used when CACHE_THRESHOLDS is on
_cached_repos: Dict[str, CachedThresholdRepository] = {}


def threshold_repository() -> ThresholdRepository:
    cfg = get_settings()
    if not cfg.CACHE_THRESHOLDS:
        return JsonThresholdRepository(cfg.DATA_FILE)
    if cfg.DATA_FILE not in _cached_repos:
        _cached_repos[cfg.DATA_FILE] = CachedThresholdRepository(JsonThresholdRepository(cfg.DATA_FILE))
    return _cached_repos[cfg.DATA_FILE]


app = FastAPI(title="UTBK Simulator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root_redirect():
    return RedirectResponse(url="/docs")


# --------- Request / response models ----------
class EvaluateRequest(BaseModel):
    scores: Dict[str, Any] = Field(default_factory=dict)
    action: Literal["calculate", "reset"] = "calculate"


class MatchOut(BaseModel):
    university: str
    major: str
    min_score: float
    diff: float
    diff_label: str


class EvaluateResponse(BaseModel):
    scores: Dict[str, Optional[int]]
    average: Optional[float] = None
    matches: List[MatchOut] = Field(default_factory=list)
    message: Optional[str] = None


def _empty_scores() -> Dict[str, Optional[int]]:
    return {s.id: None for s in SUBJECTS}


def _to_response(result: EvaluationResult, message: Optional[str]) -> EvaluateResponse:
    return EvaluateResponse(
        scores=result.scores,
        average=result.average,
        matches=[
            MatchOut(
                university=m.university,
                major=m.major,
                min_score=m.min_score,
                diff=m.diff,
                diff_label=format_difference(m.diff),
            )
            for m in result.matches
        ],
        message=message,
    )


# --------- Endpoints ----------
@app.get("/subjects")
def subjects() -> List[Dict[str, str]]:
    return [{"id": s.id, "label": s.label} for s in SUBJECTS]


@app.get("/thresholds")
def thresholds() -> List[Dict[str, Any]]:
    try:
        records = threshold_repository().list_thresholds()
    except ThresholdLoadError as e:
        logger.warning("Threshold data unavailable: %s", e.message)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    return [
        {"university": r.university, "major": r.major, "min_score": r.min_score}
        for r in records
    ]


@app.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
    # reset: back to the unevaluated view, nothing is read or computed
    if req.action == "reset":
        return EvaluateResponse(scores=_empty_scores())

    try:
        message: Optional[str] = None
        try:
            records = threshold_repository().list_thresholds()
        except ThresholdLoadError as e:
            logger.warning("Threshold data unavailable: %s", e.message)
            message = e.message
            records = []

        try:
            result = evaluator.evaluate(req.scores, records)
        except IncompleteInput as e:
            return EvaluateResponse(
                scores=evaluator.normalize_scores(req.scores),
                message=message or e.message,
            )

        # first message wins; a load error outranks the empty-data warning
        return _to_response(result, message or result.warning)

    except Exception as e:
        logger.exception("Evaluation failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Evaluation failed", "details": str(e)},
        )


if __name__ == "__main__":
    uvicorn.run("backend.app:app", host="0.0.0.0", port=8000, reload=True)
