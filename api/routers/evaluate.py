"""
Router: POST /evaluate
Liczy wyrażenie; błędy ewaluacji obsługuje globalny handler (422).
"""
from fastapi import APIRouter, Depends

from adapters.evaluator.staged_evaluator import StagedEvaluator
from api.dependencies import get_evaluator
from api.schemas import ErrorResponse, EvaluateRequest, EvaluateResponse

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post(
    "",
    response_model=EvaluateResponse,
    responses={422: {"model": ErrorResponse}},
)
def evaluate(
    body: EvaluateRequest,
    evaluator: StagedEvaluator = Depends(get_evaluator),
) -> EvaluateResponse:
    result = evaluator.evaluate(body.expression)
    return EvaluateResponse(
        expression=result.expression,
        result=result.rendered,
        is_nan=result.is_nan,
        steps=result.steps,
    )
