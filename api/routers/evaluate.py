"""
Router: POST /evaluate, POST /render
Drzewo przychodzi jako JSON (produkt zewnętrznego parsera).
Błędy ewaluacji obsługuje globalny handler w api/main.py.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator
from api.schemas import EvaluateRequest, EvaluateResponse, RenderRequest, RenderResponse
from contracts import format_rational, render_expr

router = APIRouter(tags=["evaluate"])


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(body: EvaluateRequest, evaluator=Depends(get_evaluator)) -> EvaluateResponse:
    if body.steps:
        result = evaluator.explain(body.expr)
        value, steps = result.value, result.steps
    else:
        value, steps = evaluator.evaluate(body.expr), []
    return EvaluateResponse(
        value=format_rational(value),
        is_integer=value.denominator == 1,
        rendered=render_expr(body.expr),
        steps=steps,
    )


@router.post("/render", response_model=RenderResponse)
def render(body: RenderRequest) -> RenderResponse:
    return RenderResponse(rendered=render_expr(body.expr))
