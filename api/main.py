"""
api/main.py — punkt wejścia FastAPI.

Adaptery są bezstanowe — tworzone raz w create_app() i trzymane w app.state:
  - FractionNumber (limit wykładnika z config.max_exponent)
  - ConstantResolver (tabela stałych: pi)
  - ASTEvaluator
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.identifier_resolver.constant_resolver import ConstantResolver
from adapters.number_type.fraction_number import FractionNumber
from api.dependencies import get_resolver
from api.routers import evaluate
from api.schemas import EvaluationErrorResponse, HealthResponse
from config import Settings
from contracts import EvaluationError

logger = logging.getLogger("exact_calc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "ExactCalc API ready (max_exponent=%d, constants=%s).",
        app.state.settings.max_exponent,
        ", ".join(app.state.resolver.names()),
    )
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    number = FractionNumber(max_exponent=settings.max_exponent)
    app.state.resolver = ConstantResolver(number)
    app.state.evaluator = ASTEvaluator(number=number, resolver=app.state.resolver)

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(resolver=Depends(get_resolver)):
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            constants=resolver.names(),
        )

    # Globalny handler błędów ewaluacji
    @app.exception_handler(EvaluationError)
    async def evaluation_error_handler(request: Request, exc: EvaluationError):
        return JSONResponse(
            status_code=422,
            content=EvaluationErrorResponse.from_error(exc).model_dump(),
        )

    return app


app = create_app()
