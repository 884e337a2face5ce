"""REST interface exposing the expression engine."""

from __future__ import annotations

import math
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from infix_calc.api.runtime import RuntimeStats
from infix_calc.engine import CalculationError, calculate, prepare_expression
from infix_calc.utils.config_loader import CalculatorConfig
from infix_calc.utils.logger import get_logger

logger = get_logger("infix_calc.api")

NON_FINITE_CODE = "non_finite_result"


class CalcRequest(BaseModel):
    expression: str = Field(default="", description="Infix expression, e.g. '2 + 3 * sqrt(4)'")


class CalcResponse(BaseModel):
    result: Optional[float] = None
    error: Optional[str] = None
    code: Optional[str] = None


class RuntimeStatsResponse(BaseModel):
    window_seconds: int
    requests: int
    succeeded: int
    errors_by_code: Dict[str, int]
    avg_latency_ms: float


def _error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"result": None, "error": message, "code": code})


def create_app(config: Optional[CalculatorConfig] = None) -> FastAPI:
    """Builds and configures the FastAPI application.

    Args:
        config: Loaded settings; defaults apply when omitted.

    Returns:
        Configured FastAPI app instance.
    """
    config = config or CalculatorConfig()
    engine_settings = config.engine

    app = FastAPI(title="infix-calc API", version=config.version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_allow_origins),
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    runtime_stats = RuntimeStats(window_seconds=config.server.stats_window_seconds)

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/v1/runtime/stats", response_model=RuntimeStatsResponse)
    async def runtime_stats_endpoint() -> Dict[str, Any]:
        return runtime_stats.snapshot()

    @app.post("/calculate", response_model=CalcResponse)
    async def calculate_endpoint(payload: CalcRequest, request: Request) -> Any:
        request_id = request.headers.get("X-Request-ID", "-")
        started_at = time.perf_counter()
        try:
            expression = prepare_expression(
                payload.expression,
                max_length=engine_settings.max_expression_length,
                normalize_unicode=engine_settings.normalize_unicode,
            )
            result = calculate(expression)
        except CalculationError as exc:
            elapsed_ms = (time.perf_counter() - started_at) * 1000.0
            runtime_stats.record(latency_ms=elapsed_ms, error_code=exc.code)
            logger.info(
                "calculate_rejected request_id=%s code=%s error=%s elapsed_ms=%.3f",
                request_id,
                exc.code,
                exc,
                elapsed_ms,
            )
            return _error_response(400, str(exc), exc.code)

        elapsed_ms = (time.perf_counter() - started_at) * 1000.0
        if not math.isfinite(result):
            runtime_stats.record(latency_ms=elapsed_ms, error_code=NON_FINITE_CODE)
            logger.info("calculate_non_finite request_id=%s result=%s", request_id, result)
            return _error_response(422, "result is not a finite number: {}".format(result), NON_FINITE_CODE)

        runtime_stats.record(latency_ms=elapsed_ms)
        logger.info("calculate_done request_id=%s elapsed_ms=%.3f", request_id, elapsed_ms)
        return {"result": result, "error": None, "code": None}

    return app
