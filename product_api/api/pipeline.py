"""Request Pipeline — explicit sequential stages with continue/halt results.

Invariants:
    - A stage returns None to continue or a Response to halt the pipeline
    - The validation stage only annotates the context; it never halts
    - input_error_gate is the sole place validation failures become a response
    - The last stage (the handler) always returns a Response

Design Decisions:
    - Body parsed once into RequestContext before any stage runs, so every
      stage and handler reads plain dicts instead of the Request object
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Sequence

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from product_api.core.errors import MalformedBodyError
from product_api.core.validation import FieldError, FieldRule, validate

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """Parsed request input plus the validation failures accumulated so far."""
    method: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)
    errors: list[FieldError] = field(default_factory=list)


Stage = Callable[[RequestContext], Awaitable[Response | None]]


async def read_json_body(request: Request) -> dict[str, Any]:
    """Parse a JSON object body. Non-JSON content types and non-object
    payloads read as {}; malformed JSON raises MalformedBodyError."""
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type:
        return {}
    if not (await request.body()).strip():
        return {}
    try:
        payload = await request.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise MalformedBodyError()
    return payload if isinstance(payload, dict) else {}


async def build_context(request: Request) -> RequestContext:
    return RequestContext(
        method=request.method,
        path=request.url.path,
        params=dict(request.path_params),
        body=await read_json_body(request),
    )


def validation_stage(rules: Sequence[FieldRule]) -> Stage:
    """Stage that records every failed rule on the context."""
    async def run(ctx: RequestContext) -> Response | None:
        ctx.errors.extend(validate(tuple(rules), ctx.params, ctx.body))
        return None
    return run


async def input_error_gate(ctx: RequestContext) -> Response | None:
    """Halt with 400 {"errors": [...]} when any rule failed."""
    if not ctx.errors:
        return None
    logger.warning(
        f"Validation failed on {ctx.method} {ctx.path}: "
        f"{[e.field for e in ctx.errors]}",
        extra={"error_code": "VALIDATION_ERROR", "path": ctx.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [e.to_dict() for e in ctx.errors]},
    )


async def run_pipeline(
    ctx: RequestContext, stages: Sequence[Stage],
) -> Response:
    """Run stages in order until one halts with a Response."""
    for stage in stages:
        response = await stage(ctx)
        if response is not None:
            return response
    raise RuntimeError(f"No stage produced a response for {ctx.method} {ctx.path}")
