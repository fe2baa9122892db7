# todo_api/middleware.py
"""
Request pipeline stages.

A stage is an async callable (request, call_next) -> response. install_stages
registers an ordered list of them on the app, first stage outermost.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Awaitable, Callable, Sequence

from fastapi import FastAPI, Request, Response
from fastapi.responses import RedirectResponse

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]
Stage = Callable[[Request, CallNext], Awaitable[Response]]


def install_stages(app: FastAPI, stages: Sequence[Stage]) -> None:
    # Starlette wraps the most recently added middleware around the rest
    for stage in reversed(stages):
        app.middleware("http")(stage)


def redirect_legacy_paths(
    legacy_prefix: str,
    target_prefix: str,
    status_code: int = 308,
) -> Stage:
    """Redirect /<legacy_prefix>/<rest> to /<target_prefix>/<rest> before routing."""
    pattern = re.compile(rf"^/{re.escape(legacy_prefix.strip('/'))}/(.*)$")
    target = target_prefix.strip("/")

    async def redirect_stage(request: Request, call_next: CallNext) -> Response:
        match = pattern.match(request.url.path)
        if match is None:
            return await call_next(request)

        url = f"/{target}/{match.group(1)}"
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return RedirectResponse(url, status_code=status_code)

    return redirect_stage


async def log_requests(request: Request, call_next: CallNext) -> Response:
    method, path = request.method, request.url.path
    logger.info("[%s %s %s] started.", method, path, datetime.now(timezone.utc).isoformat())
    try:
        return await call_next(request)
    finally:
        logger.info("[%s %s %s] Finished.", method, path, datetime.now(timezone.utc).isoformat())
