"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def operation_name_from_document(document: str) -> str:
    """Derive a loggable operation name from raw GraphQL document text."""
    if "__schema" in document or "IntrospectionQuery" in document:
        return "__introspection"

    match = _OPERATION_RE.search(document)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if op:
            return op
        q = params.get("query", "")
        return operation_name_from_document(q) if q else None

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        op = data.get("operationName")
        if isinstance(op, str) and op:
            return op
        q = data.get("query", "")
        if not isinstance(q, str) or not q:
            return None
        return operation_name_from_document(q)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""

        graphql_operation = await extract_graphql_operation_name(request)
        request_id = set_request_context(operation=graphql_operation)

        try:
            log_data = {
                "method": request.method,
                "path": request.url.path,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )
            response.headers["X-Request-ID"] = request_id

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
