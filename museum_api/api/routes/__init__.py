"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never touch the database session directly (repository only)
    - Unexpected handler exceptions become InternalError inside the router,
      so the 500 still passes back through CORSMiddleware
"""

import logging

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from museum_api.core.errors import ErrorContext, InternalError, MuseumError

logger = logging.getLogger(__name__)


class MuseumRoute(APIRoute):
    """APIRoute whose handler reports unexpected failures as InternalError."""

    def get_route_handler(self):
        handler = super().get_route_handler()

        async def guarded_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except (MuseumError, StarletteHTTPException, RequestValidationError):
                raise
            except Exception as e:
                logger.error(
                    f"Unhandled exception on {request.url.path}: {e}",
                    exc_info=True,
                )
                raise InternalError(ErrorContext(path=request.url.path)) from e

        return guarded_handler


class AnyMethodRoute(MuseumRoute):
    """Serves every HTTP method, including ones outside the declared list.

    The declared methods only feed the OpenAPI schema.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        # PARTIAL means path matched, method did not
        if match is Match.PARTIAL:
            match = Match.FULL
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)
