from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...utils.jwt_handler import JWTHandler
from ...utils.logging import get_store_logger
from ..error.error_handler import StoreServiceErrorHandler

logger = get_store_logger("store_service.auth")

DEFAULT_EXCLUDE_PATHS = [
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
]


class StoreServiceAuthMiddleware(BaseHTTPMiddleware):
    """Authenticate API requests using JWT bearer tokens or auth cookies."""

    def __init__(
        self,
        app: Any,
        secret_key: str,
        algorithm: str = "HS256",
        exclude_paths: Optional[list[str]] = None,
    ):
        super().__init__(app)
        self.exclude_paths = exclude_paths or list(DEFAULT_EXCLUDE_PATHS)
        self.jwt_handler = JWTHandler(secret_key=secret_key, algorithm=algorithm)

    def _should_skip_auth(self, path: str) -> bool:
        """Check if the request path should skip authentication."""
        for exclude_path in self.exclude_paths:
            if path == exclude_path or path.startswith(exclude_path + "/"):
                return True
        return False

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if self._should_skip_auth(request.url.path):
            return await call_next(request)

        correlation_id = getattr(request.state, "correlation_id", "unknown")
        auth_result = self._authenticate_request(request)

        if not auth_result["authenticated"]:
            logger.warning(
                f"Authentication failed: {auth_result['reason']}",
                extra={
                    "correlation_id": correlation_id,
                    "path": request.url.path,
                    "method": request.method,
                    "reason": auth_result["reason"],
                    "event_type": "auth_failed",
                },
            )
            response = StoreServiceErrorHandler._create_error_response(
                request=request,
                status_code=401,
                error_type="authentication_error",
                message="Authentication required",
                details={"reason": auth_result["reason"]},
            )
            response.headers["WWW-Authenticate"] = "Bearer"
            return response

        request.state.user_id = auth_result["username"]
        request.state.username = auth_result["username"]
        request.state.user_role = auth_result["user_role"]

        logger.debug(
            "Request authenticated",
            extra={
                "correlation_id": correlation_id,
                "user_id": auth_result["username"],
                "token_source": auth_result["token_source"],
                "path": request.url.path,
                "method": request.method,
                "event_type": "auth_success",
            },
        )
        return await call_next(request)

    def _extract_token(self, request: Request) -> tuple[Optional[str], str]:
        """Return the raw token and where it came from."""
        authorization = request.headers.get("Authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip(), "header"

        token = request.cookies.get("access_token") or request.cookies.get(
            "auth_token"
        )
        return token, "cookie"

    def _authenticate_request(self, request: Request) -> Dict[str, Any]:
        token, source = self._extract_token(request)

        if token is None:
            return {"authenticated": False, "reason": "missing_token"}
        if token.strip() in ("", "null", "undefined"):
            return {"authenticated": False, "reason": "empty_token"}

        try:
            token_data = self.jwt_handler.decode_token(token)
        except ValueError as e:
            logger.warning(f"JWT validation failed: {str(e)}")
            return {"authenticated": False, "reason": "invalid_token"}

        return {
            "authenticated": True,
            "username": token_data.username,
            "user_role": token_data.roles[0] if token_data.roles else "user",
            "token_source": source,
        }


class AuthenticatedUser:
    """Dependency returning the authenticated caller's username."""

    async def __call__(self, request: Request) -> str:
        username = getattr(request.state, "username", None)
        if not username:
            raise HTTPException(status_code=401, detail="Authentication required")
        return username


def setup_store_auth_middleware(
    app: FastAPI,
    secret_key: str,
    algorithm: str = "HS256",
    exclude_paths: Optional[list[str]] = None,
) -> None:
    """Setup authentication middleware for the Store Service."""
    if exclude_paths is None:
        exclude_paths = list(DEFAULT_EXCLUDE_PATHS)

    app.add_middleware(
        StoreServiceAuthMiddleware,
        secret_key=secret_key,
        algorithm=algorithm,
        exclude_paths=exclude_paths,
    )

    logger.info(
        "Store Service authentication middleware configured",
        extra={
            "excluded_paths": exclude_paths,
            "event_type": "auth_middleware_setup",
        },
    )


authenticated_user = AuthenticatedUser()
