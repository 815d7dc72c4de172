# app/api/security.py
"""
Autoryzacja oparta o jawna tabele polityk.

Kazda regula to (metoda HTTP, wzorzec sciezki) -> wymagana rola.
Pierwsza pasujaca regula wygrywa, brak reguly = endpoint publiczny.
Tozsamosc przychodzi w naglowku X-User-ID.
"""
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Iterable, Sequence

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.enums import UserRole
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

USER_HEADER = "X-User-ID"

#ADMIN spelnia kazde wymaganie CUSTOMER
ROLE_GRANTS = {
    UserRole.CUSTOMER: {UserRole.CUSTOMER},
    UserRole.ADMIN: {UserRole.CUSTOMER, UserRole.ADMIN},
}


@dataclass(frozen=True)
class Policy:
    method: str
    pattern: str
    role: UserRole

    def matches(self, method: str, path: str) -> bool:
        return self.method == method.upper() and fnmatchcase(path.rstrip("/") or "/", self.pattern)


POLICIES: Sequence[Policy] = (
    Policy("POST", "/api/products", UserRole.ADMIN),
    Policy("PUT", "/api/products/*", UserRole.ADMIN),
    Policy("DELETE", "/api/products/*", UserRole.ADMIN),
    Policy("GET", "/api/users", UserRole.ADMIN),
    Policy("PUT", "/api/users/*", UserRole.ADMIN),
)


def find_policy(method: str, path: str, policies: Iterable[Policy] = POLICIES) -> Policy | None:
    for policy in policies:
        if policy.matches(method, path):
            return policy
    return None


def has_role(user_role: UserRole, required: UserRole) -> bool:
    return required in ROLE_GRANTS.get(user_role, set())


def parse_user_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        user_id = int(raw)
    except ValueError:
        return None
    return user_id if user_id > 0 else None


class AuthorizationMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policies: Sequence[Policy] = POLICIES):
        super().__init__(app)
        self.policies = policies

    async def dispatch(self, request: Request, call_next):
        policy = find_policy(request.method, request.url.path, self.policies)
        if policy is None:
            return await call_next(request)

        user_id = parse_user_id(request.headers.get(USER_HEADER))
        if user_id is None:
            return JSONResponse(status_code=401, content={"detail": f"Missing or invalid {USER_HEADER} header"})

        role = await run_in_threadpool(self._load_role, request, user_id)
        if role is None:
            return JSONResponse(status_code=401, content={"detail": "Unknown user"})

        if not has_role(role, policy.role):
            logger.warning(
                f"User {user_id} ({role.value}) denied {request.method} {request.url.path}, "
                f"requires {policy.role.value}"
            )
            return JSONResponse(status_code=403, content={"detail": "Forbidden"})

        return await call_next(request)

    @staticmethod
    def _load_role(request: Request, user_id: int) -> UserRole | None:
        db = request.app.state.session_factory()
        try:
            user = UserRepo(db).get_user(user_id)
            return UserRole(user.role) if user else None
        finally:
            db.close()
