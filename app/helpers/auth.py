import hashlib
import secrets
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Optional

from flask import current_app, request

from app.errors import AuthenticationError
from app.extensions import db
from app.helpers.date import utcnow
from app.models import ApiToken, User

MANAGE_COMPETITIONS = "manage_competitions"


def make_token() -> str:
    return secrets.token_urlsafe(32)

def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class AuthContext:
    """Who is calling and what their token lets them do."""
    user: Optional[User] = None
    scopes: frozenset = field(default_factory=frozenset)

    @property
    def is_anonymous(self) -> bool:
        return self.user is None

    def has_scope(self, scope: str) -> bool:
        return self.user is not None and scope in self.scopes


ANONYMOUS = AuthContext()


def issue_token(user: User, scopes: Iterable[str], expires_in: Optional[timedelta] = None) -> str:
    """
    Mint a bearer token for user. Only the digest is stored, so the returned
    raw token cannot be recovered later.
    """
    raw = make_token()
    token = ApiToken(
        user_id=user.id,
        token_digest=hash_token(raw),
        scopes=" ".join(sorted(set(scopes))),
        expires_at=(utcnow() + expires_in) if expires_in else None,
    )
    db.session.add(token)
    db.session.commit()
    return raw


def resolve_token(raw: str) -> AuthContext:
    token = ApiToken.query.filter_by(token_digest=hash_token(raw)).first()
    if not token or token.revoked:
        raise AuthenticationError("Invalid access token")

    if token.expires_at is not None and token.expires_at <= utcnow():
        raise AuthenticationError("Invalid access token")

    return AuthContext(user=token.user, scopes=token.scope_set)


def get_api_caller() -> AuthContext:
    """
    Resolve the Authorization header of the current request.

    - no header            -> anonymous
    - "Bearer <token>"     -> token owner + scopes
    - anything else / bad  -> AuthenticationError
    """
    header = (request.headers.get("Authorization") or "").strip()
    if not header:
        return ANONYMOUS

    scheme, _, raw = header.partition(" ")
    raw = raw.strip()
    if scheme.lower() != "bearer" or not raw:
        current_app.logger.info("[API AUTH] Rejected malformed Authorization header")
        raise AuthenticationError("Invalid access token")

    try:
        return resolve_token(raw)
    except AuthenticationError:
        current_app.logger.info("[API AUTH] Rejected unknown, revoked or expired token")
        raise
