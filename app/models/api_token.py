from datetime import datetime
from app.extensions import db

class ApiToken(db.Model):
    __tablename__ = "api_tokens"

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    # sha256 of the bearer token; the raw token is only shown once
    token_digest = db.Column(db.String(64), nullable=False, unique=True, index=True)

    # Space separated, e.g. "public manage_competitions"
    scopes = db.Column(db.String(255), nullable=False, default="")

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=True)
    revoked = db.Column(db.Boolean, default=False, nullable=False)

    user = db.relationship("User", back_populates="api_tokens")

    @property
    def scope_set(self) -> frozenset:
        return frozenset((self.scopes or "").split())
