from datetime import datetime
from app.extensions import db

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    wca_id = db.Column(db.String(10), nullable=True, unique=True)

    # Board / results team: may manage every competition
    is_admin = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    delegated_competitions = db.relationship(
        "Competition",
        secondary="competition_delegates",
        back_populates="delegates",
    )
    organized_competitions = db.relationship(
        "Competition",
        secondary="competition_organizers",
        back_populates="organizers",
    )
    api_tokens = db.relationship("ApiToken", back_populates="user")
