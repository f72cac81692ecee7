from datetime import datetime
from app.extensions import db

# Many-to-many link tables between competitions and the users running them
competition_delegates = db.Table(
    "competition_delegates",
    db.Column("competition_id", db.String(32), db.ForeignKey("competitions.id"), primary_key=True),
    db.Column("user_id", db.Integer, db.ForeignKey("users.id"), primary_key=True),
)

competition_organizers = db.Table(
    "competition_organizers",
    db.Column("competition_id", db.String(32), db.ForeignKey("competitions.id"), primary_key=True),
    db.Column("user_id", db.Integer, db.ForeignKey("users.id"), primary_key=True),
)


class Competition(db.Model):
    __tablename__ = "competitions"

    # Stable public identifier, e.g. "TestComp2014"
    id = db.Column(db.String(32), primary_key=True)

    name = db.Column(db.String(50), nullable=False)
    short_name = db.Column(db.String(32), nullable=True)

    city_name = db.Column(db.String(50), nullable=True)
    venue = db.Column(db.String(240), nullable=True)

    # WCA country id ("USA"), not the ISO code
    country_id = db.Column(
        db.String(50),
        db.ForeignKey("countries.id"),
        nullable=False,
        index=True,
    )
    country = db.relationship("Country", back_populates="competitions")

    start_date = db.Column(db.Date, nullable=False, index=True)
    end_date = db.Column(db.Date, nullable=False)

    # Both must be true before the public can see the competition
    show_at_all = db.Column(db.Boolean, nullable=False, default=False)
    is_confirmed = db.Column(db.Boolean, nullable=False, default=False)

    external_website = db.Column(db.String(200), nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    delegates = db.relationship(
        "User",
        secondary=competition_delegates,
        back_populates="delegated_competitions",
        order_by="User.id",
    )
    organizers = db.relationship(
        "User",
        secondary=competition_organizers,
        back_populates="organized_competitions",
        order_by="User.id",
    )

    @property
    def is_visible(self) -> bool:
        return bool(self.show_at_all and self.is_confirmed)

    def is_managed_by(self, user) -> bool:
        """True for admins and for anyone listed as delegate or organizer."""
        if user is None:
            return False
        if user.is_admin:
            return True
        return any(u.id == user.id for u in self.delegates) or any(
            u.id == user.id for u in self.organizers
        )
