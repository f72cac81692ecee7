from app.extensions import db

class Country(db.Model):
    __tablename__ = "countries"

    # WCA country id, e.g. "Vietnam" or "USA"
    id = db.Column(db.String(50), primary_key=True)

    name = db.Column(db.String(50), nullable=False)

    # ISO-3166 alpha-2, the only country key the API accepts
    iso2 = db.Column(db.String(2), nullable=False, unique=True, index=True)

    continent_id = db.Column(db.String(50), nullable=True)

    competitions = db.relationship(
        "Competition",
        back_populates="country",
        lazy=True,
    )
