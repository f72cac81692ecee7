from flask import url_for


def serialize_user(user) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "wca_id": user.wca_id,
    }


def serialize_competition(comp) -> dict:
    """
    Public JSON summary of a competition.

    Dates are ISO strings; `website` is the external website, `url` the API
    detail endpoint.
    """
    return {
        "id": comp.id,
        "name": comp.name,
        "short_name": comp.short_name,
        "website": comp.external_website,
        "url": url_for("api.competition_show", competition_id=comp.id, _external=True),
        "city": comp.city_name,
        "venue": comp.venue,
        "country_iso2": comp.country.iso2 if comp.country else None,
        "start_date": comp.start_date.isoformat() if comp.start_date else None,
        "end_date": comp.end_date.isoformat() if comp.end_date else None,
        "delegates": [serialize_user(u) for u in comp.delegates],
        "organizers": [serialize_user(u) for u in comp.organizers],
    }
