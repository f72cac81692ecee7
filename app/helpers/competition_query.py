"""
Competition listing: parameter validation, filtering, ordering, paging.

Search semantics for `q` (COMPETITION_SEARCH_MODE):

- "tokens" (default): split on whitespace; every token must appear,
  case-insensitively, in at least one of name, short name, city, venue or
  country id. "comp usa" matches "Awesome Competition" held in the USA.
- "substring": the whole trimmed query must appear in one of those fields.

% and _ are matched literally in both modes.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from flask import current_app
from sqlalchemy import false, or_, select

from app.errors import ValidationError
from app.helpers.auth import AuthContext, MANAGE_COMPETITIONS
from app.helpers.date import parse_iso_date
from app.helpers.pagination import Page, decode_cursor, filter_fingerprint, paginate
from app.models import Competition, Country, competition_delegates, competition_organizers

TRUTHY = {"1", "true", "yes", "on"}

SEARCH_MODES = ("tokens", "substring")

SEARCH_COLUMNS = (
    Competition.name,
    Competition.short_name,
    Competition.city_name,
    Competition.venue,
    Competition.country_id,
)


@dataclass(frozen=True)
class CompetitionFilters:
    country_id: Optional[str] = None
    country_iso2: Optional[str] = None
    q: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None
    managed_by_me: bool = False

    def fingerprint(self) -> str:
        return filter_fingerprint(
            {
                "country_iso2": self.country_iso2,
                "q": self.q,
                "start": self.start.isoformat() if self.start else None,
                "end": self.end.isoformat() if self.end else None,
                "managed_by_me": self.managed_by_me,
            }
        )


def _present(params, key: str) -> Optional[str]:
    value = params.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_filters(params) -> CompetitionFilters:
    """
    Validate raw request args into CompetitionFilters.
    Raises ValidationError naming the field and the literal bad value.
    """
    country_id = None
    country_iso2 = _present(params, "country_iso2")
    if country_iso2 is not None:
        country = Country.query.filter_by(iso2=country_iso2.upper()).first()
        if not country:
            raise ValidationError("country_iso2", params.get("country_iso2"))
        country_id = country.id
        country_iso2 = country.iso2

    dates = {}
    for key in ("start", "end"):
        raw = _present(params, key)
        if raw is None:
            dates[key] = None
            continue
        parsed = parse_iso_date(raw)
        if parsed is None:
            raise ValidationError(key, params.get(key))
        dates[key] = parsed

    q = _present(params, "q")
    managed_by_me = (_present(params, "managed_by_me") or "").lower() in TRUTHY

    return CompetitionFilters(
        country_id=country_id,
        country_iso2=country_iso2,
        q=q,
        start=dates["start"],
        end=dates["end"],
        managed_by_me=managed_by_me,
    )


def parse_per_page(params) -> int:
    default = current_app.config["API_DEFAULT_PER_PAGE"]
    maximum = current_app.config["API_MAX_PER_PAGE"]

    raw = _present(params, "per_page")
    if raw is None:
        return min(default, maximum)

    try:
        per_page = int(raw)
    except ValueError:
        raise ValidationError("per_page", params.get("per_page"))
    if per_page < 1:
        raise ValidationError("per_page", params.get("per_page"))

    return min(per_page, maximum)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _matches_term(term: str):
    pattern = f"%{_escape_like(term)}%"
    return or_(*[col.ilike(pattern, escape="\\") for col in SEARCH_COLUMNS])


def search_clauses(q: str, mode: str) -> list:
    if mode not in SEARCH_MODES:
        raise ValueError(f"Unknown COMPETITION_SEARCH_MODE {mode!r}")
    if mode == "substring":
        return [_matches_term(q)]
    return [_matches_term(part) for part in q.split()]


def _managed_by(query, user):
    if user.is_admin:
        return query

    delegated = select(competition_delegates.c.competition_id).where(
        competition_delegates.c.user_id == user.id
    )
    organized = select(competition_organizers.c.competition_id).where(
        competition_organizers.c.user_id == user.id
    )
    return query.filter(
        or_(Competition.id.in_(delegated), Competition.id.in_(organized))
    )


def build_query(filters: CompetitionFilters, caller: AuthContext):
    """Filtered and ordered (start_date desc, id asc) competition query."""
    query = Competition.query

    if filters.managed_by_me:
        if caller.has_scope(MANAGE_COMPETITIONS):
            query = _managed_by(query, caller.user)
        else:
            # No scope: empty result, not an error
            query = query.filter(false())
    else:
        query = query.filter(
            Competition.show_at_all == True,
            Competition.is_confirmed == True,
        )

    if filters.country_id:
        query = query.filter(Competition.country_id == filters.country_id)

    if filters.q:
        mode = current_app.config.get("COMPETITION_SEARCH_MODE", "tokens")
        query = query.filter(*search_clauses(filters.q, mode))

    # Inclusive overlap of [start_date, end_date] with the requested window
    if filters.start:
        query = query.filter(Competition.end_date >= filters.start)
    if filters.end:
        query = query.filter(Competition.start_date <= filters.end)

    return query.order_by(Competition.start_date.desc(), Competition.id.asc())


def list_competitions(params, caller: AuthContext) -> Page:
    """
    Validate params, run the listing query and return one page.

    params is any mapping of raw string args (request.args in the API).
    """
    filters = parse_filters(params)
    per_page = parse_per_page(params)
    fingerprint = filters.fingerprint()

    cursor = _present(params, "cursor")
    offset = decode_cursor(cursor, fingerprint) if cursor else 0

    return paginate(build_query(filters, caller), offset, per_page, fingerprint)
