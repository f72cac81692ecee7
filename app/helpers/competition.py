from dataclasses import dataclass
from typing import Optional, Union

from flask import current_app

from app.errors import competition_not_found
from app.helpers.auth import AuthContext, MANAGE_COMPETITIONS
from app.models import Competition


@dataclass(frozen=True)
class Found:
    competition: Competition


@dataclass(frozen=True)
class Hidden:
    competition: Competition


@dataclass(frozen=True)
class Missing:
    competition_id: str


LookupResult = Union[Found, Hidden, Missing]


def lookup_competition(competition_id: str) -> LookupResult:
    """
    Look up a competition by id, tagging it by public visibility.
    Callers must not expose the Hidden/Missing difference; use
    get_comp_for_caller_or_404 at the API boundary.
    """
    comp = Competition.query.filter_by(id=competition_id).first()
    if comp is None:
        return Missing(competition_id)
    if not comp.is_visible:
        return Hidden(comp)
    return Found(comp)


def caller_can_manage(caller: AuthContext, comp: Optional[Competition]) -> bool:
    """
    True when the caller's token carries manage_competitions AND the user is
    a delegate/organizer of comp (or an admin).
    """
    if comp is None or not caller.has_scope(MANAGE_COMPETITIONS):
        return False
    return comp.is_managed_by(caller.user)


def get_comp_for_caller_or_404(competition_id: str, caller: AuthContext) -> Competition:
    """
    Collapse a LookupResult for this caller.

    Missing, and Hidden for anyone who cannot manage it, both raise the same
    NotFoundError so existence never leaks.
    """
    result = lookup_competition(competition_id)

    if isinstance(result, Found):
        return result.competition

    if isinstance(result, Hidden) and caller_can_manage(caller, result.competition):
        return result.competition

    if isinstance(result, Hidden):
        current_app.logger.debug("[COMP LOOKUP] Hidden competition %s requested without rights", competition_id)

    raise competition_not_found(competition_id)
