from urllib.parse import urlencode

from flask import Blueprint, current_app, request, jsonify, url_for

from app.errors import AuthorizationError, ValidationError
from app.helpers.auth import get_api_caller, MANAGE_COMPETITIONS
from app.helpers.competition import get_comp_for_caller_or_404, caller_can_manage
from app.helpers.competition_query import list_competitions
from app.helpers.pagination import link_header
from app.helpers.serializers import serialize_competition
from app.helpers.wcif import competition_wcif


api_bp = Blueprint("api", __name__, url_prefix="/api/v0")


def _listing_url(args, cursor=None) -> str:
    """
    Same listing with the same query args, pointed at cursor.
    Args are encoded by hand so names like "endpoint" never reach url_for.
    """
    params = [(k, v) for k, v in args.items(multi=True) if k != "cursor"]
    if cursor:
        params.append(("cursor", cursor))

    base = url_for("api.competitions_index", _external=True)
    return f"{base}?{urlencode(params)}" if params else base


@api_bp.route("/competitions")
def competitions_index():
    """
    Filtered, paginated competition listing.

    Query args: country_iso2, q, start, end (YYYY-MM-DD), managed_by_me,
    per_page, cursor.

    Response headers:
    - Link: rel="first"/"prev" after the first page, rel="last"/"next" when
      more pages exist (in that order)
    - Total / Per-Page: size of the full filtered set and of this page
    """
    caller = get_api_caller()

    try:
        page = list_competitions(request.args, caller)
    except ValidationError as e:
        current_app.logger.info("[API] Rejected competition listing: %s", e.message)
        raise

    response = jsonify([serialize_competition(c) for c in page.items])

    if page.links:
        links = {rel: _listing_url(request.args, cursor) for rel, cursor in page.links.items()}
        response.headers["Link"] = link_header(links)

    response.headers["Total"] = str(page.total)
    response.headers["Per-Page"] = str(page.per_page)
    return response


@api_bp.route("/competitions/<competition_id>")
def competition_show(competition_id):
    """
    Public summary of one competition.

    Hidden competitions 404 exactly like missing ones unless the caller
    manages them with the manage_competitions scope.
    """
    caller = get_api_caller()
    comp = get_comp_for_caller_or_404(competition_id, caller)
    return jsonify(serialize_competition(comp))


@api_bp.route("/competitions/<competition_id>/wcif")
def competition_show_wcif(competition_id):
    """
    WCIF export. Existence rules are the same as competition_show; after
    that the caller needs manage_competitions and must manage this comp.
    """
    caller = get_api_caller()
    comp = get_comp_for_caller_or_404(competition_id, caller)

    if not caller.has_scope(MANAGE_COMPETITIONS):
        raise AuthorizationError(f"Missing required scope '{MANAGE_COMPETITIONS}'")

    if not caller_can_manage(caller, comp):
        raise AuthorizationError(f"Not allowed to manage competition {competition_id}")

    current_app.logger.info("[WCIF] Exported %s for user %s", comp.id, caller.user.id)
    return jsonify(competition_wcif(comp))
