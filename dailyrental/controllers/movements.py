from flask import Blueprint, current_app, jsonify, request

from ..exceptions import CheckoutPreconditionError, RentalNotFoundError
from ..services import common
from ..services.movement_service import MovementService
from ..services.rental_service import RentalService

bp = Blueprint("movements", __name__, url_prefix="/rentals")


def _store():
    return current_app.extensions["rental_store"]


def _rental_json(rental):
    """Rental dict as persisted, plus the derived movement state."""
    out = common.rental_to_dict(rental)
    out["is_favorite"] = rental.customer.is_favorite if rental.customer else None
    out["movement_state"] = rental.movement_state
    return out


@bp.errorhandler(RentalNotFoundError)
def _not_found(e):
    return jsonify(error=e.message), 404


@bp.errorhandler(CheckoutPreconditionError)
def _bad_request(e):
    return jsonify(error=e.message), 400


@bp.get("/<rid>")
def show_rental(rid):
    return jsonify(_rental_json(RentalService.get_rental(rid, store=_store())))


@bp.post("/<rid>/checkout")
def checkout(rid):
    """Check the vehicle out; an omitted timestamp means 'now'."""
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify(error="Invalid checkout payload"), 400
    raw = str(payload.get("checkout") or "").strip()
    try:
        checkout_at = common.parse_timestamp(raw) if raw else common._now()
    except ValueError:
        return jsonify(error=f"Invalid checkout timestamp: {raw!r}"), 400

    rental = RentalService.get_rental(rid, store=_store())
    MovementService.checkout(rental, checkout_at, store=_store())
    return jsonify(_rental_json(rental))


@bp.post("/<rid>/checkin")
def checkin(rid):
    rental = RentalService.get_rental(rid, store=_store())
    MovementService.checkin(rental)
    return jsonify(_rental_json(rental))
