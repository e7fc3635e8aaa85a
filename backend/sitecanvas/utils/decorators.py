from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity
from sitecanvas.domain.exceptions import NotFoundError
from sitecanvas.extensions import db
from sitecanvas.models.website import Website


def is_owner_or_admin(website) -> bool:
    if get_jwt().get("role") == "admin":
        return True
    return website.user_id == get_jwt_identity()


def owner_required(fn):
    """
    Load ``website_id`` from the route and require the caller to own it.

    Must sit under ``@jwt_required()``. Token issuance belongs to the
    external auth service; only the ``sub`` and ``role`` claims are read.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        website = db.session.get(Website, kwargs["website_id"])
        if website is None:
            raise NotFoundError(f"Website {kwargs['website_id']} not found")

        if not is_owner_or_admin(website):
            return jsonify({"error": "Unauthorized to modify this website"}), 403

        g.current_website = website
        return fn(*args, **kwargs)
    return wrapper
