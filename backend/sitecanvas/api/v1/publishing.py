# sitecanvas/api/v1/publishing.py
from flask import current_app, request, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from sitecanvas.application.sites.publish_website import publish_website
from sitecanvas.application.sites.rollback_website import rollback_website
from sitecanvas.components import get_registry
from sitecanvas.domain.exceptions import NotFoundError
from sitecanvas.extensions import db
from sitecanvas.models.website import Website
from sitecanvas.normalizers.pagination import normalize_pagination
from sitecanvas.normalizers.version import normalize_version, normalize_version_summary
from sitecanvas.normalizers.website import normalize_website
from sitecanvas.store.version_store import VersionHistory, VersionStore
from sitecanvas.utils.decorators import is_owner_or_admin, owner_required
from . import v1_bp

MAX_PAGE_SIZE = 100


def _version_store():
    return VersionStore(
        db.session,
        get_registry(),
        auto_assign_homepage=current_app.config["AUTO_ASSIGN_HOMEPAGE"],
    )


def _owned_version(store, version_id):
    version = store.get_version(version_id)
    website = db.session.get(Website, version.website_id)

    # Hide other users' versions entirely
    if website is None or not is_owner_or_admin(website):
        raise NotFoundError(f"Version {version_id} not found")
    return version


# ------------------------
# Publishing
# ------------------------

@v1_bp.route("/websites/<website_id>/publish", methods=["POST"])
@jwt_required()
@owner_required
def publish(website_id):
    data = request.get_json(silent=True) or {}

    result = publish_website(
        website_id=website_id,
        pages=data.get("pages"),
        global_settings=data.get("globalSettings"),
        actor_id=get_jwt_identity(),
    )

    website = db.session.get(Website, website_id)

    return jsonify({
        **result,
        "website": normalize_website(website),
        "message": "Website published successfully",
    }), 201


@v1_bp.route("/websites/<website_id>/rollback/<version_id>", methods=["POST"])
@jwt_required()
@owner_required
def rollback(website_id, version_id):
    result = rollback_website(
        website_id=website_id,
        version_id=version_id,
        actor_id=get_jwt_identity(),
    )

    return jsonify({**result, "message": "Rollback successful"}), 200


# ------------------------
# Versions
# ------------------------

@v1_bp.route("/websites/<website_id>/versions", methods=["GET"])
@jwt_required()
@owner_required
def list_versions(website_id):
    limit = min(
        request.args.get("limit", current_app.config["VERSION_PAGE_SIZE"], type=int),
        MAX_PAGE_SIZE,
    )
    cursor = request.args.get("cursor")

    history = VersionHistory(db.session, website_id)
    items, meta = history.page(limit=limit, cursor=cursor)

    return jsonify(normalize_pagination(items, normalize_version_summary, cursor=meta)), 200


@v1_bp.route("/versions/<version_id>", methods=["GET"])
@jwt_required()
def get_version(version_id):
    version = _owned_version(_version_store(), version_id)
    return jsonify(normalize_version(version)), 200


@v1_bp.route("/versions/<version_id>", methods=["DELETE"])
@jwt_required()
def delete_version(version_id):
    store = _version_store()
    version = _owned_version(store, version_id)

    store.delete_version(version.id)
    current_app.logger.info("Deleted version %s by %s", version_id, get_jwt_identity())

    return "", 204
