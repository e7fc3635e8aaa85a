# sitecanvas/api/v1/websites.py
from flask import g, request, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from sitecanvas.application.sites.create_website import create_website
from sitecanvas.application.sites.delete_website import delete_website
from sitecanvas.application.sites.set_custom_domain import set_custom_domain
from sitecanvas.extensions import db
from sitecanvas.models.website import Website
from sitecanvas.normalizers.website import normalize_website
from sitecanvas.utils.decorators import owner_required
from . import v1_bp


# ------------------------
# Websites
# ------------------------

@v1_bp.route("/websites", methods=["POST"])
@jwt_required()
def create_website_route():
    data = request.get_json(silent=True) or {}

    website = create_website(
        user_id=get_jwt_identity(),
        name=data.get("name"),
        subdomain=data.get("subdomain"),
        global_settings=data.get("globalSettings"),
    )

    return jsonify(normalize_website(website)), 201


@v1_bp.route("/websites", methods=["GET"])
@jwt_required()
def list_websites():
    websites = db.session.execute(
        db.select(Website)
        .where(Website.user_id == get_jwt_identity())
        .order_by(Website.created_at.desc())
    ).scalars()

    return jsonify({"items": [normalize_website(website) for website in websites]}), 200


@v1_bp.route("/websites/<website_id>", methods=["GET"])
@jwt_required()
@owner_required
def get_website(website_id):
    return jsonify(normalize_website(g.current_website)), 200


@v1_bp.route("/websites/<website_id>", methods=["DELETE"])
@jwt_required()
@owner_required
def delete_website_route(website_id):
    delete_website(website_id=website_id, actor_id=get_jwt_identity())
    return "", 204


@v1_bp.route("/websites/<website_id>/domain", methods=["PUT"])
@jwt_required()
@owner_required
def set_domain(website_id):
    data = request.get_json(silent=True) or {}

    result = set_custom_domain(
        website_id=website_id,
        domain=data.get("domain"),
        actor_id=get_jwt_identity(),
    )

    return jsonify({
        "website": normalize_website(result["website"]),
        "dns_instructions": result["dns_instructions"],
    }), 200
