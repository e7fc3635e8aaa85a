# sitecanvas/api/v1/navigation.py
from flask import request, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from sitecanvas.application.navigation.navigation import (
    create_navigation,
    delete_navigation,
    get_navigation,
    list_navigations,
    update_navigation,
)
from sitecanvas.domain.exceptions import NotFoundError
from sitecanvas.normalizers.navigation import normalize_navigation
from sitecanvas.utils.decorators import is_owner_or_admin, owner_required
from . import v1_bp


def _owned_navigation(navigation_id):
    navigation = get_navigation(navigation_id)
    if not is_owner_or_admin(navigation.website):
        raise NotFoundError(f"Navigation {navigation_id} not found")
    return navigation


@v1_bp.route("/websites/<website_id>/navigations", methods=["GET"])
@jwt_required()
@owner_required
def list_navigations_route(website_id):
    navigations = list_navigations(website_id)
    return jsonify({"items": [normalize_navigation(nav) for nav in navigations]}), 200


@v1_bp.route("/websites/<website_id>/navigations", methods=["POST"])
@jwt_required()
@owner_required
def create_navigation_route(website_id):
    navigation = create_navigation(
        website_id=website_id,
        data=request.get_json(silent=True) or {},
        actor_id=get_jwt_identity(),
    )
    return jsonify(normalize_navigation(navigation)), 201


@v1_bp.route("/navigations/<navigation_id>", methods=["PUT"])
@jwt_required()
def update_navigation_route(navigation_id):
    _owned_navigation(navigation_id)

    navigation = update_navigation(
        navigation_id=navigation_id,
        data=request.get_json(silent=True) or {},
        actor_id=get_jwt_identity(),
    )
    return jsonify(normalize_navigation(navigation)), 200


@v1_bp.route("/navigations/<navigation_id>", methods=["DELETE"])
@jwt_required()
def delete_navigation_route(navigation_id):
    _owned_navigation(navigation_id)
    delete_navigation(navigation_id=navigation_id, actor_id=get_jwt_identity())
    return "", 204
