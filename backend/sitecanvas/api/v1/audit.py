from flask import request, jsonify
from flask_jwt_extended import jwt_required
from sitecanvas.models.audit_log import AuditLog
from sitecanvas.normalizers.audit import normalize_audit_log
from sitecanvas.normalizers.pagination import normalize_pagination
from sitecanvas.utils.decorators import owner_required
from sitecanvas.utils.pagination import paginate_keyset
from . import v1_bp


@v1_bp.route("/websites/<website_id>/audit", methods=["GET"])
@jwt_required()
@owner_required
def list_audit_logs(website_id):
    # Cursor Pagination
    limit = min(request.args.get("limit", 20, type=int), 100)
    cursor = request.args.get("cursor")

    query = AuditLog.query.filter(
        AuditLog.website_id == website_id
    )

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_keyset(
        query,
        sort_column=AuditLog.created_at,
        id_column=AuditLog.id,
        limit=limit,
        cursor=cursor,
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
