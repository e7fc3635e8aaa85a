# sitecanvas/normalizers/audit.py
from typing import Any, Dict

from sitecanvas.models.audit_log import AuditLog


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    """
    Audit row as shown in a Website's activity feed.

    ``entity_id`` is a string for every entity type; ``actor_id`` is null
    for system actions.
    """
    entity_id = log.entity_id
    return {
        "id": log.id,
        "website_id": log.website_id,
        "actor_id": log.actor_id,
        "action": log.action,
        "entity_type": log.entity_type,
        "entity_id": None if entity_id is None else str(entity_id),
        "payload": dict(log.payload or {}),
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }
