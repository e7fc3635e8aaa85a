from typing import Optional

from sitecanvas.extensions import db
from sitecanvas.models.audit_log import AuditLog


def log_action(
    *,
    website_id: str,
    actor_id: Optional[str],
    action: str,
    entity_type: str,
    entity_id: str,
    payload: dict | None = None,
    session=None,
):
    """Stage an audit row on the session; the caller owns the commit."""
    if session is None:
        session = db.session

    log = AuditLog()
    log.website_id = website_id
    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    session.add(log)
    return log
