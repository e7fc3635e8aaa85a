# sitecanvas/models/audit_log.py
from sitecanvas.extensions import db
from .base import BaseModel
from .website_mixin import WebsiteMixin
from sqlalchemy import event


class AuditLog(BaseModel, WebsiteMixin):
    __tablename__ = "audit_logs"

    __table_args__ = (
        db.Index("ix_audit_cursor", "website_id", "created_at", "id"),
        db.Index("ix_audit_actor_action", "website_id", "actor_id", "action"),
    )

    actor_id = db.Column(db.String(36), nullable=True, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)

    entity_type = db.Column(db.String(50), nullable=False, index=True)
    entity_id = db.Column(db.String(36), nullable=False, index=True)

    payload = db.Column(db.JSON, nullable=False, default=dict)


@event.listens_for(AuditLog, 'before_update')
def prevent_audit_mutation(mapper, connection, target):
    raise RuntimeError("Audit logs are immutable")
