from sqlalchemy import event
from sitecanvas.extensions import db
from .base import BaseModel
from .website_mixin import WebsiteMixin


class WebsiteVersion(BaseModel, WebsiteMixin):
    __tablename__ = "website_versions"

    version_number = db.Column(db.Integer, nullable=False)

    # [{id, name, slug, elements: [{id, type, order, config}], seoTitle?, seoDescription?}]
    pages = db.Column(db.JSON, nullable=False, default=list)
    global_settings = db.Column(db.JSON, nullable=False, default=dict)

    created_by = db.Column(db.String(36), nullable=True)

    website = db.relationship(
        "Website",
        foreign_keys="WebsiteVersion.website_id",
        back_populates="versions",
    )

    __table_args__ = (
        db.UniqueConstraint("website_id", "version_number", name="uq_website_version_number"),
        db.Index("idx_website_version_history", "website_id", "version_number"),
    )


@event.listens_for(WebsiteVersion, "before_update")
def prevent_version_mutation(mapper, connection, target):
    raise RuntimeError("Website versions are immutable")
