from sitecanvas.extensions import db
from .base import BaseModel
from .website_mixin import WebsiteMixin


class Navigation(BaseModel, WebsiteMixin):
    __tablename__ = "navigations"

    name = db.Column(db.String(100), nullable=False)
    items = db.Column(db.JSON, nullable=False, default=list)  # [{label, url, type}]

    website = db.relationship("Website", back_populates="navigations")

    __table_args__ = (
        db.UniqueConstraint("website_id", "name", name="uq_navigation_name_per_website"),
    )
