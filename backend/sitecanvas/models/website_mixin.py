from sitecanvas.extensions import db


class WebsiteMixin:
    website_id = db.Column(
        db.String(36),
        db.ForeignKey("websites.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
