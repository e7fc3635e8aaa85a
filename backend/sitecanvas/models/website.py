from sitecanvas.extensions import db
from .base import BaseModel

DOMAIN_STATUSES = ("unconfigured", "pending_verification", "verified")


class Website(BaseModel):
    __tablename__ = "websites"

    user_id = db.Column(db.String(36), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)

    # Hosts: <subdomain>.<PLATFORM_DOMAIN> and an optional customer-owned domain
    subdomain = db.Column(db.String(63), unique=True, nullable=False, index=True)
    custom_domain = db.Column(db.String(253), unique=True, nullable=True, index=True)
    domain_status = db.Column(db.String(32), nullable=False, default="unconfigured")

    # Live pointer. Only the publishing pipeline writes it.
    published_version_id = db.Column(
        db.String(36),
        db.ForeignKey(
            "website_versions.id",
            use_alter=True,
            name="fk_website_published_version",
            ondelete="SET NULL",
        ),
        nullable=True,
        index=True,
    )
    last_published_at = db.Column(db.DateTime(timezone=True), nullable=True)

    # siteName, fontFamily, fontHeadline, faviconUrl, primaryColor, secondaryColor
    global_settings = db.Column(db.JSON, nullable=False, default=dict)

    versions = db.relationship(
        "WebsiteVersion",
        foreign_keys="WebsiteVersion.website_id",
        back_populates="website",
        cascade="all, delete-orphan",
    )
    published_version = db.relationship(
        "WebsiteVersion",
        foreign_keys=[published_version_id],
        post_update=True,
    )
    navigations = db.relationship(
        "Navigation",
        back_populates="website",
        order_by="Navigation.name",
        cascade="all, delete-orphan",
    )

    @property
    def status(self) -> str:
        return "published" if self.published_version_id else "unpublished"
