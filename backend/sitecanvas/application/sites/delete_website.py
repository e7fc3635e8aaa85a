from flask import current_app

from sitecanvas.domain.exceptions import NotFoundError
from sitecanvas.extensions import db
from sitecanvas.models.audit_log import AuditLog
from sitecanvas.models.website import Website
from sitecanvas.utils.transaction import transactional


def delete_website(
    *,
    website_id: str,
    actor_id: str,
    session=None,
) -> None:
    """
    Hard-delete a Website with its Versions, Navigations and audit trail.

    Notes:
    - The published pointer is cleared first to break the
      websites <-> website_versions cycle
    - Versions and Navigations go through the ORM cascade
    """
    if session is None:
        session = db.session

    website = session.get(Website, website_id)
    if website is None:
        raise NotFoundError(f"Website {website_id} not found")

    with transactional(session):
        website.published_version_id = None
        session.flush()

        session.query(AuditLog).filter(
            AuditLog.website_id == website.id
        ).delete(synchronize_session=False)

        session.delete(website)

    current_app.logger.info("Website %s deleted by %s", website_id, actor_id)
