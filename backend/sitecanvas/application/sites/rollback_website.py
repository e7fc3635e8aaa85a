# sitecanvas/application/sites/rollback_website.py
from typing import Any, Dict, Optional

from flask import current_app

from sitecanvas.components import get_registry
from sitecanvas.domain.exceptions import NotFoundError
from sitecanvas.domain.lifecycle.website import assert_website_transition
from sitecanvas.extensions import db
from sitecanvas.models.website import Website
from sitecanvas.store.version_store import VersionStore
from .publish_website import flip_published_pointer, record_publish


def rollback_website(
    *,
    website_id: str,
    version_id: str,
    actor_id: Optional[str],
    session=None,
) -> Dict[str, Any]:
    """
    Serve an older Version again.

    No content is copied: the Version is immutable, so re-pointing the
    Website at it is enough.
    """
    if session is None:
        session = db.session

    website = session.get(Website, website_id)
    if website is None:
        raise NotFoundError(f"Website {website_id} not found")

    version = VersionStore(session, get_registry()).get_version(version_id)
    if version.website_id != website.id:
        # Same message as a miss: never confirm another tenant's ids
        raise NotFoundError(f"Version {version_id} not found")

    assert_website_transition(from_status=website.status, to_status="published")
    previous_version_id = website.published_version_id

    flip_published_pointer(
        session,
        website_id=website_id,
        version_id=version.id,
        global_settings=dict(version.global_settings or {}),
    )

    current_app.logger.info(
        "Website %s rolled back to version %s (#%d)", website_id, version.id, version.version_number
    )

    record_publish(
        session,
        website_id=website_id,
        actor_id=actor_id,
        action="website.rollback",
        payload={
            "version_id": version.id,
            "version_number": version.version_number,
            "previous_version_id": previous_version_id,
        },
    )

    return {
        "website_id": website_id,
        "version_id": version.id,
        "version_number": version.version_number,
    }
