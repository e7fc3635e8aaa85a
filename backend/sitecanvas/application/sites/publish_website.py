# sitecanvas/application/sites/publish_website.py
from typing import Any, Dict, Mapping, Optional, Sequence

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from sitecanvas.components import get_registry
from sitecanvas.domain.exceptions import NotFoundError
from sitecanvas.domain.lifecycle.website import assert_website_transition
from sitecanvas.extensions import db
from sitecanvas.models.base import utc_now
from sitecanvas.models.website import Website
from sitecanvas.store.version_store import VersionStore
from sitecanvas.utils.audit import log_action
from sitecanvas.utils.deadline import Deadline
from sitecanvas.utils.transaction import transactional


def flip_published_pointer(session, *, website_id: str, version_id: str, global_settings=None) -> None:
    """
    Point the Website at ``version_id`` with one atomic UPDATE.

    Concurrent publishes for the same Website are not merged: whichever
    UPDATE commits last wins.
    """
    values = {"published_version_id": version_id, "last_published_at": utc_now()}
    if global_settings is not None:
        values["global_settings"] = global_settings

    with transactional(session):
        result = session.execute(
            update(Website)
            .where(Website.id == website_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError(f"Website {website_id} not found")

    # In-session copies may hold the old pointer
    session.expire_all()


def record_publish(session, *, website_id: str, actor_id: Optional[str], action: str, payload: dict) -> None:
    """Attribution is best effort: a failed audit write never undoes a publish."""
    try:
        with transactional(session):
            log_action(
                website_id=website_id,
                actor_id=actor_id,
                action=action,
                entity_type="website",
                entity_id=website_id,
                payload=payload,
                session=session,
            )
    except SQLAlchemyError:
        current_app.logger.exception("Could not record %s for website %s", action, website_id)


def publish_website(
    *,
    website_id: str,
    pages: Sequence[Any],
    global_settings: Optional[Mapping[str, Any]],
    actor_id: Optional[str],
    session=None,
    registry=None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Publish a full content tree as the Website's live Version.

    Responsibilities:
    - phase 1: validate and persist a new immutable Version
    - phase 2: atomically flip the published pointer
    - audit logging

    A failure in phase 1 (validation, database, timeout) leaves the pointer
    untouched, so the previous Version keeps serving.
    """
    if session is None:
        session = db.session
    if registry is None:
        registry = get_registry()
    if timeout is None:
        timeout = current_app.config["PUBLISH_TIMEOUT_SECONDS"]

    deadline = Deadline(timeout)

    website = session.get(Website, website_id)
    if website is None:
        raise NotFoundError(f"Website {website_id} not found")

    # 1️⃣ Lifecycle transition enforcement
    assert_website_transition(from_status=website.status, to_status="published")
    previous_version_id = website.published_version_id

    # 2️⃣ Create immutable Version
    store = VersionStore(
        session,
        registry,
        auto_assign_homepage=current_app.config["AUTO_ASSIGN_HOMEPAGE"],
    )
    version_id = store.create_version(
        website_id,
        pages,
        global_settings,
        created_by=actor_id,
    )
    version = store.get_version(version_id)

    # 3️⃣ Pointer flip is the last step; a timeout here keeps the old Version live
    deadline.check("Publish")
    flip_published_pointer(
        session,
        website_id=website_id,
        version_id=version_id,
        global_settings=dict(version.global_settings or {}),
    )

    current_app.logger.info(
        "Website %s now serves version %s (#%d), previously %s",
        website_id, version_id, version.version_number, previous_version_id,
    )

    # 4️⃣ Audit logging
    record_publish(
        session,
        website_id=website_id,
        actor_id=actor_id,
        action="website.publish",
        payload={
            "version_id": version_id,
            "version_number": version.version_number,
            "previous_version_id": previous_version_id,
        },
    )

    return {
        "website_id": website_id,
        "version_id": version_id,
        "version_number": version.version_number,
    }
