# sitecanvas/application/navigation/navigation.py
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from sitecanvas.domain.exceptions import ConflictError, NotFoundError, ValidationError
from sitecanvas.domain.schemas import NavigationIn, NavigationUpdate, schema_messages
from sitecanvas.extensions import db
from sitecanvas.models.navigation import Navigation
from sitecanvas.models.website import Website
from sitecanvas.utils.audit import log_action
from sitecanvas.utils.transaction import transactional

DUPLICATE_NAME = "A navigation with this name already exists for this website"


def _parse(schema, data):
    try:
        return schema.model_validate(data or {})
    except SchemaError as exc:
        raise ValidationError(schema_messages(exc)) from exc


def get_navigation(navigation_id: str, *, session=None) -> Navigation:
    if session is None:
        session = db.session

    navigation = session.get(Navigation, navigation_id)
    if navigation is None:
        raise NotFoundError(f"Navigation {navigation_id} not found")
    return navigation


def list_navigations(website_id: str, *, session=None) -> List[Navigation]:
    if session is None:
        session = db.session

    return list(
        session.execute(
            select(Navigation)
            .where(Navigation.website_id == website_id)
            .order_by(Navigation.name)
        ).scalars()
    )


def create_navigation(
    *,
    website_id: str,
    data: Dict[str, Any],
    actor_id: Optional[str],
    session=None,
) -> Navigation:
    """Create a named, site-wide link list. Names are unique per Website."""
    if session is None:
        session = db.session

    if session.get(Website, website_id) is None:
        raise NotFoundError(f"Website {website_id} not found")

    payload = _parse(NavigationIn, data)

    navigation = Navigation()
    navigation.website_id = website_id
    navigation.name = payload.name.strip()
    navigation.items = [item.model_dump() for item in payload.items]

    try:
        with transactional(session):
            session.add(navigation)
            session.flush()

            log_action(
                website_id=website_id,
                actor_id=actor_id,
                action="navigation.create",
                entity_type="navigation",
                entity_id=navigation.id,
                payload={"name": navigation.name},
                session=session,
            )
    except IntegrityError as exc:
        raise ConflictError(DUPLICATE_NAME) from exc

    return navigation


def update_navigation(
    *,
    navigation_id: str,
    data: Dict[str, Any],
    actor_id: Optional[str],
    session=None,
) -> Navigation:
    """
    Rename a navigation and/or replace its items.

    Design rules:
    - Items are replaced wholesale, never merged
    - No silent no-op updates
    """
    if session is None:
        session = db.session

    navigation = get_navigation(navigation_id, session=session)
    payload = _parse(NavigationUpdate, data)

    changed_fields: list[str] = []
    if payload.name is not None and payload.name.strip() != navigation.name:
        navigation.name = payload.name.strip()
        changed_fields.append("name")
    if payload.items is not None:
        navigation.items = [item.model_dump() for item in payload.items]
        changed_fields.append("items")

    if not changed_fields:
        raise ValidationError(["No valid fields provided for update"])

    try:
        with transactional(session):
            log_action(
                website_id=navigation.website_id,
                actor_id=actor_id,
                action="navigation.update",
                entity_type="navigation",
                entity_id=navigation.id,
                payload={"fields": changed_fields},
                session=session,
            )
    except IntegrityError as exc:
        raise ConflictError(DUPLICATE_NAME) from exc

    return navigation


def delete_navigation(*, navigation_id: str, actor_id: Optional[str], session=None) -> None:
    if session is None:
        session = db.session

    navigation = get_navigation(navigation_id, session=session)

    with transactional(session):
        log_action(
            website_id=navigation.website_id,
            actor_id=actor_id,
            action="navigation.delete",
            entity_type="navigation",
            entity_id=navigation.id,
            payload={"name": navigation.name},
            session=session,
        )
        session.delete(navigation)
