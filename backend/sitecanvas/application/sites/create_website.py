import re
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError

from sitecanvas.domain.exceptions import ConflictError, ValidationError
from sitecanvas.extensions import db
from sitecanvas.models.website import Website
from sitecanvas.utils.audit import log_action
from sitecanvas.utils.transaction import transactional

SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")
RESERVED_SUBDOMAINS = {"www", "api", "app", "admin", "mail"}


def create_website(
    *,
    user_id: str,
    name: Optional[str],
    subdomain: Optional[str],
    global_settings: Optional[Dict[str, Any]] = None,
    session=None,
) -> Website:
    """
    Create an unpublished Website for ``user_id``.

    Edge cases handled:
    - Missing name or subdomain
    - Subdomain that is not a DNS label or is reserved
    - Subdomain already taken
    """
    if session is None:
        session = db.session

    violations = []
    name = (name or "").strip()
    subdomain = (subdomain or "").strip().lower()

    if not name:
        violations.append("name: is required")
    if not subdomain:
        violations.append("subdomain: is required")
    elif not SUBDOMAIN_PATTERN.match(subdomain):
        violations.append("subdomain: must be a DNS label (letters, digits, hyphens)")
    elif subdomain in RESERVED_SUBDOMAINS:
        violations.append(f"subdomain: '{subdomain}' is reserved")
    if global_settings is not None and not isinstance(global_settings, dict):
        violations.append("globalSettings: must be an object")

    if violations:
        raise ValidationError(violations)

    website = Website()
    website.user_id = user_id
    website.name = name
    website.subdomain = subdomain
    website.global_settings = dict(global_settings or {"siteName": name})

    try:
        with transactional(session):
            session.add(website)
            session.flush()  # ensures website.id is available

            log_action(
                website_id=website.id,
                actor_id=user_id,
                action="website.create",
                entity_type="website",
                entity_id=website.id,
                payload={"name": name, "subdomain": subdomain},
                session=session,
            )
    except IntegrityError as exc:
        # Unique constraint on websites.subdomain
        raise ConflictError(f"Subdomain '{subdomain}' is already in use") from exc

    return website
