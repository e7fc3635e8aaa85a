import re
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from sitecanvas.domain.exceptions import ConflictError, NotFoundError, ValidationError
from sitecanvas.extensions import db
from sitecanvas.models.website import Website
from sitecanvas.utils.audit import log_action
from sitecanvas.utils.hosts import normalize_host
from sitecanvas.utils.transaction import transactional

DOMAIN_PATTERN = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)(\.(?!-)[a-z0-9-]{1,63}(?<!-))*\.[a-z]{2,63}$")

DNS_INSTRUCTIONS = (
    'To connect "{domain}", add a CNAME record pointing to {target}. '
    "Verification may take up to 48 hours."
)


def set_custom_domain(
    *,
    website_id: str,
    domain: Optional[str],
    actor_id: Optional[str],
    session=None,
) -> Dict[str, Any]:
    """
    Attach a customer-owned domain to a Website, or detach it with ``None``/"".

    The domain is stored lower-cased without port so the host resolver can
    match it exactly.
    """
    if session is None:
        session = db.session

    website = session.get(Website, website_id)
    if website is None:
        raise NotFoundError(f"Website {website_id} not found")

    platform_domain = current_app.config["PLATFORM_DOMAIN"]
    normalized = normalize_host(domain) if domain else None

    if normalized:
        if len(normalized) > 253 or not DOMAIN_PATTERN.match(normalized):
            raise ValidationError(["domain: invalid domain name format"])
        if normalized == platform_domain or normalized.endswith(f".{platform_domain}"):
            raise ValidationError(["domain: platform subdomains cannot be used as custom domains"])

        taken = session.execute(
            select(Website.id).where(Website.custom_domain == normalized, Website.id != website.id)
        ).scalar_one_or_none()
        if taken is not None:
            raise ConflictError(f'Domain "{normalized}" is already in use by another website')

    try:
        with transactional(session):
            website.custom_domain = normalized
            website.domain_status = "pending_verification" if normalized else "unconfigured"

            log_action(
                website_id=website.id,
                actor_id=actor_id,
                action="website.domain",
                entity_type="website",
                entity_id=website.id,
                payload={"custom_domain": normalized},
                session=session,
            )
    except IntegrityError as exc:
        raise ConflictError(f'Domain "{normalized}" is already in use by another website') from exc

    instructions = None
    if normalized:
        instructions = DNS_INSTRUCTIONS.format(
            domain=normalized,
            target=f"{website.subdomain}.{platform_domain}",
        )

    return {"website": website, "dns_instructions": instructions}
