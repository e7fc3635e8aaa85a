"""
Host -> Website resolution for visitor requests.

Pure reads only: safe to call on every inbound request.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from sitecanvas.domain.exceptions import SiteNotFound
from sitecanvas.models.navigation import Navigation
from sitecanvas.models.website import Website
from sitecanvas.models.website_version import WebsiteVersion
from sitecanvas.utils.hosts import normalize_host, subdomain_label


@dataclass(frozen=True)
class ResolvedSite:
    website: Website
    version: WebsiteVersion
    navigations: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def pages(self) -> List[Dict[str, Any]]:
        return self.version.pages or []

    def navigations_by_name(self) -> Dict[str, Dict[str, Any]]:
        return {navigation["name"]: navigation for navigation in self.navigations}


class HostResolver:
    def __init__(self, session, platform_domain: str):
        self.session = session
        self.platform_domain = normalize_host(platform_domain)

    def find_website(self, host: str) -> Optional[Website]:
        host = normalize_host(host)
        if not host:
            return None

        website = self.session.execute(
            select(Website).where(Website.custom_domain == host)
        ).scalar_one_or_none()
        if website is not None:
            return website

        label = subdomain_label(host, self.platform_domain)
        if label is None:
            return None

        return self.session.execute(
            select(Website).where(Website.subdomain == label)
        ).scalar_one_or_none()

    def resolve(self, host: str) -> ResolvedSite:
        """
        Find the Website serving ``host`` and its published Version.

        Custom domains win over platform subdomains. Raises SiteNotFound when
        nothing matches or the Website has never been published.
        """
        website = self.find_website(host)
        if website is None:
            raise SiteNotFound()

        # Read the pointer once; the Version it names is immutable.
        version_id = website.published_version_id
        if version_id is None:
            raise SiteNotFound()

        version = self.session.get(WebsiteVersion, version_id)
        if version is None:
            raise SiteNotFound()

        navigations = self.session.execute(
            select(Navigation)
            .where(Navigation.website_id == website.id)
            .order_by(Navigation.name)
        ).scalars().all()

        return ResolvedSite(
            website=website,
            version=version,
            navigations=[
                {"id": nav.id, "name": nav.name, "items": list(nav.items or [])}
                for nav in navigations
            ],
        )
