"""
Persistence of immutable website Versions.

A Version is written once by ``create_version`` and never updated; edits
always produce a new row. The store does not touch the Website's published
pointer, that is the publishing pipeline's job.
"""
import copy
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator, List, Mapping, Optional, Sequence

from flask import current_app
from pydantic import ValidationError as SchemaError
from sqlalchemy.exc import IntegrityError

from sitecanvas.domain.exceptions import ConflictError, NotFoundError, ValidationError
from sitecanvas.domain.invariants.version import assert_version_tree
from sitecanvas.domain.schemas import GlobalSettingsIn
from sitecanvas.models.website import Website
from sitecanvas.models.website_version import WebsiteVersion
from sitecanvas.utils.pagination import CursorMeta, paginate_keyset
from sitecanvas.utils.transaction import transactional
from sitecanvas.utils.versioning import next_version_number, snapshot_pages

# Concurrent creates for one website can race on version_number
MAX_NUMBERING_ATTEMPTS = 3


@dataclass(frozen=True)
class VersionSummary:
    id: str
    website_id: str
    version_number: int
    page_count: int
    created_at: datetime
    created_by: Optional[str]


def _summary(version: WebsiteVersion) -> VersionSummary:
    return VersionSummary(
        id=version.id,
        website_id=version.website_id,
        version_number=version.version_number,
        page_count=len(version.pages or []),
        created_at=version.created_at,
        created_by=version.created_by,
    )


class VersionHistory:
    """
    Newest-first Version metadata for one Website.

    Iterating runs a fresh keyset-paginated query each time, so the sequence
    is lazy, finite and restartable.
    """

    def __init__(self, session, website_id: str, *, batch_size: int = 50):
        self._session = session
        self.website_id = website_id
        self.batch_size = batch_size

    def _query(self):
        return self._session.query(WebsiteVersion).filter(
            WebsiteVersion.website_id == self.website_id
        )

    def page(self, *, limit: int, cursor: Optional[str] = None) -> tuple[List[VersionSummary], CursorMeta]:
        rows, meta = paginate_keyset(
            self._query(),
            sort_column=WebsiteVersion.version_number,
            id_column=WebsiteVersion.id,
            limit=limit,
            cursor=cursor,
            parse=int,
        )
        return [_summary(row) for row in rows], meta

    def __iter__(self) -> Iterator[VersionSummary]:
        cursor = None
        while True:
            items, meta = self.page(limit=self.batch_size, cursor=cursor)
            yield from items
            if not meta["has_more"]:
                return
            cursor = meta["next_cursor"]


class VersionStore:
    def __init__(self, session, registry, *, auto_assign_homepage: bool = False):
        self.session = session
        self.registry = registry
        self.auto_assign_homepage = auto_assign_homepage

    def create_version(
        self,
        website_id: str,
        pages: Sequence[Any],
        global_settings: Optional[Mapping[str, Any]] = None,
        *,
        created_by: Optional[str] = None,
    ) -> str:
        """
        Validate a full content tree and persist it as a brand-new Version.

        Raises NotFoundError for an unknown website and ValidationError with
        every violation for an invalid tree.
        """
        website = self.session.get(Website, website_id)
        if website is None:
            raise NotFoundError(f"Website {website_id} not found")

        violations = self._settings_violations(global_settings)
        try:
            parsed = assert_version_tree(
                pages,
                registry=self.registry,
                auto_assign_homepage=self.auto_assign_homepage,
            )
        except ValidationError as exc:
            raise ValidationError(violations + exc.messages) from None
        if violations:
            raise ValidationError(violations)

        settings = copy.deepcopy(dict(global_settings or {}))
        documents = snapshot_pages(parsed, pages)

        for attempt in range(1, MAX_NUMBERING_ATTEMPTS + 1):
            version = WebsiteVersion()
            version.website_id = website.id
            version.version_number = next_version_number(self.session, website.id)
            version.pages = documents
            version.global_settings = settings
            version.created_by = created_by

            try:
                with transactional(self.session):
                    self.session.add(version)
            except IntegrityError:
                if attempt == MAX_NUMBERING_ATTEMPTS:
                    raise
                current_app.logger.warning(
                    "Version number clash for website %s, retrying (%d/%d)",
                    website.id, attempt, MAX_NUMBERING_ATTEMPTS,
                )
                continue

            current_app.logger.info(
                "Created version %s (#%d) for website %s",
                version.id, version.version_number, website.id,
            )
            return version.id

    @staticmethod
    def _settings_violations(global_settings) -> List[str]:
        if global_settings is None:
            return []
        if not isinstance(global_settings, Mapping):
            return ["globalSettings: must be an object"]

        try:
            GlobalSettingsIn.model_validate(dict(global_settings))
        except SchemaError as exc:
            return [
                f"globalSettings.{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]
        return []

    def get_version(self, version_id: str) -> WebsiteVersion:
        version = self.session.get(WebsiteVersion, version_id)
        if version is None:
            raise NotFoundError(f"Version {version_id} not found")
        return version

    def list_versions(self, website_id: str, *, batch_size: int = 50) -> VersionHistory:
        if self.session.get(Website, website_id) is None:
            raise NotFoundError(f"Website {website_id} not found")
        return VersionHistory(self.session, website_id, batch_size=batch_size)

    def delete_version(self, version_id: str) -> None:
        version = self.get_version(version_id)
        website = self.session.get(Website, version.website_id)

        if website is not None and website.published_version_id == version.id:
            raise ConflictError("The published version cannot be deleted")

        with transactional(self.session):
            self.session.delete(version)


def page_for_slug(pages: Sequence[Mapping[str, Any]], slug: str) -> Mapping[str, Any]:
    """Find the Page with exactly this slug inside a Version's pages."""
    for page in pages:
        if page.get("slug") == slug:
            return page
    raise NotFoundError(f"No page at {slug}")
