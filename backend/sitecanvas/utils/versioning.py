import copy
import uuid

from sqlalchemy import func, select


def snapshot_pages(parsed_pages, raw_pages):
    """
    Build the stored page documents for a new Version.

    Content is deep-copied from the submitted payload so the Version never
    shares objects with the caller. Page and Element ids are kept when
    submitted and generated otherwise. Slug and name come from the parsed
    pages because homepage auto-assignment may have changed them.
    """
    snapshot = []
    for page, raw in zip(parsed_pages, raw_pages):
        raw_elements = raw.get("elements") or []
        document = {
            "id": page.id or str(uuid.uuid4()),
            "name": page.name,
            "slug": page.slug,
            "elements": [
                {
                    "id": element.id or str(uuid.uuid4()),
                    "type": element.type,
                    "order": element.order,
                    "config": copy.deepcopy(raw_element.get("config") or {}),
                }
                for element, raw_element in zip(page.elements, raw_elements)
            ],
        }
        if page.seo_title is not None:
            document["seoTitle"] = page.seo_title
        if page.seo_description is not None:
            document["seoDescription"] = page.seo_description
        snapshot.append(document)
    return snapshot


def next_version_number(session, website_id):
    from sitecanvas.models.website_version import WebsiteVersion

    last = session.execute(
        select(func.max(WebsiteVersion.version_number))
        .where(WebsiteVersion.website_id == website_id)
    ).scalar()
    return (last or 0) + 1
