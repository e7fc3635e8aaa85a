from typing import List

from sitecanvas.domain.schemas import PageIn

HOMEPAGE_SLUG = "/"


def page_violations(page: PageIn, index: int) -> List[str]:
    """
    Slug rules. Slugs are matched verbatim against request paths, which the
    site routes derive without a trailing slash.
    """
    violations = []
    slug = page.slug

    if not slug.startswith("/"):
        violations.append(f"pages[{index}].slug: '{slug}' must start with '/'")

    if slug != slug.strip():
        violations.append(f"pages[{index}].slug: '{slug}' must not contain surrounding whitespace")

    if "//" in slug:
        violations.append(f"pages[{index}].slug: '{slug}' must not contain empty path segments")
    elif slug != HOMEPAGE_SLUG and slug.endswith("/"):
        violations.append(f"pages[{index}].slug: '{slug}' must not end with '/'")

    return violations
