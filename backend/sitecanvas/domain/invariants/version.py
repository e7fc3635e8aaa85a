from collections import Counter
from typing import Any, List, Sequence

from pydantic import ValidationError as SchemaError

from sitecanvas.domain.exceptions import ValidationError
from sitecanvas.domain.schemas import PageIn, format_error_location
from .element import element_violations
from .page import HOMEPAGE_SLUG, page_violations


def assert_version_tree(
    pages: Sequence[Any],
    *,
    registry,
    auto_assign_homepage: bool = False,
) -> List[PageIn]:
    """
    Validate a submitted page tree and return the parsed pages.

    Every violation is collected before raising so the editor can show all
    field-level messages at once. With ``auto_assign_homepage`` a tree that
    has no "/" page gets its first page renamed to "Home" at "/"; otherwise
    such a tree is rejected.
    """
    if not isinstance(pages, (list, tuple)):
        raise ValidationError(["pages: must be a list of page objects"])

    if not pages:
        raise ValidationError(["pages: a website needs at least one page"])

    violations: List[str] = []
    parsed: List[PageIn] = []

    for index, raw in enumerate(pages):
        try:
            page = PageIn.model_validate(raw)
        except SchemaError as exc:
            violations.extend(
                f"{format_error_location(f'pages[{index}]', err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            continue

        violations.extend(page_violations(page, index))
        for element_index, element in enumerate(page.elements):
            violations.extend(
                element_violations(
                    element,
                    page_index=index,
                    element_index=element_index,
                    registry=registry,
                )
            )
        parsed.append(page)

    slugs = Counter(page.slug for page in parsed)
    for slug, count in slugs.items():
        if count > 1:
            violations.append(f"pages: duplicate slug '{slug}' used by {count} pages")

    # Only judge the homepage rule when every page parsed
    if len(parsed) == len(pages) and HOMEPAGE_SLUG not in slugs:
        if auto_assign_homepage:
            parsed[0].slug = HOMEPAGE_SLUG
            parsed[0].name = "Home"
        else:
            violations.append("pages: missing homepage, exactly one page must use slug '/'")

    if violations:
        raise ValidationError(violations)

    return parsed
