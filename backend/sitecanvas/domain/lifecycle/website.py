from typing import Set

from sitecanvas.domain.exceptions import IllegalTransition

# Re-publishing loops on "published"; there is no terminal state.
ALLOWED_WEBSITE_TRANSITIONS: dict[str, Set[str]] = {
    "unpublished": {"published"},
    "published": {"published"},
}


def assert_website_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards website lifecycle transitions.
    Single source of truth for status changes.
    """
    allowed = ALLOWED_WEBSITE_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise IllegalTransition(
            f"Illegal website transition: {from_status} -> {to_status}"
        )
