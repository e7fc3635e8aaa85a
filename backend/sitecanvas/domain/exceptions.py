"""
Error taxonomy shared by the store, the publishing pipeline, the host
resolver and the renderer. HTTP mapping lives in ``sitecanvas.errors``.
"""
from typing import Iterable, List, Optional


class SiteCanvasError(Exception):
    """Base class for domain errors."""


class ValidationError(SiteCanvasError):
    """A submitted content tree is malformed. Carries every violation found."""

    def __init__(self, messages: Iterable[str]):
        self.messages: List[str] = list(messages)
        super().__init__("; ".join(self.messages) or "Invalid content tree")


class NotFoundError(SiteCanvasError):
    """Unknown Website, Version, Navigation or Page slug."""


class SiteNotFound(NotFoundError):
    """Host resolution miss. The message is generic on purpose."""

    def __init__(self):
        super().__init__("Site not found")


class RenderError(SiteCanvasError):
    """A single Element failed to render."""

    def __init__(self, *, element_id: Optional[str], element_type: str, reason: str):
        self.element_id = element_id
        self.element_type = element_type
        super().__init__(
            f"Element {element_id or '?'} of type '{element_type}' failed to render: {reason}"
        )


class ConflictError(SiteCanvasError):
    """Operation clashes with the current state (e.g. deleting the live Version)."""


class IllegalTransition(SiteCanvasError):
    """A Website lifecycle transition that is not allowed."""


class OperationTimeout(SiteCanvasError):
    """A publish or render exceeded its time budget."""
