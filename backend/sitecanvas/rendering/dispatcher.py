"""
Element dispatcher: turns a Page's Elements into HTML, in display order.

A failing Element never fails the page. It is logged and replaced by a
visible placeholder while its siblings keep rendering.
"""
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from flask import current_app
from markupsafe import Markup

from sitecanvas.components.renderers import RenderContext
from sitecanvas.domain.exceptions import RenderError
from sitecanvas.utils.order import sort_by_order


@dataclass(frozen=True)
class RenderedElement:
    key: Optional[str]
    type: str
    html: Markup
    error: Optional[RenderError] = None
    supported: bool = True


@dataclass(frozen=True)
class RenderedPage:
    slug: str
    elements: List[RenderedElement]

    @property
    def html(self) -> Markup:
        return Markup("").join(element.html for element in self.elements)

    @property
    def failures(self) -> List[RenderError]:
        return [element.error for element in self.elements if element.error is not None]


def unsupported_placeholder(element_type: str, key: Optional[str]) -> Markup:
    return Markup(
        '<div data-key="{key}" class="sc-unsupported my-2 p-3 border border-dashed rounded">'
        '<p class="text-xs">Unsupported component: <strong>{type}</strong></p></div>'
    ).format(key=key or "", type=element_type)


def error_placeholder(element_type: str, key: Optional[str]) -> Markup:
    return Markup(
        '<div data-key="{key}" class="sc-render-error my-2 p-3 border border-dashed rounded">'
        '<p class="text-xs">This <strong>{type}</strong> block could not be displayed.</p></div>'
    ).format(key=key or "", type=element_type)


def render_element(element: Mapping[str, Any], *, registry, context: RenderContext) -> RenderedElement:
    element_type = str(element.get("type") or "")
    key = element.get("id")
    spec = registry.resolve(element_type)

    if spec is None:
        current_app.logger.warning("Unsupported component type '%s' (element %s)", element_type, key)
        return RenderedElement(key=key, type=element_type, html=unsupported_placeholder(element_type, key), supported=False)

    try:
        config = spec.parse_config(element.get("config"))
        html = spec.render(config, context=context, key=key or "")
    except Exception as exc:
        error = RenderError(element_id=key, element_type=element_type, reason=str(exc))
        error.__cause__ = exc
        current_app.logger.exception(str(error))
        return RenderedElement(key=key, type=element_type, html=error_placeholder(element_type, key), error=error)

    return RenderedElement(key=key, type=element_type, html=Markup(html))


def render_page(
    page: Mapping[str, Any],
    *,
    registry,
    navigations: Optional[Mapping[str, Mapping[str, Any]]] = None,
    global_settings: Optional[Mapping[str, Any]] = None,
    deadline=None,
) -> RenderedPage:
    """
    Render every Element of ``page`` in ``order``.

    The sort is stable, so Elements sharing an order value keep their array
    position. ``deadline`` is checked before each Element; running out raises
    OperationTimeout for the whole page.
    """
    context = RenderContext(
        navigations=dict(navigations or {}),
        global_settings=dict(global_settings or {}),
    )

    rendered = []
    for element in sort_by_order(page.get("elements") or []):
        if deadline is not None:
            deadline.check("Page render")
        rendered.append(render_element(element, registry=registry, context=context))

    return RenderedPage(slug=page.get("slug", ""), elements=rendered)
