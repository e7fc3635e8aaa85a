import pytest
from markupsafe import Markup

from factories import heading
from sitecanvas.components import build_default_registry
from sitecanvas.components.registry import ComponentRegistry
from sitecanvas.domain.exceptions import OperationTimeout, RenderError
from sitecanvas.rendering.dispatcher import render_page
from sitecanvas.utils.deadline import Deadline


def _page(*elements):
    return {"id": "p1", "name": "Home", "slug": "/", "elements": list(elements)}


def test_elements_render_in_order_stable(registry):
    page = _page(
        heading("A", order=5, element_id="a"),
        heading("B", order=1, element_id="b"),
        heading("C", order=1, element_id="c"),
        heading("D", order=3, element_id="d"),
    )

    rendered = render_page(page, registry=registry)

    assert [element.key for element in rendered.elements] == ["b", "c", "d", "a"]
    html = rendered.html
    assert html.index(">B<") < html.index(">C<") < html.index(">D<") < html.index(">A<")


def test_unknown_type_placeholder_keeps_siblings(registry):
    page = _page(
        heading("Before", order=0, element_id="h1"),
        {"id": "x", "type": "carousel3d", "order": 1, "config": {}},
        heading("After", order=2, element_id="h2"),
    )

    rendered = render_page(page, registry=registry)

    assert [element.supported for element in rendered.elements] == [True, False, True]
    assert "Unsupported component: <strong>carousel3d</strong>" in rendered.html
    assert "Before" in rendered.html and "After" in rendered.html
    assert rendered.failures == []


def test_failing_renderer_is_isolated(app):
    def explode(config, *, context, key):
        raise ValueError("boom")

    default = build_default_registry()
    spec = default.resolve("hero")
    registry = ComponentRegistry([
        default.resolve("heading"),
        type(spec)(spec.type, spec.label, spec.description, spec.schema, explode),
    ])
    page = _page(
        heading("Title", order=0, element_id="t"),
        {"id": "hero-1", "type": "hero", "order": 1, "config": {}},
        heading("Tail", order=2, element_id="z"),
    )

    rendered = render_page(page, registry=registry)

    assert len(rendered.elements) == 3
    assert "Title" in rendered.html and "Tail" in rendered.html
    assert "sc-render-error" in rendered.html
    [failure] = rendered.failures
    assert isinstance(failure, RenderError)
    assert failure.element_id == "hero-1"
    assert isinstance(failure.__cause__, ValueError)


def test_invalid_stored_config_is_isolated(registry):
    page = _page(
        {"id": "b", "type": "button", "order": 0, "config": {"style": "neon"}},
        heading("Still here", order=1),
    )

    rendered = render_page(page, registry=registry)

    assert rendered.failures[0].element_type == "button"
    assert "Still here" in rendered.html


def test_element_id_is_render_key(registry):
    rendered = render_page(_page(heading("Hi", element_id="el-42")), registry=registry)

    assert 'data-key="el-42"' in rendered.html


def test_navigation_context_reaches_navbar(registry):
    page = _page({"id": "n", "type": "navbar", "order": 0, "config": {"navigationName": "main"}})
    navigations = {"main": {"id": "nav-1", "name": "main", "items": [{"label": "Shop", "url": "/shop"}]}}

    rendered = render_page(page, registry=registry, navigations=navigations)

    assert 'href="/shop"' in rendered.html


def test_text_html_is_trusted(registry):
    page = _page({"id": "t", "type": "text", "order": 0, "config": {"htmlContent": "<p><em>hi</em></p>"}})

    assert "<p><em>hi</em></p>" in render_page(page, registry=registry).html


def test_empty_page(registry):
    rendered = render_page(_page(), registry=registry)

    assert rendered.elements == []
    assert rendered.html == Markup("")


def test_render_deadline(registry):
    clock = iter([0.0, 0.0, 10.0]).__next__
    deadline = Deadline(1, clock=clock)

    with pytest.raises(OperationTimeout):
        render_page(_page(heading("a"), heading("b")), registry=registry, deadline=deadline)
