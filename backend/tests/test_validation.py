import pytest

from factories import heading, make_pages
from sitecanvas.domain.exceptions import ValidationError
from sitecanvas.domain.invariants.version import assert_version_tree


def test_valid_tree_parses(registry):
    parsed = assert_version_tree(
        make_pages(("Home", "/", [heading("Hi")]), ("About", "/about", [])),
        registry=registry,
    )

    assert [page.slug for page in parsed] == ["/", "/about"]
    assert parsed[0].elements[0].type == "heading"


@pytest.mark.parametrize("pages", [None, {}, "pages", []])
def test_tree_must_be_non_empty_list(registry, pages):
    with pytest.raises(ValidationError):
        assert_version_tree(pages, registry=registry)


def test_duplicate_homepage_rejected(registry):
    pages = make_pages(("Home", "/", []), ("Landing", "/", []))

    with pytest.raises(ValidationError) as exc_info:
        assert_version_tree(pages, registry=registry)

    assert exc_info.value.messages == ["pages: duplicate slug '/' used by 2 pages"]


def test_missing_homepage_rejected_by_default(registry):
    pages = make_pages(("About", "/about", []))

    with pytest.raises(ValidationError) as exc_info:
        assert_version_tree(pages, registry=registry)

    assert "missing homepage" in exc_info.value.messages[0]


def test_missing_homepage_auto_assigned(registry):
    pages = make_pages(("About", "/about", []), ("Contact", "/contact", []))

    parsed = assert_version_tree(pages, registry=registry, auto_assign_homepage=True)

    assert parsed[0].slug == "/"
    assert parsed[0].name == "Home"
    assert parsed[1].slug == "/contact"


def test_unknown_component_rejected_at_save(registry):
    pages = make_pages(("Home", "/", [{"type": "carousel3d", "order": 0, "config": {}}]))

    with pytest.raises(ValidationError) as exc_info:
        assert_version_tree(pages, registry=registry)

    assert exc_info.value.messages == [
        "pages[0].elements[0].type: unknown component type 'carousel3d'"
    ]


def test_every_violation_reported(registry):
    pages = [
        {"name": "Home", "slug": "/", "elements": [
            {"type": "heading", "order": 1},
            {"type": "button", "order": 2, "config": {"style": "neon"}},
        ]},
        {"slug": "/about", "elements": []},
        {"name": "Blog", "slug": "blog", "elements": []},
        {"name": "News", "slug": "/news", "elements": [{"type": "heading", "order": "1"}]},
    ]

    with pytest.raises(ValidationError) as exc_info:
        assert_version_tree(pages, registry=registry)

    messages = exc_info.value.messages
    assert any(m.startswith("pages[3].elements[0].order") for m in messages)
    assert any(m.startswith("pages[0].elements[1].config.style") for m in messages)
    assert any(m.startswith("pages[1].name") for m in messages)
    assert "pages[2].slug: 'blog' must start with '/'" in messages


def test_order_may_have_gaps_and_floats(registry):
    pages = make_pages(("Home", "/", [heading("a", order=10), heading("b", order=2.5), heading("c", order=10)]))

    parsed = assert_version_tree(pages, registry=registry)

    assert [element.order for element in parsed[0].elements] == [10, 2.5, 10]


def test_bool_order_rejected(registry):
    pages = make_pages(("Home", "/", [heading("a", order=True)]))

    with pytest.raises(ValidationError):
        assert_version_tree(pages, registry=registry)


@pytest.mark.parametrize("slug, message", [
    ("/about/", "pages[1].slug: '/about/' must not end with '/'"),
    ("/blog//post", "pages[1].slug: '/blog//post' must not contain empty path segments"),
    ("//", "pages[1].slug: '//' must not contain empty path segments"),
])
def test_slugs_must_match_request_paths(registry, slug, message):
    pages = make_pages(("Home", "/", []), ("Other", slug, []))

    with pytest.raises(ValidationError) as exc_info:
        assert_version_tree(pages, registry=registry)

    assert exc_info.value.messages == [message]


def test_nested_slug_accepted(registry):
    parsed = assert_version_tree(make_pages(("Home", "/", []), ("Post", "/blog/post", [])), registry=registry)

    assert parsed[1].slug == "/blog/post"
