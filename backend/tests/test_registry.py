import pytest
from markupsafe import Markup

from sitecanvas.components import build_default_registry
from sitecanvas.components.registry import ComponentRegistry, ComponentSpec
from sitecanvas.components.renderers import RenderContext
from sitecanvas.components.schemas import HeadingConfig


def test_default_registry_types():
    registry = build_default_registry()

    assert registry.types() == (
        "button", "divider", "footer", "heading", "hero",
        "image", "navbar", "spacer", "text", "video",
    )
    assert "heading" in registry
    assert "carousel3d" not in registry
    assert registry.resolve("carousel3d") is None


def test_duplicate_registration_rejected():
    spec = build_default_registry().resolve("heading")

    with pytest.raises(ValueError):
        ComponentRegistry([spec, spec])


def test_empty_config_renders_defaults():
    registry = build_default_registry()
    context = RenderContext()

    for component_type in registry.types():
        spec = registry.resolve(component_type)
        html = spec.render(spec.parse_config({}), context=context, key="el-1")
        assert isinstance(html, Markup)
        assert 'data-key="el-1"' in html


def test_config_uses_camel_case_keys():
    spec = build_default_registry().resolve("heading")

    config = spec.parse_config({"text": "Hi", "fontSize": "2rem", "level": "h1"})

    assert isinstance(config, HeadingConfig)
    assert config.font_size == "2rem"
    assert spec.defaults()["text"] == "Default Heading"


def test_user_text_is_escaped():
    spec = build_default_registry().resolve("heading")

    html = spec.render(spec.parse_config({"text": "<script>x</script>"}), context=RenderContext(), key="k")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_navbar_uses_site_navigation():
    spec = build_default_registry().resolve("navbar")
    context = RenderContext(navigations={
        "main": {"id": "n1", "name": "main", "items": [{"label": "About", "url": "/about", "type": "internal"}]},
    })

    html = spec.render(spec.parse_config({"navigationName": "main"}), context=context, key="nav")

    assert 'href="/about"' in html
    assert "About" in html


def test_video_embed_url():
    spec = build_default_registry().resolve("video")

    html = spec.render(
        spec.parse_config({"provider": "vimeo", "url": "123", "aspectRatio": "4:3"}),
        context=RenderContext(),
        key="v",
    )

    assert "player.vimeo.com/video/123" in html
    assert "padding-top: 75.0%" in html


def test_custom_component_spec():
    registry = ComponentRegistry([
        ComponentSpec("badge", "Badge", "A badge.", HeadingConfig,
                      lambda config, *, context, key: Markup("<b>{}</b>").format(config.text)),
    ])

    spec = registry.resolve("badge")
    assert len(registry) == 1
    assert spec.render(spec.parse_config({"text": "new"}), context=RenderContext(), key="b") == "<b>new</b>"
