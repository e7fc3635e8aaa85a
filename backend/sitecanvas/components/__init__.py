from flask import current_app

from . import renderers, schemas
from .registry import ComponentRegistry, ComponentSpec

REGISTRY_EXTENSION_KEY = "sitecanvas.component_registry"


def build_default_registry() -> ComponentRegistry:
    return ComponentRegistry([
        ComponentSpec("heading", "Heading", "Titles and subheadings (H1-H6).",
                      schemas.HeadingConfig, renderers.render_heading),
        ComponentSpec("text", "Rich Text Block", "Paragraphs, lists, and formatted text.",
                      schemas.TextConfig, renderers.render_text),
        ComponentSpec("image", "Image", "A single image with optional link and caption.",
                      schemas.ImageConfig, renderers.render_image),
        ComponentSpec("button", "Button", "Call-to-action link styled as a button.",
                      schemas.ButtonConfig, renderers.render_button),
        ComponentSpec("divider", "Divider", "Horizontal rule.",
                      schemas.DividerConfig, renderers.render_divider),
        ComponentSpec("spacer", "Spacer", "Vertical whitespace.",
                      schemas.SpacerConfig, renderers.render_spacer),
        ComponentSpec("navbar", "Navbar Section", "Top navigation bar, optionally bound to a site navigation.",
                      schemas.NavbarConfig, renderers.render_navbar),
        ComponentSpec("hero", "Hero Section", "Large hero section with heading and CTA.",
                      schemas.HeroConfig, renderers.render_hero),
        ComponentSpec("footer", "Footer Section", "Footer with copyright and links.",
                      schemas.FooterConfig, renderers.render_footer),
        ComponentSpec("video", "Video Embed", "YouTube or Vimeo embed.",
                      schemas.VideoConfig, renderers.render_video),
    ])


def get_registry() -> ComponentRegistry:
    return current_app.extensions[REGISTRY_EXTENSION_KEY]


__all__ = [
    "ComponentRegistry",
    "ComponentSpec",
    "REGISTRY_EXTENSION_KEY",
    "build_default_registry",
    "get_registry",
]
