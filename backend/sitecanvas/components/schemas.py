"""
Per-type configuration contracts.

Keys are documented by the field names; payloads use their camelCase
aliases (``htmlContent``, ``backgroundColor`` ...). Unknown keys are ignored
and every field has a default, so an empty config always renders.
"""
from datetime import datetime, timezone
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Alignment = Literal["left", "center", "right"]


class ComponentConfig(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class LinkItem(ComponentConfig):
    text: str
    href: str
    type: Literal["internal", "external"] = "internal"


class HeadingConfig(ComponentConfig):
    text: str = "Default Heading"
    level: Literal["h1", "h2", "h3", "h4", "h5", "h6"] = "h2"
    color: str = "inherit"
    font_size: Optional[str] = None
    alignment: Alignment = "left"


class TextConfig(ComponentConfig):
    # Trusted owner-authored HTML, emitted as-is
    html_content: str = "<p>Default text content. Edit this in the editor.</p>"
    alignment: Literal["left", "center", "right", "justify"] = "left"
    color: Optional[str] = None
    font_size: Optional[str] = None


class ImageConfig(ComponentConfig):
    src: str = "https://placehold.co/600x400.png?text=Placeholder"
    alt: str = "Website image"
    # The editor stores CSS strings such as "100%"; only positive ints are used
    width: Union[int, str, None] = None
    height: Union[int, str, None] = None
    link: Optional[str] = None
    open_in_new_tab: bool = False
    caption: Optional[str] = None
    corner_radius: str = "0.5rem"
    shadow: Optional[str] = None
    data_ai_hint: Optional[str] = None


class ButtonConfig(ComponentConfig):
    text: str = "Button"
    link: str = "#"
    style: Literal["primary", "secondary", "outline"] = "primary"
    alignment: Alignment = "left"
    open_in_new_tab: bool = False
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    icon_left: Optional[str] = None
    icon_right: Optional[str] = None


class DividerConfig(ComponentConfig):
    style: Literal["solid", "dashed", "dotted"] = "solid"
    color: str = "#cccccc"
    height: str = "1px"
    margin_y: str = "16px"


class SpacerConfig(ComponentConfig):
    height: str = "4rem"


class NavbarConfig(ComponentConfig):
    brand_text: str = "MySite"
    brand_link: str = "/"
    # A site-wide Navigation, looked up by name first, then by id
    navigation_name: Optional[str] = None
    navigation_id: Optional[str] = None
    links: List[LinkItem] = Field(default_factory=list)
    background_color: str = "bg-neutral-100"
    text_color: str = "text-neutral-800"


class HeroConfig(ComponentConfig):
    title: str = "Hero Title"
    subtitle: str = "Amazing subtitle describing the hero section."
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    background_image: Optional[str] = None
    background_color: str = "bg-primary/10"
    text_color: str = "text-neutral-800"
    text_align: str = "text-center"


def _default_copyright() -> str:
    return f"© {datetime.now(timezone.utc).year} Your Company. All rights reserved."


class FooterConfig(ComponentConfig):
    copyright_text: str = Field(default_factory=_default_copyright)
    links: List[LinkItem] = Field(
        default_factory=lambda: [
            LinkItem(text="Privacy Policy", href="/privacy"),
            LinkItem(text="Terms of Service", href="/terms"),
        ]
    )
    background_color: str = "bg-neutral-800"
    text_color: str = "text-neutral-300"


class VideoConfig(ComponentConfig):
    provider: Literal["youtube", "vimeo"] = "youtube"
    # Video id for the chosen provider
    url: Optional[str] = None
    aspect_ratio: str = Field(default="16:9", pattern=r"^[1-9]\d*:[1-9]\d*$")
    autoplay: bool = False
    loop: bool = False
    controls: bool = True
