"""
HTML renderers, one per component type.

Every renderer takes its parsed config, the shared ``RenderContext`` and the
Element id (``key``) and returns ``Markup``. Interpolated values go through
``Markup.format`` so they are escaped.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from markupsafe import Markup, escape

from .schemas import (
    ButtonConfig,
    DividerConfig,
    FooterConfig,
    HeadingConfig,
    HeroConfig,
    ImageConfig,
    LinkItem,
    NavbarConfig,
    SpacerConfig,
    TextConfig,
    VideoConfig,
)


@dataclass(frozen=True)
class RenderContext:
    # Site-wide navigations keyed by name: {"id", "name", "items": [{label, url, type}]}
    navigations: Mapping[str, Dict[str, Any]] = field(default_factory=dict)
    global_settings: Mapping[str, Any] = field(default_factory=dict)

    def navigation(self, *, name: Optional[str] = None, navigation_id: Optional[str] = None):
        if name and name in self.navigations:
            return self.navigations[name]
        if navigation_id:
            for navigation in self.navigations.values():
                if navigation.get("id") == navigation_id:
                    return navigation
        return None


def _style(**declarations) -> str:
    return "; ".join(
        f"{prop.replace('_', '-')}: {value}"
        for prop, value in declarations.items()
        if value
    )


def _target_attrs(new_tab: bool) -> Markup:
    if new_tab:
        return Markup(' target="_blank" rel="noopener noreferrer"')
    return Markup("")


def render_heading(config: HeadingConfig, *, context: RenderContext, key: str) -> Markup:
    style = _style(color=config.color, font_size=config.font_size, text_align=config.alignment)
    return Markup('<{tag} data-key="{key}" class="font-bold" style="{style}">{text}</{tag}>').format(
        tag=Markup(config.level), key=key, style=style, text=config.text
    )


def render_text(config: TextConfig, *, context: RenderContext, key: str) -> Markup:
    style = _style(text_align=config.alignment, color=config.color, font_size=config.font_size)
    return Markup('<div data-key="{key}" class="my-2 leading-relaxed" style="{style}">{html}</div>').format(
        key=key, style=style, html=Markup(config.html_content)
    )


def _dimension(value, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return default


def render_image(config: ImageConfig, *, context: RenderContext, key: str) -> Markup:
    shadow = {"md": " shadow-md", "lg": " shadow-lg"}.get(config.shadow or "", "")
    image = Markup(
        '<img src="{src}" alt="{alt}" width="{width}" height="{height}" '
        'class="block my-2 mx-auto{shadow}" style="border-radius: {radius}"{hint}>'
    ).format(
        src=config.src,
        alt=config.alt,
        width=_dimension(config.width, 600),
        height=_dimension(config.height, 400),
        shadow=shadow,
        radius=config.corner_radius,
        hint=Markup(' data-ai-hint="{}"').format(config.data_ai_hint) if config.data_ai_hint else "",
    )

    if config.link:
        image = Markup('<a href="{href}"{target}>{image}</a>').format(
            href=config.link, target=_target_attrs(config.open_in_new_tab), image=image
        )

    caption = ""
    if config.caption:
        caption = Markup('<figcaption class="text-center text-sm mt-2">{}</figcaption>').format(config.caption)

    return Markup('<figure data-key="{key}" class="my-2">{image}{caption}</figure>').format(
        key=key, image=image, caption=caption
    )


BUTTON_STYLES = {
    "primary": "background-color: #007bff; color: white; border-color: #007bff",
    "secondary": "background-color: #6c757d; color: white; border-color: #6c757d",
    "outline": "background-color: transparent; color: #007bff; border-color: #007bff",
}


def render_button(config: ButtonConfig, *, context: RenderContext, key: str) -> Markup:
    style = BUTTON_STYLES[config.style]
    overrides = _style(background_color=config.background_color, color=config.text_color)
    if overrides:
        style = f"{style}; {overrides}"

    label = escape(config.text)
    if config.icon_left:
        label = Markup('<span class="mr-2">{}</span>').format(config.icon_left) + label
    if config.icon_right:
        label = label + Markup('<span class="ml-2">{}</span>').format(config.icon_right)

    return Markup(
        '<div data-key="{key}" style="text-align: {align}">'
        '<a href="{href}"{target} class="inline-block px-4 py-2 my-2 rounded btn-{variant}" style="{style}">{label}</a>'
        '</div>'
    ).format(
        key=key,
        align=config.alignment,
        href=config.link,
        target=_target_attrs(config.open_in_new_tab),
        variant=config.style,
        style=style,
        label=label,
    )


def render_divider(config: DividerConfig, *, context: RenderContext, key: str) -> Markup:
    return Markup(
        '<hr data-key="{key}" style="border: none; border-top: {height} {style} {color}; margin: {margin} 0">'
    ).format(key=key, height=config.height, style=config.style, color=config.color, margin=config.margin_y)


def render_spacer(config: SpacerConfig, *, context: RenderContext, key: str) -> Markup:
    return Markup('<div data-key="{key}" class="w-full" style="height: {height}" aria-hidden="true"></div>').format(
        key=key, height=config.height
    )


def _links_html(links: List[LinkItem], css_class: str) -> Markup:
    return Markup("").join(
        Markup('<a href="{href}" class="{css}"{target}>{text}</a>').format(
            href=link.href,
            css=css_class,
            target=_target_attrs(link.type == "external"),
            text=link.text,
        )
        for link in links
    )


def render_navbar(config: NavbarConfig, *, context: RenderContext, key: str) -> Markup:
    links = config.links
    navigation = context.navigation(name=config.navigation_name, navigation_id=config.navigation_id)
    if navigation is not None:
        links = [
            LinkItem(text=item.get("label", ""), href=item.get("url", "#"), type=item.get("type", "internal"))
            for item in navigation.get("items", [])
        ]

    if links:
        body = _links_html(links, "hover:text-primary transition-colors")
    else:
        body = Markup('<span class="text-xs italic">(No navigation links configured)</span>')

    return Markup(
        '<nav data-key="{key}" class="p-4 shadow-md {bg} {fg}">'
        '<div class="container mx-auto flex justify-between items-center">'
        '<a href="{brand_link}" class="text-xl font-bold font-headline">{brand}</a>'
        '<div class="space-x-4">{body}</div>'
        '</div></nav>'
    ).format(
        key=key,
        bg=config.background_color,
        fg=config.text_color,
        brand_link=config.brand_link,
        brand=config.brand_text,
        body=body,
    )


def render_hero(config: HeroConfig, *, context: RenderContext, key: str) -> Markup:
    background = config.background_image
    if background == "":
        background = "https://placehold.co/1200x600.png"

    style = ""
    classes = f"py-20 md:py-32 {config.text_color} relative"
    if background:
        style = f"background-image: url('{background}'); background-size: cover; background-position: center"
    else:
        classes = f"{classes} {config.background_color}"

    subtitle = ""
    if config.subtitle:
        subtitle = Markup('<p class="text-lg md:text-xl mb-10 max-w-2xl mx-auto">{}</p>').format(config.subtitle)

    button = ""
    if config.button_text and config.button_link:
        button = Markup('<a href="{}" class="inline-block px-8 py-3 rounded-md text-lg font-medium">{}</a>').format(
            config.button_link, config.button_text
        )

    return Markup(
        '<section data-key="{key}" class="{classes}" style="{style}">'
        '<div class="container mx-auto px-6 {align} relative z-10">'
        '<h1 class="text-4xl md:text-5xl font-bold font-headline mb-6">{title}</h1>{subtitle}{button}'
        '</div></section>'
    ).format(
        key=key,
        classes=classes,
        style=style,
        align=config.text_align,
        title=config.title,
        subtitle=subtitle,
        button=button,
    )


def render_footer(config: FooterConfig, *, context: RenderContext, key: str) -> Markup:
    links = ""
    if config.links:
        links = Markup('<div class="mt-4 space-x-4">{}</div>').format(
            _links_html(config.links, "text-sm hover:text-primary transition-colors")
        )

    return Markup(
        '<footer data-key="{key}" class="py-8 {bg} {fg}">'
        '<div class="container mx-auto px-6 text-center"><p class="text-sm">{copyright}</p>{links}</div>'
        '</footer>'
    ).format(
        key=key,
        bg=config.background_color,
        fg=config.text_color,
        copyright=config.copyright_text,
        links=links,
    )


VIDEO_EMBEDS = {
    "youtube": "https://www.youtube.com/embed/{id}?autoplay={autoplay}&loop={loop}&controls={controls}",
    "vimeo": "https://player.vimeo.com/video/{id}?autoplay={autoplay}&loop={loop}&controls={controls}",
}


def render_video(config: VideoConfig, *, context: RenderContext, key: str) -> Markup:
    if not config.url:
        return Markup(
            '<div data-key="{key}" class="my-4 p-4 border border-dashed text-center">'
            'Video Embed: Invalid configuration. Please provide a Video ID/URL.</div>'
        ).format(key=key)

    src = VIDEO_EMBEDS[config.provider].format(
        id=config.url,
        autoplay=int(config.autoplay),
        loop=int(config.loop),
        controls=int(config.controls),
    )
    if config.provider == "youtube" and config.loop:
        src += f"&playlist={config.url}"

    width, height = (int(part) for part in config.aspect_ratio.split(":"))
    padding_top = round(height / width * 100, 4)

    return Markup(
        '<section data-key="{key}" class="my-4 md:my-6">'
        '<div class="relative w-full overflow-hidden" style="padding-top: {padding}%">'
        '<iframe class="absolute top-0 left-0 w-full h-full" src="{src}" title="Embedded video from {provider}" '
        'allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture; web-share" '
        'referrerpolicy="strict-origin-when-cross-origin" allowfullscreen></iframe>'
        '</div></section>'
    ).format(key=key, padding=padding_top, src=src, provider=config.provider)
