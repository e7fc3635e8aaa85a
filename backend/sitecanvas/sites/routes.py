from flask import current_app, g, render_template
from sitecanvas.components import get_registry
from sitecanvas.rendering.dispatcher import render_page
from sitecanvas.store.version_store import page_for_slug
from sitecanvas.utils.deadline import Deadline
from . import sites_bp

DEFAULT_BODY_FONT = "Inter"
DEFAULT_HEADLINE_FONT = "Poppins"


def page_title(page, settings, fallback_name):
    if page.get("seoTitle"):
        return page["seoTitle"]
    return f"{page.get('name', '')} - {settings.get('siteName') or fallback_name}"


@sites_bp.route("/", defaults={"path": ""}, methods=["GET"])
@sites_bp.route("/<path:path>", methods=["GET"])
def serve_page(path):
    site = g.current_site
    settings = site.version.global_settings or {}

    page = page_for_slug(site.pages, "/" + path.strip("/"))

    rendered = render_page(
        page,
        registry=get_registry(),
        navigations=site.navigations_by_name(),
        global_settings=settings,
        deadline=Deadline(current_app.config["RENDER_TIMEOUT_SECONDS"]),
    )

    if rendered.failures:
        current_app.logger.warning(
            "Rendered %s%s with %d failed element(s)",
            site.website.subdomain, rendered.slug, len(rendered.failures),
        )

    return render_template(
        "site/page.html",
        title=page_title(page, settings, site.website.name),
        description=page.get("seoDescription") or "",
        favicon=settings.get("faviconUrl"),
        body_font=settings.get("fontFamily") or DEFAULT_BODY_FONT,
        headline_font=settings.get("fontHeadline") or DEFAULT_HEADLINE_FONT,
        content=rendered.html,
    )
