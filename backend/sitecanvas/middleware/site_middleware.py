from flask import current_app, g, request
from sitecanvas.extensions import db
from sitecanvas.resolver.host import HostResolver


def site_middleware(blueprint):
    @blueprint.before_request
    def load_site():
        resolver = HostResolver(db.session, current_app.config["PLATFORM_DOMAIN"])

        # Raises SiteNotFound, rendered as a plain 404 by the error handlers
        site = resolver.resolve(request.host)

        # Attach the resolved site to the request context
        g.current_site = site
