from flask import Blueprint
from sitecanvas.middleware.site_middleware import site_middleware

# Public visitor pages, resolved from the Host header
sites_bp = Blueprint("sites", __name__, template_folder="templates")
site_middleware(sites_bp)

from . import routes
