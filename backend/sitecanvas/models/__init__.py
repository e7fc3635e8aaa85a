from .website import Website
from .website_version import WebsiteVersion
from .navigation import Navigation
from .audit_log import AuditLog

__all__ = ["Website", "WebsiteVersion", "Navigation", "AuditLog"]
