import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # Visitor hosts of the form <subdomain>.<PLATFORM_DOMAIN>
    PLATFORM_DOMAIN = os.getenv("PLATFORM_DOMAIN", "sitecanvas.app").lower()

    # Rename the first page to "/" instead of rejecting a tree without a homepage
    AUTO_ASSIGN_HOMEPAGE = _env_bool("AUTO_ASSIGN_HOMEPAGE", False)

    PUBLISH_TIMEOUT_SECONDS = float(os.getenv("PUBLISH_TIMEOUT_SECONDS", "15"))
    RENDER_TIMEOUT_SECONDS = float(os.getenv("RENDER_TIMEOUT_SECONDS", "5"))
    VERSION_PAGE_SIZE = int(os.getenv("VERSION_PAGE_SIZE", "50"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///sitecanvas-dev.db")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    PLATFORM_DOMAIN = "platform.com"
    AUTO_ASSIGN_HOMEPAGE = False
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length"


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
