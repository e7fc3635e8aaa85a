import pytest

from sitecanvas.application.sites.set_custom_domain import set_custom_domain
from sitecanvas.domain.exceptions import ConflictError, SiteNotFound, ValidationError
from sitecanvas.resolver.host import HostResolver
from sitecanvas.utils.hosts import normalize_host, subdomain_label


@pytest.fixture
def resolver(session):
    return HostResolver(session, "platform.com")


@pytest.fixture
def live_site(make_website, publish, session, user_id):
    website = make_website("myshop")
    publish(website)
    set_custom_domain(website_id=website.id, domain="example.com", actor_id=user_id, session=session)
    return website


@pytest.mark.parametrize("raw, expected", [
    ("Shop.Platform.COM", "shop.platform.com"),
    ("shop.platform.com:8080", "shop.platform.com"),
    ("example.com.", "example.com"),
    ("[::1]:5000", "::1"),
    ("", ""),
    (None, ""),
])
def test_normalize_host(raw, expected):
    assert normalize_host(raw) == expected


def test_subdomain_label():
    assert subdomain_label("shop.platform.com", "platform.com") == "shop"
    assert subdomain_label("a.b.platform.com", "platform.com") is None
    assert subdomain_label("platform.com", "platform.com") is None
    assert subdomain_label("shop.other.com", "platform.com") is None


def test_resolves_custom_domain(resolver, live_site):
    site = resolver.resolve("example.com")

    assert site.website.id == live_site.id
    assert site.version.id == live_site.published_version_id
    assert site.pages[0]["slug"] == "/"


def test_resolves_subdomain(resolver, live_site):
    assert resolver.resolve("myshop.platform.com").website.id == live_site.id


def test_port_and_case_ignored(resolver, live_site):
    assert resolver.resolve("EXAMPLE.com:443").website.id == live_site.id
    assert resolver.resolve("MyShop.Platform.com:8080").website.id == live_site.id


def test_platform_hosts_rejected_as_custom_domains(live_site, session, user_id):
    with pytest.raises(ValidationError):
        set_custom_domain(
            website_id=live_site.id, domain="other.platform.com", actor_id=user_id, session=session
        )


def test_custom_domain_checked_before_subdomain(resolver, make_website, publish, session, live_site):
    other = make_website("other", name="Other")
    publish(other)

    # Rows written before platform hosts were rejected as custom domains
    live_site.custom_domain = "other.platform.com"
    session.commit()

    assert resolver.find_website("other.platform.com").id == live_site.id
    assert resolver.resolve("other.platform.com").website.id == live_site.id


@pytest.mark.parametrize("host", [
    "shop.platform.com",
    "unknown.com",
    "a.myshop.platform.com",
    "platform.com",
    "",
])
def test_unknown_hosts(resolver, live_site, host):
    with pytest.raises(SiteNotFound) as exc_info:
        resolver.resolve(host)

    assert str(exc_info.value) == "Site not found"


def test_unpublished_site_not_served(resolver, make_website):
    make_website("draft")

    assert resolver.find_website("draft.platform.com") is not None
    with pytest.raises(SiteNotFound):
        resolver.resolve("draft.platform.com")


def test_navigations_loaded(resolver, live_site, session, user_id):
    from sitecanvas.application.navigation.navigation import create_navigation

    create_navigation(
        website_id=live_site.id,
        data={"name": "main", "items": [{"label": "About", "url": "/about"}]},
        actor_id=user_id,
        session=session,
    )

    site = resolver.resolve("example.com")

    assert site.navigations_by_name()["main"]["items"] == [
        {"label": "About", "url": "/about", "type": "internal"}
    ]


def test_domain_in_use(live_site, make_website, session, user_id):
    other = make_website("other", name="Other")

    with pytest.raises(ConflictError):
        set_custom_domain(website_id=other.id, domain="Example.com", actor_id=user_id, session=session)


def test_clearing_domain(resolver, live_site, session, user_id):
    result = set_custom_domain(website_id=live_site.id, domain=None, actor_id=user_id, session=session)

    assert result["website"].domain_status == "unconfigured"
    assert result["dns_instructions"] is None
    with pytest.raises(SiteNotFound):
        resolver.resolve("example.com")
