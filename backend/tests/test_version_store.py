import pytest

from factories import heading, make_pages
from sitecanvas.domain.exceptions import ConflictError, NotFoundError, ValidationError
from sitecanvas.models.website_version import WebsiteVersion
from sitecanvas.store.version_store import VersionStore, page_for_slug


@pytest.fixture
def store(session, registry):
    return VersionStore(session, registry)


def test_create_and_get_round_trip(store, make_website):
    website = make_website()
    pages = make_pages(
        ("Home", "/", [heading("Hello", order=1, element_id="el-1")]),
        ("About", "/about", []),
    )

    version_id = store.create_version(website.id, pages, {"siteName": "Shop"}, created_by="u1")
    version = store.get_version(version_id)

    assert version.website_id == website.id
    assert version.version_number == 1
    assert version.created_by == "u1"
    assert version.global_settings == {"siteName": "Shop"}
    assert [page["slug"] for page in version.pages] == ["/", "/about"]
    assert version.pages[0]["elements"][0] == {
        "id": "el-1", "type": "heading", "order": 1, "config": {"text": "Hello"},
    }
    assert version.pages[1]["id"]


def test_version_is_a_copy_of_the_input(store, make_website):
    website = make_website()
    pages = make_pages()

    version_id = store.create_version(website.id, pages)
    pages[0]["elements"][0]["config"]["text"] = "Changed after save"

    assert store.get_version(version_id).pages[0]["elements"][0]["config"]["text"] == "Welcome"


def test_versions_are_immutable(store, session, make_website):
    website = make_website()
    version = store.get_version(store.create_version(website.id, make_pages()))

    version.global_settings = {"siteName": "Rewritten"}
    with pytest.raises(RuntimeError):
        session.commit()
    session.rollback()

    assert store.get_version(version.id).global_settings == {}


def test_version_numbers_increase(store, make_website):
    website = make_website()

    first = store.get_version(store.create_version(website.id, make_pages()))
    second = store.get_version(store.create_version(website.id, make_pages()))

    assert (first.version_number, second.version_number) == (1, 2)
    assert first.id != second.id


def test_invalid_tree_persists_nothing(store, session, make_website):
    website = make_website()

    with pytest.raises(ValidationError):
        store.create_version(website.id, make_pages(("About", "/about", [])))

    assert session.query(WebsiteVersion).count() == 0


def test_invalid_settings_reported_with_tree_violations(store, make_website):
    website = make_website()

    with pytest.raises(ValidationError) as exc_info:
        store.create_version(website.id, make_pages(("About", "/about", [])), {"siteName": 42})

    messages = exc_info.value.messages
    assert messages[0].startswith("globalSettings.siteName")
    assert any("missing homepage" in message for message in messages)


def test_unknown_website(store):
    with pytest.raises(NotFoundError):
        store.create_version("missing", make_pages())

    with pytest.raises(NotFoundError):
        store.get_version("missing")

    with pytest.raises(NotFoundError):
        store.list_versions("missing")


def test_list_newest_first_and_restartable(store, make_website):
    website = make_website()
    created = [store.create_version(website.id, make_pages()) for _ in range(5)]

    history = store.list_versions(website.id, batch_size=2)

    first_pass = [summary.id for summary in history]
    second_pass = [summary.version_number for summary in history]

    assert first_pass == list(reversed(created))
    assert second_pass == [5, 4, 3, 2, 1]


def test_list_page_cursor(store, make_website):
    website = make_website()
    for _ in range(3):
        store.create_version(website.id, make_pages())

    history = store.list_versions(website.id)
    items, meta = history.page(limit=2)

    assert [item.version_number for item in items] == [3, 2]
    assert meta["has_more"] is True

    items, meta = history.page(limit=2, cursor=meta["next_cursor"])

    assert [item.version_number for item in items] == [1]
    assert meta == {"has_more": False, "next_cursor": None}


def test_list_is_scoped_to_website(store, make_website):
    shop = make_website("shop")
    blog = make_website("blog", name="Blog")
    store.create_version(shop.id, make_pages())

    assert list(store.list_versions(blog.id)) == []


def test_delete_published_version_conflicts(store, publish, make_website):
    website = make_website()
    live = publish(website)["version_id"]
    old = store.create_version(website.id, make_pages())

    with pytest.raises(ConflictError):
        store.delete_version(live)

    store.delete_version(old)
    with pytest.raises(NotFoundError):
        store.get_version(old)


def test_page_for_slug():
    pages = make_pages(("Home", "/", []), ("About", "/about", []))

    assert page_for_slug(pages, "/about")["name"] == "About"
    with pytest.raises(NotFoundError):
        page_for_slug(pages, "/missing")
