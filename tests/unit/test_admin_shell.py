"""Unit tests for the dashboard shell and the admin login gate."""

import asyncio

import pytest

from connector_admin.application.entity_kinds import CONNECTORS, USERS
from connector_admin.application.services import AdminShell, AuthService
from connector_admin.domain.exceptions import AuthenticationError, ProtocolError, TransportError


@pytest.fixture
def auth():
    return AuthService(username="admin", email="admin@yazaki.com", password="admin123")


@pytest.fixture
def shell(gateway, auth):
    return AdminShell(gateway, auth, uploader=gateway, page_size=5)


@pytest.fixture
def logged_in(shell):
    assert shell.login("admin", "admin123")
    return shell


# ── AuthService ──


def test_login_accepts_username_or_email(auth):
    assert auth.validate_credentials("admin", "admin123")
    assert auth.validate_credentials("admin@yazaki.com", "admin123")


def test_login_rejects_wrong_password(auth):
    assert auth.login("admin", "wrong") is None


def test_login_returns_distinct_tokens(auth):
    assert auth.login("admin", "admin123") != auth.login("admin", "admin123")


# ── Session ──


def test_shell_starts_logged_out_on_dashboard(shell):
    assert shell.is_authenticated is False
    assert shell.current == "dashboard"
    assert shell.title == "Dashboard"


def test_bad_credentials_do_not_log_in(shell):
    assert shell.login("admin", "nope") is False
    assert shell.is_authenticated is False


def test_navigation_requires_login(shell):
    with pytest.raises(AuthenticationError):
        shell.navigate("users")


@pytest.mark.asyncio
async def test_load_requires_login(shell):
    with pytest.raises(AuthenticationError):
        await shell.load()


def test_logout_returns_to_dashboard_and_closes_page(logged_in):
    page = logged_in.navigate("connectors")

    logged_in.logout()

    assert page.is_closed
    assert logged_in.page is None
    assert logged_in.current == "dashboard"
    assert logged_in.is_authenticated is False


# ── Navigation ──


def test_navigate_to_entity_page(logged_in):
    page = logged_in.navigate("users")

    assert page.kind is USERS
    assert logged_in.title == "Users Management"
    assert logged_in.page is page


def test_navigating_away_closes_previous_page(logged_in):
    users_page = logged_in.navigate("users")

    connectors_page = logged_in.navigate("connectors")

    assert users_page.is_closed
    assert connectors_page.is_closed is False
    assert logged_in.title == "Connectors Management"


def test_navigate_to_dashboard_has_no_page(logged_in):
    logged_in.navigate("users")

    assert logged_in.navigate("dashboard") is None
    assert logged_in.page is None


def test_unknown_page_is_rejected(logged_in):
    with pytest.raises(ValueError, match="settings"):
        logged_in.navigate("settings")


# ── Data ──


@pytest.mark.asyncio
async def test_load_fills_both_collections(gateway, logged_in, sample_users, sample_connectors):
    gateway.records["users"] = sample_users
    gateway.records["connectors"] = sample_connectors

    await logged_in.load()

    assert logged_in.dashboard_counts() == {"users": 3, "connectors": 3}
    assert logged_in.error is None
    assert gateway.calls == [("list", "users"), ("list", "connectors")]


@pytest.mark.asyncio
async def test_first_failed_load_shows_error_over_empty_lists(gateway, logged_in):
    gateway.fail_with = TransportError("http://localhost:5000/users", "Connection refused")

    await logged_in.load()

    assert "Connection refused" in logged_in.error
    assert logged_in.dashboard_counts() == {"users": 0, "connectors": 0}


@pytest.mark.asyncio
async def test_failed_reload_keeps_last_known_lists(gateway, logged_in, sample_users, sample_connectors):
    gateway.records["users"] = sample_users
    gateway.records["connectors"] = sample_connectors
    await logged_in.load()

    gateway.fail_with = ProtocolError(500, "Internal Server Error", "boom")
    await logged_in.load()

    assert "500" in logged_in.error
    assert logged_in.dashboard_counts() == {"users": 3, "connectors": 3}


@pytest.mark.asyncio
async def test_late_create_after_navigating_back_does_not_raise(gateway, logged_in):
    gateway.ack_gate = asyncio.Event()
    page = logged_in.navigate("connectors")
    page.open_form()
    for name in ("yazaki_pn", "customer_pn", "supplier_pn", "supplier_name"):
        page.form.set_field(name, "NEW")
    pending = asyncio.create_task(page.submit_form())
    await asyncio.sleep(0)

    logged_in.navigate("dashboard")
    await logged_in.navigate("connectors").load()
    gateway.ack_gate.set()
    saved = await pending

    assert logged_in.store.records(CONNECTORS) == (saved,)


@pytest.mark.asyncio
async def test_pages_share_the_shell_store(gateway, logged_in, sample_connectors):
    gateway.records["connectors"] = sample_connectors
    await logged_in.load()

    page = logged_in.navigate("connectors")

    assert page.view().total_count == 3
    assert page.view().page_size == 5
    assert logged_in.store.count(CONNECTORS) == 3
