"""Unit tests for UI <-> wire record mapping."""

import pytest

from connector_admin.application.entity_kinds import CONNECTORS, USERS
from connector_admin.application.mapping import from_wire, list_from_wire, to_wire
from connector_admin.domain.entities import Connector, User
from connector_admin.domain.exceptions import FormatError


# ── Users ──


def test_user_name_maps_to_full_name_on_the_wire():
    user = User(id=4, name="Dana", email="dana@example.com", role="manager", created_at=None)

    payload = to_wire(USERS, user)

    assert payload == {
        "id": 4,
        "full_name": "Dana",
        "email": "dana@example.com",
        "role": "manager",
        "created_at": None,
    }
    assert "name" not in payload


def test_user_from_wire_reads_full_name():
    user = from_wire(USERS, {
        "id": 7,
        "full_name": "Eve",
        "email": "eve@example.com",
        "role": "admin",
        "created_at": "2024-03-05T10:00:00Z",
    })

    assert user == User(
        id=7, name="Eve", email="eve@example.com", role="admin", created_at="2024-03-05T10:00:00Z"
    )


@pytest.mark.parametrize("role", [None, "", "  "])
def test_missing_role_becomes_baseline_user(role):
    user = from_wire(USERS, {"id": 1, "full_name": "A", "email": "a@x.io", "role": role})

    assert user.role == "user"


def test_role_casing_is_normalised():
    user = from_wire(USERS, {"id": 1, "full_name": "A", "email": "a@x.io", "role": "ADMIN"})

    assert user.role == "admin"


def test_unknown_role_is_a_format_error():
    with pytest.raises(FormatError, match="role"):
        from_wire(USERS, {"id": 1, "full_name": "A", "email": "a@x.io", "role": "owner"})


def test_user_round_trip_preserves_every_field():
    user = User(id=3, name="Carol", email="carol@example.com", role="user", created_at="2024-01-15T08:00:00+00:00")

    assert from_wire(USERS, to_wire(USERS, user)) == user


# ── Connectors ──


def test_connector_round_trip_keeps_null_price_null():
    connector = Connector(
        id=9, yazaki_pn="YZ-9", customer_pn="C9", supplier_pn="S9", supplier_name="Acme", price=None
    )

    payload = to_wire(CONNECTORS, connector)

    assert payload["price"] is None
    assert from_wire(CONNECTORS, payload) == connector


def test_connector_zero_price_stays_zero():
    connector = from_wire(CONNECTORS, {
        "id": 1, "yazaki_pn": "A", "customer_pn": "B", "supplier_pn": "C",
        "supplier_name": "Acme", "price": 0,
    })

    assert connector.price == 0.0
    assert connector.price is not None


def test_connector_numeric_string_price_is_parsed():
    connector = from_wire(CONNECTORS, {
        "id": 1, "yazaki_pn": "A", "customer_pn": "B", "supplier_pn": "C",
        "supplier_name": "Acme", "price": "12.5",
    })

    assert connector.price == 12.5


def test_connector_wire_shape_has_every_attribute():
    connector = Connector(yazaki_pn="A", customer_pn="B", supplier_pn="C", supplier_name="Acme")

    assert set(to_wire(CONNECTORS, connector)) == {
        "id", "yazaki_pn", "customer_pn", "supplier_pn", "supplier_name", "name",
        "price", "drawing_2d_path", "model_3d_path", "image_path",
    }


def test_missing_required_wire_key_is_a_format_error():
    with pytest.raises(FormatError, match="supplier_name"):
        from_wire(CONNECTORS, {"id": 1, "yazaki_pn": "A", "customer_pn": "B", "supplier_pn": "C"})


def test_negative_price_from_backend_is_a_format_error():
    with pytest.raises(FormatError):
        from_wire(CONNECTORS, {
            "id": 1, "yazaki_pn": "A", "customer_pn": "B", "supplier_pn": "C",
            "supplier_name": "Acme", "price": -1,
        })


def test_boolean_price_is_rejected():
    with pytest.raises(FormatError):
        from_wire(CONNECTORS, {
            "id": 1, "yazaki_pn": "A", "customer_pn": "B", "supplier_pn": "C",
            "supplier_name": "Acme", "price": True,
        })


def test_non_object_record_is_a_format_error():
    with pytest.raises(FormatError, match="Connector"):
        from_wire(CONNECTORS, ["not", "a", "record"])


# ── Lists ──


def test_list_from_wire_keeps_backend_order():
    users = list_from_wire(USERS, [
        {"id": 2, "full_name": "B", "email": "b@x.io"},
        {"id": 1, "full_name": "A", "email": "a@x.io"},
    ])

    assert [u.id for u in users] == [2, 1]


def test_list_from_wire_accepts_collection_envelope():
    users = list_from_wire(USERS, {"users": [{"id": 1, "full_name": "A", "email": "a@x.io"}]})

    assert len(users) == 1


def test_list_from_wire_rejects_non_list():
    with pytest.raises(FormatError, match="list of connectors"):
        list_from_wire(CONNECTORS, {"detail": "nope"})
