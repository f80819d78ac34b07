import pytest
from rest_framework.test import APIClient

from delivery.bootstrap import SEED_COURIERS
from delivery.container import get_container, reset_container


@pytest.fixture
def container():
    return reset_container(seed=False)


@pytest.fixture
def client(container):
    return APIClient()


def _register(client, courier_type="BICYCLE", x=50, y=50):
    response = client.post("/api/couriers/", {"type": courier_type, "location": {"x": x, "y": y}}, format="json")
    assert response.status_code == 201
    return response.data


def _create_order(client, **overrides):
    payload = {
        "pickupLocation": {"x": 50, "y": 50},
        "deliveryLocation": {"x": 60, "y": 60},
        "priority": 5,
        "weightKg": 2.0,
    }
    payload.update(overrides)
    return client.post("/api/orders/", payload, format="json")


def test_seeded_container_has_demo_couriers():
    container = reset_container(seed=True)

    assert container.courier_store.count() == len(SEED_COURIERS)
    assert get_container() is container


def test_register_and_list_couriers(client):
    courier = _register(client, "CAR", 10, 20)

    assert courier["type"] == "CAR"
    assert courier["status"] == "FREE"
    assert courier["location"] == {"x": 10.0, "y": 20.0}
    assert courier["completedOrdersToday"] == 0

    assert [c["id"] for c in client.get("/api/couriers/").data] == [courier["id"]]
    assert client.get(f"/api/couriers/{courier['id']}/").data["id"] == courier["id"]
    assert len(client.get("/api/couriers/free/").data) == 1


def test_register_rejects_unknown_type(client):
    response = client.post("/api/couriers/", {"type": "ROCKET", "location": {"x": 1, "y": 1}}, format="json")

    assert response.status_code == 400


def test_unknown_courier_returns_404(client):
    assert client.get("/api/couriers/does-not-exist/").status_code == 404
    response = client.patch("/api/couriers/does-not-exist/location/", {"location": {"x": 1, "y": 1}}, format="json")
    assert response.status_code == 404


def test_update_location(client):
    courier = _register(client)

    response = client.patch(f"/api/couriers/{courier['id']}/location/", {"location": {"x": 70, "y": 80}}, format="json")

    assert response.status_code == 200
    assert response.data["location"] == {"x": 70.0, "y": 80.0}


@pytest.mark.parametrize("body", [{}, {"location": {"x": 150, "y": 1}}, {"location": {"x": 1}}])
def test_update_location_validation(client, body):
    courier = _register(client)

    response = client.patch(f"/api/couriers/{courier['id']}/location/", body, format="json")

    assert response.status_code == 400


def test_availability_toggle(client):
    courier = _register(client)

    offline = client.patch(f"/api/couriers/{courier['id']}/availability/", {"online": False}, format="json")
    assert offline.data["status"] == "OFFLINE"
    assert client.get("/api/couriers/free/").data == []

    online = client.patch(f"/api/couriers/{courier['id']}/availability/", {"online": True}, format="json")
    assert online.data["status"] == "FREE"


def test_busy_courier_cannot_go_offline_returns_409(client):
    courier = _register(client)
    _create_order(client)

    response = client.patch(f"/api/couriers/{courier['id']}/availability/", {"online": False}, format="json")

    assert response.status_code == 409


def test_create_order_assigns_courier(client):
    courier = _register(client)

    response = _create_order(client)

    assert response.status_code == 201
    assert response.data["status"] == "ASSIGNED"
    assert response.data["assignedCourierId"] == courier["id"]
    assert response.data["weightKg"] == 2.0
    assert response.data["createdAt"]


def test_create_order_without_couriers_is_queued(client):
    response = _create_order(client)

    assert response.status_code == 201
    assert response.data["status"] == "QUEUED"
    assert response.data["assignedCourierId"] is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"priority": 0},
        {"priority": 11},
        {"weightKg": 0},
        {"weightKg": -3},
        {"pickupLocation": {"x": -1, "y": 5}},
        {"pickupLocation": None},
    ],
)
def test_create_order_validation(client, overrides):
    assert _create_order(client, **overrides).status_code == 400


def test_create_order_requires_weight(client):
    response = client.post(
        "/api/orders/",
        {"pickupLocation": {"x": 1, "y": 1}, "deliveryLocation": {"x": 2, "y": 2}, "priority": 3},
        format="json",
    )

    assert response.status_code == 400


def test_get_order_and_404(client):
    order = _create_order(client).data

    assert client.get(f"/api/orders/{order['id']}/").data["id"] == order["id"]
    assert client.get("/api/orders/missing/").status_code == 404


def test_complete_order_frees_courier_and_serves_backlog(client):
    courier = _register(client)
    first = _create_order(client).data
    second = _create_order(client).data
    assert second["status"] == "QUEUED"

    response = client.patch(f"/api/orders/{first['id']}/complete/")

    assert response.status_code == 200
    assert response.data["status"] == "COMPLETED"
    assert client.get(f"/api/orders/{second['id']}/").data["status"] == "ASSIGNED"
    assert client.get(f"/api/couriers/{courier['id']}/").data["completedOrdersToday"] == 1


def test_complete_not_assigned_order_returns_409(client):
    order = _create_order(client).data

    response = client.patch(f"/api/orders/{order['id']}/complete/")

    assert response.status_code == 409
    assert "Only ASSIGNED orders can be completed" in response.data["message"]


def test_cancel_queued_order(client):
    order = _create_order(client).data

    response = client.patch(f"/api/orders/{order['id']}/cancel/")

    assert response.status_code == 200
    assert response.data["status"] == "CANCELLED"


def test_list_orders_by_status(client):
    _register(client)
    _create_order(client)
    _create_order(client)

    assert len(client.get("/api/orders/").data) == 2
    assert len(client.get("/api/orders/", {"status": "QUEUED"}).data) == 1
    assert client.get("/api/orders/", {"status": "LOST"}).status_code == 400


def test_dispatch_stats(client):
    _register(client)
    _create_order(client)
    _create_order(client)

    stats = client.get("/api/dispatch/stats/").data

    assert stats["totalOrders"] == 2
    assert stats["totalCouriers"] == 1
    assert stats["totalAssignments"] == 1
    assert stats["queuedOrders"] == 1
    assert stats["ordersByStatus"]["ASSIGNED"] == 1
    assert stats["ordersByStatus"]["COMPLETED"] == 0
    assert stats["couriersByStatus"] == {"FREE": 0, "BUSY": 1, "OFFLINE": 0}
