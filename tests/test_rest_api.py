"""
FastAPI dev server tests.

Same contract as the Lambda handler: merged shadow on GET, one-attribute
patch on POST, processing pass on /procesar, {"error": ...} bodies.
"""
import pytest
from fastapi.testclient import TestClient

from horno_bridge import services
from horno_bridge.core.exceptions import ShadowServiceError
from horno_bridge.rest_api import app


@pytest.fixture
def client(clean_services, gateway, store):
    services.set_gateway(gateway)
    services.set_store(store)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


class TestShadowRoutes:

    def test_get_shadow(self, client, shadow_client):
        shadow_client.reported = {"M..1:23-1": "00", "modo": "auto"}
        shadow_client.desired = {"modo": "manual"}

        response = client.get("/shadow")

        assert response.status_code == 200
        assert response.json() == {"M..1:23-1": "00", "modo": "manual"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_post_shadow(self, client, shadow_client):
        response = client.post("/shadow", json={"attribute": "setpoint", "value": 175})

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert shadow_client.update_thing_shadow.call_count == 1
        assert response.headers["access-control-allow-origin"] == "*"

    def test_post_shadow_missing_attribute_is_400(self, client, shadow_client):
        response = client.post("/shadow", json={"value": 1})

        assert response.status_code == 400
        assert "attribute" in response.json()["error"]
        shadow_client.update_thing_shadow.assert_not_called()
        assert response.headers["access-control-allow-origin"] == "*"

    def test_shadow_service_failure_is_500(self, client, shadow_client):
        shadow_client.get_thing_shadow.side_effect = ShadowServiceError("shadow offline")

        response = client.get("/shadow")

        assert response.status_code == 500
        assert response.json() == {"error": "shadow offline"}
        assert response.headers["access-control-allow-origin"] == "*"


class TestProcessingRoute:

    def test_procesar_emits_events(self, client, shadow_client, store):
        services.get_cache().set("Q..1:10-1", "00")
        shadow_client.reported = {"Q..1:10-1": "01", "M..1:23-1": "00"}

        response = client.post("/procesar")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        record = store.insert.call_args.args[0]
        assert record.comentario == "Pistón activado"
        assert response.headers["access-control-allow-origin"] == "*"

    def test_unexpected_failure_is_500(self, client, store, shadow_client):
        shadow_client.reported = {"AI..4:3-1": "1"}
        store.insert.side_effect = RuntimeError("store exploded")

        response = client.post("/procesar")

        assert response.status_code == 500
        assert response.json() == {"error": "store exploded"}
        assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize("method,path", [("get", "/procesar"), ("get", "/"), ("delete", "/shadow")])
def test_unknown_routes_are_404(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}
    assert response.headers["access-control-allow-origin"] == "*"
