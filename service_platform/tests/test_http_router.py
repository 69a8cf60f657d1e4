# -*- coding: utf-8 -*-
"""FastAPI 路由绑定测试。"""

import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from service_platform.src.core.action import Action
from service_platform.src.core.platform import Platform
from service_platform.src.core.service import Service, ServiceType
from service_platform.src.dispatchers.http_router import FastApiHttpRouter
from service_platform.src.main import install_app_error_handler


def _client(router: FastApiHttpRouter) -> TestClient:
    app = FastAPI()
    install_app_error_handler(app)
    app.include_router(router.api_router)
    return TestClient(app)


class TestFastApiHttpRouter(unittest.TestCase):
    def test_query_param_and_default(self):
        router = FastApiHttpRouter(register_aliases=True)
        (
            router.add_route("GET", "/hello")
            .param("name", None, None, "名字", False, [])
            .param("greeting", "hi", None, "", True, [])
            .action(lambda name, greeting: {"text": f"{greeting} {name}"})
        )
        client = _client(router)
        self.assertEqual({"text": "hi bob"}, client.get("/hello", params={"name": "bob"}).json())
        self.assertEqual({"text": "yo bob"}, client.get("/hello?name=bob&greeting=yo").json())

    def test_missing_required_param_returns_error_body(self):
        router = FastApiHttpRouter()
        router.add_route("GET", "/hello").param("name", None, None, "", False, []).action(lambda name: name)
        resp = _client(router).get("/hello")
        self.assertEqual(400, resp.status_code)
        self.assertEqual("invalid_request", resp.json()["error"]["code"])

    def test_validator_rejects_value(self):
        router = FastApiHttpRouter()
        (
            router.add_route("GET", "/items/{item_id}")
            .param("item_id", None, str.isdigit, "条目 ID", False, [])
            .action(lambda item_id: {"id": int(item_id)})
        )
        client = _client(router)
        self.assertEqual({"id": 42}, client.get("/items/42").json())
        self.assertEqual(400, client.get("/items/abc").status_code)

    def test_json_body_params(self):
        router = FastApiHttpRouter()
        (
            router.add_route("POST", "/items")
            .param("name", None, None, "", False, [])
            .param("tags", [], None, "", True, [])
            .action(lambda name, tags: {"name": name, "tags": tags})
        )
        client = _client(router)
        resp = client.post("/items", json={"name": "pen", "tags": ["a"]})
        self.assertEqual({"name": "pen", "tags": ["a"]}, resp.json())
        self.assertEqual({"name": "pen", "tags": []}, client.post("/items", json={"name": "pen"}).json())
        self.assertEqual(400, client.post("/items", json=["pen"]).status_code)

    def test_injections_resolved_from_resources(self):
        router = FastApiHttpRouter()
        router.resources.set("greeting", lambda: "hello")
        router.resources.set(
            "message",
            lambda greeting, request: f"{greeting} {request.url.path}",
            injections=["greeting", "request"],
        )
        router.add_route("GET", "/msg").inject("message").action(lambda message: {"message": message})
        self.assertEqual({"message": "hello /msg"}, _client(router).get("/msg").json())

    def test_unknown_injection_is_server_error(self):
        router = FastApiHttpRouter()
        router.add_route("GET", "/x").inject("missing").action(lambda missing: missing)
        resp = _client(router).get("/x")
        self.assertEqual(500, resp.status_code)
        self.assertEqual("resource_not_found", resp.json()["error"]["code"])

    def test_param_validator_factory_with_injections(self):
        router = FastApiHttpRouter()
        router.resources.set("max_size", lambda: 5)
        (
            router.add_route("GET", "/page")
            .param("size", "1", lambda max_size: (lambda v: int(v) <= max_size), "", True, ["max_size"])
            .action(lambda size: {"size": int(size)})
        )
        client = _client(router)
        self.assertEqual({"size": 3}, client.get("/page?size=3").json())
        self.assertEqual(400, client.get("/page?size=9").status_code)

    def test_alias_route_forces_alias_params(self):
        router = FastApiHttpRouter(register_aliases=True)
        (
            router.add_route("GET", "/v2/items")
            .alias("/items", {"version": "1"})
            .param("version", "2", None, "", True, [])
            .label("scope", "items.read")
            .action(lambda version: {"version": version})
        )
        client = _client(router)
        self.assertEqual({"version": "2"}, client.get("/v2/items").json())
        self.assertEqual({"version": "1"}, client.get("/items?version=3").json())

        paths = client.get("/openapi.json").json()["paths"]
        self.assertIn("/v2/items", paths)
        self.assertNotIn("/items", paths)
        self.assertEqual({"scope": "items.read"}, paths["/v2/items"]["get"]["x-labels"])

    def test_alias_registration_can_be_disabled(self):
        router = FastApiHttpRouter(register_aliases=False)
        router.add_route("GET", "/v2/items").alias("/items", {}).action(lambda: {"ok": True})
        client = _client(router)
        self.assertEqual(200, client.get("/v2/items").status_code)
        self.assertEqual(404, client.get("/items").status_code)

    def test_groups_become_tags(self):
        router = FastApiHttpRouter()
        router.add_route("GET", "/tagged").groups(["api", "items"]).action(lambda: {})
        operation = _client(router).get("/openapi.json").json()["paths"]["/tagged"]["get"]
        self.assertEqual(["api", "items"], operation["tags"])

    def test_async_callback_awaited(self):
        async def handler(name):
            return {"name": name}

        router = FastApiHttpRouter()
        router.add_route("GET", "/async").param("name", "x", None, "", True, []).action(handler)
        self.assertEqual({"name": "x"}, _client(router).get("/async").json())

    def test_duplicate_route_logs_warning(self):
        router = FastApiHttpRouter()
        router.add_route("GET", "/dup").action(lambda: {"n": 1})
        with self.assertLogs("service_platform.src.dispatchers.http_router", level="WARNING"):
            router.add_route("GET", "/dup").action(lambda: {"n": 2})
        self.assertEqual({"n": 1}, _client(router).get("/dup").json())
        self.assertEqual(2, len(router.routes))

    def test_route_describe(self):
        router = FastApiHttpRouter()
        route = router.add_route("post", "/x").groups(["g"]).param("a").inject("db").label("k", object)
        info = route.describe()
        self.assertEqual("POST", info["method"])
        self.assertEqual(["a"], info["params"])
        self.assertEqual(["db"], info["injections"])
        self.assertIsInstance(info["labels"]["k"], str)
        self.assertFalse(route.mounted)


class TestPlatformWithFastApi(unittest.TestCase):
    def test_platform_init_mounts_service_actions(self):
        router = FastApiHttpRouter()
        router.resources.set("store", lambda: {"1": "pen"})
        service = Service(ServiceType.HTTP).add_action(
            "items.get",
            Action()
            .http("GET", "/items/{item_id}")
            .param("item_id", None, str.isdigit, "ID")
            .inject("store")
            .callback(lambda item_id, store: {"name": store.get(item_id)}),
        )
        platform = Platform(http_router=router)
        platform.add_service("items", service).init("http")
        self.assertEqual({"name": "pen"}, _client(router).get("/items/1").json())


if __name__ == "__main__":
    unittest.main()
