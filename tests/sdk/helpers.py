"""In-memory box registry served through ``httpx.MockTransport``."""

from __future__ import annotations

import itertools
import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import unquote

import httpx

API_PREFIX = "/api/v1"
BASE_URL = f"https://registry.test{API_PREFIX}"
TOKEN = "test-token"


@dataclass
class FakeRegistry:
    """Minimal stateful stand-in for the box registry REST API.

    Versions are kept most recently created first. Mutating calls require
    ``token`` when one is set; reads of public boxes never do.
    """

    token: str | None = None
    boxes: dict[tuple[str, str], dict[str, Any]] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)
    failures: dict[tuple[str, str], int] = field(default_factory=dict)
    _clock: itertools.count = field(default_factory=lambda: itertools.count(1))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def fail(self, method: str, path: str, status_code: int) -> None:
        """Answer ``method`` on ``path`` with ``status_code`` from now on."""
        self.failures[(method, path)] = status_code

    def mutations(self) -> list[tuple[str, str]]:
        return [call for call in self.calls if call[0] != "GET"]

    def box(self, owner: str, name: str) -> dict[str, Any]:
        return self.boxes[(owner, name)]

    def seed_hosted_provider(
        self, owner: str, name: str, version: str, provider: str
    ) -> None:
        """Attach a provider whose artifact is stored by the registry."""
        entry = self._version(self.box(owner, name), version)
        assert entry is not None
        stamp = self._now()
        entry["providers"].append(
            {
                "name": provider,
                "hosted": True,
                "hosted_token": "hosted-token",
                "original_url": None,
                "download_url": f"https://registry.test/{owner}/{name}/{version}/{provider}.box",
                "created_at": stamp,
                "updated_at": stamp,
            }
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        path = raw_path[len(API_PREFIX) :] if raw_path.startswith(API_PREFIX) else raw_path
        self.calls.append((request.method, path))

        status = self.failures.get((request.method, path))
        if status is not None:
            return _errors(status, "Injected failure")

        if request.method != "GET" and not self._authorized(request):
            return _errors(401, "Invalid token")

        segments = [unquote(part) for part in path.strip("/").split("/")]
        body = json.loads(request.content) if request.content else {}

        if segments == ["boxes"] and request.method == "POST":
            return self._create_box(body)
        if len(segments) < 3 or segments[0] != "box":
            return _not_found()

        box = self.boxes.get((segments[1], segments[2]))
        if box is None:
            return _not_found()
        if request.method == "GET" and box["private"] and not self._authorized(request):
            return _not_found()

        rest = segments[3:]
        if not rest:
            return self._box_route(request.method, box, body)
        if rest == ["versions"] and request.method == "POST":
            return self._create_version(box, body)
        if len(rest) < 2 or rest[0] != "version":
            return _not_found()

        version = self._version(box, rest[1])
        if version is None:
            return _not_found()
        tail = rest[2:]
        if not tail:
            return self._version_route(request.method, box, version, body)
        if tail == ["release"] and request.method == "PUT":
            version["status"] = "active"
            box["current_version"] = version
            return httpx.Response(200, json=version)
        if tail == ["providers"] and request.method == "POST":
            return self._create_provider(version, body)
        if len(tail) == 2 and tail[0] == "provider":
            return self._provider_route(request.method, version, tail[1], body)
        return _not_found()

    def _authorized(self, request: httpx.Request) -> bool:
        if self.token is None:
            return True
        return request.headers.get("Authorization") == f"Bearer {self.token}"

    def _now(self) -> str:
        return f"2026-01-01T00:00:{next(self._clock):02d}.000Z"

    def _create_box(self, body: dict[str, Any]) -> httpx.Response:
        key = (body["username"], body["name"])
        if key in self.boxes:
            return _errors(422, "Type has already been taken")
        stamp = self._now()
        self.boxes[key] = {
            "username": body["username"],
            "name": body["name"],
            "tag": f"{body['username']}/{body['name']}",
            "private": body.get("is_private", False),
            "downloads": 0,
            "created_at": stamp,
            "updated_at": stamp,
            "short_description": body.get("short_description"),
            "description_markdown": body.get("description"),
            "description_html": None,
            "versions": [],
            "current_version": None,
        }
        return httpx.Response(200, json=self.boxes[key])

    def _box_route(
        self, method: str, box: dict[str, Any], body: dict[str, Any]
    ) -> httpx.Response:
        if method == "GET":
            return httpx.Response(200, json=box)
        if method == "PUT":
            changes = body.get("box", {})
            if "short_description" in changes:
                box["short_description"] = changes["short_description"]
            if "description" in changes:
                box["description_markdown"] = changes["description"]
            if "is_private" in changes:
                box["private"] = changes["is_private"]
            box["updated_at"] = self._now()
            return httpx.Response(200, json=box)
        if method == "DELETE":
            del self.boxes[(box["username"], box["name"])]
            return httpx.Response(200, json=box)
        return _not_found()

    def _version(self, box: dict[str, Any], label: str) -> dict[str, Any] | None:
        for version in box["versions"]:
            if version["version"] == label:
                return version
        return None

    def _create_version(
        self, box: dict[str, Any], body: dict[str, Any]
    ) -> httpx.Response:
        spec = body.get("version", {})
        if self._version(box, spec["version"]) is not None:
            return _errors(422, "Version has already been taken")
        stamp = self._now()
        number = str(len(box["versions"]) + 1)
        base = f"{BASE_URL}/box/{box['username']}/{box['name']}/version/{spec['version']}"
        version = {
            "version": spec["version"],
            "status": "unreleased",
            "description_html": None,
            "description_markdown": spec.get("description"),
            "created_at": stamp,
            "updated_at": stamp,
            "number": number,
            "release_url": f"{base}/release",
            "revoke_url": f"{base}/revoke",
            "providers": [],
        }
        box["versions"].insert(0, version)
        return httpx.Response(200, json=version)

    def _version_route(
        self,
        method: str,
        box: dict[str, Any],
        version: dict[str, Any],
        body: dict[str, Any],
    ) -> httpx.Response:
        if method == "GET":
            return httpx.Response(200, json=version)
        if method == "PUT":
            spec = body.get("version", {})
            if "description" in spec:
                version["description_markdown"] = spec["description"]
            version["updated_at"] = self._now()
            return httpx.Response(200, json=version)
        if method == "DELETE":
            box["versions"].remove(version)
            return httpx.Response(200, json=version)
        return _not_found()

    def _create_provider(
        self, version: dict[str, Any], body: dict[str, Any]
    ) -> httpx.Response:
        spec = body.get("provider", {})
        if any(item["name"] == spec["name"] for item in version["providers"]):
            return _errors(422, "Metadata provider must be unique for version")
        stamp = self._now()
        provider = {
            "name": spec["name"],
            "hosted": False,
            "hosted_token": None,
            "original_url": spec["url"],
            "download_url": spec["url"],
            "created_at": stamp,
            "updated_at": stamp,
        }
        version["providers"].append(provider)
        return httpx.Response(200, json=provider)

    def _provider_route(
        self,
        method: str,
        version: dict[str, Any],
        name: str,
        body: dict[str, Any],
    ) -> httpx.Response:
        provider = next(
            (item for item in version["providers"] if item["name"] == name), None
        )
        if provider is None:
            return _not_found()
        if method == "GET":
            return httpx.Response(200, json=provider)
        if method == "PUT":
            spec = body.get("provider", {})
            provider.update(
                hosted=False,
                hosted_token=None,
                original_url=spec["url"],
                download_url=spec["url"],
                updated_at=self._now(),
            )
            return httpx.Response(200, json=provider)
        if method == "DELETE":
            version["providers"].remove(provider)
            return httpx.Response(200, json=provider)
        return _not_found()


def _errors(status_code: int, *messages: str) -> httpx.Response:
    return httpx.Response(
        status_code, json={"errors": list(messages), "success": False}
    )


def _not_found() -> httpx.Response:
    return _errors(404, "Resource not found!")
