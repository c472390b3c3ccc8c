"""Shared fixtures: an in-memory property backend behind a requests-style session."""

from __future__ import annotations

import itertools
import json
from pathlib import Path
import sys
from typing import Dict, List, Optional

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from insights.db.api_client import PropertiesAPIClient
from insights.models.property import PropertyRecord
from insights.services.controller import DashboardController

BASE_URL = "http://backend.test/api"

SEED_PROPERTIES = [
    {"id": 1, "address": "123 Main St", "propertyType": "Apartment", "rent": 2500, "occupancy": 95, "performanceScore": 88},
    {"id": 2, "address": "45 Oak Ave", "propertyType": "House", "rent": 3200, "occupancy": 100, "performanceScore": 91},
    {"id": 3, "address": "9 Pine Rd", "propertyType": "Studio", "rent": 1800, "occupancy": 80, "performanceScore": 72},
]


def make_response(status_code: int, body=None, url: str = BASE_URL) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakePropertyBackend:
    """Implements the REST surface the dashboard consumes, in memory.

    ``fail`` maps ``(method, path)`` to a status code and body that the next
    matching request returns instead of the normal response.
    """

    def __init__(self, properties: Optional[List[Dict]] = None) -> None:
        self.properties: List[Dict] = [dict(p) for p in (properties if properties is not None else SEED_PROPERTIES)]
        self._ids = itertools.count(max([int(p["id"]) for p in self.properties] or [0]) + 1)
        self.fail: Dict[tuple, tuple] = {}
        self.calls: List[tuple] = []
        # When set, a successful POST answers with this raw body instead of the record.
        self.create_body: Optional[str] = None

    # requests.Session compatible entry point
    def request(self, method: str, url: str, timeout=None, json=None, **kwargs) -> requests.Response:
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        self.calls.append((method, path, json))
        if (method, path) in self.fail:
            status, body = self.fail.pop((method, path))
            return make_response(status, body, url)
        if path == "/properties/analytics" and method == "GET":
            return make_response(200, self.analytics(), url)
        if path == "/properties":
            if method == "GET":
                return make_response(200, self.properties, url)
            if method == "POST":
                record = dict(json, id=next(self._ids), performanceScore=80)
                self.properties.append(record)
                return make_response(201, self.create_body if self.create_body is not None else record, url)
        if path.startswith("/properties/"):
            target = self._find(path.rsplit("/", 1)[1])
            if target is None:
                return make_response(404, "Property not found", url)
            if method == "PUT":
                target.update(json)
                return make_response(200, target, url)
            if method == "DELETE":
                self.properties.remove(target)
                return make_response(204, None, url)
        return make_response(405, "Method not allowed", url)

    def analytics(self) -> Dict:
        if not self.properties:
            return {}
        count = len(self.properties)
        return {
            "totalRevenue": sum(p["rent"] for p in self.properties),
            "averageOccupancy": sum(p["occupancy"] for p in self.properties) / count,
            "averageScore": sum(p.get("performanceScore", 0) for p in self.properties) / count,
            "totalProperties": count,
            "averageRent": sum(p["rent"] for p in self.properties) / count,
        }

    def _find(self, property_id: str) -> Optional[Dict]:
        for prop in self.properties:
            if str(prop["id"]) == property_id:
                return prop
        return None


@pytest.fixture
def backend() -> FakePropertyBackend:
    return FakePropertyBackend()


@pytest.fixture
def api_client(backend) -> PropertiesAPIClient:
    return PropertiesAPIClient(base_url=BASE_URL, session=backend)


@pytest.fixture
def controller(api_client) -> DashboardController:
    ctrl = DashboardController(api_client)
    ctrl.refresh()
    return ctrl


def make_record(id="1", address="123 Main St", property_type="Apartment", rent=2500, occupancy=95, score=88.0) -> PropertyRecord:
    return PropertyRecord(
        id=str(id),
        address=address,
        property_type=property_type,
        rent=rent,
        occupancy=occupancy,
        performance_score=score,
    )


@pytest.fixture
def record_factory():
    return make_record
