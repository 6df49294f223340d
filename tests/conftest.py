from datetime import datetime, timedelta, timezone

import pytest
from loguru import logger

from core.config import PurgeConfig
from core.models import ResourceDescriptor
from purger.repositories import ContainerRepository, ServiceRepository

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def container_info(cid, name, age, now=NOW):
    return {
        "Id": cid,
        "Names": [f"/{name}"],
        "Created": int((now - age).timestamp()),
        "Image": "busybox",
        "State": "running",
    }


def service_info(sid, name, age, now=NOW):
    created = (now - age).strftime("%Y-%m-%dT%H:%M:%S.123456789Z")
    return {"ID": sid, "CreatedAt": created, "Spec": {"Name": name}}


def container(cid, name, age, now=NOW):
    return ResourceDescriptor.from_container(container_info(cid, name, age, now))


class FakeDockerAPI:
    """Stand-in for docker.APIClient that records every call in order."""

    def __init__(self, containers=(), services=(), fail_on=()):
        self._containers = list(containers)
        self._services = list(services)
        self.fail_on = set(fail_on)  # {("stop", id), ("containers", None), ...}
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    def _call(self, op, ident=None):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            self.calls.append((op, ident))
            if (op, ident) in self.fail_on:
                raise RuntimeError(f"{op} {ident} failed")
        finally:
            self.in_flight -= 1

    def containers(self):
        self._call("containers")
        return list(self._containers)

    def services(self):
        self._call("services")
        return list(self._services)

    def stop(self, cid):
        self._call("stop", cid)

    def remove_container(self, cid):
        self._call("remove_container", cid)

    def remove_service(self, sid):
        self._call("remove_service", sid)

    def mutations(self):
        return [c for c in self.calls if c[0] not in ("containers", "services")]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_api():
    return FakeDockerAPI


@pytest.fixture
def repositories():
    def build(api):
        return ContainerRepository(api), ServiceRepository(api)

    return build


@pytest.fixture
def config():
    def build(**kwargs):
        kwargs.setdefault("age_threshold", timedelta(days=1))
        return PurgeConfig(**kwargs)

    return build


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
