"""Shared fixtures for proxygraph tests."""

import itertools
from unittest.mock import MagicMock

import pytest

from proxygraph.core.graph import ProxyObjectGraph
from proxygraph.recording.models import MethodCallRecord
from proxygraph.remote import Remote


class Endpoint(Remote):
    """Stand-in for a remote service endpoint."""

    def __init__(self, label: str = "svc"):
        self.label = label

    def ping(self) -> str:
        return "pong"


class FakeProxy(Remote):
    """Proxy returned by the mocked proxy builder."""

    def __init__(self, original, name):
        self.original = original
        self.name = name


class Box:
    """Plain object whose attributes are given as keyword arguments."""

    def __init__(self, **attrs):
        for key, value in attrs.items():
            setattr(self, key, value)


@pytest.fixture
def naming():
    counter = itertools.count(1)
    service = MagicMock()
    service.name_for.side_effect = lambda endpoint: f"ep_{next(counter)}"
    return service


@pytest.fixture
def registry():
    return MagicMock()


@pytest.fixture
def recorder():
    return MagicMock()


@pytest.fixture
def proxy_builder():
    builder = MagicMock()
    builder.build_proxy.side_effect = lambda original, name, recorder: FakeProxy(
        original, name
    )
    return builder


@pytest.fixture
def record():
    return MethodCallRecord(instance_name="root", method="lookup")


@pytest.fixture
def make_graph(registry, recorder, naming, proxy_builder):
    """Build a ProxyObjectGraph over the mocked collaborators."""

    def factory(config=None):
        return ProxyObjectGraph(
            registry, recorder, naming, proxy_builder, config=config
        )

    return factory


@pytest.fixture
def graph(make_graph):
    return make_graph()
