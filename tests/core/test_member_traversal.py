"""Test suite for walking object members: properties, fields and failures."""

from dataclasses import dataclass
from typing import Any

import pytest
from conftest import Box, Endpoint, FakeProxy
from pydantic import BaseModel

from proxygraph.config import WalkerConfig
from proxygraph.exceptions import FatalTraversalError


class ServiceHolder:
    """Exposes an endpoint through a read/write property."""

    def __init__(self, service):
        self._service = service

    @property
    def service(self):
        return self._service

    @service.setter
    def service(self, value):
        self._service = value


class ReadOnlyHolder:
    def __init__(self, value):
        self._value = value

    @property
    def value(self):
        return self._value


class CopyingHolder:
    """Getter hands out a copy; only the setter stores."""

    def __init__(self, items):
        self._items = list(items)
        self.setter_calls = 0

    @property
    def items(self):
        return list(self._items)

    @items.setter
    def items(self, value):
        self.setter_calls += 1
        self._items = list(value)


class WriteOnlyHolder:
    def _set(self, value):
        self.stored = value

    sink = property(None, _set)


class FailingHolder:
    def __init__(self, exc):
        self._exc = exc
        self.sibling = Endpoint()

    @property
    def broken(self):
        raise self._exc


class Slotted:
    __slots__ = ("service", "missing")

    def __init__(self, service):
        self.service = service


@dataclass(frozen=True)
class FrozenConfig:
    service: Any
    label: str = "frozen"


@dataclass
class Settings:
    service: Any
    retries: int = 3


class ServiceModel(BaseModel):
    name: str
    service: Any = None
    tags: list = []


class TestProperties:
    """Properties are read, walked and written back through their setter."""

    def test_read_write_property(self, graph, record):
        endpoint = Endpoint()
        holder = ServiceHolder(endpoint)

        graph.substitute(holder, record)

        assert isinstance(holder.service, FakeProxy)
        assert holder.service.original is endpoint
        assert graph.drain_discovered_endpoints() == {"ep_1": ".service"}

    def test_read_only_property_contents_substituted_in_place(self, graph, record):
        items = [Endpoint()]
        holder = ReadOnlyHolder(items)

        graph.substitute(holder, record)

        assert holder.value is items
        assert isinstance(items[0], FakeProxy)
        assert graph.drain_discovered_endpoints() == {"ep_1": ".value[0]"}

    def test_read_only_property_endpoint_cannot_be_stored(
        self, graph, record, naming, caplog
    ):
        endpoint = Endpoint()
        holder = ReadOnlyHolder(endpoint)

        graph.substitute(holder, record)

        assert holder.value is endpoint
        assert naming.name_for.call_count == 1
        assert "no writer" in caplog.text

    def test_copying_getter_is_written_back_through_setter(self, graph, record):
        holder = CopyingHolder([Endpoint()])

        graph.substitute(holder, record)

        assert holder.setter_calls == 1
        assert isinstance(holder._items[0], FakeProxy)
        assert graph.drain_discovered_endpoints() == {"ep_1": ".items[0]"}

    def test_write_only_property_skipped(self, graph, record, caplog):
        holder = WriteOnlyHolder()

        graph.substitute(holder, record)

        assert not hasattr(holder, "stored")
        assert "property is not readable" in caplog.text


class TestFields:
    """Public instance fields, slots and model fields."""

    def test_private_fields_ignored_by_default(self, graph, record, naming):
        root = Box(_hidden=Endpoint())

        graph.substitute(root, record)

        assert isinstance(root._hidden, Endpoint)
        naming.name_for.assert_not_called()

    def test_private_fields_walked_when_enabled(self, make_graph, record):
        graph = make_graph(WalkerConfig(include_private_members=True))
        root = Box(_hidden=Endpoint())

        graph.substitute(root, record)

        assert isinstance(root._hidden, FakeProxy)
        assert graph.drain_discovered_endpoints() == {"ep_1": "._hidden"}

    def test_slots(self, graph, record, caplog):
        root = Slotted(Endpoint())

        graph.substitute(root, record)

        assert isinstance(root.service, FakeProxy)
        # The unset slot is reported and skipped
        assert "missing" in caplog.text

    def test_dataclass(self, graph, record):
        settings = Settings(service=Endpoint())

        graph.substitute(settings, record)

        assert isinstance(settings.service, FakeProxy)
        assert settings.retries == 3

    def test_frozen_dataclass_write_skipped(self, graph, record, caplog):
        endpoint = Endpoint()
        frozen = FrozenConfig(service=endpoint)
        root = [frozen, Endpoint()]

        graph.substitute(root, record)

        assert frozen.service is endpoint
        assert isinstance(root[1], FakeProxy)
        assert "FrozenInstanceError" in caplog.text

    def test_unchanged_field_is_not_rewritten(self, graph, record, caplog):
        frozen = FrozenConfig(service=[1, 2])

        graph.substitute(frozen, record)

        assert frozen.service == [1, 2]
        assert "FrozenInstanceError" not in caplog.text

    def test_pydantic_model_fields(self, graph, record):
        model = ServiceModel(name="m", service=Endpoint(), tags=[Endpoint()])

        graph.substitute(model, record)

        assert isinstance(model.service, FakeProxy)
        assert isinstance(model.tags[0], FakeProxy)
        assert graph.drain_discovered_endpoints() == {
            "ep_1": ".service",
            "ep_2": ".tags[0]",
        }


class TestReadFailures:
    """Recoverable read failures are contained; others abort."""

    @pytest.mark.parametrize(
        "exc", [AttributeError("gone"), PermissionError("denied"), NotImplementedError()]
    )
    def test_recoverable_failure_does_not_stop_siblings(self, graph, record, exc):
        holder = FailingHolder(exc)
        root = [holder, Endpoint()]

        graph.substitute(root, record)

        assert isinstance(holder.sibling, FakeProxy)
        assert isinstance(root[1], FakeProxy)

    def test_recoverable_failure_is_logged(self, graph, record, caplog):
        graph.substitute(FailingHolder(PermissionError("denied")), record)

        assert "Skipping member 'broken' on FailingHolder at '.broken'" in caplog.text
        assert "PermissionError: denied" in caplog.text

    def test_unexpected_failure_aborts(self, graph, record):
        holder = FailingHolder(RuntimeError("boom"))

        with pytest.raises(FatalTraversalError) as exc_info:
            graph.substitute(Box(child=holder), record)

        error = exc_info.value
        assert error.member == "broken"
        assert error.path == ".child.broken"
        assert error.owner_type is FailingHolder
        assert isinstance(error.__cause__, RuntimeError)

    def test_custom_read_errors(self, make_graph, record):
        graph = make_graph(WalkerConfig(read_errors=(RuntimeError,)))
        holder = FailingHolder(RuntimeError("boom"))

        graph.substitute(holder, record)

        assert isinstance(holder.sibling, FakeProxy)

    def test_walker_usable_after_abort(self, graph, record):
        with pytest.raises(FatalTraversalError):
            graph.substitute(FailingHolder(RuntimeError("boom")), record)

        items = [Endpoint()]
        graph.substitute(items, record)
        assert isinstance(items[0], FakeProxy)
