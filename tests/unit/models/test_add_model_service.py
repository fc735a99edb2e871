"""Unit tests for AddModelService (the add-model use case).

Covers:
- Handler subscription at configuration time (plus the default logger).
- Step order: create model, create event, save, notify.
- Short-circuit on failure: no save or notify after an error.
"""

from __future__ import annotations

import logging

import pytest

from modules.models.handlers import log_event
from modules.models.services import AddModelService, add_model_factory
from shared.domain.exceptions import InvalidArgument, UnregisteredModel, UnregisteredModelEvent

pytestmark = pytest.mark.unit


class RecordingRepository:
    def __init__(self, calls, fail=False):
        self.calls = calls
        self.fail = fail
        self.saved = []

    async def save(self, id, model):
        self.calls.append("save")
        if self.fail:
            raise ConnectionError("storage unavailable")
        self.saved.append((id, model))


class RecordingObserver:
    def __init__(self, calls, fail=False):
        self.calls = calls
        self.fail = fail
        self.subscriptions = []
        self.notified = []

    def on(self, event_name, handler):
        self.subscriptions.append((event_name, handler))

    async def notify(self, event_name, event):
        self.calls.append("notify")
        if self.fail:
            raise RuntimeError("listener failed")
        self.notified.append((event_name, event))


async def echo(args):
    return args


@pytest.fixture()
def calls():
    return []


@pytest.fixture()
def fake_repository(calls):
    return RecordingRepository(calls)


@pytest.fixture()
def fake_observer(calls):
    return RecordingObserver(calls)


@pytest.fixture()
def registered_factory(factory):
    factory.register_model("Order", lambda args: {"total": 100})
    factory.register_event("create", "Order", echo)
    return factory


def test_handlers_are_subscribed_once_at_configuration(registered_factory, fake_repository, fake_observer):
    def handler(event):
        return None

    service = AddModelService(
        factory=registered_factory,
        model_name="order",
        repository=fake_repository,
        observer=fake_observer,
        handlers=[handler],
    )

    assert service.event_name == "CREATEORDER"
    assert service.model_name == "ORDER"
    assert fake_observer.subscriptions == [("CREATEORDER", handler), ("CREATEORDER", log_event)]


def test_caller_handler_list_is_not_mutated(registered_factory, fake_repository, fake_observer):
    handlers = []

    add_model_factory(
        factory=registered_factory,
        model_name="Order",
        repository=fake_repository,
        observer=fake_observer,
        handlers=handlers,
    )

    assert handlers == []


def test_invalid_model_name_fails_at_configuration(registered_factory, fake_repository, fake_observer):
    with pytest.raises(InvalidArgument):
        AddModelService(registered_factory, "", fake_repository, fake_observer)


@pytest.mark.asyncio
async def test_add_model_runs_steps_in_order(registered_factory, fake_repository, fake_observer, calls):
    add_model = add_model_factory(
        factory=registered_factory,
        model_name="Order",
        repository=fake_repository,
        observer=fake_observer,
    )

    model = await add_model({"total": 100})

    assert calls == ["save", "notify"]
    assert fake_repository.saved == [(model.id, model)]
    [(event_name, event)] = fake_observer.notified
    assert event_name == "CREATEORDER"
    assert event.get_event_name() == "CREATEORDER"
    assert event.payload["id"] == model.id


@pytest.mark.asyncio
async def test_unregistered_model_short_circuits(factory, fake_repository, fake_observer, calls):
    add_model = add_model_factory(
        factory=factory,
        model_name="Order",
        repository=fake_repository,
        observer=fake_observer,
    )

    with pytest.raises(UnregisteredModel):
        await add_model({})

    assert calls == []


@pytest.mark.asyncio
async def test_missing_create_event_short_circuits(factory, fake_repository, fake_observer, calls):
    factory.register_model("Order", echo)
    add_model = add_model_factory(
        factory=factory,
        model_name="Order",
        repository=fake_repository,
        observer=fake_observer,
    )

    with pytest.raises(UnregisteredModelEvent):
        await add_model({})

    assert calls == []


@pytest.mark.asyncio
async def test_repository_failure_prevents_notification(registered_factory, fake_observer, calls):
    add_model = add_model_factory(
        factory=registered_factory,
        model_name="Order",
        repository=RecordingRepository(calls, fail=True),
        observer=fake_observer,
    )

    with pytest.raises(ConnectionError):
        await add_model({})

    assert calls == ["save"]
    assert fake_observer.notified == []


@pytest.mark.asyncio
async def test_add_model_logs_progress(registered_factory, fake_repository, fake_observer, caplog):
    add_model = add_model_factory(
        factory=registered_factory,
        model_name="Order",
        repository=fake_repository,
        observer=fake_observer,
    )

    with caplog.at_level(logging.INFO, logger="modules.models.services"):
        await add_model({})

    messages = [record.getMessage() for record in caplog.records]
    assert any("model.creation_started" in message for message in messages)
    assert any("model.created" in message for message in messages)


@pytest.mark.asyncio
async def test_observer_failure_propagates_after_save(registered_factory, fake_repository, calls):
    add_model = add_model_factory(
        factory=registered_factory,
        model_name="Order",
        repository=fake_repository,
        observer=RecordingObserver(calls, fail=True),
    )
    returned = []

    with pytest.raises(RuntimeError, match="listener failed"):
        returned.append(await add_model({}))

    assert calls == ["save", "notify"]
    assert len(fake_repository.saved) == 1
    assert returned == []
