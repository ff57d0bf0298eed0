# tests/core/test_registry.py
import logging
from unittest.mock import MagicMock

import pytest

from htmlbuilder.core import EventBinding
from htmlbuilder.errors import RegistrationError
from htmlbuilder.registry import EventRegistry


@pytest.fixture
def registry():
    return EventRegistry()


def test_register_and_resolve(registry):
    callback = MagicMock()
    binding = registry.register({"name": "close", "type": "click", "callback": callback})

    resolved = registry.resolve("close")
    assert resolved is binding
    assert resolved.event_type == "click"
    assert resolved.callback is callback
    assert "close" in registry
    assert len(registry) == 1


def test_register_accepts_event_binding(registry):
    binding = EventBinding(name="open", event_type="click", callback=print, options={"once": True})
    assert registry.register(binding) is binding
    assert registry.resolve("open").options == {"once": True}


def test_on_prefix_is_stripped(registry):
    """'onclick' en 'click' zijn uitwisselbaar bij registratie."""
    registry.register({"name": "onsave", "event_type": "submit", "callback": print})
    assert registry.resolve("save") is not None
    assert registry.resolve("onsave") is None
    assert registry.names() == ["save"]


def test_on_prefix_on_event_binding_instance(registry):
    binding = EventBinding(name="onreset", event_type="click", callback=print)
    stored = registry.register(binding)
    assert stored.name == "reset"
    assert stored.callback is print


@pytest.mark.parametrize("data, message", [
    ({"type": "click", "callback": print}, "without a name"),
    ({"name": "", "type": "click", "callback": print}, "without a name"),
    ({"name": "x", "callback": print}, "precise type"),
    ({"name": "x", "type": "click"}, "callback"),
    ({"name": "on", "type": "click", "callback": print}, "not a valid event name"),
])
def test_incomplete_registration_fails(registry, data, message):
    """Zonder naam, type of callback faalt de registratie."""
    with pytest.raises(RegistrationError, match=message):
        registry.register(data)
    assert len(registry) == 0


def test_non_callable_callback_fails(registry):
    with pytest.raises(RegistrationError):
        registry.register({"name": "x", "type": "click", "callback": "not callable"})


def test_register_rejects_other_types(registry):
    with pytest.raises(RegistrationError):
        registry.register(["close", "click", print])


def test_duplicate_names_first_wins(registry, caplog):
    """Bij dubbele namen blijft de eerste registratie geldig."""
    first = registry.register({"name": "go", "type": "click", "callback": MagicMock()})
    with caplog.at_level(logging.WARNING, logger="htmlbuilder.registry"):
        registry.register({"name": "go", "type": "dblclick", "callback": MagicMock()})

    assert registry.resolve("go") is first
    assert len(registry) == 2
    assert "already registered" in caplog.text


def test_resolve_unknown_returns_none(registry):
    assert registry.resolve("missing") is None
