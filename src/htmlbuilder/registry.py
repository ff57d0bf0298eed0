# src/htmlbuilder/registry.py
import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from .core import EventBinding
from .errors import RegistrationError

logger = logging.getLogger(__name__)


class EventRegistry:
    """
    Name-keyed table of event bindings that templates reference with `@name`.

    Owned by a single HTMLBuilder: bindings registered here are available to every
    template compiled by that builder. Registration is append-only; duplicate names
    are kept but lookups always return the first registration.
    """

    def __init__(self):
        self._events: List[EventBinding] = []

    def register(self, binding: Union[EventBinding, Mapping[str, Any]]) -> EventBinding:
        """
        Registers an event binding.

        Args:
            binding: An EventBinding, or a mapping with `name`, `event_type`
                     (or `type`), `callback` and optional `options`.

        Returns:
            EventBinding: The stored binding (with its `on` prefix stripped).

        Raises:
            RegistrationError: If the name, the type or the callback is missing.
        """
        if not isinstance(binding, EventBinding):
            binding = self._from_mapping(binding)

        if not binding.name:
            raise RegistrationError("register(): cannot bind an event without a name.")
        if not binding.event_type:
            raise RegistrationError("register(): cannot bind an event without a precise type.")

        name = binding.name
        if name.startswith("on"):
            name = name[2:]
            if not name:
                raise RegistrationError("register(): 'on' is not a valid event name.")
            binding = binding.model_copy(update={"name": name})

        if name in self:
            logger.warning("Event '%s' is already registered; the first registration stays in effect.", name)

        self._events.append(binding)
        logger.debug("Registered event '%s' (%s)", name, binding.event_type)
        return binding

    @staticmethod
    def _from_mapping(data: Mapping[str, Any]) -> EventBinding:
        if not isinstance(data, Mapping):
            raise RegistrationError(f"register(): expected an EventBinding or a mapping, got {type(data).__name__}.")

        fields = dict(data)
        if "event_type" not in fields and "type" in fields:
            fields["event_type"] = fields.pop("type")

        if not fields.get("name"):
            raise RegistrationError("register(): cannot bind an event without a name.")
        if not fields.get("event_type"):
            raise RegistrationError("register(): cannot bind an event without a precise type.")
        if fields.get("callback") is None:
            raise RegistrationError("register(): cannot bind an event without a callback function.")

        try:
            return EventBinding(**fields)
        except ValidationError as e:
            raise RegistrationError(f"register(): invalid event binding: {e}") from e

    def resolve(self, name: str) -> Optional[EventBinding]:
        """Gets the first registered event with exactly this name."""
        for event in self._events:
            if event.name == name:
                return event
        return None

    def names(self) -> List[str]:
        return [event.name for event in self._events]

    def __contains__(self, name: object) -> bool:
        return any(event.name == name for event in self._events)

    def __len__(self) -> int:
        return len(self._events)
