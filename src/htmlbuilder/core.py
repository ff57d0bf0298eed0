# src/htmlbuilder/core.py
from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field


class EventBinding(BaseModel):
    """
    A named event listener that templates can reference with `@name`.
    The `name` is the lookup key, `event_type` the event the callback listens to.
    """
    name: str
    event_type: str
    callback: Callable[[Any], Any]
    options: Optional[Any] = None


class ElementNode(BaseModel):
    """
    Data model representing a materialized element of the presentation tree.
    """
    tag: str
    classes: List[str] = Field(default_factory=list)
    id: Optional[str] = None
    text: Optional[str] = None
    attrs: Dict[str, str] = Field(default_factory=dict)
    style: Dict[str, str] = Field(default_factory=dict)
    children: List['ElementNode'] = Field(default_factory=list)
    listeners: List[EventBinding] = Field(default_factory=list)

    @classmethod
    def create(cls, tag: str) -> 'ElementNode':
        """Default node factory used by the builder."""
        return cls(tag=tag)

    @property
    def is_empty(self) -> bool:
        """Returns True if the element contains no text and no children."""
        return not self.text and not self.children

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def set_attribute(self, name: str, value: str = "") -> None:
        """Sets an attribute; `class` and `id` are reflected onto their fields."""
        if name == "class":
            self.classes = []
            for c in value.split():
                self.add_class(c)
        elif name == "id":
            self.id = value or None
        else:
            self.attrs[name] = value

    def remove_attribute(self, name: str) -> None:
        self.attrs.pop(name, None)

    def add_event_listener(self, binding: EventBinding) -> None:
        # The same binding object is only ever attached once per node
        if any(existing is binding for existing in self.listeners):
            return
        self.listeners.append(binding)

    def dispatch(self, event_type: str, event: Any = None) -> int:
        """
        Invokes every listener registered for `event_type`, in attachment order.

        Returns:
            int: The number of callbacks that were called.
        """
        called = 0
        for binding in list(self.listeners):
            if binding.event_type == event_type:
                binding.callback(event)
                called += 1
        return called

    def prepend(self, child: 'ElementNode') -> 'ElementNode':
        self.children.insert(0, child)
        return child

    def append_child(self, child: 'ElementNode') -> 'ElementNode':
        self.children.append(child)
        return child

    def remove_child(self, child: 'ElementNode') -> None:
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                return
        raise ValueError(f"<{child.tag}> is not a child of <{self.tag}>")

    def depth_first(self) -> Iterator['ElementNode']:
        """Traverse the tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()

    def find_by_id(self, node_id: str) -> Optional['ElementNode']:
        for node in self.depth_first():
            if node.id == node_id:
                return node
        return None

    def find_by_class(self, name: str) -> List['ElementNode']:
        return [node for node in self.depth_first() if name in node.classes]


class NodeDescriptor(BaseModel):
    """
    The parsed meaning of one template line, before materialization.
    `attributes` keeps the declaration order; a value of None marks a presence attribute.
    """
    tag: str
    classes: List[str] = Field(default_factory=list)
    id: Optional[str] = None
    text: Optional[str] = None
    attributes: List[Tuple[str, Optional[str]]] = Field(default_factory=list)
    event_names: List[str] = Field(default_factory=list)
    diagnostics: List[str] = Field(default_factory=list)


# Factory signature the builder uses to create platform nodes
NodeFactory = Callable[[str], ElementNode]
