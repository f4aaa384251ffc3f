"""
Structure traversal shared by binding and inventory.

The target is walked depth-first in declaration order. Every node is
reached through a Slot (an addressable location) so that leaves can be
reassigned in place, whether they live on a dataclass attribute, in a
list element, or in a Ref holder.

Node shapes:
    - Composite: a dataclass instance. Each public field extends the key
      with its derived name.
    - Sequence: a list. Every element shares the key of the list itself;
      there is no per-index suffix.
    - Leaf: anything else. The binder decides whether it can be set.

Traversal never creates nodes. A composite or sequence slot holding None
and an empty list both contribute no leaves.
"""

import dataclasses
import logging
import typing
from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from envbind.coercion import LeafKind, kind_name, leaf_kind
from envbind.naming import derive_key

logger = logging.getLogger(__name__)

_SEQUENCE_ORIGINS = (list, Sequence, MutableSequence)


class Ref:
    """
    Addressable holder for a scalar root.

    Python cannot hand out a reference to a bare int or str, so a scalar
    that should be read straight from one environment key is wrapped:

        port = Ref(8080)
        load_from_environment(port, "PORT")
        port.value  # int from $PORT, or 8080 when unset

    Properties:
        value: Current value
        annotation: Declared type; defaults to the type of `value`
    """

    def __init__(self, value: Any = None, annotation: Any = None):
        self.value = value
        self.annotation = annotation

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


class Slot(ABC):
    """A location in the target structure that holds one node."""

    annotation: Any = None
    path: str = ""

    @abstractmethod
    def read(self) -> Any:
        ...

    @abstractmethod
    def write(self, value: Any) -> None:
        ...


class RootSlot(Slot):
    """The caller's dataclass or list; it is traversed, never replaced."""

    def __init__(self, target: Any):
        self.target = target

    def read(self) -> Any:
        return self.target

    def write(self, value: Any) -> None:
        raise TypeError(f"cannot replace root target of type {type(self.target).__name__}")


class RefSlot(Slot):
    def __init__(self, ref: Ref):
        self.ref = ref
        self.annotation = ref.annotation

    def read(self) -> Any:
        return self.ref.value

    def write(self, value: Any) -> None:
        self.ref.value = value


class AttributeSlot(Slot):
    def __init__(self, owner: Any, name: str, annotation: Any, path: str):
        self.owner = owner
        self.name = name
        self.annotation = annotation
        self.path = path

    def read(self) -> Any:
        # init=False fields without a default have no attribute until assigned
        return getattr(self.owner, self.name, None)

    def write(self, value: Any) -> None:
        setattr(self.owner, self.name, value)


class IndexSlot(Slot):
    def __init__(self, items: list, index: int, annotation: Any, path: str):
        self.items = items
        self.index = index
        self.annotation = annotation
        self.path = path

    def read(self) -> Any:
        return self.items[self.index]

    def write(self, value: Any) -> None:
        self.items[self.index] = value


@dataclass
class Leaf:
    """A scalar slot reached during traversal, with its environment key."""

    key: str
    slot: Slot

    @property
    def kind(self) -> Optional[LeafKind]:
        return leaf_kind(self.slot.annotation, self.slot.read())

    @property
    def kind_name(self) -> str:
        return kind_name(self.slot.annotation, self.slot.read())

    @property
    def path(self) -> str:
        return self.slot.path


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _is_composite(annotation: Any, value: Any) -> bool:
    if _is_dataclass_instance(value):
        return True
    return value is None and isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def _is_sequence(annotation: Any, value: Any) -> bool:
    if isinstance(value, list):
        return True
    if value is not None:
        return False
    return annotation is list or typing.get_origin(annotation) in _SEQUENCE_ORIGINS


def _element_annotation(annotation: Any) -> Any:
    if typing.get_origin(annotation) in _SEQUENCE_ORIGINS:
        args = typing.get_args(annotation)
        if args:
            return args[0]
    return None


def _type_hints(node_type: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(node_type)
    except (NameError, TypeError) as exc:
        # Unresolvable forward references: fall back to field.type / runtime values
        logger.debug("Could not resolve annotations of %s: %s", node_type.__name__, exc)
        return {}


def _bindable_fields(node: Any) -> Iterator[Tuple[str, Any]]:
    """Yield (name, annotation) for every field the binder may set."""
    node_type = type(node)
    params = getattr(node_type, "__dataclass_params__", None)
    if params is not None and params.frozen:
        logger.debug("Skipping fields of frozen dataclass %s", node_type.__name__)
        return

    hints = _type_hints(node_type)
    for field in dataclasses.fields(node):
        if field.name.startswith("_"):
            logger.debug("Skipping private field %s.%s", node_type.__name__, field.name)
            continue
        annotation = hints.get(field.name)
        if annotation is None and not isinstance(field.type, str):
            annotation = field.type
        yield field.name, annotation


def _join_path(parent: str, name: str) -> str:
    return f"{parent}.{name}" if parent else name


def root_slot(target: Any) -> Slot:
    """
    Wrap the caller's target in a Slot.

    Raises:
        TypeError: If the target is not a dataclass instance, a list or a Ref
    """
    if isinstance(target, Ref):
        return RefSlot(target)
    if _is_dataclass_instance(target) or isinstance(target, list):
        return RootSlot(target)
    raise TypeError(
        f"cannot bind onto {type(target).__name__}: "
        "expected a dataclass instance, a list or a Ref"
    )


def iter_leaves(slot: Slot, key: str) -> Iterator[Leaf]:
    """
    Yield every leaf below `slot`, depth-first in declaration order.

    Args:
        slot: Slot holding the node to walk
        key: Environment key accumulated for this node

    Yields:
        Leaf objects; the generator is lazy, so a consumer that raises
        stops the walk and later siblings are never visited
    """
    value = slot.read()

    if _is_composite(slot.annotation, value):
        if value is None:
            return
        for name, annotation in _bindable_fields(value):
            child = AttributeSlot(value, name, annotation, _join_path(slot.path, name))
            yield from iter_leaves(child, derive_key(name, key))
        return

    if _is_sequence(slot.annotation, value):
        if value is None:
            return
        element_annotation = _element_annotation(slot.annotation)
        for index in range(len(value)):
            child = IndexSlot(value, index, element_annotation, f"{slot.path}[{index}]")
            yield from iter_leaves(child, key)
        return

    yield Leaf(key=key, slot=slot)


__all__ = [
    "Ref",
    "Slot",
    "Leaf",
    "root_slot",
    "iter_leaves",
]
