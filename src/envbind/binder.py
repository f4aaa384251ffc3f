"""
Recursive binder: populate a structure in place from environment variables.

Each leaf field is looked up under a key derived from its path:

    @dataclass
    class Database:
        host: str = "localhost"
        port: int = 5432

    @dataclass
    class Config:
        database: Database = field(default_factory=Database)
        featureFlags: List[Flag] = field(default_factory=list)

    load_from_environment(config, "app")
        config.database.host     ← APP_DATABASE_HOST
        config.database.port     ← APP_DATABASE_PORT
        config.featureFlags[*].x ← APP_FEATURE_FLAGS_X  (shared by every element)

Unset variables leave defaults untouched. The first bad value aborts the
walk; fields already bound keep their new values.
"""

import logging
import os
from typing import Any, Mapping, Optional

from envbind.coercion import coerce
from envbind.errors import BindError, UnsupportedTypeError
from envbind.traversal import iter_leaves, root_slot

logger = logging.getLogger(__name__)


def load_from_environment(
    target: Any,
    prefix: str = "",
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Bind environment variables onto `target` in place.

    Args:
        target: Dataclass instance, list, or Ref to populate
        prefix: Key prefix for the root; used verbatim as the key of a Ref
        environ: Variables to read from (defaults to os.environ)

    Raises:
        CoercionError: A variable is set but not parseable as its field's kind
        UnsupportedTypeError: A variable is set for a field of unsupported kind
        TypeError: `target` is not addressable
    """
    lookup = os.environ if environ is None else environ

    for leaf in iter_leaves(root_slot(target), prefix):
        if leaf.key not in lookup:
            continue
        raw = lookup[leaf.key]

        kind = leaf.kind
        if kind is None:
            raise UnsupportedTypeError(leaf.key, leaf.kind_name)

        leaf.slot.write(coerce(kind, leaf.key, raw))
        logger.debug("Bound %s from environment", leaf.key)


def must_load_from_environment(
    target: Any,
    prefix: str = "",
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Same as load_from_environment, but misconfiguration is fatal.

    Raises:
        SystemExit: Carrying the BindError message, chained to the BindError
    """
    try:
        load_from_environment(target, prefix, environ=environ)
    except BindError as exc:
        logger.critical("Configuration could not be loaded from environment: %s", exc)
        raise SystemExit(str(exc)) from exc


__all__ = ["load_from_environment", "must_load_from_environment"]
