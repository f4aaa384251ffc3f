"""
envbind: populate configuration structures from environment variables.

Every leaf field is read from a variable whose name is derived from the
field's path, upper snake cased:

    config.database.poolSize  (prefix "app")  ←  APP_DATABASE_POOL_SIZE

GUARANTEES:
-----------
    - Unset variables never change a field
    - Only str, int and bool leaves are assigned
    - Elements of a list share one key (no index suffix)
    - The first bad value aborts the load and is raised to the caller

The environment is only ever read.
"""

from envbind.binder import load_from_environment, must_load_from_environment
from envbind.coercion import LeafKind
from envbind.errors import BindError, CoercionError, UnsupportedTypeError
from envbind.inventory import (
    EnvVariable,
    describe_environment,
    inventory_keys,
    inventory_to_dict,
    inventory_to_json,
    inventory_to_yaml,
)
from envbind.naming import derive_key
from envbind.traversal import Ref

__version__ = "0.1.0"

__all__ = [
    "load_from_environment",
    "must_load_from_environment",
    "derive_key",
    "Ref",
    "LeafKind",
    "BindError",
    "CoercionError",
    "UnsupportedTypeError",
    "EnvVariable",
    "describe_environment",
    "inventory_keys",
    "inventory_to_dict",
    "inventory_to_json",
    "inventory_to_yaml",
]
