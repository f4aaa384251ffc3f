"""
Environment inventory: which variables does a structure read?

Walks the target exactly as the binder does, but only reports, so the
list of keys can be documented or handed to operators before deploying.
Serialization goes through an intermediate dict, like the rest of the
package's outputs.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import yaml

from envbind.traversal import iter_leaves, root_slot


@dataclass
class EnvVariable:
    """
    One leaf of the target and the variable that feeds it.

    Properties:
        key: Environment key looked up for the leaf
        kind: Leaf kind ("string", "int", "bool", or the unsupported type's name)
        path: Attribute path from the root, with [i] for list elements
        default: Value currently held, for supported kinds only
        present: Whether the key is set in the inspected environment
    """

    key: str
    kind: str
    path: str
    default: Any = None
    present: bool = False


def describe_environment(
    target: Any,
    prefix: str = "",
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> List[EnvVariable]:
    """List every leaf of `target` in traversal order. Never raises on kinds."""
    lookup = os.environ if environ is None else environ
    variables = []
    for leaf in iter_leaves(root_slot(target), prefix):
        supported = leaf.kind is not None
        variables.append(EnvVariable(
            key=leaf.key,
            kind=leaf.kind_name,
            path=leaf.path,
            default=leaf.slot.read() if supported else None,
            present=leaf.key in lookup,
        ))
    return variables


def inventory_keys(target: Any, prefix: str = "") -> List[str]:
    """Distinct keys read by `target`, in first-seen order."""
    seen: Dict[str, None] = {}
    for leaf in iter_leaves(root_slot(target), prefix):
        seen.setdefault(leaf.key, None)
    return list(seen)


def variable_to_dict(v: EnvVariable) -> Dict[str, Any]:
    return {
        "key": v.key,
        "kind": v.kind,
        "path": v.path,
        "default": v.default,
        "present": v.present,
    }


def inventory_to_dict(variables: List[EnvVariable]) -> Dict[str, Any]:
    return {"variables": [variable_to_dict(v) for v in variables]}


def inventory_to_json(variables: List[EnvVariable]) -> str:
    return json.dumps(inventory_to_dict(variables), sort_keys=True)


def inventory_to_yaml(variables: List[EnvVariable]) -> str:
    return yaml.safe_dump(inventory_to_dict(variables), sort_keys=False)


__all__ = [
    "EnvVariable",
    "describe_environment",
    "inventory_keys",
    "variable_to_dict",
    "inventory_to_dict",
    "inventory_to_json",
    "inventory_to_yaml",
]
