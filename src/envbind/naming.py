"""
Environment key naming.

Turns a field name plus the key accumulated so far into the environment
variable key for that field.

Rules:
    - The prefix is upper-cased and kept as-is
    - CamelCase words are split with "_" on a lower → upper transition
    - Runs of capitals stay joined (acronyms): FooBAR → FOO_BAR
    - An empty name yields the prefix alone, with no trailing separator

Examples:
    derive_key("FooBar", "")     → "FOO_BAR"
    derive_key("bar", "foo")     → "FOO_BAR"
    derive_key("", "FOO")        → "FOO"
    derive_key("api_key", "svc") → "SVC_API_KEY"
"""


def derive_key(name: str, prefix: str = "") -> str:
    """
    Derive the environment key for `name` below `prefix`.

    Args:
        name: Field (or path segment) name, in camel or snake case
        prefix: Key accumulated for the enclosing node (may be empty)

    Returns:
        Upper snake case key, joined to the prefix with "_" when the
        prefix is non-empty
    """
    upper_prefix = prefix.upper()

    if name == "":
        return upper_prefix

    parts = []
    in_upper_run = False
    for position, char in enumerate(name):
        is_upper = char.isupper()
        if position != 0 and is_upper and not in_upper_run:
            parts.append("_")
        if is_upper:
            parts.append(char)
            in_upper_run = True
            continue
        parts.append(char.upper())
        in_upper_run = False

    derived = "".join(parts)
    if upper_prefix == "":
        return derived

    return f"{upper_prefix}_{derived}"


__all__ = ["derive_key"]
