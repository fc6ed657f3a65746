"""Locale tree helpers.

A locale file is a nested JSON object. Internally each node is either a
:class:`Leaf` (string, number, boolean, ``None`` or a list, which is never
descended into) or a :class:`Branch` holding an ordered mapping of child
nodes. :func:`flatten` turns a tree into the set of dotted paths to its leaves
and :func:`prune` removes the leaves whose path is not in a given key set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping, Union


@dataclass(frozen=True)
class Leaf:
    """Terminal value of a locale tree."""

    value: Any = None


@dataclass
class Branch:
    """Nested mapping of names to child nodes, in source order."""

    children: dict[str, "Node"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    def items(self) -> Iterable[tuple[str, "Node"]]:
        return self.children.items()


Node = Union[Leaf, Branch]


def to_node(obj: Any) -> Node:
    """Convert decoded JSON data into a tree node."""
    if isinstance(obj, dict):
        return Branch({str(k): to_node(v) for k, v in obj.items()})
    return Leaf(obj)


def to_plain(node: Node) -> Any:
    """Convert a tree node back into plain JSON-serializable data."""
    if isinstance(node, Branch):
        return {k: to_plain(v) for k, v in node.items()}
    return node.value


def _as_branch(tree: Branch | Mapping[str, Any]) -> Branch:
    if isinstance(tree, Branch):
        return tree
    return Branch({str(k): to_node(v) for k, v in tree.items()})


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def iter_leaf_paths(tree: Branch | Mapping[str, Any], prefix: str = "") -> Iterator[str]:
    """Yield dotted paths of every leaf in depth-first order."""
    for name, child in _as_branch(tree).items():
        full_key = _join(prefix, name)
        if isinstance(child, Branch):
            yield from iter_leaf_paths(child, full_key)
        else:
            yield full_key


def flatten(tree: Branch | Mapping[str, Any], prefix: str = "") -> set[str]:
    """Return the set of dotted paths to every leaf of ``tree``.

    >>> sorted(flatten({"user": {"name": "John"}, "items": [1, 2]}))
    ['items', 'user.name']
    """
    return set(iter_leaf_paths(tree, prefix))


def _prune_branch(branch: Branch, used_keys: set[str] | frozenset[str], prefix: str) -> tuple[Branch, list[str]]:
    kept: dict[str, Node] = {}
    removed: list[str] = []
    for name, child in branch.items():
        full_key = _join(prefix, name)
        if isinstance(child, Branch):
            cleaned, nested_removed = _prune_branch(child, used_keys, full_key)
            removed.extend(nested_removed)
            # emptied branches are dropped, never kept as {}
            if len(cleaned):
                kept[name] = cleaned
        elif full_key in used_keys:
            kept[name] = child
        else:
            removed.append(full_key)
    return Branch(kept), removed


def prune(
    tree: Branch | Mapping[str, Any],
    used_keys: Iterable[str],
    prefix: str = "",
) -> tuple[Any, list[str]]:
    """Drop every leaf whose dotted path is not in ``used_keys``.

    Returns ``(cleaned, removed)`` where ``cleaned`` has the same shape as the
    input (a :class:`Branch` for a branch, a plain ``dict`` for a mapping) and
    ``removed`` lists the dropped paths depth-first. The input is not mutated.
    """
    keys = used_keys if isinstance(used_keys, (set, frozenset)) else set(used_keys)
    cleaned, removed = _prune_branch(_as_branch(tree), keys, prefix)
    if isinstance(tree, Branch):
        return cleaned, removed
    return to_plain(cleaned), removed
