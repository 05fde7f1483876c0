"""Widget class nodes: a class tree with resources and where each one is declared."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from xmukit.converters import _latin1_lower
from xmukit.widgets import Resource, WidgetClass

__all__ = [
    "WidgetNode",
    "initialize_nodes",
    "fetch_resources",
    "count_owned_resources",
    "name_to_node",
]

_NAME_LIMIT = 1024


@dataclass(eq=False)
class WidgetNode:
    """A node describing one widget class within a set of known classes."""

    label: str
    widget_class: WidgetClass
    superclass: WidgetNode | None = field(default=None, repr=False)
    children: list[WidgetNode] = field(default_factory=list, repr=False)
    lowered_label: str = ""
    lowered_classname: str = ""
    have_resources: bool = False
    resources: list[Resource] = field(default_factory=list, repr=False)
    resourcewn: list[WidgetNode | None] = field(default_factory=list, repr=False)
    constraints: list[Resource] = field(default_factory=list, repr=False)
    constraintwn: list[WidgetNode | None] = field(default_factory=list, repr=False)
    data: Any = None

    def classname(self) -> str:
        """Return the name of the node's widget class."""
        return self.widget_class.name


def initialize_nodes(nodes: list[WidgetNode]) -> None:
    """Link each node to the nearest superclass node present in ``nodes``.

    Classes that have no node of their own are skipped while walking up the
    superclass chain. Each node's ``children`` keeps the order of ``nodes``.
    """
    for node in nodes:
        node.children = []
    for node in reversed(nodes):
        node.lowered_label = _latin1_lower(node.label)
        node.lowered_classname = _latin1_lower(node.classname())
        node.superclass = None
        node.have_resources = False
        node.resources = []
        node.resourcewn = []
        node.constraints = []
        node.constraintwn = []
        node.data = None

        cls = node.widget_class.superclass
        while cls is not None and node.superclass is None:
            node.superclass = next(
                (candidate for candidate in nodes if candidate.widget_class is cls),
                None,
            )
            cls = cls.superclass
        if node.superclass is not None:
            node.superclass.children.insert(0, node)


def _collected(widget_class: WidgetClass, constraints: bool) -> list[Resource]:
    """Return the full, name-sorted resource list of a class and its ancestors."""
    merged: dict[str, Resource] = {}
    for cls in reversed(list(widget_class.ancestry())):
        for resource in cls.constraints if constraints else cls.resources:
            merged[resource.name] = resource
    return sorted(merged.values(), key=lambda resource: resource.name)


def _find_owner(node: WidgetNode, name: str, constraints: bool) -> WidgetNode:
    """Walk up from ``node`` while the superclass also has ``name``."""
    sup = node.superclass
    while sup is not None:
        listing = sup.constraints if constraints else sup.resources
        if not any(resource.name == name for resource in listing):
            break
        node, sup = sup, sup.superclass
    return node


def _mark_resource_owner(node: WidgetNode) -> None:
    node.resourcewn = [_find_owner(node, r.name, False) for r in node.resources]
    node.constraintwn = [_find_owner(node, r.name, True) for r in node.constraints]


def _chain(node: WidgetNode | None, topnode: WidgetNode | None):
    """Yield ``node`` and its superclass nodes, stopping after ``topnode``."""
    while node is not None:
        yield node
        if node is topnode:
            return
        node = node.superclass


def fetch_resources(node: WidgetNode, topnode: WidgetNode | None = None) -> None:
    """Load resources up the superclass chain and record each one's owner.

    The walk stops at ``topnode`` when given, or at a node that already
    holds its resources.
    """
    if node.have_resources:
        return
    for wn in _chain(node, topnode):
        if wn.have_resources:
            break
        wn.resources = _collected(wn.widget_class, False)
        wn.resourcewn = [None] * len(wn.resources)
        wn.constraints = _collected(wn.widget_class, True)
        wn.constraintwn = [None] * len(wn.constraints)
        wn.have_resources = True
    for wn in _chain(node, topnode):
        _mark_resource_owner(wn)


def count_owned_resources(
    node: WidgetNode, owner: WidgetNode, constraints: bool = False
) -> int:
    """Count the resources of ``node`` that were first declared by ``owner``."""
    owners = node.constraintwn if constraints else node.resourcewn
    return sum(1 for wn in owners if wn is owner)


def name_to_node(nodes: list[WidgetNode], name: str) -> WidgetNode | None:
    """Find a node by label or class name, ignoring case; None if absent."""
    wanted = _latin1_lower(name[: _NAME_LIMIT - 1])
    for node in nodes:
        if wanted in (node.lowered_label, node.lowered_classname):
            return node
    return None