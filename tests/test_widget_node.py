import pytest

from xmukit.widget_node import (
    WidgetNode,
    count_owned_resources,
    fetch_resources,
    initialize_nodes,
    name_to_node,
)
from xmukit.widgets import Resource, WidgetClass


@pytest.fixture
def tree():
    core = WidgetClass("Core", resources=[Resource("width"), Resource("height")])
    simple = WidgetClass("Simple", core, resources=[Resource("cursor")])
    label = WidgetClass(
        "Label", simple, resources=[Resource("label"), Resource("width")]
    )
    nodes = [
        WidgetNode("core", core),
        WidgetNode("label", label),
        WidgetNode("simple", simple),
    ]
    initialize_nodes(nodes)
    core_n, label_n, simple_n = nodes
    return nodes, core_n, label_n, simple_n


def test_superclass_links(tree):
    _, core_n, label_n, simple_n = tree
    assert label_n.superclass is simple_n
    assert simple_n.superclass is core_n
    assert core_n.superclass is None


def test_children_links(tree):
    _, core_n, label_n, simple_n = tree
    assert core_n.children == [simple_n]
    assert simple_n.children == [label_n]
    assert label_n.children == []


def test_lowered_names(tree):
    _, _, label_n, _ = tree
    assert label_n.lowered_label == "label"
    assert label_n.lowered_classname == "label"
    assert label_n.classname() == "Label"


def test_hidden_superclass_is_skipped():
    base = WidgetClass("Base")
    hidden = WidgetClass("Hidden", base)
    leaf = WidgetClass("Leaf", hidden)
    nodes = [WidgetNode("base", base), WidgetNode("leaf", leaf)]
    initialize_nodes(nodes)
    assert nodes[1].superclass is nodes[0]
    assert nodes[0].children == [nodes[1]]


def test_children_keep_array_order():
    base = WidgetClass("Base")
    a = WidgetClass("A", base)
    b = WidgetClass("B", base)
    nodes = [WidgetNode("a", a), WidgetNode("b", b), WidgetNode("base", base)]
    initialize_nodes(nodes)
    assert nodes[2].children == [nodes[0], nodes[1]]


def test_name_to_node(tree):
    nodes, _, label_n, simple_n = tree
    assert name_to_node(nodes, "LABEL") is label_n
    assert name_to_node(nodes, "Simple") is simple_n
    assert name_to_node(nodes, "nothing") is None


def test_fetch_resources_sorted(tree):
    _, _, label_n, _ = tree
    fetch_resources(label_n)
    names = [r.name for r in label_n.resources]
    assert names == sorted(names)
    assert set(names) == {"cursor", "height", "label", "width"}
    assert label_n.have_resources


def test_resource_owners(tree):
    _, core_n, label_n, simple_n = tree
    fetch_resources(label_n)
    owners = dict(zip((r.name for r in label_n.resources), label_n.resourcewn))
    assert owners["label"] is label_n
    assert owners["cursor"] is simple_n
    assert owners["width"] is core_n
    assert owners["height"] is core_n


def test_count_owned_resources(tree):
    _, core_n, label_n, simple_n = tree
    fetch_resources(label_n)
    counts = [count_owned_resources(label_n, n, False) for n in (core_n, simple_n, label_n)]
    assert sum(counts) == len(label_n.resources)
    assert count_owned_resources(label_n, label_n, False) == 1
    assert count_owned_resources(label_n, label_n, True) == 0


def test_topnode_stops_walk(tree):
    _, core_n, label_n, simple_n = tree
    fetch_resources(label_n, label_n)
    assert not simple_n.have_resources
    assert not core_n.have_resources
    assert count_owned_resources(label_n, label_n, False) == len(label_n.resources)


def test_constraint_owners():
    base = WidgetClass("Form", constraints=[Resource("top")], composite=True)
    sub = WidgetClass("Sub", base, constraints=[Resource("left")], composite=True)
    nodes = [WidgetNode("form", base), WidgetNode("sub", sub)]
    initialize_nodes(nodes)
    fetch_resources(nodes[1])
    assert [r.name for r in nodes[1].constraints] == ["left", "top"]
    assert count_owned_resources(nodes[1], nodes[0], True) == 1
    assert count_owned_resources(nodes[1], nodes[1], True) == 1


def test_fetch_twice_keeps_result(tree):
    _, _, label_n, _ = tree
    fetch_resources(label_n)
    first = list(label_n.resourcewn)
    fetch_resources(label_n)
    assert label_n.resourcewn == first