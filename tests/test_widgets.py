import pytest

from xmukit.converters import ConversionError
from xmukit.widgets import Resource, Widget, WidgetClass, string_to_widget, widget_to_string


@pytest.fixture
def classes():
    core = WidgetClass("Core", resources=[Resource("width", "Width", "Dimension")])
    composite = WidgetClass("Composite", superclass=core, composite=True)
    form = WidgetClass("Form", superclass=composite)
    label = WidgetClass("Label", superclass=core)
    shell = WidgetClass("Shell", superclass=composite)
    return {"core": core, "composite": composite, "form": form, "label": label, "shell": shell}


@pytest.fixture
def tree(classes):
    parent = Widget("form", classes["form"])
    first = Widget("first", classes["label"], parent=parent)
    second = Widget("Label", classes["form"], parent=parent)
    popup = Widget("menu", classes["shell"], parent=parent)
    parent.children.extend([first, second])
    parent.popups.append(popup)
    return parent, first, second, popup


def test_is_subclass_of(classes):
    assert classes["form"].is_subclass_of(classes["core"])
    assert classes["form"].is_subclass_of(classes["form"])
    assert not classes["label"].is_subclass_of(classes["composite"])


def test_is_composite_follows_superclasses(classes):
    assert Widget("f", classes["form"]).is_composite()
    assert not Widget("l", classes["label"]).is_composite()


def test_string_to_widget_matches_child_name(tree):
    parent, first, _, _ = tree
    assert string_to_widget(parent, "first") is first


def test_string_to_widget_matches_popup_name(tree):
    parent, _, _, popup = tree
    assert string_to_widget(parent, "menu") is popup


def test_name_match_beats_class_match(tree):
    parent, first, second, _ = tree
    # "Label" is the name of the second child and the class of the first.
    assert string_to_widget(parent, "Label") is second


def test_string_to_widget_matches_class_name(tree):
    parent, _, _, popup = tree
    assert string_to_widget(parent, "Shell") is popup


def test_class_match_returns_first_normal_child(tree):
    parent, _, second, _ = tree
    assert string_to_widget(parent, "Form") is second


def test_string_to_widget_is_case_sensitive(tree):
    parent = tree[0]
    with pytest.raises(ConversionError):
        string_to_widget(parent, "FIRST")


def test_non_composite_parent_ignores_children(classes):
    parent = Widget("label", classes["label"])
    parent.children.append(Widget("child", classes["label"], parent=parent))
    with pytest.raises(ConversionError):
        string_to_widget(parent, "child")


def test_non_composite_parent_still_searches_popups(classes):
    parent = Widget("label", classes["label"])
    popup = Widget("pop", classes["shell"], parent=parent)
    parent.popups.append(popup)
    assert string_to_widget(parent, "pop") is popup


def test_widget_to_string_round_trip(tree):
    parent, first, _, popup = tree
    for widget in (first, popup):
        assert string_to_widget(parent, widget_to_string(widget)) is widget


def test_widget_to_string_none():
    assert widget_to_string(None) == "(null)"


def test_resource_fields(classes):
    resource = classes["core"].resources[0]
    assert (resource.name, resource.resource_class, resource.resource_type) == (
        "width",
        "Width",
        "Dimension",
    )