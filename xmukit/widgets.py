"""A small widget model and conversions between widget names and widgets."""

from __future__ import annotations

from dataclasses import dataclass, field

from xmukit.converters import ConversionError

__all__ = [
    "Resource",
    "WidgetClass",
    "Widget",
    "string_to_widget",
    "widget_to_string",
]


@dataclass(frozen=True)
class Resource:
    """A resource a widget class declares."""

    name: str
    resource_class: str = ""
    resource_type: str = ""


@dataclass(eq=False)
class WidgetClass:
    """A widget class with its superclass and declared resources."""

    name: str
    superclass: WidgetClass | None = None
    resources: list[Resource] = field(default_factory=list)
    constraints: list[Resource] = field(default_factory=list)
    composite: bool = False

    def ancestry(self):
        """Yield this class and then each superclass in turn."""
        cls: WidgetClass | None = self
        while cls is not None:
            yield cls
            cls = cls.superclass

    def is_subclass_of(self, other: WidgetClass) -> bool:
        """Return True if this class is ``other`` or derives from it."""
        return any(cls is other for cls in self.ancestry())


@dataclass(eq=False)
class Widget:
    """A widget instance with its normal and popup children."""

    name: str
    widget_class: WidgetClass
    parent: Widget | None = field(default=None, repr=False)
    children: list[Widget] = field(default_factory=list, repr=False)
    popups: list[Widget] = field(default_factory=list, repr=False)

    def is_composite(self) -> bool:
        """Return True if the widget's class, or a superclass, is composite."""
        return any(cls.composite for cls in self.widget_class.ancestry())


def string_to_widget(parent: Widget, name: str) -> Widget:
    """Find a child of ``parent`` by name, or failing that by class name.

    Normal children are searched before popup children; names are compared
    exactly. Children of a non-composite parent are not considered.
    """
    normal = parent.children if parent.is_composite() else []
    for candidate in (*normal, *parent.popups):
        if candidate.name == name:
            return candidate
    for candidate in (*normal, *parent.popups):
        if candidate.widget_class.name == name:
            return candidate
    raise ConversionError(f'Cannot convert string "{name}" to type Widget')


def widget_to_string(widget: Widget | None) -> str:
    """Return the widget's name, or ``"(null)"`` for no widget."""
    if widget is None:
        return "(null)"
    return widget.name