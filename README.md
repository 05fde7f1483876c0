# xmukit

Small, self-contained helpers for X toolkit programs: resource string
converters, a widget class model, the rules for standard colormap
allocations, the standard CIE white points and a Compound Text parser.
All of it is pure Python and works without a display connection.

## Modules

### `xmukit.converters`

Converters between resource strings and values. Names are matched without
regard to ASCII or ISO Latin-1 case.

- `string_to_backing_store` / `backing_store_to_string`: the names
  `notUseful`, `whenMapped`, `always` and `default`, and the `BackingStore`
  enum.
- `string_to_gravity` / `gravity_to_string`: window gravity names such as
  `northwest`, `center` and `static`. The names `left`, `top`, `right` and
  `bottom` are also accepted. The gravity values are module constants
  (`NORTH_WEST_GRAVITY`, ...).
- `string_to_justify` / `justify_to_string`: `left`, `center`, `right` and
  the `Justify` enum.
- `string_to_long` / `long_to_string`: `string_to_long` skips leading white
  space and parses a leading signed decimal integer.

A string that cannot be converted raises `ConversionError`, which is a
subclass of `ValueError`. A value with no name raises it too.

### `xmukit.style_converters`

- `string_to_orientation` / `orientation_to_string` for the `Orientation`
  enum (`horizontal`, `vertical`).
- `string_to_shape_style` / `shape_style_to_string` for the `ShapeStyle`
  enum (`Rectangle`, `Oval`, `Ellipse`, `RoundedRectangle`).

These functions also raise `ConversionError`.

### `xmukit.widgets`

- `Resource`: a resource with its name, class and type.
- `WidgetClass`: a widget class with a superclass, resources, constraint
  resources and a `composite` flag. `is_subclass_of` tells whether the class
  is another class or derives from it.
- `Widget`: a widget with a name, a class, normal children and popups.
  `is_composite` tells whether the widget's class or any superclass is
  composite.
- `string_to_widget(parent, name)` finds a child of `parent`. It first
  compares `name` with the children's names and then with their class names.
  Each pass looks at normal children before popups, and normal children are
  searched only when the parent is composite. Case matters. When no child
  matches it raises `ConversionError`.
- `widget_to_string(widget)` returns the widget's name, or `"(null)"` when
  the widget is `None`.

### `xmukit.widget_node`

`WidgetNode` describes one widget class within a set of known classes.

- `initialize_nodes(nodes)` links each node to the nearest superclass node in
  the list and fills in the lower-cased label and class name.
- `fetch_resources(node, topnode=None)` collects the resources of a node and
  its superclass nodes, sorted by name. For each resource it records the node
  that first declares it.
- `count_owned_resources(node, owner, constraints=False)` counts how many of
  a node's resources or constraint resources come from `owner`.
- `name_to_node(nodes, name)` finds a node by label or class name without
  regard to case. It returns `None` when no node matches.

### `xmukit.stdcmap`

The rules for standard colormap allocations, applied to a `VisualInfo`
(visual class, colormap size and RGB masks):

- `valid_allocation` checks whether the red, green and blue maxima fit the
  visual and suit the `StandardMap` property.
- `colormap_multipliers` returns the red, green and blue multipliers.
- `standard_colormap` returns a `StandardColormap` describing the layout. It
  raises `ValueError` for an invalid allocation.

### `xmukit.whitepoint`

The standard white points as `WhitePoint(u, v, y)` named tuples: `CIE_A`,
`CIE_B`, `CIE_C`, `CIE_D55`, `CIE_D65`, `CIE_D75`, `ASTM_D50` and
`WP_9300K`. `white_point(name)` looks them up without regard to case and
raises `ValueError` for an unknown name.

### `xmukit.xct`

`CompoundTextParser(data, flags=XctFlags.NONE)` splits a Compound Text byte
string into items. `next_item()` returns one `Item` at a time and
`XctResult.END_OF_TEXT` at the end. Iterating over the parser yields every
item up to the end, and `reset()` starts again from the beginning.

Each `Item` carries:

- `result`, an `XctResult`;
- the item's bytes, in `data`;
- `char_size`, where 0 means a variable size;
- the `encoding` name;
- the current `horizontal` direction, a `Direction`;
- the nesting depth, in `horz_depth`.

`XctFlags` selects how items are reported:

- `SINGLE_SET_SEGMENTS` reports C0, GL, C1 and GR segments separately.
- `PROVIDE_EXTENSIONS` reports unknown control sequences as extensions.
- `ACCEPT_C0_EXTENSIONS` and `ACCEPT_C1_EXTENSIONS` accept unknown control
  characters.
- `HIDE_DIRECTION` stops direction changes from being reported as items.
- `SHIFT_MULTI_GR_TO_GL` shifts multi-byte GR sets into GL.

Malformed text raises `CompoundTextError`, which is a subclass of
`ValueError`.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

```python
from xmukit.converters import string_to_justify, Justify
assert string_to_justify("Center") is Justify.CENTER

from xmukit.xct import CompoundTextParser
for item in CompoundTextParser(b"hello\x1b-A\xe9t\xe9"):
    print(item.result, item.encoding, item.data)
```

## What it does not do

The package works only on values in memory. It never talks to a display
server, so it cannot:

- create colormaps, cursors, bitmaps or windows;
- store colormap properties;
- reshape widgets.

`xmukit.stdcmap` only checks allocations and describes their layout.

## Running the tests

```
pytest
```