import pytest

from xmukit import converters
from xmukit.converters import (
    BackingStore,
    ConversionError,
    Justify,
    backing_store_to_string,
    gravity_to_string,
    justify_to_string,
    long_to_string,
    string_to_backing_store,
    string_to_gravity,
    string_to_justify,
    string_to_long,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("notUseful", BackingStore.NOT_USEFUL),
        ("whenMapped", BackingStore.WHEN_MAPPED),
        ("always", BackingStore.ALWAYS),
        ("default", BackingStore.DEFAULT),
        ("ALWAYS", BackingStore.ALWAYS),
        ("NotUseful", BackingStore.NOT_USEFUL),
    ],
)
def test_string_to_backing_store(text, expected):
    assert string_to_backing_store(text) == expected


def test_backing_store_default_is_sum_of_others():
    assert string_to_backing_store("default") == (
        BackingStore.ALWAYS + BackingStore.WHEN_MAPPED + BackingStore.NOT_USEFUL
    )


def test_backing_store_name_is_truncated_before_matching():
    assert string_to_backing_store("whenMappedExtra") == BackingStore.WHEN_MAPPED


@pytest.mark.parametrize("text", ["never", "", "alway"])
def test_string_to_backing_store_rejects_unknown(text):
    with pytest.raises(ConversionError):
        string_to_backing_store(text)


@pytest.mark.parametrize("store", list(BackingStore))
def test_backing_store_round_trip(store):
    assert string_to_backing_store(backing_store_to_string(store)) == store


def test_backing_store_to_string_names():
    assert backing_store_to_string(BackingStore.WHEN_MAPPED) == "whenMapped"
    assert backing_store_to_string(0) == "notUseful"


def test_backing_store_to_string_rejects_unknown():
    with pytest.raises(ConversionError):
        backing_store_to_string(42)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("forget", converters.FORGET_GRAVITY),
        ("NorthWest", converters.NORTH_WEST_GRAVITY),
        ("north", converters.NORTH_GRAVITY),
        ("southeast", converters.SOUTH_EAST_GRAVITY),
        ("static", converters.STATIC_GRAVITY),
        ("unmap", converters.UNMAP_GRAVITY),
        ("left", converters.WEST_GRAVITY),
        ("Top", converters.NORTH_GRAVITY),
        ("right", converters.EAST_GRAVITY),
        ("BOTTOM", converters.SOUTH_GRAVITY),
        ("center", converters.CENTER_GRAVITY),
    ],
)
def test_string_to_gravity(text, expected):
    assert string_to_gravity(text) == expected


@pytest.mark.parametrize("text", ["middle", "", "north west"])
def test_string_to_gravity_rejects_unknown(text):
    with pytest.raises(ConversionError):
        string_to_gravity(text)


def test_gravity_to_string_prefers_first_name():
    assert gravity_to_string(converters.WEST_GRAVITY) == "west"
    assert gravity_to_string(converters.UNMAP_GRAVITY) == "forget"


@pytest.mark.parametrize(
    "gravity",
    [
        converters.NORTH_WEST_GRAVITY,
        converters.NORTH_GRAVITY,
        converters.NORTH_EAST_GRAVITY,
        converters.WEST_GRAVITY,
        converters.CENTER_GRAVITY,
        converters.EAST_GRAVITY,
        converters.SOUTH_WEST_GRAVITY,
        converters.SOUTH_GRAVITY,
        converters.SOUTH_EAST_GRAVITY,
        converters.STATIC_GRAVITY,
        converters.FORGET_GRAVITY,
    ],
)
def test_gravity_round_trip(gravity):
    assert string_to_gravity(gravity_to_string(gravity)) == gravity


def test_gravity_to_string_rejects_unknown():
    with pytest.raises(ConversionError):
        gravity_to_string(99)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("left", Justify.LEFT),
        ("Center", Justify.CENTER),
        ("RIGHT", Justify.RIGHT),
    ],
)
def test_string_to_justify(text, expected):
    assert string_to_justify(text) == expected


def test_justify_name_is_truncated_before_matching():
    assert string_to_justify("centered") == Justify.CENTER


@pytest.mark.parametrize("text", ["top", "", "middle"])
def test_string_to_justify_rejects_unknown(text):
    with pytest.raises(ConversionError):
        string_to_justify(text)


def test_string_to_justify_rejects_missing():
    with pytest.raises(ConversionError):
        string_to_justify(None)


@pytest.mark.parametrize("justify", list(Justify))
def test_justify_round_trip(justify):
    assert string_to_justify(justify_to_string(justify)) == justify


def test_justify_to_string_rejects_unknown():
    with pytest.raises(ConversionError):
        justify_to_string(7)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("+8", 8),
        ("123abc", 123),
        ("\t\n9", 9),
    ],
)
def test_string_to_long(text, expected):
    assert string_to_long(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "- 5", "  "])
def test_string_to_long_rejects_garbage(text):
    with pytest.raises(ConversionError):
        string_to_long(text)


@pytest.mark.parametrize("number", [0, 1, -1, 2**40, -(2**40)])
def test_long_round_trip(number):
    assert string_to_long(long_to_string(number)) == number


def test_long_to_string_format():
    assert long_to_string(-305) == "-305"