import pytest

from boxkeeper.models import (
    MAX_BOXES,
    Box,
    BoxLimitError,
    BoxList,
    BoxNotFoundError,
    BoxStore,
    format_number,
)


def make_box(name="crate"):
    return Box(1.0, 2.0, 3.0, "wood", "no", name)


def test_box_list_add_returns_number():
    boxes = BoxList()
    assert boxes.add(make_box("a")) == 1
    assert boxes.add(make_box("b")) == 2
    assert len(boxes) == 2


def test_box_list_get_by_number():
    boxes = BoxList()
    boxes.add(make_box("a"))
    boxes.add(make_box("b"))
    assert boxes.get(2).name == "b"


@pytest.mark.parametrize("number", [0, -1, 3])
def test_box_list_get_out_of_range(number):
    boxes = BoxList()
    boxes.add(make_box("a"))
    boxes.add(make_box("b"))
    with pytest.raises(BoxNotFoundError):
        boxes.get(number)


def test_box_list_limit():
    boxes = BoxList()
    for i in range(MAX_BOXES):
        boxes.add(make_box(str(i)))
    with pytest.raises(BoxLimitError):
        boxes.add(make_box("extra"))
    assert len(boxes) == MAX_BOXES


def test_box_list_remove_shifts_numbers():
    boxes = BoxList()
    for name in ("a", "b", "c"):
        boxes.add(make_box(name))
    removed = boxes.remove(2)
    assert removed.name == "b"
    assert [box.name for box in boxes] == ["a", "c"]
    assert boxes.get(2).name == "c"


def test_box_list_remove_missing():
    boxes = BoxList()
    with pytest.raises(BoxNotFoundError):
        boxes.remove(1)


def test_box_list_update_changes_fields():
    boxes = BoxList()
    boxes.add(make_box("a"))
    boxes.update(1, name="renamed", length=9.5)
    box = boxes.get(1)
    assert (box.name, box.length, box.width) == ("renamed", 9.5, 2.0)


def test_box_list_update_unknown_field():
    boxes = BoxList()
    boxes.add(make_box("a"))
    with pytest.raises(TypeError):
        boxes.update(1, colour="red")


def test_box_list_numbered():
    boxes = BoxList()
    boxes.add(make_box("a"))
    boxes.add(make_box("b"))
    assert [(n, box.name) for n, box in boxes.numbered()] == [(1, "a"), (2, "b")]


def test_box_store_assigns_increasing_ids():
    store = BoxStore()
    first = store.add(make_box("a"))
    second = store.add(make_box("b"))
    assert (first, second) == (1, 2)
    assert store.get(2).box_id == 2


def test_box_store_ids_not_reused_after_remove():
    store = BoxStore()
    store.add(make_box("a"))
    store.add(make_box("b"))
    store.remove(2)
    assert store.add(make_box("c")) == 3
    assert 2 not in store


def test_box_store_missing_id():
    store = BoxStore()
    store.add(make_box("a"))
    with pytest.raises(BoxNotFoundError):
        store.get(7)
    with pytest.raises(BoxNotFoundError):
        store.remove(7)


def test_box_store_limit():
    store = BoxStore()
    for i in range(MAX_BOXES):
        store.add(make_box(str(i)))
    with pytest.raises(BoxLimitError):
        store.add(make_box("extra"))
    assert len(store) == MAX_BOXES


def test_box_store_update_and_items():
    store = BoxStore()
    store.add(make_box("a"))
    store.add(make_box("b"))
    store.update(1, material="steel")
    assert store.get(1).material == "steel"
    assert [(key, box.name) for key, box in store.items()] == [(1, "a"), (2, "b")]


def test_box_store_update_cannot_change_id():
    store = BoxStore()
    store.add(make_box("a"))
    with pytest.raises(TypeError):
        store.update(1, box_id=5)
    assert store.get(1).box_id == 1


@pytest.mark.parametrize("value,expected", [(2.5, "2.5"), (3.0, "3"), (10.0, "10")])
def test_format_number_drops_trailing_zeros(value, expected):
    assert format_number(value) == expected


def test_format_number_uses_six_significant_digits():
    assert format_number(1234567.0) == "1.23457e+06"