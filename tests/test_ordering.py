import pytest

from organized.element import Element, ElementType
from organized.ordering import (
    SortKey,
    SortOrderError,
    compare,
    parse_order,
    sort_elements,
)


def _elements():
    return [
        Element(ElementType.WIRE, "copper", 0),
        Element(ElementType.ACTUATOR, "motor", 1),
        Element(ElementType.SENSOR, "bravo", 2),
        Element(ElementType.ACTUATOR, "alpha", 3),
        Element(ElementType.DEVICE, "motor", 4),
    ]


def test_parse_single_keys():
    assert parse_order(["TYPE"]) == (SortKey.TYPE,)
    assert parse_order(["NAME"]) == (SortKey.NAME,)
    assert parse_order(["ID"]) == (SortKey.ID,)


def test_parse_reverse_flags():
    assert parse_order(["NAME", "-r", "ID"]) == (SortKey.NAME_R, SortKey.ID)
    assert parse_order(["TYPE", "ID", "-r"]) == (SortKey.TYPE, SortKey.ID_R)


@pytest.mark.parametrize(
    "args", [[], ["COLOR"], ["-r"], ["NAME", "-r", "-r"], ["name"]]
)
def test_parse_errors(args):
    with pytest.raises(SortOrderError):
        parse_order(args)


def test_key_properties():
    reversed_name, plain_type = parse_order(["NAME", "-r", "TYPE"])
    assert reversed_name.field == "name"
    assert reversed_name.reverse is True
    assert plain_type.reverse is False


def test_compare_signs():
    a = Element(ElementType.ACTUATOR, "a", 0)
    b = Element(ElementType.WIRE, "b", 1)
    assert compare(a, b, [SortKey.TYPE]) < 0
    assert compare(a, b, [SortKey.TYPE_R]) > 0
    assert compare(a, a, [SortKey.NAME, SortKey.ID]) == 0


def test_compare_falls_through_to_next_key():
    a = Element(ElementType.DEVICE, "same", 5)
    b = Element(ElementType.DEVICE, "same", 2)
    assert compare(a, b, [SortKey.TYPE, SortKey.NAME, SortKey.ID]) > 0
    assert compare(a, b, [SortKey.TYPE, SortKey.NAME, SortKey.ID_R]) < 0


def test_compare_uses_only_three_keys():
    a = Element(ElementType.DEVICE, "same", 5)
    b = Element(ElementType.DEVICE, "same", 2)
    order = [SortKey.TYPE, SortKey.NAME, SortKey.TYPE, SortKey.ID]
    assert compare(a, b, order) == 0


def test_sort_by_name():
    result = sort_elements(_elements(), [SortKey.NAME])
    names = [e.name for e in result]
    assert names == sorted(names)


def test_sort_by_name_reversed():
    result = sort_elements(_elements(), [SortKey.NAME_R])
    names = [e.name for e in result]
    assert names == sorted(names, reverse=True)


def test_sort_by_type_then_name():
    result = sort_elements(_elements(), [SortKey.TYPE, SortKey.NAME])
    keys = [(e.kind, e.name) for e in result]
    assert keys == sorted(keys)


def test_sort_by_id_reverse_is_permutation():
    elements = _elements()
    result = sort_elements(elements, [SortKey.ID_R])
    assert [e.id for e in result] == [4, 3, 2, 1, 0]
    assert sorted(result, key=lambda e: e.id) == elements


def test_sort_does_not_modify_input():
    elements = _elements()
    snapshot = list(elements)
    sort_elements(elements, [SortKey.NAME])
    assert elements == snapshot


def test_sort_empty_and_single():
    assert sort_elements([], [SortKey.ID]) == []
    one = [Element(ElementType.WIRE, "w", 7)]
    assert sort_elements(one, [SortKey.NAME]) == one