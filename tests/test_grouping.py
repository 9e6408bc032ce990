from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import pytest

from farmacia.catalog.grouping import CategoryIndex, base_categories, split_categories
from farmacia.catalog.loader import Farmaco


def _item(name, categoria, estado="En caja"):
    return Farmaco(nombre=name, categoria=categoria, estado=estado)


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Herpes", ["Herpes"]),
        ("Aftas/Herpes", ["Aftas", "Herpes"]),
        (" Antiinflamatorio / Analgésico ", ["Antiinflamatorio", "Analgésico"]),
        ("  Bienestar  ", ["Bienestar"]),
        ("", [""]),
        ("A//B", ["A", "", "B"]),
    ],
)
def test_split_categories(label, expected):
    assert split_categories(label) == expected


@pytest.mark.parametrize("label", ["Aftas/Herpes", " a / b /c ", "", "Dermatología"])
def test_split_is_idempotent_per_segment(label):
    for segment in split_categories(label):
        assert split_categories(segment) == [segment]


def test_compound_category_fans_out_to_every_group():
    items = [_item("Gel bucal", "Aftas/Herpes")]
    index = CategoryIndex(items)

    assert list(index.categories) == ["Aftas", "Herpes"]
    assert index.items_for("Aftas") == items
    assert index.items_for("Herpes") == items


def test_groups_preserve_input_order_and_reference_items():
    items = [
        _item("Ibuprofeno", "Antiinflamatorio/Analgésico"),
        _item("Paracetamol", "Analgésico"),
        _item("Hidrocortisona", "Dermatología / Antiinflamatorio"),
    ]
    index = CategoryIndex(items)

    assert index.categories == ("Analgésico", "Antiinflamatorio", "Dermatología")
    assert [i.name for i in index.items_for("Analgésico")] == ["Ibuprofeno", "Paracetamol"]
    assert [i.name for i in index.items_for("Antiinflamatorio")] == ["Ibuprofeno", "Hidrocortisona"]
    assert index.indices_for("Dermatología") == (2,)
    assert index.items_for("Analgésico")[0] is index.items[0]


def test_each_item_is_grouped_exactly_under_its_split_categories():
    items = [
        _item("a", "Aftas/Herpes"),
        _item("b", "Herpes"),
        _item("c", "Alergias / Antihistamínico"),
    ]
    index = CategoryIndex(items)

    for pos, item in enumerate(items):
        listed_under = {cat for cat in index.categories if pos in index.indices_for(cat)}
        assert listed_under == set(split_categories(item.category))
        assert set(index.categories_of(pos)) == listed_under


def test_group_sizes_sum():
    simple = [_item("a", "Herpes"), _item("b", "Aftas")]
    compound = simple + [_item("c", "Aftas/Herpes")]

    simple_index = CategoryIndex(simple)
    assert sum(len(items) for _, items in simple_index.groups()) == len(simple)

    compound_index = CategoryIndex(compound)
    assert sum(len(items) for _, items in compound_index.groups()) > len(compound)


def test_repeated_segment_lists_item_once():
    index = CategoryIndex([_item("a", "Herpes/Herpes")])
    assert index.indices_for("Herpes") == (0,)


def test_base_categories_is_sorted_union():
    items = [_item("a", "Herpes/Aftas"), _item("b", "Aftas"), _item("c", "Bienestar")]
    assert base_categories(items) == ["Aftas", "Bienestar", "Herpes"]
    assert base_categories(items) == list(CategoryIndex(items).categories)


def test_empty_input_has_no_categories():
    index = CategoryIndex([])
    assert len(index) == 0
    assert index.groups() == []
    assert index.items_for("Herpes") == []
    assert "Herpes" not in index
