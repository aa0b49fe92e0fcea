import random

import pytest

from chango.pipeline import (
    LOCATIONS,
    PRODUCTS,
    StockedProduct,
    accountant,
    cashier,
    importer,
    lucky_supermarket,
    organizer,
)


def test_importer_yields_products_in_order():
    assert list(importer(["milk", "bread"])) == ["milk", "bread"]


def test_organizer_uses_first_four_locations():
    rng = random.Random(9)
    placed = list(organizer(["x"] * 300, LOCATIONS, rng))
    assert {item.location for item in placed} == set(LOCATIONS[:4])
    assert all(item.price == 0 for item in placed)


def test_organizer_needs_four_locations():
    with pytest.raises(IndexError):
        list(organizer(["x"] * 100, ["only"], random.Random(1)))


def test_accountant_sets_prices_in_range():
    items = [StockedProduct("tofu", "fridge")] * 200
    priced = list(accountant(items, random.Random(3)))
    assert all(1 <= item.price < 12 for item in priced)
    assert all(item.name == "tofu" and item.location == "fridge" for item in priced)


def test_cashier_prints_receipt(capsys):
    items = [StockedProduct("milk", "fridge", 3), StockedProduct("tofu", "warehouse", 7)]
    assert cashier(iter(items)) == items
    assert capsys.readouterr().out == (
        "1. milk = 3 (taken from fridge)\n2. tofu = 7 (taken from warehouse)\n"
    )


def test_lucky_supermarket_stocks_every_product(capsys):
    receipt = lucky_supermarket(random.Random(5))
    assert [item.name for item in receipt] == list(PRODUCTS)
    assert all(item.location in LOCATIONS[:4] for item in receipt)
    assert len(capsys.readouterr().out.splitlines()) == len(PRODUCTS)