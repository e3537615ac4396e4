from __future__ import annotations

import copy

import pytest

from app.models.schemas import Receipt
from app.services.validation import find_invalid_field, validate_receipt


VALID_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "4.50",
}


def _receipt(**overrides) -> Receipt:
    data = copy.deepcopy(VALID_RECEIPT)
    data.update(overrides)
    return Receipt.model_validate(data)


def test_valid_receipt_accepted():
    assert validate_receipt(_receipt()) is True
    assert find_invalid_field(_receipt()) is None


@pytest.mark.parametrize("retailer", ["Target", "M&M Corner Market", "Walgreens 123", "Jo-Ann Fabrics"])
def test_retailer_names_accepted(retailer):
    assert validate_receipt(_receipt(retailer=retailer))


@pytest.mark.parametrize("retailer", ["", "   ", "Target!", "Ben's", "Shop/Mart", "A.B.C", "Tar\nget", "Tar\tget", "Target\n"])
def test_retailer_names_rejected(retailer):
    assert find_invalid_field(_receipt(retailer=retailer)) == "retailer"
    assert validate_receipt(_receipt(retailer=retailer)) is False


@pytest.mark.parametrize(
    "field,value",
    [
        ("purchaseDate", "2022-02-30"),
        ("purchaseDate", "03/20/2022"),
        ("purchaseDate", ""),
        ("purchaseTime", "25:00"),
        ("purchaseTime", "2:33"),
        ("purchaseTime", "14:33:00"),
        ("total", "4.5"),
        ("total", "-4.50"),
        ("total", "4"),
        ("total", ""),
    ],
)
def test_malformed_fields_rejected(field, value):
    assert find_invalid_field(_receipt(**{field: value})) == field
    assert validate_receipt(_receipt(**{field: value})) is False


def test_empty_items_rejected():
    assert find_invalid_field(_receipt(items=[])) == "items"
    assert validate_receipt(_receipt(items=[])) is False


def test_blank_item_description_rejected():
    items = [{"shortDescription": "  ", "price": "1.00"}]
    assert find_invalid_field(_receipt(items=items)) == "items[0].shortDescription"


def test_bad_item_price_rejects_whole_receipt():
    items = [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.2"},
    ]
    assert find_invalid_field(_receipt(items=items)) == "items[1].price"
    assert validate_receipt(_receipt(items=items)) is False


def test_validation_does_not_modify_receipt():
    receipt = _receipt()
    before = receipt.model_dump(by_alias=True)
    validate_receipt(receipt)
    assert receipt.model_dump(by_alias=True) == before


def test_long_amounts_accepted():
    long_amount = "1" + "0" * 28 + ".01"
    items = [{"shortDescription": "Gatorade", "price": long_amount}]
    assert validate_receipt(_receipt(total=long_amount, items=items)) is True
