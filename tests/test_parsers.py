import pytest

from product_range.exceptions import InvalidArgument
from product_range.parsers import parse_catalog, product_from_record


def test_product_from_record(catalog_records):
    product = product_from_record(catalog_records[0])
    assert product.id == 1
    assert product.brand == "Samsung"
    assert product.price == 10000.0
    assert isinstance(product.stock, int)
    assert product.describe() == "Samsung - Smartphone"


def test_missing_text_fields_default_to_empty():
    product = product_from_record(
        {"id": 5, "price": 1, "quality": 1, "rating": 1, "stock": 0, "display": 1}
    )
    assert product.name == ""
    assert product.processor == ""


@pytest.mark.parametrize("field", ["price", "quality", "rating", "stock", "display"])
def test_missing_numeric_field_rejected(catalog_records, field):
    record = dict(catalog_records[0])
    del record[field]
    with pytest.raises(InvalidArgument, match=field):
        product_from_record(record)


def test_numeric_strings_are_not_coerced(catalog_records):
    record = dict(catalog_records[0], rating="4.5")
    with pytest.raises(InvalidArgument, match="rating"):
        product_from_record(record)


@pytest.mark.parametrize("stock", [-1, 2.5])
def test_invalid_stock_rejected(catalog_records, stock):
    with pytest.raises(InvalidArgument, match="stock"):
        product_from_record(dict(catalog_records[0], stock=stock))


@pytest.mark.parametrize("product_id", [None, "1", True])
def test_invalid_id_rejected(catalog_records, product_id):
    with pytest.raises(InvalidArgument, match="id"):
        product_from_record(dict(catalog_records[0], id=product_id))


def test_parse_catalog_accepts_array_and_wrapped_object(catalog_records):
    assert parse_catalog(catalog_records) == parse_catalog({"products": catalog_records})
    assert len(parse_catalog(catalog_records)) == 4


def test_parse_catalog_rejects_duplicates(catalog_records):
    with pytest.raises(InvalidArgument, match="Duplicate"):
        parse_catalog(catalog_records + [catalog_records[1]])


@pytest.mark.parametrize("data", [{"items": []}, "products", None])
def test_parse_catalog_rejects_other_shapes(data):
    with pytest.raises(InvalidArgument):
        parse_catalog(data)


def test_integer_too_large_for_float_rejected(catalog_records):
    with pytest.raises(InvalidArgument, match="price"):
        product_from_record(dict(catalog_records[0], price=10**400))
