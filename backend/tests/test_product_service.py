# backend/tests/test_product_service.py
import pytest

from schemas.products import ProductCreate, ProductUpdate
from services.errors import NotFoundError
from services.product_service import ProductService, collect_update_fields
from tests.fakes import FakeProductRepository, FakeUserRepository


@pytest.fixture
def service(store):
    return ProductService(FakeProductRepository(store), FakeUserRepository(store))


def test_collect_update_fields_keeps_zero_and_empty_values():
    fields = collect_update_fields(ProductUpdate(quantity=0, price=0, description=""))

    assert fields == {"quantity": 0, "price": 0, "description": ""}


def test_collect_update_fields_maps_to_columns_and_skips_absent():
    fields = collect_update_fields(ProductUpdate(quantity=4, unitOfMeasure="box"))

    assert fields == {"quantity": 4, "unit_of_measure": "box"}


def test_owner_can_zero_out_stock(service, store):
    assert service.update_for_farmer(9, 5, ProductUpdate(quantity=0)) == 1
    assert store.products[5].quantity == 0


def test_update_of_foreign_product_matches_nothing(service, store):
    assert service.update_for_farmer(9, 7, ProductUpdate(quantity=1, price=9.9)) == 0
    assert store.products[7].quantity == 120
    assert store.products[7].price == 0.4


def test_create_for_farmer_sets_owner(service, store):
    out = service.create_for_farmer(10, ProductCreate(name="Milk", quantity=8, price=1.2, type="DAIRY"))

    assert out.producerId == 10
    assert store.products[out.id].producer_id == 10


def test_create_for_non_farmer_is_rejected(service):
    with pytest.raises(NotFoundError):
        service.create_for_farmer(1, ProductCreate(name="Milk", quantity=8, price=1.2, type="DAIRY"))


def test_get_unknown_product(service):
    with pytest.raises(NotFoundError):
        service.get_product(404)


def test_list_for_farmer(service):
    assert [p.name for p in service.list_for_farmer(9)] == ["Apples", "Pears"]
