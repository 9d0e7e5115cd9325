"""Application tests for catalogue commands and read queries."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.management import AdjustStock, DeleteProduct, UpdateProductPrice
from storefront.catalogue.product import Product


@pytest.fixture()
def catalogue(trex_id, raptor_id, stego_id):
    return {"trex": trex_id, "raptor": raptor_id, "stego": stego_id}


def _repo():
    return current_domain.repository_for(Product)


class TestCatalogueQueries:
    def test_list_all(self, catalogue):
        names = [p.name for p in _repo().all_products()]
        assert sorted(names) == ["Stegosaurus Steppers", "T-Rex Trappers", "Volcano Velociraptors"]

    def test_featured(self, catalogue):
        featured = {p.name for p in _repo().featured()}
        assert featured == {"T-Rex Trappers", "Volcano Velociraptors"}

    def test_collection_match_is_case_insensitive(self, catalogue):
        assert [p.name for p in _repo().in_collection("herbivore collection")] == ["Stegosaurus Steppers"]
        assert [p.name for p in _repo().in_collection("HERBIVORE COLLECTION")] == ["Stegosaurus Steppers"]

    def test_collection_match_is_exact(self, catalogue):
        assert _repo().in_collection("Herbivore") == []

    def test_category_match_is_case_insensitive(self, catalogue):
        names = {p.name for p in _repo().in_category("running")}
        assert names == {"T-Rex Trappers", "Volcano Velociraptors"}

    def test_unknown_category_is_empty(self, catalogue):
        assert _repo().in_category("Swimming") == []

    def test_get_by_id(self, catalogue):
        assert _repo().get(catalogue["stego"]).name == "Stegosaurus Steppers"

    def test_get_unknown_id(self):
        with pytest.raises(ObjectNotFoundError):
            _repo().get("3f1e1b8e-0000-4000-8000-000000000000")

    def test_find_many_skips_unknown_ids(self, catalogue):
        found = _repo().find_many([catalogue["trex"], catalogue["trex"], "missing"])
        assert list(found) == [catalogue["trex"]]

    def test_find_many_with_no_ids(self):
        assert _repo().find_many([]) == {}


class TestProductManagement:
    def test_update_price(self, trex_id):
        current_domain.process(UpdateProductPrice(product_id=trex_id, new_price=109.99), asynchronous=False)
        assert _repo().get(trex_id).price == 109.99

    def test_adjust_stock(self, trex_id):
        current_domain.process(AdjustStock(product_id=trex_id, delta=-5), asynchronous=False)
        assert _repo().get(trex_id).stock == 20

    def test_stock_cannot_go_below_zero(self, trex_id):
        with pytest.raises(ValidationError):
            current_domain.process(AdjustStock(product_id=trex_id, delta=-26), asynchronous=False)
        assert _repo().get(trex_id).stock == 25

    def test_delete_product(self, trex_id, raptor_id):
        current_domain.process(DeleteProduct(product_id=trex_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            _repo().get(trex_id)
        assert [p.name for p in _repo().all_products()] == ["Volcano Velociraptors"]

    def test_delete_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                DeleteProduct(product_id="3f1e1b8e-0000-4000-8000-000000000000"), asynchronous=False
            )
