"""Integration tests for the product type use cases."""

import pytest

from catalog.application.add_product_type import AddProductTypeHandler
from catalog.application.delete_product_type import DeleteProductTypeHandler
from catalog.application.dto import ProductTypeChanges
from catalog.application.list_product_types import ListProductTypesHandler
from catalog.application.show_product_type import ShowProductTypeHandler
from catalog.application.update_product_type import UpdateProductTypeHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from tests.builders import make_product_type
from tests.fakes import FakeProductTypeRepository


def _repo() -> FakeProductTypeRepository:
    return FakeProductTypeRepository([
        make_product_type(),
        make_product_type(id="t2", name="T-Shirts"),
        make_product_type(id="t3", name="Hats", is_active=False),
    ])


class TestProductTypes:

    def test_add_derives_slug(self):
        dto = AddProductTypeHandler(FakeProductTypeRepository()).handle("Running Shoes")
        assert dto.slug == "running-shoes"

    def test_add_duplicate(self):
        with pytest.raises(ValidationError, match="Product type 'shoes' already exists"):
            AddProductTypeHandler(_repo()).handle("shoes", slug="shoes-2")

    def test_add_blank_name(self):
        with pytest.raises(ValidationError, match="Product type name is required"):
            AddProductTypeHandler(FakeProductTypeRepository()).handle("   ")

    def test_update_slug_clash(self):
        with pytest.raises(ValidationError, match="slug 't-shirts' already exists"):
            UpdateProductTypeHandler(_repo()).handle("t1", ProductTypeChanges(slug="t-shirts"))

    def test_update_reactivates(self):
        dto = UpdateProductTypeHandler(_repo()).handle("t3", ProductTypeChanges(is_active=True))
        assert dto.is_active

    def test_soft_delete(self):
        repo = _repo()
        DeleteProductTypeHandler(repo).handle("t2")
        assert repo.get_by_id("t2").is_active is False

    def test_delete_unknown(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductTypeHandler(_repo()).handle("nope")

    def test_list_active(self):
        names = [t.name for t in ListProductTypesHandler(_repo()).handle(is_active=True)]
        assert names == ["Shoes", "T-Shirts"]

    def test_show_by_slug(self):
        assert ShowProductTypeHandler(_repo()).handle(slug="hats").id == "t3"
