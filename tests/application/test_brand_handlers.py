"""Integration tests for the brand use cases."""

import pytest

from catalog.application.add_brand import AddBrandHandler
from catalog.application.delete_brand import DeleteBrandHandler
from catalog.application.dto import BrandChanges
from catalog.application.list_brands import ListBrandsHandler
from catalog.application.show_brand import ShowBrandHandler
from catalog.application.update_brand import UpdateBrandHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from tests.builders import make_brand
from tests.fakes import FakeBrandRepository


class TestAddBrand:

    def test_derives_slug(self):
        repo = FakeBrandRepository()
        dto = AddBrandHandler(repo).handle("New Balance")
        assert dto.slug == "new-balance"
        assert dto.is_active
        assert repo.get_by_id(dto.id) is not None

    def test_explicit_slug_normalized(self):
        dto = AddBrandHandler(FakeBrandRepository()).handle("Nike", slug="  NIKE-US ")
        assert dto.slug == "nike-us"

    def test_duplicate_name_case_insensitive(self):
        repo = FakeBrandRepository([make_brand()])
        with pytest.raises(ValidationError, match="already exists"):
            AddBrandHandler(repo).handle("nike", slug="nike-2")

    def test_duplicate_slug(self):
        repo = FakeBrandRepository([make_brand()])
        with pytest.raises(ValidationError, match="slug 'nike' already exists"):
            AddBrandHandler(repo).handle("Nike Inc", slug="nike")

    @pytest.mark.parametrize("fields, message", [
        ({"name": 5}, "Brand name is required"),
        ({"name": "Puma", "website": 5}, "Website URL must be a string"),
        ({"name": "Puma", "slug": 5}, "Slug must be a string"),
    ])
    def test_non_string_fields(self, fields, message):
        with pytest.raises(ValidationError, match=message):
            AddBrandHandler(FakeBrandRepository()).handle(**fields)

    def test_invalid_website(self):
        with pytest.raises(ValidationError, match="Website"):
            AddBrandHandler(FakeBrandRepository()).handle("Puma", website="puma.com")


class TestUpdateBrand:

    def test_updates_supplied_fields(self):
        repo = FakeBrandRepository([make_brand()])
        dto = UpdateBrandHandler(repo).handle(
            "b1", BrandChanges(description="Just do it", website="https://nike.com")
        )
        assert dto.name == "Nike"
        assert dto.description == "Just do it"
        assert dto.website == "https://nike.com"

    def test_rename_to_existing_name(self):
        repo = FakeBrandRepository([make_brand(), make_brand(id="b2", name="Adidas")])
        with pytest.raises(ValidationError, match="already exists"):
            UpdateBrandHandler(repo).handle("b2", BrandChanges(name="NIKE"))

    def test_unknown_brand(self):
        with pytest.raises(EntityNotFoundError):
            UpdateBrandHandler(FakeBrandRepository()).handle("nope", BrandChanges(name="x"))


class TestDeleteAndQueryBrands:

    def _repo(self):
        return FakeBrandRepository([
            make_brand(),
            make_brand(id="b2", name="Adidas"),
            make_brand(id="b3", name="Reebok", is_active=False),
        ])

    def test_soft_delete(self):
        repo = self._repo()
        DeleteBrandHandler(repo).handle("b1")
        assert repo.get_by_id("b1").is_active is False

    def test_list_sorted_by_name(self):
        names = [b.name for b in ListBrandsHandler(self._repo()).handle()]
        assert names == ["Adidas", "Nike", "Reebok"]

    def test_list_filters(self):
        handler = ListBrandsHandler(self._repo())
        assert [b.id for b in handler.handle(is_active=False)] == ["b3"]
        assert [b.id for b in handler.handle(search="DID")] == ["b2"]

    def test_show_by_id_or_slug(self):
        handler = ShowBrandHandler(self._repo())
        assert handler.handle(brand_id="b2").name == "Adidas"
        assert handler.handle(slug="Reebok").id == "b3"

    def test_show_missing(self):
        with pytest.raises(EntityNotFoundError, match="Brand not found"):
            ShowBrandHandler(self._repo()).handle(slug="puma")
