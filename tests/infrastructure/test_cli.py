"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.main import cli
from catalog.infrastructure.persistence.json_brand_repository import JsonBrandRepository
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_product_type_repository import (
    JsonProductTypeRepository,
)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    bootstrap.config.cache_clear()
    yield tmp_path / "data"
    bootstrap.config.cache_clear()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def product_id(data_dir, runner, tmp_path):
    """Create a brand, a product type and a product; return the product id."""
    assert runner.invoke(cli, ["brand", "add", "--name", "Nike"]).exit_code == 0
    assert runner.invoke(cli, ["product-type", "add", "--name", "Shoes"]).exit_code == 0
    brand = JsonBrandRepository(data_dir / "brands.json").get_by_slug("nike")
    product_type = JsonProductTypeRepository(data_dir / "product_types.json").get_by_slug("shoes")

    doc = tmp_path / "product.json"
    doc.write_text(json.dumps({
        "name": "Air Runner",
        "brand_id": brand.id,
        "product_type_id": product_type.id,
        "category": "sneakers",
        "price": 120,
        "variants": [
            {"color": "black", "sizes": [{"size": 8, "stock": 10}, {"size": 9, "stock": 2}]},
            {"color": "white", "sizes": [{"size": 8, "stock": 4}]},
        ],
    }))
    result = runner.invoke(cli, ["product", "create", "--file", str(doc)])
    assert result.exit_code == 0, result.output
    assert "Product created successfully" in result.output
    return JsonProductRepository(data_dir / "products.json").list_all()[0].id


class TestStockCommands:

    def test_update(self, runner, product_id, data_dir):
        result = runner.invoke(
            cli, ["stock", "update", "--id", product_id, "--color", "black",
                  "--size", "8", "--quantity", "-3"],
        )
        assert result.exit_code == 0, result.output
        assert 'Stock updated successfully for color "black" size 8' in result.output
        product = JsonProductRepository(data_dir / "products.json").get_by_id(product_id)
        assert product.stock_by_size(8) == 11

    def test_update_insufficient(self, runner, product_id):
        result = runner.invoke(
            cli, ["stock", "update", "--id", product_id, "--color", "black",
                  "--size", "9", "--quantity", "-5"],
        )
        assert result.exit_code == 1
        assert "Available: 2, Requested: -5" in result.output

    def test_label_size_is_a_new_slot(self, runner, product_id, data_dir):
        result = runner.invoke(
            cli, ["stock", "update", "--id", product_id, "--color", "red",
                  "--size", "M", "--quantity", "6"],
        )
        assert result.exit_code == 0, result.output
        product = JsonProductRepository(data_dir / "products.json").get_by_id(product_id)
        assert product.stock_by_size("M") == 6
        assert product.total_stock == 22

    def test_bulk(self, runner, product_id, tmp_path):
        doc = tmp_path / "bulk.json"
        doc.write_text(json.dumps({"variants": [
            {"color": "black", "sizes": [{"size": 8, "quantity": 5}, {"size": 9, "quantity": -9}]},
        ]}))
        result = runner.invoke(cli, ["stock", "bulk", "--id", product_id, "--file", str(doc)])
        assert result.exit_code == 0, result.output
        assert "Stock updated for 1 color-size combination(s)" in result.output
        assert "black size 8: +5" in result.output

    def test_bulk_all_failed(self, runner, product_id, tmp_path):
        doc = tmp_path / "bulk.json"
        doc.write_text(json.dumps({"variants": [{"sizes": []}]}))
        result = runner.invoke(cli, ["stock", "bulk", "--id", product_id, "--file", str(doc)])
        assert result.exit_code == 1
        assert "Failed to update stock" in result.output

    def test_by_size(self, runner, product_id):
        result = runner.invoke(cli, ["stock", "by-size", "--id", product_id, "--size", "8"])
        assert result.exit_code == 0, result.output
        assert "Size 8: 14 in stock across all colors" in result.output

    def test_unknown_product(self, runner, data_dir):
        result = runner.invoke(cli, ["stock", "by-size", "--id", "nope", "--size", "8"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCatalogCommands:

    def test_product_list_and_delete(self, runner, product_id):
        listing = runner.invoke(cli, ["product", "list", "--in-stock"])
        assert "Air Runner" in listing.output
        assert runner.invoke(cli, ["product", "delete", "--id", product_id]).exit_code == 0
        assert "No products found." in runner.invoke(cli, ["product", "list"]).output

    def test_malformed_product_file_is_a_clean_error(self, runner, product_id, data_dir, tmp_path):
        existing = JsonProductRepository(data_dir / "products.json").get_by_id(product_id)
        doc = tmp_path / "bad.json"
        doc.write_text(json.dumps({
            "name": 5,
            "brand_id": existing.brand_id,
            "product_type_id": existing.product_type_id,
            "category": "sneakers",
            "price": 1,
            "variants": [{"color": "black", "sizes": [{"size": 8, "stock": 1}]}],
        }))
        result = runner.invoke(cli, ["product", "create", "--file", str(doc)])
        assert result.exit_code == 1
        assert "Product name is required" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_duplicate_brand(self, runner, data_dir):
        runner.invoke(cli, ["brand", "add", "--name", "Nike"])
        result = runner.invoke(cli, ["brand", "add", "--name", "nike"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_image_upload_needs_credentials(self, runner, data_dir, tmp_path, monkeypatch):
        for name in ("CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET"):
            monkeypatch.delenv(name, raising=False)
        image = tmp_path / "shoe.png"
        image.write_bytes(b"png")
        result = runner.invoke(cli, ["image", "upload", str(image)])
        assert result.exit_code == 1
        assert "CLOUDINARY" in result.output
