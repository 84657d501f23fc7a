"""Unit tests for the ProductDomainService domain service."""

from unittest.mock import Mock

import pytest

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing_policy import PriceBand, PriceBands
from catalog.domain.service.product_domain_service import ProductDomainService
from catalog.infrastructure.persistence.in_memory_category_repository import (
    InMemoryCategoryRepository,
)
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _setup(
    category_ids: tuple[str, ...] = ("category_1", "category_2", "category_3", "category_unlisted"),
    products: list[Product] | None = None,
    inactive: tuple[str, ...] = (),
    price_bands: PriceBands | None = None,
):
    categories = []
    for cid in category_ids:
        category = Category.create(f"Name {cid}", "", id=cid)
        if cid in inactive:
            category.deactivate()
        categories.append(category)
    category_repo = InMemoryCategoryRepository(categories)
    product_repo = InMemoryProductRepository(products or [])
    svc = ProductDomainService(product_repo, category_repo, price_bands)
    return svc, product_repo, category_repo


def _priced(cid: str, *prices: float) -> list[Product]:
    return [Product.create(f"Item {i}", p, cid) for i, p in enumerate(prices)]


class TestCategoryActive:

    def test_active_category(self):
        svc, _, _ = _setup()
        assert svc.is_category_active("category_1") is True

    def test_inactive_category(self):
        svc, _, _ = _setup(inactive=("category_1",))
        assert svc.is_category_active("category_1") is False

    def test_missing_category(self):
        svc, _, _ = _setup()
        assert svc.is_category_active("ghost") is False


class TestProductNameUniqueness:

    def test_duplicate_in_same_category_rejected(self):
        svc, product_repo, _ = _setup()
        product_repo.save(Product.create("X", 10, "cat_1"))
        assert svc.is_product_name_unique("X", "cat_1") is False

    def test_same_name_in_other_category_allowed(self):
        svc, product_repo, _ = _setup()
        product_repo.save(Product.create("X", 10, "cat_1"))
        assert svc.is_product_name_unique("X", "cat_2") is True

    def test_match_is_exact(self):
        svc, product_repo, _ = _setup()
        product_repo.save(Product.create("X", 10, "cat_1"))
        assert svc.is_product_name_unique("x", "cat_1") is True


class TestPriceRange:

    def test_within_listed_band(self):
        svc, _, _ = _setup()
        assert svc.is_price_within_acceptable_range(500, "category_1") is True

    def test_above_listed_band(self):
        svc, _, _ = _setup()
        assert svc.is_price_within_acceptable_range(5000, "category_1") is False

    def test_bounds_are_inclusive(self):
        svc, _, _ = _setup()
        assert svc.is_price_within_acceptable_range(10.00, "category_1") is True
        assert svc.is_price_within_acceptable_range(1000.00, "category_1") is True
        assert svc.is_price_within_acceptable_range(9.99, "category_1") is False

    def test_unlisted_category_uses_default_band(self):
        svc, _, _ = _setup()
        assert svc.is_price_within_acceptable_range(50, "category_unlisted") is True
        assert svc.is_price_within_acceptable_range(0.5, "category_unlisted") is False
        assert svc.is_price_within_acceptable_range(10001, "category_unlisted") is False

    def test_missing_category_is_out_of_range(self):
        svc, _, _ = _setup()
        assert svc.is_price_within_acceptable_range(500, "ghost") is False

    def test_get_price_range_is_pure_lookup(self):
        product_repo = Mock(spec=ProductRepository)
        category_repo = Mock(spec=CategoryRepository)
        svc = ProductDomainService(product_repo, category_repo)

        assert svc.get_price_range_for_category("category_2") == PriceBand(50.00, 2000.00)
        assert svc.get_price_range_for_category("category_3").as_dict() == {
            "min": 100.00,
            "max": 5000.00,
        }
        assert svc.get_price_range_for_category("whatever") == PriceBand(1.00, 10000.00)
        assert product_repo.method_calls == []
        assert category_repo.method_calls == []

    def test_injected_bands_replace_defaults(self):
        bands = PriceBands(bands={"category_1": PriceBand(1, 5)}, default=PriceBand(0, 1))
        svc, _, _ = _setup(price_bands=bands)
        assert svc.is_price_within_acceptable_range(500, "category_1") is False
        assert svc.is_price_within_acceptable_range(4, "category_1") is True
        assert svc.get_price_range_for_category("category_2") == PriceBand(0, 1)


class TestCanCreateProduct:

    def test_all_checks_pass(self):
        svc, _, _ = _setup()
        assert svc.can_create_product("Laptop", 500, "category_1") is True

    def test_inactive_category_fails(self):
        svc, _, _ = _setup(inactive=("category_1",))
        assert svc.can_create_product("Laptop", 500, "category_1") is False

    def test_duplicate_name_fails(self):
        svc, _, _ = _setup(products=[Product.create("Laptop", 500, "category_1")])
        assert svc.can_create_product("Laptop", 600, "category_1") is False

    def test_price_out_of_band_fails(self):
        svc, _, _ = _setup()
        assert svc.can_create_product("Laptop", 5000, "category_1") is False


class TestCanCreateProductShortCircuit:
    """Checks run in order: category active -> name unique -> price range."""

    def _mocked(self, category: Category | None, products: list[Product]):
        product_repo = Mock(spec=ProductRepository)
        product_repo.find_all.return_value = products
        category_repo = Mock(spec=CategoryRepository)
        category_repo.find_by_id.return_value = category
        return ProductDomainService(product_repo, category_repo), product_repo, category_repo

    def test_stops_after_inactive_category(self):
        svc, product_repo, category_repo = self._mocked(None, [])

        assert svc.can_create_product("Laptop", 500, "category_1") is False

        assert category_repo.find_by_id.call_count == 1
        assert product_repo.find_all.call_count == 0

    def test_stops_after_duplicate_name(self):
        category = Category.create("Tech", "", id="category_1")
        existing = Product.create("Laptop", 500, "category_1")
        svc, product_repo, category_repo = self._mocked(category, [existing])

        assert svc.can_create_product("Laptop", 500, "category_1") is False

        # Only the activity check looked the category up; the range check never ran.
        assert category_repo.find_by_id.call_count == 1
        assert product_repo.find_all.call_count == 1

    def test_runs_all_three_checks_when_passing(self):
        category = Category.create("Tech", "", id="category_1")
        svc, product_repo, category_repo = self._mocked(category, [])

        assert svc.can_create_product("Laptop", 500, "category_1") is True

        assert category_repo.find_by_id.call_count == 2
        assert product_repo.find_all.call_count == 1


class TestAveragePrice:

    def test_average(self):
        svc, _, _ = _setup(products=_priced("category_1", 100, 200, 300))
        assert svc.get_average_price_for_category("category_1") == 200

    def test_empty_category_has_no_average(self):
        svc, _, _ = _setup(products=_priced("category_1", 100))
        assert svc.get_average_price_for_category("category_2") is None

    def test_only_counts_own_category(self):
        products = _priced("category_1", 100, 300) + _priced("category_2", 1000)
        svc, _, _ = _setup(products=products)
        assert svc.get_average_price_for_category("category_1") == 200


class TestPriceCompetitiveness:

    def test_within_twenty_percent(self):
        svc, _, _ = _setup(products=_priced("category_1", 100))
        assert svc.is_price_competitive(119.99, "category_1") is True
        assert svc.is_price_competitive(80.01, "category_1") is True

    def test_outside_twenty_percent(self):
        svc, _, _ = _setup(products=_priced("category_1", 100))
        assert svc.is_price_competitive(121, "category_1") is False
        assert svc.is_price_competitive(79, "category_1") is False

    @pytest.mark.parametrize("price", [80.0, 120.0])
    def test_bounds_are_inclusive(self, price):
        svc, _, _ = _setup(products=_priced("category_1", 50, 150))
        assert svc.is_price_competitive(price, "category_1") is True

    def test_empty_category_is_vacuously_competitive(self):
        svc, _, _ = _setup()
        assert svc.is_price_competitive(1_000_000, "category_1") is True

    @pytest.mark.parametrize("price", [26.64, 39.96])
    def test_two_decimal_bounds_are_inclusive(self, price):
        svc, _, _ = _setup(products=_priced("category_1", 33.30))
        assert svc.is_price_competitive(price, "category_1") is True

    def test_just_outside_two_decimal_bounds(self):
        svc, _, _ = _setup(products=_priced("category_1", 33.30))
        assert svc.is_price_competitive(39.97, "category_1") is False
        assert svc.is_price_competitive(26.63, "category_1") is False
