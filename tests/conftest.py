"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest

from storefront.models import CartItem, CatalogSnapshot, Category, HomeSection, Order, Product


@pytest.fixture
def categories() -> list[Category]:
    """Electronics > (Audio > Headphones, TV & Video) plus a separate Fashion root."""
    return [
        Category(id="c1", name="Electronics", slug="electronics"),
        Category(id="c2", name="Audio", slug="audio", parent_id="c1"),
        Category(id="c3", name="TV & Video", slug="tv-video", parent_id="c1"),
        Category(id="c4", name="Headphones", slug="headphones", parent_id="c2"),
        Category(id="c5", name="Fashion", slug="fashion"),
    ]


@pytest.fixture
def products() -> list[Product]:
    """Catalog mixing categories, sale states, featured flags and dates."""
    return [
        Product(
            id="p1",
            name="Smart Speaker",
            price=Decimal("100"),
            original_price=Decimal("120"),
            category="Electronics",
            is_featured=True,
            created_at="2024-01-01T00:00:00Z",
        ),
        Product(
            id="p2",
            name="Bookshelf Speakers",
            price=Decimal("50"),
            category="audio",
            created_at="2023-06-01T00:00:00Z",
        ),
        Product(
            id="p3",
            name="Studio Headphones",
            price=Decimal("30"),
            original_price=Decimal("30"),
            category="HEADPHONES",
        ),
        Product(
            id="p4",
            name="OLED TV",
            price=Decimal("400"),
            original_price=Decimal("500"),
            category="TV & Video",
            is_featured=True,
            created_at="2024-03-10T12:00:00+00:00",
        ),
        Product(
            id="p5",
            name="Linen Shirt",
            price=Decimal("20"),
            original_price=Decimal("25"),
            category="Fashion",
            created_at="2023-12-24",
        ),
        Product(
            id="p6",
            name="Mystery Box",
            price=Decimal("5"),
            category="Clearance",
            created_at="not-a-date",
        ),
    ]


@pytest.fixture
def orders() -> list[Order]:
    return [
        Order(id="o1", items=[CartItem(id="p1", quantity=3), CartItem(id="p5", quantity=1)]),
        Order(id="o2", items=[CartItem(id="p1", quantity=2), CartItem(id="p4-black", quantity=9)]),
        Order(id="o3", items=[CartItem(id="p5", quantity=4)]),
    ]


@pytest.fixture
def sections() -> list[HomeSection]:
    return [
        HomeSection(id="s-sale", type="slider", title="On Sale", filter_type="sale", sort_order=3),
        HomeSection(
            id="s-electronics",
            type="slider",
            title="Electronics",
            filter_type="category",
            filter_value="electronics",
            sort_order=1,
        ),
        HomeSection(id="s-tabs", type="tabbed-slider", title="Featured Products", sort_order=2),
        HomeSection(
            id="s-hidden",
            type="slider",
            title="Hidden",
            filter_type="featured",
            is_active=False,
            sort_order=0,
        ),
        HomeSection(
            id="s-empty",
            type="slider",
            title="Garden",
            filter_type="category",
            filter_value="Garden",
            sort_order=4,
        ),
        HomeSection(id="s-banner", type="banner", title="Promo", sort_order=5),
    ]


@pytest.fixture
def catalog(products, categories, orders, sections) -> CatalogSnapshot:
    return CatalogSnapshot(
        products=products,
        categories=categories,
        orders=orders,
        sections=sections,
    )
