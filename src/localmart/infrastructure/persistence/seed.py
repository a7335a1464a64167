"""Demo data: one customer, three vendors and a small catalog."""

from __future__ import annotations

from localmart.domain.model.product import Product
from localmart.domain.model.user import Role, User
from localmart.domain.model.value_objects import Money
from localmart.domain.repository.product_repository import ProductRepository
from localmart.domain.repository.user_repository import UserRepository

DEMO_USERS = [
    User(
        id="1", name="Demo Customer", email="customer@demo.com", role=Role.CUSTOMER,
        phone="+254700000001", address="123 Demo Street, Nairobi", city="Nairobi",
    ),
    User(
        id="2", name="Demo Vendor", email="vendor@demo.com", role=Role.VENDOR,
        phone="+254700000002", address="456 Market Street, Nairobi", city="Nairobi",
    ),
    User(
        id="3", name="Fresh Fruits Kenya", email="freshfruits@demo.com", role=Role.VENDOR,
        phone="+254700000003", address="789 Fruit Avenue, Eldoret", city="Eldoret",
    ),
    User(
        id="4", name="Electronics Hub", email="electronics@demo.com", role=Role.VENDOR,
        phone="+254700000004", address="321 Tech Road, Mombasa", city="Mombasa",
    ),
]

# (name, description, price, category, stock, vendor_id)
_DEMO_CATALOG = [
    ("Fresh Bananas", "Sweet and ripe bananas from local farms", "150", "Fruits", 50, "2"),
    ("Red Apples", "Crisp and juicy red apples", "200", "Fruits", 30, "2"),
    ("Organic Tomatoes", "Fresh organic tomatoes grown locally", "120", "Vegetables", 25, "3"),
    ("Smartphone", "Latest Android smartphone with great features", "25000", "Electronics", 10, "4"),
    ("Wireless Headphones", "Wireless headphones with noise cancellation", "3500", "Electronics", 15, "4"),
    ("Fresh Milk", "Fresh cow milk from local dairy farms", "80", "Dairy", 40, "3"),
    ("Whole Wheat Bread", "Freshly baked whole wheat bread", "60", "Bakery", 20, "2"),
    ("Green Vegetables Mix", "Fresh mixed green vegetables", "180", "Vegetables", 35, "3"),
]


def demo_products() -> list[Product]:
    return [
        Product(
            id=str(index),
            name=name,
            description=description,
            price=Money.of(price),
            category=category,
            stock=stock,
            vendor_id=vendor_id,
        )
        for index, (name, description, price, category, stock, vendor_id)
        in enumerate(_DEMO_CATALOG, start=1)
    ]


def seed_demo_data(user_repo: UserRepository, product_repo: ProductRepository) -> tuple[int, int]:
    """Insert (or overwrite) the demo accounts and catalog.

    Returns the number of users and products written.
    """
    for user in DEMO_USERS:
        user_repo.save(user)
    products = demo_products()
    for product in products:
        product_repo.save(product)
    return len(DEMO_USERS), len(products)
