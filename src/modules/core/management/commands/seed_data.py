from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.products.models import Product
from modules.users.models import User

SEED_USERS = [
    ("Ana Souza", "ana@example.com"),
    ("Bruno Lima", "bruno@example.com"),
    ("Carla Mendes", "carla@example.com"),
]

SEED_CATEGORIES = [
    ("Electronics", "Devices, peripherals and accessories."),
    ("Furniture", "Desks, chairs and storage."),
    ("Office", "Stationery and office supplies."),
]

# (owner email, name, price, description, category names)
SEED_PRODUCTS = [
    ("ana@example.com", "Monitor 27\"", Decimal("1299.90"), None, ["Electronics"]),
    ("ana@example.com", "Mechanical Keyboard", Decimal("399.90"), None, ["Electronics", "Office"]),
    ("bruno@example.com", "Office Desk", Decimal("899.00"), "Oak top", ["Furniture", "Office"]),
    ("bruno@example.com", "Ergonomic Chair", Decimal("1499.00"), None, ["Furniture"]),
    ("carla@example.com", "Blue Pen", Decimal("4.90"), None, ["Office"]),
    ("carla@example.com", "Gift Card", Decimal("0.00"), "Uncategorised", []),
]


class Command(BaseCommand):
    help = "Seed database with demo users, categories and products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--with-admin",
            action="store_true",
            help="Also create an 'admin' API account (password 'admin123').",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        api_accounts = self._seed_api_accounts() if options["with_admin"] else 0
        users = self._seed_users()
        categories = self._seed_categories()
        products_created = self._seed_products(users, categories)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"api_accounts={api_accounts}, "
                f"users={len(users)}, "
                f"categories={len(categories)}, "
                f"products_created={products_created}"
            )
        )

    def _seed_api_accounts(self) -> int:
        Account = get_user_model()
        if Account.objects.filter(username="admin").exists():
            return 0
        Account.objects.create_superuser("admin", password="admin123")
        return 1

    def _seed_users(self) -> dict[str, User]:
        users: dict[str, User] = {}
        for name, email in SEED_USERS:
            user, _ = User.objects.get_or_create(email=email, defaults={"name": name})
            users[email] = user
        return users

    def _seed_categories(self) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for name, description in SEED_CATEGORIES:
            category, _ = Category.objects.get_or_create(
                name=name, defaults={"description": description}
            )
            categories[name] = category
        return categories

    def _seed_products(
        self, users: dict[str, User], categories: dict[str, Category]
    ) -> int:
        created = 0
        for email, name, price, description, category_names in SEED_PRODUCTS:
            product, is_new = Product.objects.get_or_create(
                owner=users[email],
                name=name,
                defaults={"price": price, "description": description},
            )
            if is_new:
                product.categories.set([categories[c] for c in category_names])
                created += 1
        return created
