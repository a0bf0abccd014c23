"""
Wipe marketplace data, keeping admin accounts.

Usage:
    python manage.py clean_database --yes
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from authentication.models import Admin
from marketplace.models import Avis, Boutique, Order, Product

# Children first so no SET_NULL cascades fire on rows about to go
CLEARED_MODELS = (
    ("orders", Order),
    ("products", Product),
    ("boutiques", Boutique),
    ("reviews", Avis),
)


class Command(BaseCommand):
    help = "Delete all orders, products, boutiques and reviews (admin accounts are kept)"

    def add_arguments(self, parser):
        parser.add_argument("--yes", action="store_true", help="Confirm the deletion")

    def handle(self, *args, **options):
        if not options["yes"]:
            raise CommandError("This deletes all marketplace data. Re-run with --yes to confirm.")

        self.stdout.write("Current data:")
        for label, model in CLEARED_MODELS:
            self.stdout.write(f"  {label}: {model.objects.count()}")

        with transaction.atomic():
            for label, model in CLEARED_MODELS:
                deleted, _ = model.objects.all().delete()
                self.stdout.write(f"Deleted {deleted} {label}")

        self.stdout.write(
            self.style.SUCCESS(f"Database cleaned. {Admin.objects.count()} admin account(s) preserved.")
        )
