"""
Maintenance command to change an admin account's credentials.

Usage:
    python manage.py update_admin --email "new@ivoirestore.com" --password "NewPassword1"
    python manage.py update_admin --current "old@ivoirestore.com" --email "new@ivoirestore.com"

Without ``--current`` the oldest admin account is updated.
"""

from django.contrib.auth.hashers import make_password
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.core.validators import validate_email

from authentication.models import Admin

MIN_PASSWORD_LENGTH = 8


class Command(BaseCommand):
    help = "Update an admin account's email and/or password"

    def add_arguments(self, parser):
        parser.add_argument("--email", type=str, help="New email address for the account")
        parser.add_argument("--password", type=str, help="New password (at least 8 characters)")
        parser.add_argument(
            "--current", type=str, help="Email of the account to update (default: the oldest admin)"
        )

    def handle(self, *args, **options):
        new_email = (options.get("email") or "").strip().lower()
        new_password = options.get("password")
        current = (options.get("current") or "").strip().lower()

        if not new_email and not new_password:
            raise CommandError("Nothing to update: pass --email and/or --password.")

        if current:
            admin = Admin.objects.filter(email=current).first()
        else:
            admin = Admin.objects.order_by("created_at").first()
        if admin is None:
            raise CommandError("No admin account found.")

        update_fields = ["updated_at"]
        if new_email:
            try:
                validate_email(new_email)
            except ValidationError:
                raise CommandError(f"Invalid email address: {new_email}")
            if Admin.objects.filter(email=new_email).exclude(pk=admin.pk).exists():
                raise CommandError(f"Email {new_email} is already used by another account.")
            self.stdout.write(f"Updating admin: {admin.email} -> {new_email}")
            admin.email = new_email
            update_fields.append("email")

        if new_password:
            if len(new_password) < MIN_PASSWORD_LENGTH:
                raise CommandError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
            admin.password = make_password(new_password)
            update_fields.append("password")

        admin.save(update_fields=update_fields)

        self.stdout.write(self.style.SUCCESS(f"Admin {admin.email} updated."))
        if new_password:
            self.stdout.write("New password applied.")
