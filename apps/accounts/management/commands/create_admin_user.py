"""
Management command to create or promote a back-office admin.

Usage:
    python manage.py create_admin_user --email admin@veezet.az --name "Admin"

Prompts for the password when --password is omitted. An existing account
with the same email is promoted to ADMIN and keeps its password unless a
new one is given.
"""

from getpass import getpass

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.accounts.models import User, UserRole


class Command(BaseCommand):
    help = 'Create an ADMIN account or promote an existing one'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True, help='Admin email address')
        parser.add_argument('--password', help='Password (prompted when omitted)')
        parser.add_argument('--name', default='', help='Display name')

    @transaction.atomic
    def handle(self, *args, **options):
        email = options['email'].strip().lower()
        password = options['password']
        name = options['name'] or None

        user = User.objects.filter(email=email).first()

        if user is None:
            if not password:
                password = getpass('Password: ')
            if len(password) < 6:
                raise CommandError('Password must be at least 6 characters long')

            User.objects.create_user(
                email=email,
                password=password,
                name=name,
                role=UserRole.ADMIN,
                is_staff=True,
            )
            self.stdout.write(self.style.SUCCESS(f'Created admin {email}'))
            return

        user.role = UserRole.ADMIN
        user.is_staff = True
        if name:
            user.name = name
        if password:
            user.set_password(password)
        user.save()
        self.stdout.write(self.style.SUCCESS(f'Promoted {email} to admin'))
