"""
Management command to seed a fresh database.

Usage:
    python manage.py seed_database
    python manage.py seed_database --clear

This creates (skipping anything that already exists):
- an ADMIN account and a demo customer
- the five default catalog products (three business card plans,
  a redirect sticker and a static info card)
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.catalog.models import CatalogProduct, ProductType, BusinessCardPlan
from apps.catalog.services import invalidate_catalog_cache


DEFAULT_CATALOG = [
    {
        'name': 'Starter Vizitkart',
        'description': 'Yeni başlayanlar üçün ideal NFC vizitkart. Əsas kontakt məlumatları və sosial media linklər.',
        'image_url': '/img/products/starter-card.jpg',
        'one_time_price': Decimal('25.99'),
        'monthly_service_fee': Decimal('0.00'),
        'yearly_service_fee': Decimal('12.99'),
        'type': ProductType.BUSINESS_CARD,
        'plan': BusinessCardPlan.STARTER,
    },
    {
        'name': 'Professional Vizitkart',
        'description': 'Peşəkarlar üçün tam funksional NFC vizitkart. QR kod, çoxlu sosial media və fərdi dizayn.',
        'image_url': '/img/products/pro-card.jpg',
        'one_time_price': Decimal('45.99'),
        'monthly_service_fee': Decimal('2.99'),
        'yearly_service_fee': Decimal('29.99'),
        'type': ProductType.BUSINESS_CARD,
        'plan': BusinessCardPlan.PROFESSIONAL,
    },
    {
        'name': 'Business Vizitkart',
        'description': 'Şirkətlər üçün premium NFC vizitkart. Analitika, qrup idarəsi və prioritet dəstək.',
        'image_url': '/img/products/business-card.jpg',
        'one_time_price': Decimal('89.99'),
        'monthly_service_fee': Decimal('9.99'),
        'yearly_service_fee': Decimal('99.99'),
        'type': ProductType.BUSINESS_CARD,
        'plan': BusinessCardPlan.BUSINESS,
    },
    {
        'name': 'Smart Redirect Sticker',
        'description': 'İstənilən səhifəyə yönləndirən NFC stiker. Menyu, website və ya sosial media üçün.',
        'image_url': '/img/products/redirect-sticker.jpg',
        'one_time_price': Decimal('15.99'),
        'monthly_service_fee': Decimal('0.00'),
        'yearly_service_fee': Decimal('5.99'),
        'type': ProductType.REDIRECT_ITEM,
        'plan': None,
    },
    {
        'name': 'Static Info Card',
        'description': 'Sabit məlumat göstərən NFC kart. Şirkət məlumatı, WiFi şifrə və ya digər məlumatlar.',
        'image_url': '/img/products/static-card.jpg',
        'one_time_price': Decimal('19.99'),
        'monthly_service_fee': Decimal('0.00'),
        'yearly_service_fee': Decimal('0.00'),
        'type': ProductType.STATIC_ITEM,
        'plan': None,
    },
]


class Command(BaseCommand):
    help = 'Seed the admin account, a demo user and the default catalog'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Remove catalog products that were never ordered before seeding',
        )
        parser.add_argument('--admin-email', default='admin@veezet.com')
        parser.add_argument('--admin-password', default='admin12345')
        parser.add_argument('--demo-email', default='demo@veezet.com')
        parser.add_argument('--demo-password', default='demo12345')

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = CatalogProduct.objects.filter(products__isnull=True).delete()
            self.stdout.write(f'Removed {deleted} unused catalog product(s)')

        self.create_user(
            options['admin_email'],
            options['admin_password'],
            name='Admin User',
            role=UserRole.ADMIN,
        )
        self.create_user(
            options['demo_email'],
            options['demo_password'],
            name='Demo User',
            role=UserRole.USER,
        )

        created = 0
        for entry in DEFAULT_CATALOG:
            defaults = {key: value for key, value in entry.items() if key != 'name'}
            _, was_created = CatalogProduct.objects.get_or_create(name=entry['name'], defaults=defaults)
            created += int(was_created)

        invalidate_catalog_cache()
        self.stdout.write(self.style.SUCCESS(
            f'Seeding complete: {created} new catalog product(s)'
        ))

    def create_user(self, email, password, *, name, role):
        if User.objects.filter(email=email).exists():
            self.stdout.write(f'  {email} already exists, skipped')
            return

        User.objects.create_user(
            email=email,
            password=password,
            name=name,
            role=role,
            is_staff=role == UserRole.ADMIN,
        )
        self.stdout.write(f'  Created {role.label.lower()} {email}')
