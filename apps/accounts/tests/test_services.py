import pytest
from django.core.management import call_command

from apps.accounts.models import User, UserRole
from apps.accounts.services import (
    register_user,
    authenticate_user,
    change_email,
    change_password,
    update_user_role,
    UserRegistrationError,
    InvalidCredentialsError,
    EmailInUseError,
    PasswordConfirmationError,
    PasswordReuseError,
    InvalidRoleError,
)


@pytest.mark.django_db
class TestAccountServices:

    def test_register_rejects_case_variant_duplicate(self, user):
        with pytest.raises(UserRegistrationError):
            register_user(email='TESTUSER@example.com', password='secret1')

    def test_authenticate_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='bad')

    def test_change_email_to_own_address_is_allowed(self, user):
        updated = change_email(user_id=user.id, new_email=user.email.upper())
        assert updated.email == user.email

    def test_change_email_conflict(self, user, other_user):
        with pytest.raises(EmailInUseError):
            change_email(user_id=user.id, new_email=other_user.email)

    def test_change_password_checks(self, user):
        with pytest.raises(PasswordConfirmationError):
            change_password(user_id=user.id, current_password='x', new_password='abcdef')
        with pytest.raises(PasswordReuseError):
            change_password(user_id=user.id, current_password='TestPass123!', new_password='TestPass123!')

    def test_demote_admin_clears_staff(self, admin_user):
        user = update_user_role(user_id=admin_user.id, role=UserRole.USER)
        assert user.role == UserRole.USER
        assert not user.is_staff

    def test_invalid_role(self, user):
        with pytest.raises(InvalidRoleError):
            update_user_role(user_id=user.id, role='ROOT')


@pytest.mark.django_db
class TestCreateAdminUserCommand:

    def test_creates_admin(self):
        call_command('create_admin_user', email='Boss@Example.com', password='secret1', name='Boss')

        admin = User.objects.get(email='boss@example.com')
        assert admin.role == UserRole.ADMIN
        assert admin.is_staff
        assert admin.check_password('secret1')

    def test_promotes_existing_user(self, user):
        call_command('create_admin_user', email=user.email)

        user.refresh_from_db()
        assert user.role == UserRole.ADMIN
        assert user.check_password('TestPass123!')
