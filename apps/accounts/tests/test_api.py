import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        url = reverse('users:register')
        data = {
            'email': 'NewUser@Example.com',
            'password': 'secret1',
            'name': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['email'] == 'newuser@example.com'
        assert response.data['user']['role'] == UserRole.USER
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_without_name(self, api_client):
        url = reverse('users:register')
        response = api_client.post(url, {'email': 'minimal@example.com', 'password': 'secret1'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['name'] is None

    def test_register_duplicate_email(self, api_client, user):
        url = reverse('users:register')
        response = api_client.post(url, {'email': user.email, 'password': 'secret1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'User with this email already exists'

    def test_register_short_password(self, api_client):
        url = reverse('users:register')
        response = api_client.post(url, {'email': 'weak@example.com', 'password': '123'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data

    def test_register_invalid_email(self, api_client):
        url = reverse('users:register')
        response = api_client.post(url, {'email': 'not-an-email', 'password': 'secret1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data


# =============================================================================
# Login / Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'email': user.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Login successful'
        assert 'access' in response.data['tokens']

    def test_login_is_case_insensitive_on_email(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'TestUser@Example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {'email': user.email, 'password': 'WrongPass'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_nonexistent_user(self, api_client):
        url = reverse('users:login')
        response = api_client.post(url, {'email': 'ghost@example.com', 'password': 'whatever'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('users:login')
        response = api_client.post(url, {'email': user_inactive.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_updates_last_login(self, api_client, user):
        assert user.last_login is None
        api_client.post(reverse('users:login'), {'email': user.email, 'password': 'TestPass123!'})

        user.refresh_from_db()
        assert user.last_login is not None


@pytest.mark.django_db
class TestLogout:

    def test_logout(self, api_client):
        response = api_client.post(reverse('users:logout'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'Logout successful'}


# =============================================================================
# Current user / account changes
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/me/"""

    def test_get_current_user(self, authenticated_client, user):
        response = authenticated_client.get(reverse('account:me'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(user.id)
        assert set(response.data) == {'id', 'email', 'name', 'role', 'created_at', 'updated_at'}

    def test_get_current_user_unauthenticated(self, api_client):
        response = api_client.get(reverse('account:me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestChangeEmail:
    """Tests for PUT /api/account/change-email/"""

    def test_change_email(self, authenticated_client, user):
        url = reverse('account:change-email')
        response = authenticated_client.put(url, {'new_email': 'Fresh@Example.com'})

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.email == 'fresh@example.com'

    def test_change_email_taken(self, authenticated_client, other_user):
        url = reverse('account:change-email')
        response = authenticated_client.put(url, {'new_email': other_user.email})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Email is already in use'

    def test_change_email_invalid(self, authenticated_client):
        url = reverse('account:change-email')
        response = authenticated_client.put(url, {'new_email': 'nope'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_change_email_missing(self, authenticated_client):
        response = authenticated_client.put(reverse('account:change-email'), {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestChangePassword:
    """Tests for PUT /api/account/change-password/"""

    def test_change_password(self, authenticated_client, user):
        url = reverse('account:change-password')
        response = authenticated_client.put(url, {
            'current_password': 'TestPass123!',
            'new_password': 'NewPass456!',
        })

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.check_password('NewPass456!')

    def test_wrong_current_password(self, authenticated_client):
        url = reverse('account:change-password')
        response = authenticated_client.put(url, {
            'current_password': 'nope-nope',
            'new_password': 'NewPass456!',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Current password is incorrect'

    def test_same_password_rejected(self, authenticated_client):
        url = reverse('account:change-password')
        response = authenticated_client.put(url, {
            'current_password': 'TestPass123!',
            'new_password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_short_password_rejected(self, authenticated_client):
        url = reverse('account:change-password')
        response = authenticated_client.put(url, {
            'current_password': 'TestPass123!',
            'new_password': '12345',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'new_password' in response.data


# =============================================================================
# Admin user management
# =============================================================================

@pytest.mark.django_db
class TestAdminUsers:

    def test_list_users(self, admin_client, user, admin_user):
        response = admin_client.get(reverse('account:admin-users'))

        assert response.status_code == status.HTTP_200_OK
        emails = [u['email'] for u in response.data['users']]
        assert set(emails) == {user.email, admin_user.email}

    def test_list_users_forbidden_for_customers(self, authenticated_client):
        response = authenticated_client.get(reverse('account:admin-users'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_users_unauthenticated(self, api_client):
        response = api_client.get(reverse('account:admin-users'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_staff_flag_alone_is_not_admin(self, api_client):
        staff = User.objects.create_user(
            email='staff@example.com',
            password='StaffPass123!',
            is_staff=True,
        )
        refresh = RefreshToken.for_user(staff)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')

        response = api_client.get(reverse('account:admin-users'))

        assert not staff.is_admin
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_promote_user(self, admin_client, user):
        url = reverse('account:admin-user-role')
        response = admin_client.put(url, {'user_id': str(user.id), 'role': 'ADMIN'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['role'] == 'ADMIN'
        user.refresh_from_db()
        assert user.is_staff

    def test_invalid_role(self, admin_client, user):
        url = reverse('account:admin-user-role')
        response = admin_client.put(url, {'user_id': str(user.id), 'role': 'OWNER'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_user(self, admin_client):
        url = reverse('account:admin-user-role')
        response = admin_client.put(url, {
            'user_id': '00000000-0000-0000-0000-000000000000',
            'role': 'USER',
        })

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Model Tests
# =============================================================================

@pytest.mark.django_db
class TestUserModel:

    def test_create_user_lowercases_email(self):
        user = User.objects.create_user(email='Mixed@Case.COM', password='secret1')

        assert user.email == 'mixed@case.com'
        assert user.role == UserRole.USER
        assert not user.is_staff

    def test_create_superuser(self):
        admin = User.objects.create_superuser(email='root@example.com', password='secret1')

        assert admin.is_admin
        assert admin.is_superuser

    def test_get_display_name(self, user):
        assert user.get_display_name() == 'Test User'
        user.name = None
        assert user.get_display_name() == user.email
