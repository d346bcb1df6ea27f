"""
Permission classes shared by the back-office endpoints.

Usage:
    @api_view(['GET'])
    @permission_classes([IsAuthenticated, IsAdminRole])
    def list_users(request):
        ...
"""

from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """
    Allows access only to accounts with the ADMIN role.

    Pair with IsAuthenticated so anonymous requests get 401 instead of 403.
    """

    message = 'Admin access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)
