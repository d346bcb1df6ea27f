from rest_framework import serializers

from .models import User, UserRole


class UserSerializer(serializers.ModelSerializer):
    """Account data returned by auth and profile endpoints."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'role',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        min_length=6,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=150,
        default=''
    )

    def validate_email(self, value):
        return value.strip().lower()


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class ChangeEmailSerializer(serializers.Serializer):
    new_email = serializers.EmailField(required=True)


class ChangePasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )
    new_password = serializers.CharField(
        required=True,
        min_length=6,
        style={'input_type': 'password'},
        error_messages={
            'min_length': 'New password must be at least 6 characters long',
        }
    )


class UpdateUserRoleSerializer(serializers.Serializer):
    user_id = serializers.UUIDField(required=True)
    role = serializers.CharField(required=True)

    def validate_role(self, value):
        if value not in UserRole.values:
            raise serializers.ValidationError('Invalid role. Must be USER or ADMIN')
        return value
