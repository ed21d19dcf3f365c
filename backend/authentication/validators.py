from rest_framework import serializers


class PasswordMatchValidator:
    """Serializer-level check that a confirmation field repeats the password"""

    message = 'Passwords do not match'

    def __init__(self, password_field='password', confirm_field='confirmPassword'):
        self.password_field = password_field
        self.confirm_field = confirm_field

    def __call__(self, attrs):
        if attrs.get(self.password_field) != attrs.get(self.confirm_field):
            raise serializers.ValidationError({self.confirm_field: self.message})
