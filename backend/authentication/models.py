from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    ROLE_CHOICES = (
        ('viewer', 'Viewer'),
        ('admin', 'Admin'),
    )
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default='viewer')

    @property
    def is_dashboard_admin(self):
        return self.role == 'admin'

    def __str__(self):
        return f"{self.email} ({self.role})"
