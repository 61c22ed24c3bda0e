"""User model for authentication and cart ownership.

Extends Django's `AbstractUser` so emails are unique and normalized; carts
and orders hang off the user through `carts` and `orders`.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Custom user with a unique, normalized email."""

    email = models.EmailField(unique=True)

    def save(self, *args, **kwargs):
        """Normalize the email (trimmed, lowercase) and persist."""
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)
