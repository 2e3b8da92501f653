from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Site account; journaling data hangs off the user's Profile"""

    class Meta(AbstractUser.Meta):
        ordering = ['-date_joined']

    def __str__(self):
        return self.username

    @property
    def display_name(self):
        profile = getattr(self, 'profile', None)
        return profile.display_name if profile else Profile.DEFAULT_DISPLAY_NAME


class Profile(models.Model):
    """One record per user, created alongside the account.

    The primary key is the user's own id, so journal rows keyed on a
    profile are keyed on the owning user's identity.
    """

    DEFAULT_DISPLAY_NAME = 'Anonymous'

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        db_column='id',
        related_name='profile',
    )
    display_name = models.CharField(max_length=100, default=DEFAULT_DISPLAY_NAME)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'profiles'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.display_name} ({self.user.username})"
