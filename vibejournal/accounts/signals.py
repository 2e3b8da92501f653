# accounts/signals.py
import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import User, Profile

logger = logging.getLogger(__name__)


@receiver(post_save, sender=User)
def create_profile(sender, instance, created, **kwargs):
    """Give every new account its profile row"""
    if not created:
        return
    profile, made = Profile.objects.get_or_create(user=instance)
    if made:
        logger.info("Created profile for user %s", instance.pk)
