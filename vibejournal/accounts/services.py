# accounts/services.py
from .models import Profile
from .policies import PROFILE_POLICY, UPDATE


def get_profile(user):
    """Return the caller's profile, creating it if signup skipped the signal"""
    try:
        return user.profile
    except Profile.DoesNotExist:
        profile, _ = Profile.objects.get_or_create(user=user)
        return profile


def set_display_name(user, display_name):
    profile = get_profile(user)
    PROFILE_POLICY.enforce(user, UPDATE, profile)
    profile.display_name = display_name.strip() or Profile.DEFAULT_DISPLAY_NAME
    profile.save(update_fields=['display_name', 'updated_at'])
    return profile
