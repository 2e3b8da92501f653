"""Account, profile and session tests."""

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from django.urls import reverse
from django.contrib.auth.models import AnonymousUser

from accounts.models import Profile
from accounts.policies import DELETE, INSERT, PROFILE_POLICY, SELECT, UPDATE
from journal.policies import ENTRY_POLICY
from journal.models import JournalEntry

PASSWORD = "s3cret-Passphrase!"

User = get_user_model()


@pytest.mark.django_db
class TestProfileLifecycle:

    def test_profile_created_on_signup(self, user):
        profile = Profile.objects.get(pk=user.pk)
        assert profile.display_name == "Anonymous"
        assert user.display_name == "Anonymous"

    def test_deleting_user_removes_profile_and_entries(self, user, make_entry):
        make_entry(user)
        user.delete()

        assert not Profile.objects.exists()
        assert not JournalEntry.objects.exists()


@pytest.mark.django_db
class TestOwnerPolicies:

    def test_entry_policy_scopes_to_owner(self, user, other_user, make_entry):
        mine = make_entry(user)
        make_entry(other_user)

        assert list(ENTRY_POLICY.scope(JournalEntry.objects.all(), user)) == [mine]
        assert not ENTRY_POLICY.scope(JournalEntry.objects.all(), AnonymousUser()).exists()

    @pytest.mark.parametrize("action", [SELECT, INSERT, UPDATE, DELETE])
    def test_entry_policy_owner_only(self, user, other_user, make_entry, action):
        entry = make_entry(user)

        assert ENTRY_POLICY.allows(user, action, entry)
        assert not ENTRY_POLICY.allows(other_user, action, entry)
        assert not ENTRY_POLICY.allows(AnonymousUser(), action, entry)

    def test_profiles_cannot_be_deleted_through_policy(self, user):
        assert PROFILE_POLICY.allows(user, UPDATE, user.profile)
        assert not PROFILE_POLICY.allows(user, DELETE, user.profile)

    def test_enforce_raises_for_other_user(self, user, other_user):
        with pytest.raises(PermissionDenied):
            PROFILE_POLICY.enforce(other_user, UPDATE, user.profile)


@pytest.mark.django_db
class TestRegisterLoginViews:

    def test_register_with_display_name(self, client):
        response = client.post(reverse("accounts:register"), {
            "username": "carol",
            "email": "carol@example.com",
            "password": PASSWORD,
            "password_confirm": PASSWORD,
            "display_name": "Carol",
        })

        assert response.status_code == 302
        assert response.url == reverse("accounts:login")
        assert User.objects.get(username="carol").profile.display_name == "Carol"

    def test_register_password_mismatch(self, client):
        response = client.post(reverse("accounts:register"), {
            "username": "carol",
            "email": "carol@example.com",
            "password": PASSWORD,
            "password_confirm": PASSWORD + "x",
        })

        assert response.status_code == 200
        assert not User.objects.filter(username="carol").exists()

    def test_login_redirects_to_archive(self, client, user):
        response = client.post(reverse("accounts:login"), {
            "username": user.username, "password": PASSWORD,
        })

        assert response.status_code == 302
        assert response.url == reverse("journal:archive")

    def test_login_honours_safe_next(self, client, user):
        response = client.post(
            reverse("accounts:login") + "?next=/accounts/profile/",
            {"username": user.username, "password": PASSWORD},
        )
        assert response.url == "/accounts/profile/"

    def test_login_ignores_external_next(self, client, user):
        response = client.post(
            reverse("accounts:login") + "?next=https://evil.example.com/",
            {"username": user.username, "password": PASSWORD},
        )
        assert response.url == reverse("journal:archive")

    def test_invalid_credentials(self, client, user):
        response = client.post(reverse("accounts:login"), {
            "username": user.username, "password": "wrong",
        })

        assert response.status_code == 200
        assert "Invalid username or password." in [str(m) for m in response.context["messages"]]

    def test_logout_clears_session(self, auth_client):
        response = auth_client.post(reverse("accounts:logout"))

        assert response.status_code == 302
        assert "_auth_user_id" not in auth_client.session

    def test_logout_refuses_get(self, auth_client, user):
        response = auth_client.get(reverse("accounts:logout"))

        assert response.status_code == 405
        assert auth_client.session["_auth_user_id"] == str(user.pk)


@pytest.mark.django_db
class TestProfileViews:

    def test_profile_page(self, auth_client, user, make_entry):
        make_entry(user)
        response = auth_client.get(reverse("accounts:profile"))

        assert response.status_code == 200
        assert response.context["total_entries"] == 1

    def test_update_display_name(self, auth_client, user):
        response = auth_client.post(reverse("accounts:profile_update"), {"display_name": "Al"})

        assert response.status_code == 302
        user.profile.refresh_from_db()
        assert user.profile.display_name == "Al"


@pytest.mark.django_db
class TestAccountAPI:

    def test_register_returns_tokens(self, api_client):
        response = api_client.post(reverse("accounts:api_register"), {
            "username": "dave",
            "email": "dave@example.com",
            "password": PASSWORD,
            "password_confirm": PASSWORD,
            "display_name": "Dave",
        }, format="json")

        assert response.status_code == 201
        assert response.data["user"]["display_name"] == "Dave"
        assert {"access", "refresh"} <= set(response.data["tokens"])

    def test_login_then_session_with_bearer_token(self, api_client, user):
        response = api_client.post(reverse("accounts:api_login"), {
            "username": user.username, "password": PASSWORD,
        }, format="json")
        assert response.status_code == 200

        access = response.data["tokens"]["access"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        session = api_client.get(reverse("accounts:api_session"))

        assert session.status_code == 200
        assert session.data["user"]["username"] == user.username
        assert session.data["profile"]["id"] == user.pk

    def test_login_rejects_bad_credentials(self, api_client, user):
        response = api_client.post(reverse("accounts:api_login"), {
            "username": user.username, "password": "nope",
        }, format="json")
        assert response.status_code == 401

    def test_session_requires_credentials(self, api_client):
        assert api_client.get(reverse("accounts:api_session")).status_code == 401

    def test_logout_blacklists_refresh_token(self, api_client, user):
        tokens = api_client.post(reverse("accounts:api_login"), {
            "username": user.username, "password": PASSWORD,
        }, format="json").data["tokens"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = api_client.post(reverse("accounts:api_logout"), {"refresh": tokens["refresh"]}, format="json")
        assert response.status_code == 205

        refreshed = api_client.post(reverse("token_refresh"), {"refresh": tokens["refresh"]}, format="json")
        assert refreshed.status_code == 401

    def test_profile_update(self, auth_api_client, user):
        response = auth_api_client.patch(
            reverse("accounts:api_profile"), {"display_name": "Ally"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["display_name"] == "Ally"
        user.profile.refresh_from_db()
        assert user.profile.display_name == "Ally"
