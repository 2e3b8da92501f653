import pytest
from rest_framework.test import APIClient

from journal.models import JournalEntry

PASSWORD = "s3cret-Passphrase!"


@pytest.fixture
def make_user(django_user_model):
    def _make_user(username="alice", **extra):
        return django_user_model.objects.create_user(
            username=username, email=f"{username}@example.com", password=PASSWORD, **extra
        )
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user("alice")


@pytest.fixture
def other_user(make_user):
    return make_user("bob")


@pytest.fixture
def make_entry():
    def _make_entry(owner, content="A quiet day", **fields):
        return JournalEntry.objects.create(user=owner.profile, content=content, **fields)
    return _make_entry


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_api_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client
