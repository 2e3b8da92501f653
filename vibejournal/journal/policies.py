# journal/policies.py
from accounts.policies import OwnerPolicy, IsOwner

# Owners may read, create, edit and delete their own entries; nobody else may.
ENTRY_POLICY = OwnerPolicy('journal_entries', 'user_id')


class IsEntryOwner(IsOwner):
    policy = ENTRY_POLICY
