# journal/exceptions.py


class EntryError(Exception):
    """Base for journal failures shown to the user as a notification"""

    user_message = "Something went wrong. Please try again."

    def __init__(self, message=None):
        super().__init__(message or self.user_message)


class AuthenticationMissing(EntryError):
    user_message = "You must be logged in to create entries."


class EntryWriteError(EntryError):
    user_message = "Failed to create entry. Please try again."


class EntryReadError(EntryError):
    user_message = "Failed to load your journal entries."
