"""Errors raised when an AWS call behind a handler fails."""


class MarioError(Exception):
    """Base class for errors raised by this package."""


class SecretLookupError(MarioError):
    """Reading a value from Secrets Manager failed."""

    def __init__(self, secret_id: str, reason: str) -> None:
        super().__init__(f"Failed to read secret {secret_id}: {reason}")
        self.secret_id = secret_id


class AuthLogWriteError(MarioError):
    """Inserting a row into the auth-log table failed."""

    def __init__(self, table_name: str, reason: str) -> None:
        super().__init__(f"Error inserting row in table {table_name}: {reason}")
        self.table_name = table_name
