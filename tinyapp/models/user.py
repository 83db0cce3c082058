from dataclasses import dataclass


@dataclass
class User:
    """
    Registered account.

    The plaintext password never reaches this record; only the bcrypt hash
    produced at registration time is kept.
    """
    id: str
    email: str
    password_hash: str
