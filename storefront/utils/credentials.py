import hmac
from typing import Optional


class CredentialChecker:
    """
    Turns passwords into their stored form and checks them at log-in.

    Subclasses can replace both methods with a hashing scheme; callers only
    ever go through ``encode`` and ``verify``.
    """

    def encode(self, password: str) -> str:
        raise NotImplementedError

    def verify(self, password: str, stored: Optional[str]) -> bool:
        raise NotImplementedError


class PlaintextCredentials(CredentialChecker):
    """
    Passwords are stored and compared as entered.

    Trailing blanks of the stored value are ignored, since CHAR columns come
    back padded to their declared width.
    """

    def encode(self, password: str) -> str:
        return password

    def verify(self, password: str, stored: Optional[str]) -> bool:
        if stored is None:
            return False
        return hmac.compare_digest(stored.rstrip(" ").encode(), password.encode())


default_credentials = PlaintextCredentials()
