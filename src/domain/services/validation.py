"""Input checks shared by the services."""

from core.exceptions import InvalidEmailError


def normalize_email(email: str | None) -> str:
    """Canonical form used for every stored and looked-up email."""
    return (email or "").strip()


def require_email(email: str | None, *, require_at: bool = False) -> str:
    """Return the normalized email or raise ``InvalidEmailError``.

    Identity is trusted, so this only rejects blank values and, when
    ``require_at`` is set, strings that cannot be an address at all.
    """
    value = normalize_email(email)
    if not value or (require_at and "@" not in value):
        raise InvalidEmailError(email)
    return value
