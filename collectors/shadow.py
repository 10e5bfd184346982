# Shadow Collector - Reads the credential status store.
# An unreadable store is an expected condition for non-root runs.

from pathlib import Path

from .base import CredentialStoreUnreadable


class _Unavailable:
    def __bool__(self):
        return False

    def __repr__(self):
        return "UNAVAILABLE"


UNAVAILABLE = _Unavailable()


def read_shadow(shadow_path: str | Path = "/etc/shadow") -> dict[str, str]:
    path = Path(shadow_path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise CredentialStoreUnreadable(f"cannot read {path}: {e.strerror or e}") from e

    entries = {}
    for line in text.splitlines():
        if not line or line.startswith("#") or ":" not in line:
            continue
        name, field, *_ = line.split(":")
        if not name:
            continue
        entries[name] = field
    return entries


def load_credential_store(shadow_path: str | Path = "/etc/shadow"):
    """Return the name -> password field mapping, or UNAVAILABLE."""
    try:
        return read_shadow(shadow_path)
    except CredentialStoreUnreadable:
        return UNAVAILABLE
