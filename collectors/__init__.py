from .base import (
    AccountVanished,
    Collector,
    CollectorResult,
    CommandError,
    CredentialStoreUnreadable,
    MalformedDirectoryEntry,
    PrivilegedCommandFailed,
    SourceUnavailable,
)
from .accounts import (
    AccountCollector,
    AccountRecord,
    iter_accounts,
    iter_passwd_file,
    lookup_account,
)
from .groups import GroupCollector
from .passwd_status import PasswdStatusCollector
from .shadow import UNAVAILABLE, load_credential_store

__all__ = [
    "Collector",
    "CollectorResult",
    "AccountCollector",
    "AccountRecord",
    "GroupCollector",
    "PasswdStatusCollector",
    "UNAVAILABLE",
    "iter_accounts",
    "iter_passwd_file",
    "lookup_account",
    "load_credential_store",
    "AccountVanished",
    "CommandError",
    "CredentialStoreUnreadable",
    "MalformedDirectoryEntry",
    "PrivilegedCommandFailed",
    "SourceUnavailable",
]

COLLECTORS = {
    "accounts": AccountCollector,
    "passwd_status": PasswdStatusCollector,
    "groups": GroupCollector,
}
