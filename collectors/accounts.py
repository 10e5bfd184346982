# Account Collector - Enumerates the account directory.
# Prefers NSS-aware `getent passwd`, falls back to parsing the passwd file.

import shlex
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

from .base import (
    AccountVanished,
    Collector,
    CommandError,
    MalformedDirectoryEntry,
    SourceUnavailable,
)


@dataclass(frozen=True)
class AccountRecord:
    name: str
    uid: int
    gid: int
    home: str
    shell: str
    gecos: str = ""


def parse_passwd_line(line: str) -> AccountRecord:
    # name:placeholder:uid:gid:gecos:home:shell
    parts = line.split(":")
    if len(parts) < 7:
        raise MalformedDirectoryEntry(line, "expected 7 fields")
    name, _, uid, gid, gecos, home, shell = parts[:7]
    if not name:
        raise MalformedDirectoryEntry(line, "empty account name")
    try:
        return AccountRecord(
            name=name,
            uid=int(uid),
            gid=int(gid),
            home=home,
            shell=shell.strip(),
            gecos=gecos,
        )
    except ValueError:
        raise MalformedDirectoryEntry(line, "non-numeric uid/gid") from None


def iter_passwd_lines(lines: Iterable[str], notices: list[str] | None = None) -> Iterator[AccountRecord]:
    for line in lines:
        line = line.rstrip("\n")
        if not line.strip() or line.startswith("#"):
            continue
        try:
            yield parse_passwd_line(line)
        except MalformedDirectoryEntry as e:
            notice = f"Warning: skipped malformed passwd entry ({e})"
            print(f"[!] {notice}")
            if notices is not None:
                notices.append(notice)


class AccountCollector(Collector):
    name = "accounts"
    description = "Account directory enumeration via getent"

    def get_command(self) -> str:
        return "getent passwd"

    def parse_output(self, raw_output: str) -> dict[str, Any]:
        # Records are parsed lazily by iter_accounts
        return {"lines": raw_output.splitlines()}

    @staticmethod
    def available() -> bool:
        return shutil.which("getent") is not None


def iter_passwd_file(passwd_path: str | Path = "/etc/passwd",
                     notices: list[str] | None = None) -> Iterator[AccountRecord]:
    path = Path(passwd_path)
    try:
        handle = path.open(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceUnavailable(f"Cannot read account file {path}: {e}") from e
    with handle:
        yield from iter_passwd_lines(handle, notices)


def iter_accounts(executor, passwd_path: str | Path = "/etc/passwd",
                  notices: list[str] | None = None) -> Iterator[AccountRecord]:
    if AccountCollector.available():
        result = AccountCollector().execute(executor)
        if result.success:
            yield from iter_passwd_lines(result.parsed_data["lines"], notices)
            return
        notice = (
            f"Warning: getent passwd failed ({result.error}), read {passwd_path} directly"
            " - directory-service accounts may be missing."
        )
        print(f"[!] {notice}")
        if notices is not None:
            notices.append(notice)

    yield from iter_passwd_file(passwd_path, notices)


def lookup_account(executor, name: str, passwd_path: str | Path = "/etc/passwd") -> AccountRecord:
    if AccountCollector.available():
        try:
            raw_output = executor.run(f"getent passwd {shlex.quote(name)}")
        except CommandError:
            raise AccountVanished(name) from None
        for record in iter_passwd_lines(raw_output.splitlines()):
            if record.name == name:
                return record
        raise AccountVanished(name)

    try:
        for record in iter_passwd_file(passwd_path):
            if record.name == name:
                return record
    except SourceUnavailable:
        raise AccountVanished(name) from None
    raise AccountVanished(name)
