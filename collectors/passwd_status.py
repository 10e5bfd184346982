# Passwd Status Collector - Per-account credential status via `passwd -S`.
# Output looks like: "daemon L 2024-01-01 0 99999 7 -1"

import shlex
from typing import Any

from .base import Collector

STATUS_CODES = {"P", "PS", "L", "LK", "NP"}


class PasswdStatusCollector(Collector):
    name = "passwd_status"
    description = "Per-account password status query"

    def __init__(self, account: str):
        self.account = account

    def get_command(self) -> str:
        return f"passwd -S {shlex.quote(self.account)}"

    def parse_output(self, raw_output: str) -> dict[str, Any]:
        for line in raw_output.strip().split("\n"):
            parts = line.split()
            if len(parts) >= 2 and parts[0] == self.account:
                if parts[1] not in STATUS_CODES:
                    raise ValueError(f"Unrecognised passwd status: {parts[1]!r}")
                return {"account": self.account, "status": parts[1]}
        raise ValueError(f"No passwd status line for {self.account}")
