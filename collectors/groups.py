# Group Collector - Group membership of a single account.

import shlex
from typing import Any

from .base import Collector


class GroupCollector(Collector):
    name = "groups"
    description = "Group membership lookup"

    def __init__(self, account: str, use_groups_command: bool = False):
        self.account = account
        self.use_groups_command = use_groups_command

    def get_command(self) -> str:
        if self.use_groups_command:
            return f"groups {shlex.quote(self.account)}"
        return f"id -nG {shlex.quote(self.account)}"

    def parse_output(self, raw_output: str) -> dict[str, Any]:
        text = raw_output.strip()
        # `groups user` prints "user : g1 g2"
        if self.use_groups_command and " : " in text:
            text = text.split(" : ", 1)[1]
        return {"groups": text.split()}
