# Abstract base collector and error taxonomy for Lachesis

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class SourceUnavailable(RuntimeError):
    """No account directory backend could be read."""


class CredentialStoreUnreadable(OSError):
    pass


class AccountVanished(LookupError):
    pass


class PrivilegedCommandFailed(RuntimeError):
    def __init__(self, command: str, returncode: int):
        super().__init__(f"'{command}' exited with status {returncode}")
        self.command = command
        self.returncode = returncode


class MalformedDirectoryEntry(ValueError):
    def __init__(self, line: str, reason: str):
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class CommandError(RuntimeError):
    def __init__(self, command: str, returncode: int, output: str = ""):
        super().__init__(f"'{command}' exited with status {returncode}")
        self.command = command
        self.returncode = returncode
        self.output = output


@dataclass
class CollectorResult:
    collector_type: str
    subject: str
    raw_output: str
    parsed_data: dict[str, Any]
    command: str
    success: bool
    error: str | None = None
    timestamp: str = field(default="")

    def __post_init__(self):
        if not self.timestamp:
            from datetime import datetime, timezone
            self.timestamp = datetime.now(timezone.utc).isoformat()


class Collector(ABC):

    name: str = "base"
    description: str = "Base collector"

    @abstractmethod
    def get_command(self) -> str:
        pass

    @abstractmethod
    def parse_output(self, raw_output: str) -> dict[str, Any]:
        pass

    def execute(self, executor, subject: str = "localhost") -> CollectorResult:
        command = self.get_command()
        try:
            raw_output = executor.run(command)
            parsed = self.parse_output(raw_output)
            return CollectorResult(
                collector_type=self.name,
                subject=subject,
                raw_output=raw_output,
                parsed_data=parsed,
                command=command,
                success=True
            )
        except (CommandError, OSError, ValueError) as e:
            return CollectorResult(
                collector_type=self.name,
                subject=subject,
                raw_output=getattr(e, "output", ""),
                parsed_data={},
                command=command,
                success=False,
                error=str(e)
            )
