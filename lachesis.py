#!/usr/bin/env python3
"""
Local account audit engine: measures every account on the host against
the human/system split and walks the operator through remediation.

Usage:
    python lachesis.py --policy policy.yaml
    python lachesis.py --report-only   # Write artifacts, skip remediation
    python lachesis.py --dry-run       # Show the planned audit
"""

import argparse
import copy
import os
import re
import shlex
import subprocess
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable

import yaml
from jinja2 import Environment, FileSystemLoader
from tqdm import tqdm

from collectors import (
    COLLECTORS,
    UNAVAILABLE,
    AccountRecord,
    AccountVanished,
    CommandError,
    GroupCollector,
    PasswdStatusCollector,
    PrivilegedCommandFailed,
    SourceUnavailable,
    iter_accounts,
    load_credential_store,
    lookup_account,
)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_POLICY: dict[str, Any] = {
    "meta": {
        "organization": "Unknown",
        "version": "1.0",
    },
    "accounts": {
        "human_uid_min": 1000,
        # 65534 is conventionally "nobody"
        "uid_max": 65533,
        "passwd_file": "/etc/passwd",
        "shadow_file": "/etc/shadow",
        "login_shells": ["bash", "sh", "zsh", "ksh", "dash", "ash"],
        "no_home_sentinels": ["/nonexistent"],
    },
    "output": {
        "directory": ".",
        "human_file": "human_users.txt",
        "system_file": "system_users.txt",
    },
    "audit": {
        "timeout_seconds": 30,
    },
}


def load_policy(policy_path: str | None = None) -> dict[str, Any]:
    policy = copy.deepcopy(DEFAULT_POLICY)
    if policy_path is None:
        return policy

    with open(policy_path) as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError("Policy must be a YAML mapping")

    for key, section in loaded.items():
        if key not in policy:
            raise ValueError(f"Policy has unknown key: {key}")
        if not isinstance(section, dict):
            raise ValueError(f"Policy section '{key}' must be a mapping")
        policy[key].update(section)

    accounts = policy["accounts"]
    if int(accounts["human_uid_min"]) > int(accounts["uid_max"]):
        raise ValueError("accounts.human_uid_min must not exceed accounts.uid_max")

    for key in ("login_shells", "no_home_sentinels"):
        value = accounts[key]
        if not isinstance(value, list) or not value or \
                not all(isinstance(item, str) and item for item in value):
            raise ValueError(f"accounts.{key} must be a non-empty list of strings")

    return policy


class LocalExecutor:
    def __init__(self, timeout: int = 30):
        self.timeout = timeout

    def run(self, command: str) -> str:
        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise CommandError(command, -1, "timed out") from e
        if result.returncode != 0:
            raise CommandError(command, result.returncode, result.stdout + result.stderr)
        return result.stdout

    def interactive(self, command: str) -> int:
        # Inherits the terminal, passwd prompts for the new password itself
        return subprocess.run(command, shell=True).returncode


class PrivilegedExecutor:
    """Prefixes every command with a privilege-escalation wrapper."""

    def __init__(self, inner, prefix: str = "sudo"):
        self.inner = inner
        self.prefix = prefix

    def wrap(self, command: str) -> str:
        return f"{self.prefix} {command}"

    def interactive(self, command: str) -> int:
        return self.inner.interactive(self.wrap(command))


def build_privileged_executor(executor, euid: int | None = None):
    if euid is None:
        euid = os.geteuid()
    if euid == 0:
        return executor
    return PrivilegedExecutor(executor)


class CredentialStatus(Enum):
    LOCKED = "locked"
    SET_AND_USABLE = "set_and_usable"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CredentialReading:
    status: CredentialStatus
    # Which tier answered; None when no source could
    source: str | None = None
    raw: str = ""

    @property
    def confirmed(self) -> bool:
        return self.source is not None

    def describe(self) -> str:
        if self.source is None:
            return f"status unknown (no source answered: {self.raw or 'no output'})"
        if self.raw:
            return f"status unknown ({self.source} reported {self.raw})"
        return f"status unknown (empty password field in {self.source})"


LOCKED_MARKERS = ("!", "*")


def classify_shadow_field(password_field: str) -> CredentialStatus:
    if password_field.startswith(LOCKED_MARKERS):
        return CredentialStatus.LOCKED
    if password_field == "":
        return CredentialStatus.UNKNOWN
    return CredentialStatus.SET_AND_USABLE


class PasswdStatusResolver:
    source = "passwd -S"

    STATUS_MAP = {
        "P": CredentialStatus.SET_AND_USABLE,
        "PS": CredentialStatus.SET_AND_USABLE,
        "L": CredentialStatus.LOCKED,
        "LK": CredentialStatus.LOCKED,
        # No password: not flaggable, but not locked either
        "NP": CredentialStatus.UNKNOWN,
    }

    def __init__(self, executor):
        self.executor = executor

    def resolve(self, name: str) -> CredentialReading:
        result = PasswdStatusCollector(name).execute(self.executor, name)
        if not result.success:
            return CredentialReading(CredentialStatus.UNKNOWN, None, result.error or "")
        code = result.parsed_data["status"]
        return CredentialReading(self.STATUS_MAP[code], self.source, code)


class ShadowResolver:
    def __init__(self, store: dict[str, str], fallback, shadow_path: str = "/etc/shadow"):
        self.store = store
        self.fallback = fallback
        self.source = str(shadow_path)

    def resolve(self, name: str) -> CredentialReading:
        password_field = self.store.get(name)
        if password_field is None:
            return self.fallback.resolve(name)

        status = classify_shadow_field(password_field)
        # Never carry the hash itself past this point
        raw = password_field[:1] if status is CredentialStatus.LOCKED else ""
        return CredentialReading(status, self.source, raw)


def build_resolver(store, executor, shadow_path: str = "/etc/shadow"):
    fallback = PasswdStatusResolver(executor)
    if store is UNAVAILABLE:
        return fallback
    return ShadowResolver(store, fallback, shadow_path)


@dataclass
class ClassificationBucket:
    human: list[str]
    system: list[str]
    records: dict[str, AccountRecord]
    excluded: list[str] = field(default_factory=list)

    @property
    def system_records(self) -> list[AccountRecord]:
        return [self.records[name] for name in self.system]


class Classifier:
    def __init__(self, human_min: int = 1000, uid_max: int = 65533):
        self.human_min = int(human_min)
        self.uid_max = int(uid_max)

    def classify(self, records: Iterable[AccountRecord]) -> ClassificationBucket:
        by_name: dict[str, AccountRecord] = {}
        for record in records:
            # Duplicate names collapse onto the first entry seen
            by_name.setdefault(record.name, record)

        human = sorted(
            name for name, r in by_name.items()
            if self.human_min <= r.uid <= self.uid_max
        )
        system = sorted(name for name, r in by_name.items() if r.uid < self.human_min)
        excluded = sorted(name for name, r in by_name.items() if r.uid > self.uid_max)

        return ClassificationBucket(
            human=human,
            system=system,
            records=by_name,
            excluded=excluded
        )


class IssueKind(Enum):
    LOGIN_SHELL_PRESENT = "login_shell_present"
    HOME_MISSING_OR_INVALID = "home_missing_or_invalid"
    CREDENTIAL_USABLE = "credential_usable"


ISSUE_TEMPLATES = {
    IssueKind.LOGIN_SHELL_PRESENT: "has login shell ({evidence})",
    IssueKind.HOME_MISSING_OR_INVALID: "home missing or invalid ({evidence})",
    IssueKind.CREDENTIAL_USABLE: "usable password ({evidence})",
}


@dataclass(frozen=True)
class Issue:
    kind: IssueKind
    evidence: str

    @property
    def description(self) -> str:
        return ISSUE_TEMPLATES[self.kind].format(evidence=self.evidence)


@dataclass
class AccountAssessment:
    record: AccountRecord
    credential: CredentialReading
    issues: list[Issue] = field(default_factory=list)

    @property
    def kinds(self) -> list[IssueKind]:
        return [issue.kind for issue in self.issues]

    @property
    def issue_summary(self) -> str:
        return ", ".join(issue.description for issue in self.issues)


class MisconfigurationDetector:
    def __init__(
        self,
        resolver,
        login_shells: Iterable[str] = ("bash", "sh", "zsh", "ksh", "dash", "ash"),
        no_home_sentinels: Iterable[str] = ("/nonexistent",)
    ):
        self.resolver = resolver
        shells = "|".join(re.escape(shell) for shell in login_shells)
        self.login_shell_re = re.compile(rf"/({shells})$")
        self.no_home_sentinels = set(no_home_sentinels)

    def check_shell(self, record: AccountRecord) -> Issue | None:
        if self.login_shell_re.search(record.shell):
            return Issue(IssueKind.LOGIN_SHELL_PRESENT, record.shell)
        return None

    def check_home(self, record: AccountRecord) -> Issue | None:
        home = record.home
        if not home or home in self.no_home_sentinels or not Path(home).is_dir():
            return Issue(IssueKind.HOME_MISSING_OR_INVALID, home)
        return None

    def check_credential(self, reading: CredentialReading) -> Issue | None:
        if reading.status is not CredentialStatus.SET_AND_USABLE:
            return None
        evidence = f"{reading.status.value} per {reading.source}"
        if reading.raw:
            evidence += f": {reading.raw}"
        return Issue(IssueKind.CREDENTIAL_USABLE, evidence)

    def assess(self, record: AccountRecord) -> AccountAssessment:
        reading = self.resolver.resolve(record.name)
        # All rules run, declaration order is report order
        checks = (
            self.check_shell(record),
            self.check_home(record),
            self.check_credential(reading),
        )
        return AccountAssessment(
            record=record,
            credential=reading,
            issues=[issue for issue in checks if issue is not None]
        )

    def scan(self, bucket: ClassificationBucket, progress: bool = True) -> list[AccountAssessment]:
        records = bucket.system_records
        iterator = tqdm(
            records,
            desc="Scanning system accounts",
            leave=False,
            disable=not (progress and sys.stderr.isatty())
        )
        return [self.assess(record) for record in iterator]


class Step(Enum):
    START = "start"
    ASK_ROTATE = "ask_rotate"
    ROTATING = "rotating"
    SKIP_ROTATE = "skip_rotate"
    SHOW_GROUPS = "show_groups"
    ASK_LOCK = "ask_lock"
    LOCKING = "locking"
    SKIP_LOCK = "skip_lock"
    DONE = "done"


class Answer(Enum):
    YES = "yes"
    NO = "no"
    INVALID = "invalid"


def parse_answer(reply: str | None) -> Answer:
    # None means end of input, which defaults like an empty reply
    if reply is None:
        return Answer.NO
    reply = reply.strip()
    if not reply or reply[0] in "Nn":
        return Answer.NO
    if reply[0] in "Yy":
        return Answer.YES
    return Answer.INVALID


@dataclass
class RemediationDecision:
    name: str
    password_rotated: bool = False
    account_locked: bool = False
    skipped: bool = False
    groups: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    completed: bool = False

    @property
    def summary(self) -> str:
        if self.skipped:
            return "skipped (account not found)"
        text = (
            f"password rotated: {'yes' if self.password_rotated else 'no'}, "
            f"locked: {'yes' if self.account_locked else 'no'}"
        )
        if self.failures:
            text += f", failures: {'; '.join(self.failures)}"
        if not self.completed:
            text += " (interrupted)"
        return text


class RemediationWorkflow:
    def __init__(
        self,
        executor,
        privileged,
        input_func: Callable[[str], str] = input,
        passwd_path: str = "/etc/passwd"
    ):
        self.executor = executor
        self.privileged = privileged
        self.input_func = input_func
        self.passwd_path = passwd_path

    def ask(self, prompt: str) -> bool:
        while True:
            try:
                reply = self.input_func(prompt)
            except EOFError:
                print()
                reply = None
            answer = parse_answer(reply)
            if answer is Answer.INVALID:
                print("Please answer y or n.")
                continue
            return answer is Answer.YES

    def run_privileged(self, command: str) -> None:
        returncode = self.privileged.interactive(command)
        if returncode != 0:
            raise PrivilegedCommandFailed(command, returncode)

    def show_groups(self, name: str) -> list[str]:
        print(f"Groups for {name}:")
        for collector in (GroupCollector(name), GroupCollector(name, use_groups_command=True)):
            result = collector.execute(self.executor, name)
            groups = result.parsed_data.get("groups") if result.success else None
            if groups:
                for group in groups:
                    print(f"  - {group}")
                return groups
        print("  (could not determine groups)")
        return []

    def remediate(self, name: str, decision: RemediationDecision | None = None) -> RemediationDecision:
        if decision is None:
            decision = RemediationDecision(name=name)
        quoted = shlex.quote(name)
        step = Step.START

        while step is not Step.DONE:
            if step is Step.START:
                try:
                    record = lookup_account(self.executor, name, self.passwd_path)
                except AccountVanished:
                    print(f"User '{name}' not found on system, skipping.")
                    decision.skipped = True
                    step = Step.DONE
                    continue
                print()
                print(f"User: {name}")
                print(f"UID:{record.uid} HOME:{record.home} SHELL:{record.shell}")
                step = Step.ASK_ROTATE

            elif step is Step.ASK_ROTATE:
                confirmed = self.ask(f"Change password for {name}? [y/N]: ")
                step = Step.ROTATING if confirmed else Step.SKIP_ROTATE

            elif step is Step.ROTATING:
                print(f"Changing password for {name}...")
                try:
                    self.run_privileged(f"passwd {quoted}")
                    decision.password_rotated = True
                except PrivilegedCommandFailed as e:
                    print(f"[!] passwd failed for {name} ({e}); you may need root/sudo.")
                    decision.failures.append(f"password rotation failed ({e.returncode})")
                step = Step.SHOW_GROUPS

            elif step is Step.SKIP_ROTATE:
                print(f"Skipping password change for {name}.")
                step = Step.SHOW_GROUPS

            elif step is Step.SHOW_GROUPS:
                decision.groups = self.show_groups(name)
                step = Step.ASK_LOCK

            elif step is Step.ASK_LOCK:
                confirmed = self.ask(f"Lock account {name}? [y/N]: ")
                step = Step.LOCKING if confirmed else Step.SKIP_LOCK

            elif step is Step.LOCKING:
                print(f"Locking account {name}...")
                try:
                    self.run_privileged(f"passwd -l {quoted}")
                    decision.account_locked = True
                    print(f"[+] {name} locked.")
                except PrivilegedCommandFailed as e:
                    print(f"[!] Failed to lock {name} ({e}); check permissions.")
                    decision.failures.append(f"lock failed ({e.returncode})")
                step = Step.DONE

            elif step is Step.SKIP_LOCK:
                print(f"Leaving {name} unlocked.")
                step = Step.DONE

        decision.completed = True
        return decision

    def run(self, names: Iterable[str],
            decisions: list[RemediationDecision] | None = None) -> list[RemediationDecision]:
        # Each decision is recorded before its dialogue starts, so a caller
        # holding the list still sees partial outcomes after an interrupt
        if decisions is None:
            decisions = []
        for name in names:
            if not name:
                continue
            decision = RemediationDecision(name=name)
            decisions.append(decision)
            self.remediate(name, decision)
        return decisions


@dataclass
class AuditReport:
    detected_on: str
    human: list[str]
    system_records: list[AccountRecord]
    assessments: list[AccountAssessment]
    excluded: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.summary:
            self._compute_summary()

    @property
    def flagged(self) -> list[AccountAssessment]:
        return [a for a in self.assessments if a.issues]

    @property
    def unverified(self) -> list[AccountAssessment]:
        return [a for a in self.assessments if a.credential.status is CredentialStatus.UNKNOWN]

    def _compute_summary(self):
        by_issue = {kind.value: 0 for kind in IssueKind}
        for assessment in self.assessments:
            for kind in assessment.kinds:
                by_issue[kind.value] += 1

        self.summary = {
            "human_accounts": len(self.human),
            "system_accounts": len(self.system_records),
            "excluded_accounts": len(self.excluded),
            "flagged": len(self.flagged),
            "unverified_credentials": len(self.unverified),
            "by_issue": by_issue,
        }


class Reporter:
    def __init__(self, template_dir: str | Path = TEMPLATE_DIR):
        self.template_dir = Path(template_dir)
        # Plain-text artifacts, nothing to escape
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            trim_blocks=True,
            keep_trailing_newline=True,
            autoescape=False
        )

    def render(self, template_name: str, output_path: str | Path, mode: str = "w", **context) -> str:
        template = self.env.get_template(template_name)
        rendered = template.render(**context)

        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, mode, encoding="utf-8") as f:
            f.write(rendered)

        return str(output)

    def write_human(self, report: AuditReport, output_path: str | Path) -> str:
        return self.render("human_users.txt.j2", output_path, report=report)

    def write_system(self, report: AuditReport, output_path: str | Path) -> str:
        return self.render("system_users.txt.j2", output_path, report=report)

    def append_remediation(self, decisions: list[RemediationDecision], output_path: str | Path) -> str:
        return self.render(
            "remediation.txt.j2",
            output_path,
            mode="a",
            decisions=decisions,
            performed_on=datetime.now().strftime("%a %b %d %H:%M:%S %Y")
        )


class Auditor:
    def __init__(self, policy_path: str | None = None, output_dir: str | None = None,
                 executor=None, euid: int | None = None, template_dir: str | Path = TEMPLATE_DIR):
        self.policy_path = policy_path
        self.policy = load_policy(policy_path)
        accounts = self.policy["accounts"]
        output = self.policy["output"]

        self.executor = executor or LocalExecutor(timeout=self.policy["audit"]["timeout_seconds"])
        self.privileged = build_privileged_executor(self.executor, euid)
        self.classifier = Classifier(accounts["human_uid_min"], accounts["uid_max"])
        self.reporter = Reporter(template_dir)

        directory = Path(output_dir or output["directory"])
        self.human_path = directory / output["human_file"]
        self.system_path = directory / output["system_file"]

    def dry_run(self):
        accounts = self.policy["accounts"]
        print("=" * 70)
        print("DRY RUN - Planned Account Audit")
        print("=" * 70)
        print(f"\nPolicy: {self.policy_path or 'built-in defaults'}")
        print(f"Organization: {self.policy['meta'].get('organization', 'Unknown')}")
        print(f"\nHuman accounts: {accounts['human_uid_min']} <= uid <= {accounts['uid_max']}")
        print(f"System accounts: uid < {accounts['human_uid_min']}")
        print(f"Login shells flagged: {', '.join(accounts['login_shells'])}")
        print(f"Credential store: {accounts['shadow_file']} (fallback: passwd -S)")

        print(f"\nCollectors ({len(COLLECTORS)}):")
        for name, collector in COLLECTORS.items():
            print(f"  - {name}: {collector.description}")

        escalation = "none (running as root)" if self.privileged is self.executor else self.privileged.prefix
        print(f"\nPrivilege escalation: {escalation}")
        print(f"Artifacts: {self.human_path}, {self.system_path}")
        print(f"{'=' * 70}")

    def classify(self, notices: list[str] | None = None) -> ClassificationBucket:
        passwd_file = self.policy["accounts"]["passwd_file"]
        return self.classifier.classify(iter_accounts(self.executor, passwd_file, notices))

    def audit(self, progress: bool = True) -> AuditReport:
        accounts = self.policy["accounts"]
        print(f"[*] Building account lists (human uid >= {accounts['human_uid_min']})...")
        warnings = []
        bucket = self.classify(warnings)

        shadow_file = accounts["shadow_file"]
        store = load_credential_store(shadow_file)
        if store is UNAVAILABLE:
            warning = f"Warning: cannot read {shadow_file} - some password checks will be skipped."
            print(f"[!] {warning}")
            warnings.append(warning)

        print("[*] Scanning system accounts for potentially invalid configurations...")
        detector = MisconfigurationDetector(
            build_resolver(store, self.executor, shadow_file),
            accounts["login_shells"],
            accounts["no_home_sentinels"]
        )
        assessments = detector.scan(bucket, progress)

        return AuditReport(
            detected_on=datetime.now().strftime("%a %b %d %H:%M:%S %Y"),
            human=bucket.human,
            system_records=bucket.system_records,
            assessments=assessments,
            excluded=bucket.excluded,
            warnings=warnings
        )

    def generate_report(self, report: AuditReport) -> dict[str, str]:
        result = {
            "human": self.reporter.write_human(report, self.human_path),
            "system": self.reporter.write_system(report, self.system_path),
        }
        print(f"[+] Human users: {result['human']}")
        print(f"[+] System users: {result['system']}")
        return result

    def remediate(self, report: AuditReport,
                  input_func: Callable[[str], str] = input) -> list[RemediationDecision]:
        workflow = RemediationWorkflow(
            self.executor,
            self.privileged,
            input_func=input_func,
            passwd_path=self.policy["accounts"]["passwd_file"]
        )
        print(f"[*] Now iterating human users in {self.human_path}...")
        decisions = []
        try:
            workflow.run(report.human, decisions)
        finally:
            self.reporter.append_remediation(decisions, self.system_path)
        return decisions


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Lachesis: local account audit and remediation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full audit with interactive remediation
  python lachesis.py

  # Custom policy and output directory
  python lachesis.py --policy policy.yaml --output reports

  # Write the artifacts only
  python lachesis.py --report-only

  # Show what will be checked
  python lachesis.py --dry-run
        """
    )

    parser.add_argument(
        "--policy", "-p",
        default=None,
        help="Path to policy YAML (default: built-in defaults)"
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory for the artifacts (default: policy output.directory)"
    )
    parser.add_argument(
        "--report-only",
        action="store_true",
        help="Write the artifacts and skip the remediation dialogue"
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only validate policy syntax"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show planned checks without execution"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar"
    )

    args = parser.parse_args(argv)

    try:
        auditor = Auditor(args.policy, output_dir=args.output)
        print(f"[+] Loaded policy: {args.policy or 'built-in defaults'}")

        if args.validate_only:
            print("\n[+] Policy validation passed.")
            return 0

        if args.dry_run:
            auditor.dry_run()
            return 0

        print("Starting user audit...")
        report = auditor.audit(progress=not args.no_progress)
        auditor.generate_report(report)

        print(f"\n{'='*60}")
        print("AUDIT SUMMARY")
        print(f"{'='*60}")
        print(f"Human accounts:   {report.summary['human_accounts']}")
        print(f"System accounts:  {report.summary['system_accounts']}")
        print(f"Flagged:          {report.summary['flagged']}")
        print(f"Unverified creds: {report.summary['unverified_credentials']}")

        if not report.human:
            print(f"\nNo human users found in {auditor.human_path}. Exiting.")
            return 0

        if args.report_only:
            print("\n[*] Remediation skipped (--report-only).")
            return 0

        decisions = auditor.remediate(report)
        failed = [d for d in decisions if d.failures]

        print("\nAudit complete.")
        print(f"Human users written to: {auditor.human_path}")
        print(f"System users written to: {auditor.system_path}")
        if failed:
            print(f"[!] {len(failed)} account(s) had failed remediation steps, see {auditor.system_path}")
        print(f"Review {auditor.system_path} carefully for the 'INVALID_SYSTEM_ACCOUNTS' section.")
        return 0

    except SourceUnavailable as e:
        print(f"[!] No account data obtainable: {e}")
        return 2

    except KeyboardInterrupt:
        print("\n[!] Interrupted.")
        return 130

    except Exception as e:
        print(f"[!] Error: {e}")
        import traceback
        traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
