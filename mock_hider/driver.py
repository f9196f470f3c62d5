"""Registration driver: attaches the rule table once per loaded process."""
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional
if TYPE_CHECKING:
    from .host import HookRegistry, InterceptionHost

from .engine import AttachReport, attach_all
from .rules import Rule
from .utils import debug_log, log


class AttachState(Enum):
    UNATTACHED = "unattached"
    ATTACHING = "attaching"
    ATTACHED = "attached"  # at least one rule bound
    SKIPPED = "skipped"    # whitelisted or no identity
    FAILED = "failed"      # nothing could be bound


class RegistrationDriver:
    """Drives attach_all() from load-package events.

    Each process is attached at most once; later events for the same process
    return the first report, so no transformer is ever bound twice.
    """

    def __init__(self, host: 'InterceptionHost', rules: Optional[Iterable[Rule]] = None,
                 whitelist: Optional[Iterable[str]] = None):
        self.host = host
        self.rules: Optional[List[Rule]] = list(rules) if rules is not None else None
        self.whitelist = whitelist
        self._states: Dict[Optional[str], AttachState] = {}
        self._reports: Dict[Optional[str], AttachReport] = {}

    def install(self, host: Optional['HookRegistry'] = None) -> None:
        """Subscribe to the host's load-package event."""
        (host or self.host).add_load_listener(self.handle_load_package)

    def state(self, process_identity: Optional[str]) -> AttachState:
        return self._states.get(process_identity, AttachState.UNATTACHED)

    def report(self, process_identity: Optional[str]) -> Optional[AttachReport]:
        return self._reports.get(process_identity)

    def handle_load_package(self, process_identity: Optional[str]) -> AttachReport:
        """Attach to a freshly loaded process."""
        cached = self._reports.get(process_identity)
        if cached is not None:
            debug_log(f"{process_identity} already {self.state(process_identity).value}")
            return cached

        self._states[process_identity] = AttachState.ATTACHING
        report = attach_all(process_identity, self.host, self.rules, self.whitelist)

        if report.skipped:
            state = AttachState.SKIPPED
        elif report.bound:
            state = AttachState.ATTACHED
        else:
            state = AttachState.FAILED

        self._states[process_identity] = state
        self._reports[process_identity] = report
        log(f"[*] {process_identity}: {state.value} "
            f"({len(report.bound)} bound, {len(report.unavailable)} unavailable, "
            f"{len(report.failed)} failed)")
        return report
