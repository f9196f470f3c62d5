"""Interception engine: binds the rule table and applies rules to calls."""
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional
if TYPE_CHECKING:
    from .host import InterceptionHost, BindingHandle

from .errors import HostBindingFailure, UnavailableSurface
from .rules import Rule
from .types import CallOutcome
from .utils import debug_log, hook_log, log
from .whitelist import is_exempt


class BindOutcome(Enum):
    BOUND = "bound"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


@dataclass
class BindResult:
    rule: Rule
    outcome: BindOutcome
    handle: Optional['BindingHandle'] = None
    error: Optional[Exception] = None


@dataclass
class AttachReport:
    """Per-rule outcome of attaching to one process."""
    process_identity: Optional[str]
    skipped: bool = False
    results: List[BindResult] = field(default_factory=list)

    def _with(self, outcome: BindOutcome) -> List[BindResult]:
        return [r for r in self.results if r.outcome is outcome]

    @property
    def bound(self) -> List[BindResult]:
        return self._with(BindOutcome.BOUND)

    @property
    def unavailable(self) -> List[BindResult]:
        return self._with(BindOutcome.UNAVAILABLE)

    @property
    def failed(self) -> List[BindResult]:
        return self._with(BindOutcome.FAILED)

    def signatures(self, outcome: BindOutcome = BindOutcome.BOUND) -> List[str]:
        return [r.rule.signature for r in self._with(outcome)]


def _default_rules() -> List[Rule]:
    from .hooks.table import RULE_TABLE
    return RULE_TABLE


def bind_rule(process_identity: str, rule: Rule, host: 'InterceptionHost') -> BindResult:
    """Bind one rule through the host, turning host errors into an outcome."""
    if rule.version_gated and not host.supports(rule.surface):
        debug_log(f"{rule.signature} not supported on API {host.sdk_int}, skipping")
        return BindResult(rule, BindOutcome.UNAVAILABLE)
    try:
        handle = host.bind(process_identity, rule)
    except UnavailableSurface as e:
        debug_log(f"{rule.signature} unavailable: {e}")
        return BindResult(rule, BindOutcome.UNAVAILABLE, error=e)
    except Exception as e:
        failure = HostBindingFailure(rule.signature, e)
        hook_log(f"[{rule.surface.class_name}] Hook failed: {failure}")
        return BindResult(rule, BindOutcome.FAILED, error=failure)
    log(f"    Hooked {rule.signature} -> {rule.name}")
    return BindResult(rule, BindOutcome.BOUND, handle=handle)


def attach_all(process_identity: Optional[str], host: 'InterceptionHost',
               rules: Optional[Iterable[Rule]] = None,
               whitelist: Optional[Iterable[str]] = None) -> AttachReport:
    """Bind every rule for a process unless it is exempt.

    A missing or whitelisted process identity binds nothing. A rule whose
    surface is unavailable, or whose binding fails, is recorded and the rest
    still bind.

    Args:
        process_identity: Package / process name being loaded
        host: Interception host that installs the hooks
        rules: Rules to bind (RULE_TABLE if None)
        whitelist: Exempt identities (configured whitelist if None)
    """
    if not process_identity or is_exempt(process_identity, whitelist):
        debug_log(f"Skipping {process_identity!r}: whitelisted")
        return AttachReport(process_identity, skipped=True)

    if rules is None:
        rules = _default_rules()

    report = AttachReport(process_identity)
    for rule in rules:
        report.results.append(bind_rule(process_identity, rule, host))
    return report


def apply_rule(rule: Rule, args: List, real_call: Callable[[], Any]) -> CallOutcome:
    """Run one intercepted call through its rule.

    Replacing rules never invoke real_call. Other rules transform the real
    result. A transformer fault falls back to the real, untransformed result;
    errors raised by real_call itself belong to the app and propagate.
    """
    if rule.replaces:
        try:
            return CallOutcome(rule.transform(args, None), executed=False)
        except Exception as e:
            hook_log(f"{rule.name} failed on {rule.signature}: {e}")
            return CallOutcome(real_call(), executed=True)

    result = real_call()
    try:
        return CallOutcome(rule.transform(args, result), executed=True)
    except Exception as e:
        hook_log(f"{rule.name} failed on {rule.signature}: {e}")
        return CallOutcome(result, executed=True)
