"""Interception rule model.

A rule binds one platform surface to a transformer. Replacing rules run
instead of the real method; every other kind runs on the real result.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List

from .surfaces import Surface


class ActionKind(Enum):
    REPLACE_RETURN = "replace_return"
    STRIP_KEY = "strip_key"
    FILTER_LIST = "filter_list"
    MUTATE_FIELD = "mutate_field"


@dataclass(frozen=True, eq=False)
class Rule:
    surface: Surface
    action: ActionKind
    transformer: Callable[..., Any]
    payload: Dict[str, Any] = field(default_factory=dict)
    # Consult host.supports() before binding
    version_gated: bool = False

    @property
    def signature(self) -> str:
        return self.surface.signature

    @property
    def replaces(self) -> bool:
        return self.action is ActionKind.REPLACE_RETURN

    @property
    def name(self) -> str:
        return getattr(self.transformer, '__name__', repr(self.transformer))

    def transform(self, args: List, result: Any) -> Any:
        return self.transformer(args, result, **self.payload)

    def __repr__(self):
        return f"Rule({self.signature} -> {self.name})"


def validate_rule_table(rules: Iterable[Rule]) -> List[Rule]:
    """Check that no two rules target the same surface.

    Rules are applied in no particular order, which is only sound when their
    surfaces are disjoint.

    Raises:
        ValueError: on a duplicate signature
    """
    seen = set()
    checked = []
    for rule in rules:
        if rule.signature in seen:
            raise ValueError(f"Duplicate rule for {rule.signature}")
        seen.add(rule.signature)
        checked.append(rule)
    return checked
