from typing import Any, Dict, List, Optional
from dataclasses import dataclass

@dataclass
class CallArg:
    """One argument of an intercepted call."""
    value: Any

@dataclass
class CallOutcome:
    """What the caller of an intercepted surface receives."""
    result: Any
    executed: bool  # whether the real method ran

class JavaObject:
    def __init__(self, class_name: str):
        self.class_name = class_name
        self.fields: Dict[str, Any] = {}
        # Special handling for strings
        if class_name == "Ljava/lang/String;":
            self.internal_value = ""
    
    def is_list(self) -> bool:
        return hasattr(self, '_list_data')
    
    def __repr__(self):
        if self.is_list():
            return f"{self.class_name}{self._list_data!r}"
        if hasattr(self, 'internal_value'):
            return f"{self.class_name}('{self.internal_value}')"
        return f"Object({self.class_name})"


def java_string(value: str) -> JavaObject:
    str_obj = JavaObject("Ljava/lang/String;")
    str_obj.internal_value = value
    return str_obj


def java_list(items: Optional[List[Any]] = None, class_name: str = "Ljava/util/ArrayList;") -> JavaObject:
    list_obj = JavaObject(class_name)
    list_obj._list_data = list(items) if items else []
    return list_obj
