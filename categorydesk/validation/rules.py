"""
CategoryDesk Client - Validation Rules Module

Declarative per-field rule chains. Each field owns an ordered list of
predicate + message pairs; a schema evaluates every field and collects
the messages of the rules that fail.

Author: CategoryDesk Project
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence


@dataclass(frozen=True)
class Rule:
    """
    A single check on one field value.

    Attributes:
        predicate: Returns True when the value passes
        message: Human-readable message reported on failure
        stops_chain: If the rule fails, skip the remaining rules of the field
    """
    predicate: Callable[[Any], bool]
    message: str
    stops_chain: bool = False

    def passes(self, value: Any) -> bool:
        return bool(self.predicate(value))


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def required(message: str) -> Rule:
    """Value must be present and not only whitespace."""
    return Rule(lambda value: not _is_blank(value), message, stops_chain=True)


def min_length(length: int, message: str) -> Rule:
    return Rule(lambda value: len(value or "") >= length, message)


def contains(pattern: str, message: str) -> Rule:
    """Value must contain at least one match of pattern (ASCII classes)."""
    compiled = re.compile(pattern, re.ASCII)
    return Rule(lambda value: compiled.search(value or "") is not None, message)


def matches(pattern: str, message: str) -> Rule:
    """Whole value must match pattern."""
    compiled = re.compile(pattern, re.ASCII)
    return Rule(lambda value: compiled.fullmatch(value or "") is not None, message)


_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _parses_as_date(value: Any) -> bool:
    if isinstance(value, date):
        return True
    text = str(value).strip()
    if not _ISO_DATE.fullmatch(text):
        return False
    try:
        datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def is_date(message: str) -> Rule:
    """Value must be an ISO calendar date (YYYY-MM-DD)."""
    return Rule(_parses_as_date, message)


class ValidationErrors(Mapping):
    """
    Field name -> message mapping produced by one validation pass.

    Indexing a field gives its first failing message (the one shown
    inline); all() gives every failing message in rule order. A field
    that is absent currently passes.
    """

    def __init__(self, failures: Optional[Dict[str, List[str]]] = None):
        self._failures: Dict[str, List[str]] = {
            name: list(messages) for name, messages in (failures or {}).items() if messages
        }

    def __getitem__(self, field_name: str) -> str:
        return self._failures[field_name][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._failures!r})"

    def all(self, field_name: str) -> List[str]:
        return list(self._failures.get(field_name, []))

    def fields(self) -> List[str]:
        return list(self._failures)

    def messages(self) -> List[str]:
        """Every failing message, field by field."""
        return [message for messages in self._failures.values() for message in messages]


def resolve_path(values: Mapping, path: str) -> Any:
    """
    Look up a dotted field path such as "address.zipCode".

    Returns None when any segment is missing.
    """
    current: Any = values
    for segment in path.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current


class ValidationSchema:
    """
    Ordered rule chains keyed by field path.

    Every field is evaluated on each call; failures never short-circuit
    across fields. Within a field a failing rule with stops_chain set
    ends that field's evaluation.
    """

    def __init__(self, fields: Dict[str, Sequence[Rule]]):
        self.fields: Dict[str, List[Rule]] = {name: list(rules) for name, rules in fields.items()}

    def validate_field(self, field_name: str, value: Any) -> List[str]:
        failures = []
        for rule in self.fields.get(field_name, []):
            if rule.passes(value):
                continue
            failures.append(rule.message)
            if rule.stops_chain:
                break
        return failures

    def validate(self, values: Mapping) -> ValidationErrors:
        """
        Validate a draft payload.

        Args:
            values: Draft in wire shape (nested dicts for grouped fields)

        Returns:
            ValidationErrors; empty when every rule passes
        """
        failures = {}
        for field_name in self.fields:
            messages = self.validate_field(field_name, resolve_path(values, field_name))
            if messages:
                failures[field_name] = messages
        return ValidationErrors(failures)
