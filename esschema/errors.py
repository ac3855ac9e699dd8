"""
Collecting and reporting schema validation findings.

The validator walks the expected schema depth-first and tells the collector where it is
(index, mapping, property path, multi-field). Every finding is stored under that location,
so the final report can list all problems for one location together.
"""

from contextlib import contextmanager
from typing import Iterator

from pydantic import BaseModel, ConfigDict

from esschema import messages

PATH_SEPARATOR = "."


class ValidationContext(BaseModel):
    """The location of a finding. Unset components are None"""

    model_config = ConfigDict(frozen=True)

    index_name: str | None = None
    mapping_name: str | None = None
    path: str | None = None
    field_name: str | None = None

    def intro(self) -> str:
        if self.field_name:
            return messages.error_intro(self.index_name, self.mapping_name, self.path, self.field_name)
        elif self.path:
            return messages.error_intro(self.index_name, self.mapping_name, self.path)
        elif self.mapping_name:
            return messages.error_intro(self.index_name, self.mapping_name)
        else:
            return messages.error_intro(self.index_name)


Findings = dict[ValidationContext, list[str]]


class SchemaValidationError(ValueError):
    """Raised (once per validation run) if the actual schema does not match the expected schema"""

    def __init__(self, report: str, findings: Findings):
        super().__init__(f"Schema validation failed:\n{report}")
        self.report = report
        self.findings = findings


def format_report(findings: Findings) -> str:
    """One intro line per location, followed by its messages indented with a tab"""
    lines = []
    for context, context_messages in findings.items():
        lines.append(context.intro())
        lines.extend(f"\t{message}" for message in context_messages)
    return "\n".join(lines)


class ValidationErrorCollector:
    """
    Accumulates findings for a single validation run. Not thread safe: create one per run.

    Use the context managers (index, mapping, property, field) rather than the raw setters,
    so the location is restored however the nested block exits.
    """

    def __init__(self) -> None:
        self._index_name: str | None = None
        self._mapping_name: str | None = None
        self._path: list[str] = []
        self._field_name: str | None = None
        self._messages: Findings = {}

    def set_index_name(self, name: str | None) -> None:
        self._index_name = name

    def set_mapping_name(self, name: str | None) -> None:
        self._mapping_name = name

    def set_field_name(self, name: str | None) -> None:
        self._field_name = name

    def push_property_name(self, name: str) -> None:
        self._path.append(name)

    def pop_property_name(self) -> None:
        self._path.pop()

    @contextmanager
    def index(self, name: str) -> Iterator[None]:
        previous = self._index_name
        self.set_index_name(name)
        try:
            yield
        finally:
            self.set_index_name(previous)

    @contextmanager
    def mapping(self, name: str) -> Iterator[None]:
        previous = self._mapping_name
        self.set_mapping_name(name)
        try:
            yield
        finally:
            self.set_mapping_name(previous)

    @contextmanager
    def property(self, name: str) -> Iterator[None]:
        self.push_property_name(name)
        try:
            yield
        finally:
            self.pop_property_name()

    @contextmanager
    def field(self, name: str) -> Iterator[None]:
        previous = self._field_name
        self.set_field_name(name)
        try:
            yield
        finally:
            self.set_field_name(previous)

    def current_context(self) -> ValidationContext:
        return ValidationContext(
            index_name=self._index_name,
            mapping_name=self._mapping_name,
            path=PATH_SEPARATOR.join(self._path) or None,
            field_name=self._field_name,
        )

    def add_error(self, message: str) -> None:
        self._messages.setdefault(self.current_context(), []).append(message)

    def drain(self) -> Findings:
        """Return all findings (grouped by location, in the order they were found) and reset the collector"""
        result, self._messages = self._messages, {}
        return result
