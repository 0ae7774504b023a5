"""Problems reported by collect-all rule-source validation."""

from __future__ import annotations

from dataclasses import dataclass

from cookcritic.exceptions.rules import RuleLoadError


@dataclass(frozen=True)
class ValidationError:
    """One problem in a rule source, keyed by a stable ``RULE00N`` code.

    ``rule_code`` names the offending rule (``FC001``) when the problem
    belongs to a declared rule rather than to the file as a whole.
    """

    code: str
    path: str
    message: str
    line: int | None = None
    field: str = ""
    rule_code: str = ""
    hint: str = ""

    @classmethod
    def from_load_error(cls, exc: RuleLoadError) -> ValidationError:
        return cls(code=exc.error_code, path=exc.path, message=exc.message, line=exc.line, field=exc.field)

    @property
    def location(self) -> str:
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"

    def format(self) -> str:
        """Render as ``[CODE] path:line RULE message (hint)``."""
        parts = [f"[{self.code}]", self.location]
        if self.rule_code:
            parts.append(self.rule_code)
        parts.append(self.message)
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort by code, then path, line and field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.line or 0, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(e.format() for e in sort_errors(errors))
