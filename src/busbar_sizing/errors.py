"""
Error Taxonomy
==============

Every failure of the calculation core is a deterministic rejection of its input.
Nothing here is transient, so callers fix the input and call again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True)
class FieldIssue:
    """One offending input field and why it was rejected."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class BusbarCalculationError(Exception):
    """Base class for all errors raised by the busbar calculation core."""

    code = "BusbarCalculationError"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class BusbarValidationError(BusbarCalculationError, ValueError):
    """
    One or more input fields are missing, non-numeric or out of range.

    Carries every violation found, not just the first one.
    """

    code = "ValidationError"

    def __init__(self, issues: Iterable[FieldIssue]):
        self.issues = tuple(issues)
        if self.issues:
            detail = "; ".join(f"{i.field}: {i.message}" for i in self.issues)
        else:
            detail = "invalid input"
        super().__init__(f"Invalid busbar input ({len(self.issues)} issue(s)): {detail}")

    @property
    def fields(self) -> List[str]:
        return [issue.field for issue in self.issues]

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, model: Optional[Type[BaseModel]] = None
    ) -> "BusbarValidationError":
        """
        Convert a pydantic error, one issue per failing location.

        Errors raised while validating a default are located by field name, not
        alias; passing ``model`` maps such names back to their JSON alias.
        """
        fields = model.model_fields if model is not None else {}
        issues = []
        for err in exc.errors():
            parts = [str(part) for part in err.get("loc", ())]
            if parts and parts[0] in fields and fields[parts[0]].alias:
                parts[0] = fields[parts[0]].alias
            loc = ".".join(parts)
            issues.append(FieldIssue(field=loc or "input", message=err.get("msg", "invalid value")))
        return cls(issues)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = [issue.to_dict() for issue in self.issues]
        return data


class UnknownMaterialError(BusbarCalculationError, KeyError):
    """The material key is not in the material property table."""

    code = "UnknownMaterial"

    def __init__(self, material: Any, known: Sequence[str] = ()):
        self.material = material
        self.known = tuple(known)
        msg = f"Unknown material: {material!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidSimulationParametersError(BusbarCalculationError, ValueError):
    """Simulation duration or time-step count is outside the allowed range."""

    code = "InvalidSimulationParameters"


class MissingPrerequisiteDataError(BusbarCalculationError):
    """Transient simulation was invoked without a usable busbar description."""

    code = "MissingPrerequisiteData"

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            "Short-circuit simulation requires busbar data with: " + ", ".join(self.missing)
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["missing"] = list(self.missing)
        return data
