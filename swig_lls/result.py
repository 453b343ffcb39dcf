from enum import Enum
from pathlib import Path
from typing import Optional, List, Dict, Any, Set


class ResultStatus(Enum):
    RESOLVED = "resolved"
    SKIPPED = "skipped"


class OverloadResult:
    """Outcome of emitting one overload of a function."""

    def __init__(
        self,
        status: ResultStatus,
        function_name: str,
        signature: str = '',
        reason: Optional[str] = None
    ):
        if not isinstance(status, ResultStatus):
            raise TypeError(f"status must be ResultStatus enum, got {type(status)}")

        self.status = status
        self.function_name = function_name
        self.signature = signature
        self.reason = reason

    @property
    def resolved(self) -> bool:
        return self.status == ResultStatus.RESOLVED

    def to_dict(self) -> Dict[str, Any]:
        result_dict = {
            'status': self.status.value,
            'function': self.function_name,
            'signature': self.signature
        }

        if self.reason is not None:
            result_dict['reason'] = self.reason

        return result_dict

    def __repr__(self) -> str:
        return f"OverloadResult(status={self.status.value}, function={self.function_name})"


class GenerationReport:
    """
    Collects everything a run produced besides the annotation lines:
    written files, per-overload outcomes, structural defects and the
    deduplicated set of native types that could not be resolved.
    """

    def __init__(self):
        self.files_written: List[Path] = []
        self.overload_results: List[OverloadResult] = []
        self.defects: List[str] = []
        self.unresolved_types: Set[str] = set()

    def add_overload(self, result: OverloadResult):
        self.overload_results.append(result)

    def add_defect(self, message: str):
        self.defects.append(message)

    @property
    def resolved_count(self) -> int:
        return sum(1 for r in self.overload_results if r.resolved)

    @property
    def skipped(self) -> List[OverloadResult]:
        return [r for r in self.overload_results if not r.resolved]

    def summary_lines(self) -> List[str]:
        lines = [
            f"Files written: {len(self.files_written)}",
            f"Overloads emitted: {self.resolved_count}, skipped: {len(self.skipped)}",
        ]
        for defect in self.defects:
            lines.append(f"Malformed declaration: {defect}")
        for type_name in sorted(self.unresolved_types):
            lines.append(f"Unresolved type: {type_name}")
        return lines

    def to_dict(self) -> Dict[str, Any]:
        return {
            'files_written': [str(p) for p in self.files_written],
            'overloads': [r.to_dict() for r in self.overload_results],
            'defects': list(self.defects),
            'unresolved_types': sorted(self.unresolved_types)
        }
