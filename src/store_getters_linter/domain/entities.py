from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RootClassification(Enum):
    """What the root of a receiver chain turned out to be."""
    BOUND_PARAMETER = "bound_parameter"
    IMPLICIT_RECEIVER = "implicit_receiver"
    OTHER = "other"


@dataclass(frozen=True)
class SourceSpan:
    """
    Source range of a node.

    Lines are 1-based, columns are 0-based UTF-8 byte offsets (astroid positions).
    """
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def to_offsets(self, line_starts: list[int]) -> tuple[int, int]:
        """Absolute byte offsets of the span within the source the line table came from."""
        start = line_starts[self.start_line - 1] + self.start_col
        end = line_starts[self.end_line - 1] + self.end_col
        return (start, end)


@dataclass(frozen=True)
class TextEdit:
    """Replace the text covered by `span` with `replacement`."""
    span: SourceSpan
    replacement: str


@dataclass(frozen=True)
class Diagnostic:
    """A reported getter mutation, optionally carrying its autofix."""
    code: str
    symbol: str
    message: str
    method: str
    location: SourceSpan
    severity: str = "problem"
    fix: Optional[TextEdit] = None

    def format(self, path: str) -> str:
        loc = self.location
        return f"{path}:{loc.start_line}:{loc.start_col}: {self.code} ({self.symbol}) {self.message}"


@dataclass(frozen=True)
class FileReport:
    """Diagnostics produced for one file during one traversal session."""
    path: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fixed: bool = False
    parse_failed: bool = False

    @property
    def edits(self) -> list[TextEdit]:
        return [d.fix for d in self.diagnostics if d.fix is not None]


@dataclass(frozen=True)
class ScanResult:
    """Result of scanning a path."""
    reports: list[FileReport] = field(default_factory=list)

    @property
    def diagnostic_count(self) -> int:
        return sum(len(r.diagnostics) for r in self.reports)

    @property
    def fixed_files(self) -> list[str]:
        return [r.path for r in self.reports if r.fixed]

    def has_violations(self) -> bool:
        return self.diagnostic_count > 0
