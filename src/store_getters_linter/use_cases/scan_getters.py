"""Use Case: scan files for getter state mutations."""

import logging
from pathlib import Path

import astroid

from store_getters_linter.domain.entities import Diagnostic, FileReport, ScanResult
from store_getters_linter.domain.protocols import AstroidProtocol
from store_getters_linter.domain.rules.getter_mutation import GetterMutationRule
from store_getters_linter.domain.scope_context import ScopeContextStack

logger = logging.getLogger(__name__)


class GetterScan:
    """
    One traversal session over one module.

    Exposes the same visit_/leave_ callbacks as the pylint checker so the
    AstroidGateway walker can drive it outside pylint.
    """

    def __init__(
        self, rule: GetterMutationRule, fix_enabled: bool, source: bytes | None
    ) -> None:
        self.rule = rule
        self.fix_enabled = fix_enabled
        self.source = source
        self.stack = ScopeContextStack()
        self.diagnostics: list[Diagnostic] = []

    def visit_dict(self, node: astroid.nodes.Dict) -> None:
        self.rule.enter_node(node, self.stack)

    def leave_dict(self, node: astroid.nodes.Dict) -> None:
        self.rule.leave_node(node, self.stack)

    def visit_lambda(self, node: astroid.nodes.Lambda) -> None:
        self.rule.record_function(node, self.stack)

    def visit_call(self, node: astroid.nodes.Call) -> None:
        for violation in self.rule.check_call(node, self.stack):
            self.diagnostics.append(self.rule.emit(violation, self.fix_enabled, self.source))


class ScanGettersUseCase:
    """Collect Python files under a path and run one GetterScan per file."""

    def __init__(self, astroid_gateway: AstroidProtocol, rule: GetterMutationRule) -> None:
        self.astroid_gateway = astroid_gateway
        self.rule = rule

    @staticmethod
    def collect_files(target: Path) -> list[Path]:
        if target.is_file():
            return [target] if target.suffix == ".py" else []
        files = []
        for path in sorted(target.rglob("*.py")):
            relative = path.relative_to(target)
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue
            files.append(path)
        return files

    def scan_module(
        self, module: astroid.nodes.Module, path: str, fix_enabled: bool
    ) -> FileReport:
        source = self.astroid_gateway.read_source(module) if fix_enabled else None
        session = GetterScan(self.rule, fix_enabled, source)
        self.astroid_gateway.walk(module, session)
        return FileReport(path=path, diagnostics=session.diagnostics)

    def scan_file(self, path: Path, fix_enabled: bool = False) -> FileReport:
        module = self.astroid_gateway.parse_file(str(path))
        if module is None:
            return FileReport(path=str(path), parse_failed=True)
        return self.scan_module(module, str(path), fix_enabled)

    def execute(self, target: str, fix_enabled: bool = False) -> ScanResult:
        files = self.collect_files(Path(target))
        logger.debug("Scanning %d file(s) under %s", len(files), target)
        return ScanResult(reports=[self.scan_file(f, fix_enabled) for f in files])
