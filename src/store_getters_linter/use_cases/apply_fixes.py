"""Use Case: Apply Fixes to Source Code."""

import dataclasses
import logging
from pathlib import Path

from store_getters_linter.domain.entities import FileReport, ScanResult
from store_getters_linter.domain.protocols import FixerGatewayProtocol
from store_getters_linter.use_cases.scan_getters import ScanGettersUseCase

logger = logging.getLogger(__name__)


class ApplyFixesUseCase:
    """Scan with fixes enabled, write them, and re-scan what was modified."""

    def __init__(
        self, scan_use_case: ScanGettersUseCase, fixer_gateway: FixerGatewayProtocol
    ) -> None:
        self.scan_use_case = scan_use_case
        self.fixer_gateway = fixer_gateway

    def execute(self, target: str) -> ScanResult:
        """
        Returns the reports after fixing.

        A modified file is re-scanned; its report lists whatever is left (for
        instance an overlapping edit skipped this round) and has fixed=True.
        """
        reports: list[FileReport] = []
        for report in self.scan_use_case.execute(target, fix_enabled=True).reports:
            if not report.edits:
                reports.append(report)
                continue
            modified = self.fixer_gateway.apply_edits(report.path, report.edits)
            if not modified:
                reports.append(report)
                continue
            rescanned = self.scan_use_case.scan_file(Path(report.path), fix_enabled=False)
            logger.debug(
                "%s: %d fixed, %d remaining",
                report.path,
                len(report.diagnostics) - len(rescanned.diagnostics),
                len(rescanned.diagnostics),
            )
            reports.append(dataclasses.replace(rescanned, fixed=True))
        return ScanResult(reports=reports)
