"""LibCST Transformers for code fixes."""

import libcst as cst


class EnsureImportTransformer(cst.CSTTransformer):
    """Transformer to add `import <module>` to a module that lacks it."""

    def __init__(self, context: dict) -> None:
        self.module = context.get("module")
        self.has_import = False
        self.added = False

    def visit_Import(self, node: cst.Import) -> None:
        """Check if the module is already imported under its own name."""
        for alias in node.names:
            if (
                isinstance(alias.name, cst.Name)
                and alias.name.value == self.module
                and alias.asname is None
            ):
                self.has_import = True

    def visit_FunctionDef(self, node: cst.FunctionDef) -> bool:
        # Only module-level imports make the name available everywhere.
        return False

    def visit_ClassDef(self, node: cst.ClassDef) -> bool:
        return False

    def leave_Module(self, original_node: cst.Module, updated_node: cst.Module) -> cst.Module:
        if self.has_import or self.added or not self.module:
            return updated_node

        import_stmt = cst.SimpleStatementLine(
            body=[cst.Import(names=[cst.ImportAlias(name=cst.Name(self.module))])]
        )

        new_body = list(updated_node.body)
        insert_idx: int = 0
        for i, stmt in enumerate(new_body):
            if self._is_docstring(stmt) and i == 0:
                insert_idx = 1
            elif self._is_import(stmt):
                insert_idx = i + 1
            else:
                break

        new_body.insert(insert_idx, import_stmt)
        self.added = True
        return updated_node.with_changes(body=new_body)

    @staticmethod
    def _is_import(stmt: cst.CSTNode) -> bool:
        return isinstance(stmt, cst.SimpleStatementLine) and all(
            isinstance(s, (cst.Import, cst.ImportFrom)) for s in stmt.body
        )

    @staticmethod
    def _is_docstring(stmt: cst.CSTNode) -> bool:
        return (
            isinstance(stmt, cst.SimpleStatementLine)
            and len(stmt.body) == 1
            and isinstance(stmt.body[0], cst.Expr)
            and isinstance(stmt.body[0].value, (cst.SimpleString, cst.ConcatenatedString))
        )
