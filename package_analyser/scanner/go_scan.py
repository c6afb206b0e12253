"""Go declaration scanner built on tree-sitter.

Parses one file, keeps comments in the tree, and reports:
    - the declared package name
    - top-level declarations as tagged Declaration records
    - exported function/method count
    - the distinct raw import path literals (quotes included)
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

import tree_sitter_go
from tree_sitter import Language, Parser

from ..errors import ParseFailed
from ..logging_config import get_logger
from ..models import Declaration, DeclKind, ScanResult, SourceFile

logger = get_logger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

_SPEC_KINDS = {
    "type_declaration": DeclKind.TYPE,
    "var_declaration": DeclKind.VAR,
    "const_declaration": DeclKind.CONST,
}
_SPEC_NODES = {"type_spec", "type_alias", "var_spec", "const_spec"}


def is_exported(name: str) -> bool:
    """Go visibility rule: exported iff the first character is an uppercase letter."""
    return bool(name) and name[0].isupper()


def is_exported_function(decl: Declaration) -> bool:
    """True for function or method declarations with an exported name."""
    return decl.kind in (DeclKind.FUNCTION, DeclKind.METHOD) and is_exported(decl.name)


def _text(node: Any) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _first_error(node: Any) -> Optional[Any]:
    """Depth-first search for the first ERROR or MISSING node."""
    stack = [node]
    while stack:
        n = stack.pop()
        if n.type == "ERROR" or n.is_missing:
            return n
        if n.has_error:
            stack.extend(reversed(n.children))
    return None


def _spec_nodes(decl_node: Any) -> Iterator[Any]:
    """Yield type/var/const specs, whether single or in a parenthesised group."""
    stack = list(reversed(decl_node.named_children))
    while stack:
        n = stack.pop()
        if n.type in _SPEC_NODES:
            yield n
        elif n.type.endswith("_list"):
            stack.extend(reversed(n.named_children))


def _import_paths(decl_node: Any) -> Iterator[str]:
    stack = list(reversed(decl_node.named_children))
    while stack:
        n = stack.pop()
        if n.type == "import_spec":
            path = n.child_by_field_name("path")
            if path is not None:
                yield _text(path)
        elif n.type == "import_spec_list":
            stack.extend(reversed(n.named_children))


class GoScanner:
    """Parses Go source and extracts exported-function counts and imports."""

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)

    def _parse(self, file: SourceFile) -> Any:
        tree = self._parser.parse(file.text.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            bad = _first_error(root)
            if bad is not None:
                row, col = bad.start_point
                what = f"missing {bad.type}" if bad.is_missing else "syntax error"
                raise ParseFailed(file.name, f"{what} at line {row + 1}, column {col + 1}")
            raise ParseFailed(file.name, "syntax error")
        return root

    @staticmethod
    def _package_clause(file: SourceFile, root: Any) -> str:
        for child in root.named_children:
            if child.type == "package_clause":
                for part in child.named_children:
                    if part.type == "package_identifier":
                        return _text(part)
        raise ParseFailed(file.name, "expected 'package' clause")

    def package_name(self, file: SourceFile) -> str:
        """Declared package of a file."""
        return self._package_clause(file, self._parse(file))

    def scan(self, file: SourceFile) -> ScanResult:
        root = self._parse(file)
        package = self._package_clause(file, root)

        declarations: list[Declaration] = []
        imports: set[str] = set()
        for node in root.named_children:
            if node.type == "import_declaration":
                imports.update(_import_paths(node))
            elif node.type == "function_declaration":
                name = node.child_by_field_name("name")
                declarations.append(Declaration(DeclKind.FUNCTION, _text(name)))
            elif node.type == "method_declaration":
                name = node.child_by_field_name("name")
                declarations.append(Declaration(DeclKind.METHOD, _text(name)))
            elif node.type in _SPEC_KINDS:
                kind = _SPEC_KINDS[node.type]
                for spec in _spec_nodes(node):
                    for name in spec.children_by_field_name("name"):
                        declarations.append(Declaration(kind, _text(name)))
            # comments and anything else carry no declarations

        exported = sum(1 for d in declarations if is_exported_function(d))
        logger.debug("scanned %s: package %s, %d exported, %d imports", file.name, package, exported, len(imports))
        return ScanResult(
            file_name=file.name,
            package_name=package,
            exported_functions=exported,
            imports=frozenset(imports),
            declarations=tuple(declarations),
        )
