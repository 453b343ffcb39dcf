"""
Writer for LuaLS annotation files (---@meta stubs).
"""

from pathlib import Path
from typing import List, Optional, Tuple

from .. import logger
from ..config import GeneratorConfig, HEADER_LINES, NAMESPACE_SEPARATOR, OUTPUT_SUFFIX
from ..parsers.cpp_type import is_variadic, to_cpp_type
from ..parsers.items import (BaseItem, ClassItem, EnumItem, FunctionItem, ItemKind,
                             NamespaceItem, Overload, VariableItem)
from ..parsers.model_builder import collect_namespaces
from ..result import GenerationReport, OverloadResult, ResultStatus
from ..resolution.type_resolver import TypeResolver, NO_ANNOTATION

LUA_KEYWORDS = {
    'and', 'break', 'do', 'else', 'elseif', 'end', 'false', 'for', 'function',
    'goto', 'if', 'in', 'local', 'nil', 'not', 'or', 'repeat', 'return',
    'then', 'true', 'until', 'while',
}


def lua_parameter_name(name: str) -> str:
    if name in LUA_KEYWORDS:
        return '_' + name
    return name


class LLSWriter:
    """
    Emits one annotation file per namespace of the symbol model.

    Overloads whose parameters or return type cannot be resolved are left
    out of the output and recorded in the report.
    """

    def __init__(self, root: NamespaceItem, resolver: TypeResolver, module_name: Optional[str] = None,
                 config: Optional[GeneratorConfig] = None, report: Optional[GenerationReport] = None):
        self.root = root
        self.resolver = resolver
        self.config = config or GeneratorConfig()
        self.report = report if report is not None else GenerationReport()
        self.global_file_name = self.config.global_file_name or module_name or 'global'
        self.lines: List[str] = []

    def write(self, output_dir: Path) -> List[Path]:
        """Write all annotation files and return their paths."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        targets = collect_namespaces(self.root)
        if self._has_global_content():
            targets.insert(0, self.root)
        global_name = self._global_target_name(targets)

        for namespace in targets:
            name = global_name if namespace.is_global else namespace.symbolic_name
            out_path = output_dir / f"{name}{OUTPUT_SUFFIX}"
            lines = self.render(namespace)
            out_path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
            logger.info(f"Wrote {len(lines)} lines to {out_path}")
            written.append(out_path)

        self.report.files_written.extend(written)
        return written

    def render(self, namespace: NamespaceItem) -> List[str]:
        """Annotation lines for one namespace file."""
        self.lines = list(HEADER_LINES)
        self._write_namespace(namespace)
        return self.lines

    def _global_target_name(self, targets: List[NamespaceItem]) -> str:
        """File name for global declarations, moved aside if a namespace already uses it."""
        taken = {ns.symbolic_name for ns in targets if not ns.is_global}
        name = self.global_file_name
        if name not in taken:
            return name

        renamed = f"{name}_global"
        while renamed in taken:
            renamed += '_'
        message = f"Global file name {name} matches a namespace; writing global declarations to {renamed}{OUTPUT_SUFFIX}"
        logger.warning(message)
        self.report.add_defect(message)
        return renamed

    def _has_global_content(self) -> bool:
        return bool(self.root.classes or self.root.functions or self.root.variables or self.root.enums)

    def _traverse(self, item: BaseItem) -> None:
        # Namespaces are never nested inside the one being written; each gets its own file
        if item.kind == ItemKind.CLASS:
            self._write_class(item)
        elif item.kind == ItemKind.FUNCTION:
            self._write_function(item)
        elif item.kind == ItemKind.VARIABLE:
            self._write_variable(item)
        elif item.kind == ItemKind.ENUM:
            self._write_enum(item)

    def _write_namespace(self, namespace: NamespaceItem) -> None:
        if not namespace.is_global:
            self.lines.append(f"local {namespace.symbolic_name} = {{}}")
            self.lines.append("")

        for child in namespace.children:
            self._traverse(child)

        if not namespace.is_global:
            self.lines.append("")
            self.lines.append(f"return {namespace.symbolic_name}")

    def _write_class(self, lclass: ClassItem) -> None:
        path = lclass.qualified_name
        self.lines.append(f"---@class {path}")
        for var in lclass.variables:
            lua_type = self._resolve_variable(var)
            if lua_type and var.symbolic_name:
                self.lines.append(f"---@field {var.symbolic_name} {lua_type}")
        self.lines.append(f"{path} = {{}}")
        self.lines.append("")

        for child in lclass.children:
            if child.kind != ItemKind.VARIABLE:
                self._traverse(child)

    def _write_variable(self, var: VariableItem) -> None:
        lua_type = self._resolve_variable(var)
        if not lua_type:
            return
        self.lines.append(f"---@type {lua_type}")
        self.lines.append(f"{var.qualified_name} = nil")
        self.lines.append("")

    def _resolve_variable(self, var: VariableItem) -> Optional[str]:
        lua_type = self.resolver.resolve(var.type_token)
        if lua_type is None:
            logger.warning(f"Skipping variable {var.qualified_name}: unresolved type {var.cpp_type}")
        return lua_type

    def _write_enum(self, lenum: EnumItem) -> None:
        path = lenum.qualified_name
        self.lines.append(f"---@enum {path}Enum")
        if lenum.values:
            values = ', '.join(f"{v.name} = {v.value}" for v in lenum.values)
            self.lines.append(f"{path} = {{ {values} }}")
        else:
            self.lines.append(f"{path} = {{}}")
        self.lines.append("")

    def _write_function(self, func: FunctionItem) -> None:
        if func.declared_name is not None and NAMESPACE_SEPARATOR in func.declared_name:
            message = f"Function name contains namespace separator: {func.declared_name}"
            logger.warning(message)
            self.report.add_defect(message)
            return

        parent = func.parent
        owner_path = parent.qualified_name if parent is not None else None
        if owner_path:
            member_of_class = parent.kind == ItemKind.CLASS
            separator = ':' if member_of_class and not func.is_static else '.'
            func_name = f"{owner_path}{separator}{func.symbolic_name}"
        else:
            func_name = func.symbolic_name

        for overload in func.overloads:
            lines, result = self._render_overload(func_name, overload, owner_path)
            self.report.add_overload(result)
            if result.resolved:
                self.lines.extend(lines)
            else:
                logger.warning(f"Skipping overload {result.signature}: {result.reason}")

    def _render_overload(self, func_name: str, overload: Overload,
                         owner_path: Optional[str]) -> Tuple[List[str], OverloadResult]:
        lines = []
        names = []
        reason = None

        for parm in overload.parameters:
            if is_variadic(parm.type_token):
                names.append('...')
                continue
            if parm.type_token is None:
                reason = reason or "parameter without type"
                continue
            lua_type = self.resolver.resolve(parm.type_token)
            if lua_type is None:
                reason = reason or f"unresolved parameter type {to_cpp_type(parm.type_token)}"
                continue
            if not parm.name:
                reason = reason or "unnamed parameter"
                continue
            if lua_type == NO_ANNOTATION:
                continue
            name = lua_parameter_name(parm.name)
            names.append(name)
            lines.append(f"---@param {name} {lua_type} # {to_cpp_type(parm.type_token)}")

        if overload.returns_owner:
            return_type = owner_path
        else:
            return_type = self.resolver.resolve(overload.return_type)
            if return_type is None:
                reason = reason or f"unresolved return type {to_cpp_type(overload.return_type)}"
        if return_type:
            lines.append(f"---@return {return_type}")

        lines.append(f"function {func_name}({', '.join(names)}) end")
        lines.append("")

        signature = self._describe(func_name, overload, owner_path)
        if reason is not None:
            return [], OverloadResult(ResultStatus.SKIPPED, func_name, signature, reason)
        return lines, OverloadResult(ResultStatus.RESOLVED, func_name, signature)

    @staticmethod
    def _describe(func_name: str, overload: Overload, owner_path: Optional[str]) -> str:
        params = ', '.join(f"{to_cpp_type(p.type_token) or '?'} {p.name or ''}".strip() for p in overload.parameters)
        if overload.returns_owner:
            return_type = owner_path
        else:
            return_type = to_cpp_type(overload.return_type) or 'void'
        return f"{return_type} {func_name}({params})"
