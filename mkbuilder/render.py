"""Objective-C preview of a builder ``CodeFile``.

The host's emitter owns the real output; this renders enough of the header and
implementation to eyeball a descriptor or diff it in tests.
"""

from __future__ import annotations

from typing import Iterable

from .codegen import CodeBuilder
from .model import CodeFile, Import, Method, ObjCClass, Property


def _write_imports(cb: CodeBuilder, imports: Iterable[Import]) -> None:
    # dedup by text; attributes of the same framework share one umbrella import
    seen: set[str] = set()
    for imp in imports:
        line = imp.to_code()
        if line not in seen:
            cb.write(line)
            seen.add(line)


def _ivar_declaration(prop: Property) -> str:
    reference = prop.return_type.reference
    separator = "" if reference.endswith("*") else " "
    return f"{reference}{separator}_{prop.name};"


def _write_method(cb: CodeBuilder, method: Method, is_class_method: bool) -> None:
    with cb.braced(method.signature(is_class_method)):
        cb.extend(method.code)


def render_header(file: CodeFile) -> str:
    cb = CodeBuilder()
    _write_imports(cb, (imp for imp in file.imports if imp.is_public))
    if file.forward_declarations:
        cb.write()
        for decl in file.forward_declarations:
            cb.write(decl.to_code())
    for cls in file.classes:
        cb.write()
        cb.write(f"@interface {cls.name} : {cls.base_class_name}")
        for method in cls.class_methods:
            cb.write()
            cb.write(method.signature(is_class_method=True) + ";")
        for method in cls.instance_methods:
            cb.write()
            cb.write(method.signature() + ";")
        cb.write()
        cb.write("@end")
    return cb.render()


def _write_implementation(cb: CodeBuilder, cls: ObjCClass) -> None:
    cb.write(f"@implementation {cls.name}")
    if cls.internal_properties:
        with cb.braced():
            for prop in cls.internal_properties:
                cb.write(_ivar_declaration(prop))
    for method in cls.class_methods:
        cb.write()
        _write_method(cb, method, is_class_method=True)
    for method in cls.instance_methods:
        cb.write()
        _write_method(cb, method, is_class_method=False)
    cb.write()
    cb.write("@end")


def render_implementation(file: CodeFile) -> str:
    cb = CodeBuilder()
    _write_imports(cb, (imp for imp in file.imports if not imp.is_public))
    for cls in file.classes:
        cb.write()
        _write_implementation(cb, cls)
    return cb.render()
