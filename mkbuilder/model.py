"""Typed descriptors for value types and the Objective-C code they produce.

Input side: ``ValueType`` and its ``Attribute``/``AttributeType``/``TypeLookup``
records, produced upstream by the spec parser. Output side: ``Method``,
``Property``, ``Import``, ``ForwardDeclaration``, ``ObjCClass`` and
``CodeFile``, handed to the host's emitter. Everything is frozen so one
descriptor can be shared across independent generation runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# -----------------------------
# Input descriptors
# -----------------------------

class Nullability(Enum):
    INHERITED = "inherited"
    NULLABLE = "nullable"
    NONNULL = "nonnull"


@dataclass(frozen=True)
class AttributeType:
    name: str
    reference: str
    library_type_is_defined_in: str | None = None
    file_type_is_defined_in: str | None = None
    underlying_type: str | None = None
    conforming_protocol: str | None = None


@dataclass(frozen=True)
class Attribute:
    name: str
    type: AttributeType
    nullability: Nullability = Nullability.INHERITED


@dataclass(frozen=True)
class TypeLookup:
    """A cross-type reference the upstream resolver has already located."""
    name: str
    can_forward_declare: bool = True
    library: str | None = None
    file: str | None = None


@dataclass(frozen=True)
class ValueType:
    type_name: str
    attributes: tuple[Attribute, ...] = ()
    includes: tuple[str, ...] = ()
    type_lookups: tuple[TypeLookup, ...] = ()
    library_name: str | None = None


# -----------------------------
# Output descriptors
# -----------------------------

@dataclass(frozen=True)
class ObjCType:
    name: str
    reference: str


INSTANCETYPE = ObjCType(name="instancetype", reference="instancetype")


class KeywordArgumentModifier(Enum):
    NULLABLE = "nullable"
    NONNULL = "nonnull"


@dataclass(frozen=True)
class KeywordArgument:
    name: str
    type: ObjCType
    modifiers: tuple[KeywordArgumentModifier, ...] = ()

    def to_code(self) -> str:
        prefix = "".join(f"{mod.value} " for mod in self.modifiers)
        return f"({prefix}{self.type.reference}){self.name}"


@dataclass(frozen=True)
class Keyword:
    name: str
    argument: KeywordArgument | None = None

    def to_code(self) -> str:
        if self.argument is None:
            return self.name
        return f"{self.name}:{self.argument.to_code()}"


@dataclass(frozen=True)
class ReturnType:
    type: ObjCType | None = None
    modifiers: tuple[KeywordArgumentModifier, ...] = ()

    def to_code(self) -> str:
        if self.type is None:
            return "(void)"
        prefix = "".join(f"{mod.value} " for mod in self.modifiers)
        return f"({prefix}{self.type.reference})"


@dataclass(frozen=True)
class Method:
    keywords: tuple[Keyword, ...]
    return_type: ReturnType
    code: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    compiler_attributes: tuple[str, ...] = ()
    preprocessors: tuple[str, ...] = ()
    belongs_to_protocol: str | None = None

    @property
    def selector(self) -> str:
        """Selector as the runtime sees it, e.g. ``withName:`` or ``build``."""
        return "".join(
            kw.name if kw.argument is None else f"{kw.name}:" for kw in self.keywords
        )

    def signature(self, is_class_method: bool = False) -> str:
        marker = "+" if is_class_method else "-"
        keywords = " ".join(kw.to_code() for kw in self.keywords)
        return f"{marker} {self.return_type.to_code()}{keywords}"


class PropertyAccess(Enum):
    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class Property:
    name: str
    return_type: ObjCType
    access: PropertyAccess = PropertyAccess.PUBLIC
    modifiers: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()


@dataclass(frozen=True)
class Import:
    file: str
    is_public: bool
    library: str | None = None

    def to_code(self) -> str:
        if self.library:
            return f"#import <{self.library}/{self.file}>"
        return f'#import "{self.file}"'


class ForwardDeclarationKind(Enum):
    CLASS = "class"
    PROTOCOL = "protocol"


@dataclass(frozen=True)
class ForwardDeclaration:
    name: str
    kind: ForwardDeclarationKind = ForwardDeclarationKind.CLASS

    @classmethod
    def for_class(cls, name: str) -> "ForwardDeclaration":
        return cls(name, ForwardDeclarationKind.CLASS)

    @classmethod
    def for_protocol(cls, name: str) -> "ForwardDeclaration":
        return cls(name, ForwardDeclarationKind.PROTOCOL)

    def to_code(self) -> str:
        return f"@{self.kind.value} {self.name};"


class ClassNullability(Enum):
    DEFAULT = "default"
    ASSUME_NONNULL = "assume_nonnull"


@dataclass(frozen=True)
class ObjCClass:
    name: str
    base_class_name: str
    class_methods: tuple[Method, ...] = ()
    instance_methods: tuple[Method, ...] = ()
    properties: tuple[Property, ...] = ()
    internal_properties: tuple[Property, ...] = ()
    implemented_protocols: tuple[str, ...] = ()
    covariant_types: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    nullability: ClassNullability = ClassNullability.DEFAULT
    subclassing_restricted: bool = False


class FileType(Enum):
    OBJECTIVE_C = "objc"


@dataclass(frozen=True)
class CodeFile:
    name: str
    file_type: FileType
    imports: tuple[Import, ...] = ()
    forward_declarations: tuple[ForwardDeclaration, ...] = ()
    classes: tuple[ObjCClass, ...] = ()
    comments: tuple[str, ...] = ()
    enumerations: tuple[str, ...] = ()
    block_types: tuple[str, ...] = ()
    static_constants: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    diagnostic_ignores: tuple[str, ...] = ()
    structs: tuple[str, ...] = ()
    namespaces: tuple[str, ...] = ()
    macros: tuple[str, ...] = ()
