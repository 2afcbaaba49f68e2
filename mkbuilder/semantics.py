"""Classification of attribute types shared by every generator of a value type.

The builder and the value type's own initializer must agree on which incoming
values get copied and which types can be forward declared, so both take the
same ``SemanticsPolicy`` instead of consulting global tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from .model import Attribute, AttributeType, Import


class TypeCategory(Enum):
    BUILT_IN = "built_in"        # platform type with a known umbrella import
    USER_CLASS = "user_class"    # object pointer to a class we can @class
    PROTOCOL = "protocol"        # id<P>; Foo<P> * classifies by Foo
    UNRESOLVED = "unresolved"    # non-object user type: needs its full definition


class Storage(Enum):
    OBJECT = "object"
    BLOCK = "block"
    SCALAR = "scalar"
    STRUCT = "struct"
    OPAQUE = "opaque"


FOUNDATION_IMPORT = Import(file="Foundation.h", is_public=True, library="Foundation")
CORE_GRAPHICS_IMPORT = Import(file="CoreGraphics.h", is_public=True, library="CoreGraphics")
UIKIT_IMPORT = Import(file="UIKit.h", is_public=True, library="UIKit")

# Language-level types that never need an import of their own.
PRIMITIVE_TYPES: frozenset[str] = frozenset({
    "id", "SEL", "Class", "instancetype", "void",
    "bool", "char", "short", "int", "long", "long long", "float", "double",
    "unsigned char", "unsigned short", "unsigned int", "unsigned long", "unsigned long long",
    "int8_t", "int16_t", "int32_t", "int64_t",
    "uint8_t", "uint16_t", "uint32_t", "uint64_t",
    "size_t", "uintptr_t",
})

SCALAR_TYPES: frozenset[str] = (PRIMITIVE_TYPES - {"id", "SEL", "Class", "instancetype", "void"}) | {
    "BOOL", "NSInteger", "NSUInteger", "CGFloat", "NSTimeInterval",
}

STRUCT_TYPES: frozenset[str] = frozenset({
    "CGRect", "CGPoint", "CGSize", "CGVector", "CGAffineTransform",
    "NSRange", "UIEdgeInsets", "UIOffset",
})

_FOUNDATION_TYPES = (
    "BOOL", "NSInteger", "NSUInteger", "NSTimeInterval", "NSRange",
    "NSObject", "NSString", "NSMutableString", "NSAttributedString",
    "NSArray", "NSMutableArray", "NSDictionary", "NSMutableDictionary",
    "NSSet", "NSMutableSet", "NSOrderedSet", "NSIndexSet", "NSCountedSet",
    "NSNumber", "NSDecimalNumber", "NSValue", "NSData", "NSMutableData",
    "NSDate", "NSDateComponents", "NSCalendar", "NSTimeZone", "NSLocale",
    "NSURL", "NSURLRequest", "NSUUID", "NSError",
)
_CORE_GRAPHICS_TYPES = (
    "CGFloat", "CGRect", "CGPoint", "CGSize", "CGVector", "CGAffineTransform",
    "CGImageRef", "CGColorRef", "CGPathRef",
)
_UIKIT_TYPES = ("UIColor", "UIImage", "UIFont", "UIEdgeInsets", "UIOffset", "UIView")

WELL_KNOWN_IMPORTS: dict[str, Import] = {
    **{name: FOUNDATION_IMPORT for name in _FOUNDATION_TYPES},
    **{name: CORE_GRAPHICS_IMPORT for name in _CORE_GRAPHICS_TYPES},
    **{name: UIKIT_IMPORT for name in _UIKIT_TYPES},
}

# Types with mutable subclasses; storing them uncopied would let a caller
# mutate a built value behind its back.
COPYABLE_TYPES: frozenset[str] = frozenset({
    "NSString", "NSAttributedString",
    "NSArray", "NSDictionary", "NSSet", "NSOrderedSet", "NSIndexSet",
    "NSData", "NSURLRequest", "NSDateComponents",
})

SYSTEM_PREFIXES: tuple[str, ...] = ("NS", "UI", "CG", "CF", "CA")


@runtime_checkable
class SemanticsPolicy(Protocol):
    """What the builder needs to know about an attribute type."""

    def storage(self, attribute_type: AttributeType) -> Storage: ...

    def classify(self, attribute_type: AttributeType) -> TypeCategory: ...

    def should_copy(self, attribute_type: AttributeType) -> bool: ...

    def needs_import(self, type_name: str) -> bool: ...

    def known_import(self, type_name: str) -> Import | None: ...

    def is_system_protocol(self, protocol_name: str) -> bool: ...


@dataclass(frozen=True, eq=False)
class DefaultSemanticsPolicy:
    """Table-driven policy; pass different tables to model another platform."""

    primitive_types: frozenset[str] = PRIMITIVE_TYPES
    scalar_types: frozenset[str] = SCALAR_TYPES
    struct_types: frozenset[str] = STRUCT_TYPES
    copyable_types: frozenset[str] = COPYABLE_TYPES
    well_known_imports: dict[str, Import] = field(default_factory=lambda: dict(WELL_KNOWN_IMPORTS))
    system_prefixes: tuple[str, ...] = SYSTEM_PREFIXES

    def _is_system_name(self, name: str) -> bool:
        for prefix in self.system_prefixes:
            rest = name[len(prefix):]
            if name.startswith(prefix) and rest[:1].isupper():
                return True
        return False

    def storage(self, attribute_type: AttributeType) -> Storage:
        name = attribute_type.underlying_type or attribute_type.name
        reference = attribute_type.reference.strip()
        if name in self.scalar_types:
            return Storage.SCALAR
        if name in self.struct_types:
            return Storage.STRUCT
        if "^" in reference:
            return Storage.BLOCK
        if name == "id" or reference.endswith("*"):
            return Storage.OBJECT
        return Storage.OPAQUE

    def classify(self, attribute_type: AttributeType) -> TypeCategory:
        name = attribute_type.name
        if attribute_type.conforming_protocol and name == "id":
            return TypeCategory.PROTOCOL
        if (
            name in self.well_known_imports
            or name in self.primitive_types
            or name in self.scalar_types
            or self._is_system_name(name)
        ):
            return TypeCategory.BUILT_IN
        if self.storage(attribute_type) is Storage.OBJECT:
            return TypeCategory.USER_CLASS
        return TypeCategory.UNRESOLVED

    def should_copy(self, attribute_type: AttributeType) -> bool:
        storage = self.storage(attribute_type)
        if storage is Storage.BLOCK:
            return True
        return storage is Storage.OBJECT and attribute_type.name in self.copyable_types

    def needs_import(self, type_name: str) -> bool:
        return type_name not in self.primitive_types

    def known_import(self, type_name: str) -> Import | None:
        return self.well_known_imports.get(type_name)

    def is_system_protocol(self, protocol_name: str) -> bool:
        return self._is_system_name(protocol_name)


DEFAULT_POLICY: SemanticsPolicy = DefaultSemanticsPolicy()


# -----------------------------
# Rules derived from a policy
# -----------------------------

def should_copy_incoming_value(
    policy: SemanticsPolicy, supports_value_semantics: bool, attribute: Attribute
) -> bool:
    return supports_value_semantics and policy.should_copy(attribute.type)


def can_forward_declare(policy: SemanticsPolicy, attribute: Attribute) -> bool:
    return policy.classify(attribute.type) is TypeCategory.USER_CLASS


def requires_public_import(policy: SemanticsPolicy, attribute: Attribute) -> bool:
    return policy.classify(attribute.type) is TypeCategory.UNRESOLVED


def forward_protocol_name(policy: SemanticsPolicy, attribute: Attribute) -> str | None:
    """Protocol to ``@protocol``-declare for ``attribute``, if any."""
    protocol = attribute.type.conforming_protocol
    if not protocol or policy.is_system_protocol(protocol):
        return None
    return protocol
