from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from .model import Attribute, AttributeType, Nullability, TypeLookup, ValueType

# JSON shapes as the upstream spec parser hands them over.


class AttributeTypeSpec(TypedDict):
    name: str
    reference: NotRequired[str]
    libraryTypeIsDefinedIn: NotRequired[str]
    fileTypeIsDefinedIn: NotRequired[str]
    underlyingType: NotRequired[str]
    conformingProtocol: NotRequired[str]


class AttributeSpec(TypedDict):
    name: str
    type: AttributeTypeSpec
    nullability: NotRequired[str]


class TypeLookupSpec(TypedDict):
    name: str
    canForwardDeclare: NotRequired[bool]
    library: NotRequired[str]
    file: NotRequired[str]


class ValueTypeSpec(TypedDict):
    typeName: str
    libraryName: NotRequired[str]
    attributes: NotRequired[list[AttributeSpec]]
    includes: NotRequired[list[str]]
    typeLookups: NotRequired[list[TypeLookupSpec]]


def _require_str(data: Any, key: str, what: str) -> str:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{what} is missing a non-empty '{key}'")
    return value


def mk_attribute_type(spec: AttributeTypeSpec) -> AttributeType:
    name = _require_str(spec, "name", "attribute type")
    return AttributeType(
        name=name,
        reference=spec.get("reference", f"{name} *"),
        library_type_is_defined_in=spec.get("libraryTypeIsDefinedIn"),
        file_type_is_defined_in=spec.get("fileTypeIsDefinedIn"),
        underlying_type=spec.get("underlyingType"),
        conforming_protocol=spec.get("conformingProtocol"),
    )


def mk_attribute(spec: AttributeSpec) -> Attribute:
    name = _require_str(spec, "name", "attribute")
    raw_nullability = spec.get("nullability", Nullability.INHERITED.value)
    try:
        nullability = Nullability(raw_nullability)
    except ValueError:
        allowed = ", ".join(n.value for n in Nullability)
        raise ValueError(
            f"attribute '{name}' has unknown nullability {raw_nullability!r}; expected one of {allowed}"
        ) from None
    if "type" not in spec:
        raise ValueError(f"attribute '{name}' is missing 'type'")
    return Attribute(name=name, type=mk_attribute_type(spec["type"]), nullability=nullability)


def _optional_list(data: Any, key: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list, got {type(value).__name__}")
    return value


def mk_type_lookup(spec: TypeLookupSpec) -> TypeLookup:
    name = _require_str(spec, "name", "type lookup")
    can_forward_declare = spec.get("canForwardDeclare", True)
    if not isinstance(can_forward_declare, bool):
        raise ValueError(f"type lookup '{name}' has non-boolean canForwardDeclare {can_forward_declare!r}")
    return TypeLookup(
        name=name,
        can_forward_declare=can_forward_declare,
        library=spec.get("library"),
        file=spec.get("file"),
    )


def mk_value_type(spec: ValueTypeSpec) -> ValueType:
    type_name = _require_str(spec, "typeName", "value type")
    includes = _optional_list(spec, "includes")
    if not all(isinstance(i, str) for i in includes):
        raise ValueError("includes must be a list of strings")
    return ValueType(
        type_name=type_name,
        attributes=tuple(mk_attribute(a) for a in _optional_list(spec, "attributes")),
        includes=tuple(includes),
        type_lookups=tuple(mk_type_lookup(t) for t in _optional_list(spec, "typeLookups")),
        library_name=spec.get("libraryName"),
    )
