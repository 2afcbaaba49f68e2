from __future__ import annotations

import logging

from .dependencies import forward_declarations_for_builder, imports_for_builder
from .layout import nested_call_lines
from .model import (
    INSTANCETYPE,
    Attribute,
    ClassNullability,
    CodeFile,
    FileType,
    Keyword,
    KeywordArgument,
    KeywordArgumentModifier,
    Method,
    Nullability,
    ObjCClass,
    ObjCType,
    Property,
    PropertyAccess,
    ReturnType,
    ValueType,
)
from .naming import (
    argument_name,
    builder_name,
    capitalize,
    existing_argument_name,
    ivar_name,
    mutation_keyword,
    seed_factory_keyword,
    short_name,
    value_type_reference,
)
from .options import IncludeOptions
from .semantics import DEFAULT_POLICY, SemanticsPolicy, should_copy_incoming_value

logger = logging.getLogger(__name__)

BASE_CLASS_NAME = "NSObject"

_NULLABILITY_MODIFIERS: dict[Nullability, tuple[KeywordArgumentModifier, ...]] = {
    Nullability.INHERITED: (),
    Nullability.NULLABLE: (KeywordArgumentModifier.NULLABLE,),
    Nullability.NONNULL: (KeywordArgumentModifier.NONNULL,),
}


def _value_object_type(value_type: ValueType) -> ObjCType:
    return ObjCType(name=value_type.type_name, reference=value_type_reference(value_type.type_name))


def _returns_instancetype() -> ReturnType:
    return ReturnType(type=INSTANCETYPE)


# ---------- class methods ----------

def fresh_builder_call(value_type: ValueType) -> str:
    return f"[{builder_name(value_type.type_name)} {short_name(value_type.type_name)}]"


def builder_class_method(value_type: ValueType) -> Method:
    return Method(
        keywords=(Keyword(name=short_name(value_type.type_name)),),
        return_type=_returns_instancetype(),
        code=(f"return [{builder_name(value_type.type_name)} new];",),
    )


def builder_from_existing_object_class_method(value_type: ValueType) -> Method:
    seed_name = existing_argument_name(value_type.type_name)
    return Method(
        keywords=(
            Keyword(
                name=seed_factory_keyword(value_type.type_name),
                argument=KeywordArgument(name=seed_name, type=_value_object_type(value_type)),
            ),
        ),
        return_type=_returns_instancetype(),
        code=tuple(nested_call_lines(fresh_builder_call(value_type), seed_name, value_type.attributes)),
    )


# ---------- instance methods ----------

def constructor_invocation(value_type: ValueType) -> str:
    """``[[Person alloc] initWithName:_name age:_age]``, or ``[Person new]``."""
    if not value_type.attributes:
        return f"[{value_type.type_name} new]"
    first, *rest = value_type.attributes
    parts = [f"initWith{capitalize(first.name)}:{ivar_name(first)}"]
    parts.extend(f"{attribute.name}:{ivar_name(attribute)}" for attribute in rest)
    return f"[[{value_type.type_name} alloc] {' '.join(parts)}]"


def build_instance_method(value_type: ValueType) -> Method:
    return Method(
        keywords=(Keyword(name="build"),),
        return_type=ReturnType(type=_value_object_type(value_type)),
        code=(f"return {constructor_invocation(value_type)};",),
    )


def value_to_assign(policy: SemanticsPolicy, supports_value_semantics: bool, attribute: Attribute) -> str:
    name = argument_name(attribute)
    if should_copy_incoming_value(policy, supports_value_semantics, attribute):
        return f"[{name} copy]"
    return name


def with_instance_method(
    policy: SemanticsPolicy, supports_value_semantics: bool, attribute: Attribute
) -> Method:
    return Method(
        keywords=(
            Keyword(
                name=mutation_keyword(attribute),
                argument=KeywordArgument(
                    name=argument_name(attribute),
                    type=ObjCType(name=attribute.type.name, reference=attribute.type.reference),
                    modifiers=_NULLABILITY_MODIFIERS[attribute.nullability],
                ),
            ),
        ),
        return_type=_returns_instancetype(),
        code=(
            f"{ivar_name(attribute)} = {value_to_assign(policy, supports_value_semantics, attribute)};",
            "return self;",
        ),
    )


def internal_property(attribute: Attribute) -> Property:
    return Property(
        name=attribute.name,
        return_type=ObjCType(name=attribute.type.name, reference=attribute.type.reference),
        access=PropertyAccess.PRIVATE,
    )


# ---------- assembly ----------

def builder_class_for_value_type(
    value_type: ValueType,
    options: IncludeOptions | None = None,
    policy: SemanticsPolicy = DEFAULT_POLICY,
) -> ObjCClass:
    if options is None:
        options = IncludeOptions.from_includes(value_type.includes)
    return ObjCClass(
        name=builder_name(value_type.type_name),
        base_class_name=BASE_CLASS_NAME,
        class_methods=(
            builder_class_method(value_type),
            builder_from_existing_object_class_method(value_type),
        ),
        instance_methods=(
            build_instance_method(value_type),
            *(with_instance_method(policy, options.value_semantics, a) for a in value_type.attributes),
        ),
        properties=(),
        internal_properties=tuple(internal_property(a) for a in value_type.attributes),
        nullability=ClassNullability.DEFAULT,
        subclassing_restricted=False,
    )


def builder_file_for_value_type(
    value_type: ValueType, policy: SemanticsPolicy = DEFAULT_POLICY
) -> CodeFile:
    options = IncludeOptions.from_includes(value_type.includes)
    file = CodeFile(
        name=builder_name(value_type.type_name),
        file_type=FileType.OBJECTIVE_C,
        imports=tuple(imports_for_builder(value_type, options, policy)),
        forward_declarations=tuple(forward_declarations_for_builder(value_type, policy)),
        classes=(builder_class_for_value_type(value_type, options, policy),),
    )
    logger.debug(
        "Synthesized %s: %d attributes, %d imports, %d forward declarations",
        file.name, len(value_type.attributes), len(file.imports), len(file.forward_declarations),
    )
    return file
