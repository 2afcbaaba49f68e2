from __future__ import annotations

import logging

from .model import Attribute, ForwardDeclaration, Import, TypeLookup, ValueType
from .naming import builder_name
from .options import IncludeOptions
from .semantics import (
    DEFAULT_POLICY,
    FOUNDATION_IMPORT,
    SemanticsPolicy,
    can_forward_declare,
    forward_protocol_name,
    requires_public_import,
)

logger = logging.getLogger(__name__)


def _header_file(declared_file: str | None, type_name: str) -> str:
    return declared_file or f"{type_name}.h"


def import_for_type_lookup(
    object_library: str | None, is_public: bool, type_lookup: TypeLookup
) -> Import:
    return Import(
        file=_header_file(type_lookup.file, type_lookup.name),
        is_public=is_public,
        library=type_lookup.library or object_library,
    )


def imports_for_type_lookups(value_type: ValueType, options: IncludeOptions) -> list[Import]:
    """Lookups we cannot forward declare are always imported publicly.

    Forward-declarable lookups only get a (private) import when the value type
    opted into forward declarations; otherwise the forward declaration alone
    is enough.
    """
    imports: list[Import] = []
    for lookup in value_type.type_lookups:
        if not lookup.can_forward_declare:
            imports.append(import_for_type_lookup(value_type.library_name, True, lookup))
        elif options.use_forward_declarations:
            imports.append(import_for_type_lookup(value_type.library_name, False, lookup))
        else:
            logger.debug("Omitting import for forward-declarable lookup %s", lookup.name)
    return imports


def must_declare_import_for_attribute(
    policy: SemanticsPolicy, type_lookups: tuple[TypeLookup, ...], attribute: Attribute
) -> bool:
    type_name = attribute.type.name
    if any(lookup.name == type_name for lookup in type_lookups):
        return False
    return policy.needs_import(type_name)


def import_for_attribute(
    policy: SemanticsPolicy, object_library: str | None, is_public: bool, attribute: Attribute
) -> Import:
    built_in = policy.known_import(attribute.type.name)
    if built_in is not None:
        return built_in
    return Import(
        file=_header_file(attribute.type.file_type_is_defined_in, attribute.type.name),
        is_public=is_public or requires_public_import(policy, attribute),
        library=attribute.type.library_type_is_defined_in or object_library,
    )


def imports_for_builder(
    value_type: ValueType,
    options: IncludeOptions | None = None,
    policy: SemanticsPolicy = DEFAULT_POLICY,
) -> list[Import]:
    if options is None:
        options = IncludeOptions.from_includes(value_type.includes)
    imports: list[Import] = [
        FOUNDATION_IMPORT,
        Import(file=f"{value_type.type_name}.h", is_public=False, library=value_type.library_name),
        Import(file=f"{builder_name(value_type.type_name)}.h", is_public=False),
    ]
    imports.extend(imports_for_type_lookups(value_type, options))

    if options.skip_attribute_imports:
        logger.debug("Skipping attribute imports for %s", value_type.type_name)
        return imports

    for attribute in value_type.attributes:
        if not must_declare_import_for_attribute(policy, value_type.type_lookups, attribute):
            continue
        imports.append(
            import_for_attribute(
                policy, value_type.library_name, options.make_public_imports, attribute
            )
        )
    return imports


def forward_declarations_for_builder(
    value_type: ValueType, policy: SemanticsPolicy = DEFAULT_POLICY
) -> list[ForwardDeclaration]:
    declarations = [ForwardDeclaration.for_class(value_type.type_name)]
    declarations.extend(
        ForwardDeclaration.for_class(lookup.name)
        for lookup in value_type.type_lookups
        if lookup.can_forward_declare
    )
    declarations.extend(
        ForwardDeclaration.for_class(attribute.type.name)
        for attribute in value_type.attributes
        if can_forward_declare(policy, attribute)
    )
    for attribute in value_type.attributes:
        protocol = forward_protocol_name(policy, attribute)
        if protocol is not None:
            declarations.append(ForwardDeclaration.for_protocol(protocol))
    return declarations
