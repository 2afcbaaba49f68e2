from mkbuilder.dependencies import (
    forward_declarations_for_builder,
    imports_for_builder,
    imports_for_type_lookups,
)
from mkbuilder.model import Attribute, AttributeType, ForwardDeclaration, Import, TypeLookup, ValueType
from mkbuilder.options import IncludeOptions
from mkbuilder.semantics import FOUNDATION_IMPORT

from conftest import object_attribute


BASE_IMPORTS = [
    FOUNDATION_IMPORT,
    Import(file="Order.h", is_public=False, library="Shop"),
    Import(file="OrderBuilder.h", is_public=False),
]


def _order(*attributes: Attribute, includes=(), lookups=()) -> ValueType:
    return ValueType(
        type_name="Order",
        attributes=attributes,
        includes=tuple(includes),
        type_lookups=tuple(lookups),
        library_name="Shop",
    )


def _customer() -> Attribute:
    return object_attribute("customer", "Customer", file_type_is_defined_in="Customer.h")


def _status() -> Attribute:
    return Attribute("status", AttributeType("OrderStatus", "OrderStatus", underlying_type="NSInteger"))


def test_fixed_imports_come_first(person: ValueType) -> None:
    imports = imports_for_builder(person)
    assert imports[:3] == [
        FOUNDATION_IMPORT,
        Import(file="Person.h", is_public=False, library=None),
        Import(file="PersonBuilder.h", is_public=False, library=None),
    ]
    # NSString and NSUInteger resolve through the well-known table
    assert imports[3:] == [FOUNDATION_IMPORT, FOUNDATION_IMPORT]


def test_value_type_is_always_forward_declared(person: ValueType) -> None:
    assert forward_declarations_for_builder(person) == [ForwardDeclaration.for_class("Person")]


def test_attribute_imports_are_public_by_default() -> None:
    imports = imports_for_builder(_order(_customer()))
    assert imports == BASE_IMPORTS + [Import(file="Customer.h", is_public=True, library="Shop")]


def test_forward_declaration_mode_makes_attribute_imports_private() -> None:
    imports = imports_for_builder(_order(_customer(), includes=["UseForwardDeclarations"]))
    assert imports[-1] == Import(file="Customer.h", is_public=False, library="Shop")


def test_skip_imports_in_implementation_keeps_forward_declaration() -> None:
    vt = _order(_customer(), includes=["UseForwardDeclarations", "SkipImportsInImplementation"])
    assert imports_for_builder(vt) == BASE_IMPORTS
    assert forward_declarations_for_builder(vt) == [
        ForwardDeclaration.for_class("Order"),
        ForwardDeclaration.for_class("Customer"),
    ]


def test_skip_imports_alone_has_no_effect() -> None:
    vt = _order(_customer(), includes=["SkipImportsInImplementation"])
    assert len(imports_for_builder(vt)) == len(BASE_IMPORTS) + 1


def test_non_object_types_stay_public_in_forward_declaration_mode() -> None:
    vt = _order(_status(), includes=["UseForwardDeclarations"])
    assert imports_for_builder(vt)[-1] == Import(file="OrderStatus.h", is_public=True, library="Shop")
    assert forward_declarations_for_builder(vt) == [ForwardDeclaration.for_class("Order")]


def test_attribute_library_wins_over_value_type_library() -> None:
    attr = object_attribute("owner", "User", library_type_is_defined_in="Accounts")
    assert imports_for_builder(_order(attr))[-1] == Import(file="User.h", is_public=True, library="Accounts")


def test_unresolved_type_gets_best_effort_import() -> None:
    vt = ValueType(type_name="Order", attributes=(object_attribute("widget", "Widget"),))
    assert imports_for_builder(vt)[-1] == Import(file="Widget.h", is_public=True, library=None)


def test_type_lookups() -> None:
    lookups = [
        TypeLookup("Money", can_forward_declare=False),
        TypeLookup("Coupon", can_forward_declare=True, library="Promo", file="PromoCoupon.h"),
    ]
    plain = _order(lookups=lookups)
    assert imports_for_type_lookups(plain, IncludeOptions.from_includes(plain.includes)) == [
        Import(file="Money.h", is_public=True, library="Shop"),
    ]
    forward = _order(lookups=lookups, includes=["UseForwardDeclarations"])
    assert imports_for_type_lookups(forward, IncludeOptions.from_includes(forward.includes)) == [
        Import(file="Money.h", is_public=True, library="Shop"),
        Import(file="PromoCoupon.h", is_public=False, library="Promo"),
    ]
    assert forward_declarations_for_builder(forward) == [
        ForwardDeclaration.for_class("Order"),
        ForwardDeclaration.for_class("Coupon"),
    ]


def test_attribute_named_by_type_lookup_is_not_imported_twice() -> None:
    attr = object_attribute("coupon", "Coupon")
    vt = _order(attr, lookups=[TypeLookup("Coupon", can_forward_declare=True)])
    assert imports_for_builder(vt) == BASE_IMPORTS


def test_primitive_types_need_no_import() -> None:
    attr = Attribute("ratio", AttributeType("double", "double"))
    assert imports_for_builder(_order(attr)) == BASE_IMPORTS


def test_protocol_attributes() -> None:
    delegate = Attribute("delegate", AttributeType("id", "id<OrderDelegate>", conforming_protocol="OrderDelegate"))
    copying = Attribute("token", AttributeType("id", "id<NSCopying>", conforming_protocol="NSCopying"))
    vt = _order(delegate, copying)
    assert forward_declarations_for_builder(vt) == [
        ForwardDeclaration.for_class("Order"),
        ForwardDeclaration.for_protocol("OrderDelegate"),
    ]
    assert imports_for_builder(vt) == BASE_IMPORTS


def test_declaration_order() -> None:
    delegate = Attribute("delegate", AttributeType("id", "id<OrderDelegate>", conforming_protocol="OrderDelegate"))
    vt = _order(delegate, _customer(), lookups=[TypeLookup("Coupon")])
    assert [d.to_code() for d in forward_declarations_for_builder(vt)] == [
        "@class Order;",
        "@class Coupon;",
        "@class Customer;",
        "@protocol OrderDelegate;",
    ]


def _feed() -> Attribute:
    return Attribute("feed", AttributeType("Feed", "Feed<FeedSource> *", conforming_protocol="FeedSource"))


def test_class_conforming_to_protocol_gets_both_declarations() -> None:
    vt = _order(_feed(), includes=["UseForwardDeclarations", "SkipImportsInImplementation"])
    assert [d.to_code() for d in forward_declarations_for_builder(vt)] == [
        "@class Order;",
        "@class Feed;",
        "@protocol FeedSource;",
    ]
    assert imports_for_builder(vt) == BASE_IMPORTS


def test_class_conforming_to_protocol_is_imported() -> None:
    assert imports_for_builder(_order(_feed()))[-1] == Import(file="Feed.h", is_public=True, library="Shop")
