import pytest

from mkbuilder.model import Attribute, AttributeType, Nullability, ValueType


def object_attribute(name: str, type_name: str, **kwargs) -> Attribute:
    nullability = kwargs.pop("nullability", Nullability.INHERITED)
    return Attribute(name=name, type=AttributeType(type_name, f"{type_name} *", **kwargs), nullability=nullability)


def scalar_attribute(name: str, type_name: str, **kwargs) -> Attribute:
    return Attribute(name=name, type=AttributeType(type_name, type_name, **kwargs))


@pytest.fixture
def person() -> ValueType:
    return ValueType(
        type_name="Person",
        attributes=(
            object_attribute("name", "NSString", nullability=Nullability.NONNULL),
            scalar_attribute("age", "NSUInteger"),
        ),
    )


@pytest.fixture
def empty_value() -> ValueType:
    return ValueType(type_name="RMEmpty")
