"""Examples: local type inference.

A local variable needs no declared type: a type checker infers it from the
initializer, and at run time the name simply refers to whatever object was
assigned. Annotations remain useful where the initializer does not make the
intended type obvious, e.g. when a name should hold any subtype of a common
base class.
"""

from __future__ import annotations

from dataclasses import dataclass

from calque.collections import collect, list_of, map_of, to_list

from ..checks import check_contains_exactly, check_empty, check_equal, check_not_empty
from ..registry import example

GROUP = "inference"


@dataclass(frozen=True)
class Vehicle:
    """Base type of the vehicle hierarchy used below."""

    reg_number: str


class Car(Vehicle):
    pass


class Lorry(Vehicle):
    pass


@example(group=GROUP)
def infer_type_of_generic_local_variable() -> None:
    """An unannotated local takes the type of the object it is bound to."""
    list_of_strings: list[str] = []
    another_list_of_strings = list[str]()

    check_equal(type(another_list_of_strings), type(list_of_strings), "inferred type")
    check_empty(another_list_of_strings)


@example(group=GROUP)
def infer_type_of_loop_variables() -> None:
    """Loop variables over a mapping's items need no declared types."""
    country_to_cities = map_of(
        ("UK", list_of("London", "Manchester", "Birmingham", "Liverpool")),
        ("Italy", list_of("Rome", "Turin", "Naples", "Milan")),
    )

    for _country, cities in country_to_cities.items():
        check_not_empty(cities)


@example(group=GROUP)
def annotated_base_type_supports_polymorphism() -> None:
    """A name annotated with a base type can refer to any of its subtypes."""
    vehicles: list[Vehicle] = [Car("FAB 1"), Lorry("Trucker 1")]
    reg_numbers = collect((v.reg_number for v in vehicles), to_list())
    check_contains_exactly(reg_numbers, ["FAB 1", "Trucker 1"])

    # inferred as Car; a type checker rejects rebinding it to a Lorry
    vehicle = Car("130Y R4C3R")
    check_equal(type(vehicle), Car, "inferred type")
