"""Unit tests for the read-only list, set and mapping types and their factories."""

import operator

import pytest

from calque.collections import (
    UnmodifiableList,
    UnmodifiableMap,
    UnmodifiableSet,
    list_copy_of,
    list_of,
    map_copy_of,
    map_of,
    set_copy_of,
    set_of,
)
from calque.errors import (
    DuplicateElementError,
    DuplicateKeyError,
    NullElementError,
    UnsupportedOperationError,
)

# ============================================================================
#                               Lists
# ============================================================================


class TestUnmodifiableList:
    """Tests for UnmodifiableList and the list factories."""

    @staticmethod
    def test_list_of_preserves_argument_order() -> None:
        """list_of keeps elements in the order given."""
        colours = list_of("red", "yellow", "pink")
        assert list(colours) == ["red", "yellow", "pink"]
        assert colours[1] == "yellow"
        assert len(colours) == 3

    @staticmethod
    def test_copy_is_decoupled_from_source() -> None:
        """Later changes to the source list are not visible in the copy."""
        source = ["red", "yellow"]
        copied = list_copy_of(source)
        source.append("blue")
        assert copied == ["red", "yellow"]
        assert "blue" not in copied

    @staticmethod
    def test_copy_of_unmodifiable_returns_same_instance() -> None:
        """Copying an UnmodifiableList returns it unchanged."""
        colours = list_of("red")
        assert list_copy_of(colours) is colours

    @staticmethod
    @pytest.mark.parametrize(
        "factory",
        [lambda: list_of("a", None), lambda: list_copy_of(["a", None])],
        ids=["list_of", "list_copy_of"],
    )
    def test_none_elements_rejected(factory) -> None:
        """Both list factories reject None elements."""
        with pytest.raises(NullElementError, match="element must not be None"):
            factory()

    @staticmethod
    @pytest.mark.parametrize(
        "mutate",
        [
            lambda xs: xs.append("orange"),
            lambda xs: xs.extend(["orange"]),
            lambda xs: xs.insert(0, "orange"),
            lambda xs: xs.remove("red"),
            lambda xs: xs.pop(),
            lambda xs: xs.clear(),
            lambda xs: xs.sort(),
            lambda xs: xs.reverse(),
            lambda xs: xs.__setitem__(0, "orange"),
            lambda xs: xs.__delitem__(0),
        ],
        ids=[
            "append",
            "extend",
            "insert",
            "remove",
            "pop",
            "clear",
            "sort",
            "reverse",
            "setitem",
            "delitem",
        ],
    )
    def test_mutators_raise_and_leave_contents_unchanged(mutate) -> None:
        """Every structural mutator raises UnsupportedOperationError."""
        colours = list_of("red", "yellow", "pink")
        with pytest.raises(UnsupportedOperationError):
            mutate(colours)
        assert colours == ["red", "yellow", "pink"]

    @staticmethod
    def test_augmented_assignment_rejected() -> None:
        """``+=`` does not silently rebind to a new list."""
        colours = list_of("red")
        with pytest.raises(UnsupportedOperationError, match="__iadd__"):
            colours += ["yellow"]

    @staticmethod
    def test_repetition_in_place_rejected() -> None:
        colours = list_of("red")
        with pytest.raises(UnsupportedOperationError, match="__imul__"):
            colours *= 2
        assert colours == ["red"]

    @staticmethod
    def test_unsupported_operation_is_a_type_error() -> None:
        """Callers can catch the builtin TypeError."""
        with pytest.raises(TypeError):
            list_of("red").append("orange")

    @staticmethod
    def test_equality_with_lists_and_tuples() -> None:
        """Lists compare equal to sequences with the same elements in order."""
        colours = list_of("red", "yellow")
        assert colours == ["red", "yellow"]
        assert colours == ("red", "yellow")
        assert colours == list_of("red", "yellow")
        assert colours != ["yellow", "red"]

    @staticmethod
    def test_hashable_and_sliceable() -> None:
        """Lists are hashable; slicing returns another UnmodifiableList."""
        colours = list_of("red", "yellow", "pink")
        assert hash(colours) == hash(list_of("red", "yellow", "pink"))
        head = colours[:2]
        assert isinstance(head, UnmodifiableList)
        assert head == ["red", "yellow"]

    @staticmethod
    def test_concatenation_returns_new_list() -> None:
        """``+`` builds a new unmodifiable list and leaves both operands alone."""
        colours = list_of("red")
        combined = colours + ["yellow"]
        assert combined == ["red", "yellow"]
        assert colours == ["red"]

    @staticmethod
    def test_concatenation_rejects_none() -> None:
        with pytest.raises(NullElementError):
            list_of("red") + ["yellow", None]  # pylint: disable=expression-not-assigned

    @staticmethod
    def test_repr() -> None:
        assert repr(list_of(1, 2)) == "UnmodifiableList([1, 2])"


# ============================================================================
#                               Sets
# ============================================================================


class TestUnmodifiableSet:
    """Tests for UnmodifiableSet and the set factories."""

    @staticmethod
    def test_set_of_rejects_duplicates() -> None:
        """The strict factory raises DuplicateElementError naming the element."""
        with pytest.raises(DuplicateElementError, match="'red'") as excinfo:
            set_of("red", "yellow", "red")
        assert excinfo.value.element == "red"

    @staticmethod
    def test_set_copy_of_collapses_duplicates() -> None:
        """The copying factory keeps each distinct value once."""
        colours = set_copy_of(["red", "yellow", "green", "red"])
        assert colours == {"red", "yellow", "green"}
        assert len(colours) == 3

    @staticmethod
    def test_set_rejects_none() -> None:
        with pytest.raises(NullElementError):
            set_of("red", None)
        with pytest.raises(NullElementError):
            set_copy_of(["red", None])

    @staticmethod
    def test_copy_of_unmodifiable_returns_same_instance() -> None:
        colours = set_of("red")
        assert set_copy_of(colours) is colours

    @staticmethod
    @pytest.mark.parametrize(
        "mutate",
        [
            lambda s: s.add("pink"),
            lambda s: s.discard("red"),
            lambda s: s.remove("red"),
            lambda s: s.pop(),
            lambda s: s.clear(),
            lambda s: s.update({"pink"}),
            lambda s: s.difference_update({"red"}),
            lambda s: s.intersection_update({"red"}),
            lambda s: s.symmetric_difference_update({"red", "pink"}),
        ],
        ids=[
            "add",
            "discard",
            "remove",
            "pop",
            "clear",
            "update",
            "difference_update",
            "intersection_update",
            "symmetric_difference_update",
        ],
    )
    def test_mutators_raise(mutate) -> None:
        """Mutating methods raise and leave the set unchanged."""
        colours = set_of("red", "yellow")
        with pytest.raises(UnsupportedOperationError):
            mutate(colours)
        assert colours == {"red", "yellow"}

    @staticmethod
    @pytest.mark.parametrize(
        "in_place, dunder",
        [
            (operator.ior, "__ior__"),
            (operator.iand, "__iand__"),
            (operator.isub, "__isub__"),
            (operator.ixor, "__ixor__"),
        ],
        ids=["|=", "&=", "-=", "^="],
    )
    def test_in_place_operators_rejected(in_place, dunder) -> None:
        colours = set_of("red", "yellow")
        with pytest.raises(UnsupportedOperationError, match=dunder):
            in_place(colours, {"red", "pink"})
        assert colours == {"red", "yellow"}

    @staticmethod
    def test_set_algebra_returns_unmodifiable_sets() -> None:
        """Binary set operators produce new read-only sets."""
        union = set_of("red") | {"yellow"}
        assert isinstance(union, UnmodifiableSet)
        assert union == {"red", "yellow"}

    @staticmethod
    @pytest.mark.parametrize(
        "combine",
        [
            lambda s: s | {None},
            lambda s: {None} | s,
            lambda s: s ^ {None},
            lambda s: {"pink", None} - s,
        ],
        ids=["or", "reflected-or", "xor", "reflected-sub"],
    )
    def test_set_algebra_rejects_none(combine) -> None:
        with pytest.raises(NullElementError):
            combine(set_of("red"))

    @staticmethod
    def test_hashable() -> None:
        assert hash(set_of("a", "b")) == hash(set_copy_of(["b", "a", "a"]))


# ============================================================================
#                               Maps
# ============================================================================


class TestUnmodifiableMap:
    """Tests for UnmodifiableMap and the map factories."""

    @staticmethod
    def test_map_of_builds_mapping() -> None:
        capitals = map_of(("UK", "London"), ("Italy", "Rome"))
        assert capitals["Italy"] == "Rome"
        assert dict(capitals) == {"UK": "London", "Italy": "Rome"}

    @staticmethod
    def test_map_of_rejects_duplicate_keys() -> None:
        """DuplicateKeyError names the key and both values."""
        with pytest.raises(DuplicateKeyError) as excinfo:
            map_of(("UK", "London"), ("UK", "Leeds"))
        error = excinfo.value
        assert (error.key, error.first, error.second) == ("UK", "London", "Leeds")
        assert str(error) == (
            "duplicate key 'UK' (attempted merging values 'London' and 'Leeds')"
        )

    @staticmethod
    @pytest.mark.parametrize(
        "entries, what",
        [((None, "London"), "key"), (("UK", None), "value")],
        ids=["none-key", "none-value"],
    )
    def test_map_of_rejects_none(entries, what) -> None:
        with pytest.raises(NullElementError, match=f"{what} must not be None"):
            map_of(entries)

    @staticmethod
    def test_copy_is_decoupled_from_source() -> None:
        source = {"UK": "London"}
        copied = map_copy_of(source)
        source["France"] = "Paris"
        assert "France" not in copied
        assert len(copied) == 1

    @staticmethod
    def test_copy_of_unmodifiable_returns_same_instance() -> None:
        capitals = map_of(("UK", "London"))
        assert map_copy_of(capitals) is capitals

    @staticmethod
    def test_copy_rejects_none_values() -> None:
        with pytest.raises(NullElementError):
            map_copy_of({"UK": None})

    @staticmethod
    @pytest.mark.parametrize(
        "mutate",
        [
            lambda m: m.__setitem__("France", "Paris"),
            lambda m: m.__delitem__("UK"),
            lambda m: m.pop("UK"),
            lambda m: m.popitem(),
            lambda m: m.clear(),
            lambda m: m.update({"France": "Paris"}),
            lambda m: m.setdefault("France", "Paris"),
        ],
        ids=["setitem", "delitem", "pop", "popitem", "clear", "update", "setdefault"],
    )
    def test_mutators_raise(mutate) -> None:
        capitals = map_of(("UK", "London"))
        with pytest.raises(UnsupportedOperationError):
            mutate(capitals)
        assert capitals == {"UK": "London"}

    @staticmethod
    def test_union_returns_new_map() -> None:
        merged = map_of(("UK", "London")) | {"Italy": "Rome"}
        assert isinstance(merged, UnmodifiableMap)
        assert merged == {"UK": "London", "Italy": "Rome"}

    @staticmethod
    @pytest.mark.parametrize(
        "other, what",
        [({"Italy": None}, "value"), ({None: "Rome"}, "key")],
        ids=["none-value", "none-key"],
    )
    def test_union_rejects_none(other, what) -> None:
        capitals = map_of(("UK", "London"))
        with pytest.raises(NullElementError, match=f"{what} must not be None"):
            capitals | other  # pylint: disable=pointless-statement
        assert capitals == {"UK": "London"}

    @staticmethod
    def test_hashable() -> None:
        assert hash(map_of(("a", 1), ("b", 2))) == hash(map_of(("b", 2), ("a", 1)))
