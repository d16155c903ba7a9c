"""
Tests for frozen renderings (FrozenMapping, FrozenSequence, freeze, frozen_copy).

Views hand these out from snapshot() and the source accessor, so they must
be read-only and must not track later changes to the original.
"""

import collections as _collections

import pytest as _pytest

import subview.utils.frozen as frozen


class TestFrozenSequence:
    """Tests for FrozenSequence."""

    def test_reads_like_a_list(self) -> None:
        """Indexing, slicing, len and iteration work."""
        seq = frozen.FrozenSequence([1, 2, 3])

        assert seq[0] == 1
        assert seq[-1] == 3
        assert len(seq) == 3
        assert list(seq) == [1, 2, 3]
        assert 2 in seq

    def test_slice_stays_frozen(self) -> None:
        """Slicing returns another FrozenSequence."""
        seq = frozen.FrozenSequence([1, 2, 3])

        part = seq[1:]

        assert isinstance(part, frozen.FrozenSequence)
        assert part == [2, 3]

    def test_nested_containers_frozen(self) -> None:
        """Nested lists and dicts come back frozen."""
        seq = frozen.FrozenSequence([[1], {"a": 1}])

        assert isinstance(seq[0], frozen.FrozenSequence)
        assert isinstance(seq[1], frozen.FrozenMapping)

    def test_no_mutation(self) -> None:
        """Item assignment and list mutators are unavailable."""
        seq = frozen.FrozenSequence([1, 2])

        with _pytest.raises(TypeError):
            seq[0] = 5  # type: ignore[index]
        with _pytest.raises(AttributeError):
            seq.append(3)  # type: ignore[attr-defined]

    def test_equality(self) -> None:
        """Equal to any non-string sequence with the same items."""
        seq = frozen.FrozenSequence(["a", "b"])

        assert seq == ["a", "b"]
        assert seq == ("a", "b")
        assert seq != ["a"]
        assert seq != "ab"
        assert seq != 42

    def test_not_hashable(self) -> None:
        """FrozenSequence is not hashable."""
        with _pytest.raises(TypeError, match="unhashable"):
            hash(frozen.FrozenSequence([1]))

    def test_repr(self) -> None:
        """repr names the wrapper."""
        assert repr(frozen.FrozenSequence([1])) == "FrozenSequence([1])"


class TestFrozenMapping:
    """Tests for FrozenMapping."""

    def test_reads_like_a_dict(self) -> None:
        """Lookup, len, iteration and membership work."""
        fm = frozen.FrozenMapping({"a": 1, "b": 2})

        assert fm["a"] == 1
        assert len(fm) == 2
        assert set(fm) == {"a", "b"}
        assert "b" in fm
        with _pytest.raises(KeyError):
            _ = fm["missing"]

    def test_no_mutation(self) -> None:
        """Item assignment and deletion are unavailable."""
        fm = frozen.FrozenMapping({"a": 1})

        with _pytest.raises(TypeError):
            fm["a"] = 2  # type: ignore[index]
        with _pytest.raises(TypeError):
            del fm["a"]  # type: ignore[attr-defined]

    def test_equality(self) -> None:
        """Equal to any mapping with the same content."""
        fm = frozen.FrozenMapping({"a": 1})

        assert fm == {"a": 1}
        assert fm == frozen.FrozenMapping({"a": 1})
        assert fm != {"a": 2}
        assert fm != [("a", 1)]

    def test_accepts_non_dict_mapping(self) -> None:
        """Other Mapping types are copied into a dict."""
        fm = frozen.FrozenMapping(_collections.OrderedDict(a=1))

        assert fm == {"a": 1}


class TestFreeze:
    """Tests for freeze(), which wraps without copying."""

    def test_wraps_containers(self) -> None:
        """dicts and lists are wrapped, other values pass through."""
        assert isinstance(frozen.freeze({}), frozen.FrozenMapping)
        assert isinstance(frozen.freeze([]), frozen.FrozenSequence)
        assert frozen.freeze("abc") == "abc"
        assert frozen.freeze((1,)) == (1,)
        assert frozen.freeze(5) == 5

    def test_bytearray_to_bytes(self) -> None:
        """bytearray becomes bytes."""
        result = frozen.freeze(bytearray(b"ab"))

        assert result == b"ab"
        assert type(result) is bytes

    def test_already_frozen_unchanged(self) -> None:
        """Frozen values are returned as is."""
        seq = frozen.FrozenSequence([1])

        assert frozen.freeze(seq) is seq

    def test_shares_data(self) -> None:
        """freeze() sees later changes to a list it wrapped."""
        data = [1]
        seq = frozen.freeze(data)
        data.append(2)

        assert seq == [1, 2]


class TestFrozenCopy:
    """Tests for frozen_copy(), which copies before freezing."""

    def test_list_copied(self) -> None:
        """Later changes to the list do not show through."""
        data = [1, 2]
        snap = frozen.frozen_copy(data)
        data.append(3)

        assert isinstance(snap, frozen.FrozenSequence)
        assert snap == [1, 2]

    def test_dict_copied(self) -> None:
        """Later changes to the dict do not show through."""
        data = {"a": 1}
        snap = frozen.frozen_copy(data)
        data["b"] = 2

        assert snap == {"a": 1}

    def test_bytes_like(self) -> None:
        """bytearray and memoryview become bytes."""
        assert frozen.frozen_copy(bytearray(b"ab")) == b"ab"
        assert type(frozen.frozen_copy(memoryview(b"ab"))) is bytes

    def test_immutable_values_returned(self) -> None:
        """str, bytes and tuple need no copy."""
        text = "abc"

        assert frozen.frozen_copy(text) is text

    def test_other_objects_shallow_copied(self) -> None:
        """Arbitrary objects are copied, not shared."""

        class Box:
            def __init__(self) -> None:
                self.value = 1

        box = Box()
        copy = frozen.frozen_copy(box)
        box.value = 2

        assert copy is not box
        assert copy.value == 1
