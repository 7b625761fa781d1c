"""Tests for ReactiveArray mutators and their channels."""

import pytest

from ripple import ReactiveArray


@pytest.fixture
def numbers():
    return ReactiveArray([0, 1, 2])


@pytest.fixture
def aggregate(numbers, recorder):
    """Observer on the aggregate channel, storing a copy of each payload."""
    observer = recorder(list)
    numbers.add_observer(observer)
    return observer


class TestReactiveArrayReplacement:
    """Tests for whole-list replacement."""

    def test_set_and_value_assignment(self, numbers, aggregate):
        """set and value assignment should each notify with the new list."""
        assert numbers.value == [0, 1, 2]

        numbers.set([3, 4, 5])
        numbers.value = [6, 7, 8]

        assert numbers.to_unreactive() == [6, 7, 8]
        assert aggregate.received == [[3, 4, 5], [6, 7, 8]]

    def test_set_copies_input(self, numbers):
        """The array should keep its own copy of an assigned list."""
        source = [9, 9]
        numbers.set(source)
        source.append(10)

        assert numbers.value == [9, 9]

    def test_constructor_copies_and_accepts_tuples(self):
        """Construction should copy the seed into a fresh list."""
        seed = (1, 2)
        array = ReactiveArray(seed)

        assert array.value == [1, 2]
        assert isinstance(array.value, list)

    def test_to_unreactive_is_independent_copy(self, numbers):
        """to_unreactive should be equal to value but not the same list."""
        plain = numbers.to_unreactive()

        assert plain == numbers.value
        assert plain is not numbers.value

    def test_set_without_notifying(self, numbers, aggregate):
        """set_without_notifying should not reach any observer."""
        numbers.set_without_notifying([5])

        assert numbers.value == [5]
        assert aggregate.received == []


class TestReactiveArrayMutators:
    """Tests for each mutator's sub-observable payload, return value and aggregate notification."""

    def test_set_at(self, numbers, aggregate, recorder):
        """set_at should fire on_set_at with the index, then the aggregate channel."""
        indexed = []
        numbers.on_set_at.add_observer(lambda i: indexed.append((i, numbers.value[i])))

        numbers.set_at(1, 10)

        assert numbers.value == [0, 10, 2]
        assert aggregate.received == [[0, 10, 2]]
        assert indexed == [(1, 10)]

    def test_set_at_out_of_range_raises(self, numbers, aggregate):
        """set_at past the end should raise IndexError without notifying."""
        with pytest.raises(IndexError):
            numbers.set_at(5, 1)
        assert aggregate.received == []

    def test_item_assignment_delegates_to_set_at(self, numbers, aggregate, recorder):
        """arr[i] = v should behave like set_at."""
        indexed = recorder()
        numbers.on_set_at.add_observer(indexed)

        numbers[-1] = 20

        assert numbers.value == [0, 1, 20]
        assert indexed.received == [-1]
        assert aggregate.received == [[0, 1, 20]]

    def test_copy_within(self, numbers, aggregate, recorder):
        """copy_within should copy inside the list and report the full list."""
        channel = recorder(list)
        numbers.on_copy_within.add_observer(channel)

        result = numbers.copy_within(0, 1, 2)

        assert result == [1, 1, 2]
        assert numbers.value == [1, 1, 2]
        assert aggregate.received == [[1, 1, 2]]
        assert channel.received == [[1, 1, 2]]

    def test_copy_within_negative_positions(self):
        """Negative positions should count from the end."""
        array = ReactiveArray([1, 2, 3, 4, 5])

        assert array.copy_within(-2, -3, -1) == [1, 2, 3, 3, 4]

    def test_copy_within_clamps_to_length(self):
        """Copies running past the end should be truncated."""
        array = ReactiveArray([1, 2, 3, 4, 5])

        assert array.copy_within(3, 0) == [1, 2, 3, 1, 2]

    def test_fill(self, numbers, aggregate, recorder):
        """fill should overwrite the whole list by default."""
        channel = recorder(list)
        numbers.on_fill.add_observer(channel)

        result = numbers.fill(1)

        assert result == [1, 1, 1]
        assert aggregate.received == [[1, 1, 1]]
        assert channel.received == [[1, 1, 1]]

    def test_fill_range(self):
        """fill should respect start and end, including negative end."""
        array = ReactiveArray([0, 0, 0, 0])

        assert array.fill(7, 1, -1) == [0, 7, 7, 0]

    def test_pop(self, numbers, aggregate, recorder):
        """pop should remove and report the last element."""
        channel = recorder()
        numbers.on_pop.add_observer(channel)

        assert numbers.pop() == 2
        assert numbers.value == [0, 1]
        assert aggregate.received == [[0, 1]]
        assert channel.received == [2]

    def test_pop_empty(self, recorder):
        """pop on an empty array should return None and still notify."""
        array = ReactiveArray()
        channel, aggregate = recorder(), recorder(list)
        array.on_pop.add_observer(channel)
        array.add_observer(aggregate)

        assert array.pop() is None
        assert channel.received == [None]
        assert aggregate.received == [[]]

    def test_push(self, numbers, aggregate, recorder):
        """push should report only the pushed items and return the new length."""
        channel = recorder()
        numbers.on_push.add_observer(channel)

        assert numbers.push(3, 4) == 5
        assert numbers.value == [0, 1, 2, 3, 4]
        assert aggregate.received == [[0, 1, 2, 3, 4]]
        assert channel.received == [[3, 4]]

    def test_reverse(self, numbers, aggregate, recorder):
        """reverse should reverse in place and report the full list."""
        channel = recorder(list)
        numbers.on_reverse.add_observer(channel)

        assert numbers.reverse() == [2, 1, 0]
        assert aggregate.received == [[2, 1, 0]]
        assert channel.received == [[2, 1, 0]]

    def test_shift(self, numbers, aggregate, recorder):
        """shift should remove and report the first element."""
        channel = recorder()
        numbers.on_shift.add_observer(channel)

        assert numbers.shift() == 0
        assert numbers.value == [1, 2]
        assert aggregate.received == [[1, 2]]
        assert channel.received == [0]

    def test_shift_empty(self):
        """shift on an empty array should return None."""
        assert ReactiveArray().shift() is None

    def test_sort(self, recorder):
        """sort should order in place and report the full list."""
        array = ReactiveArray([1, 2, 0])
        channel, total = recorder(list), recorder(list)
        array.on_sort.add_observer(channel)
        array.add_observer(total)

        assert array.sort() == [0, 1, 2]
        assert total.received == [[0, 1, 2]]
        assert channel.received == [[0, 1, 2]]

    def test_sort_with_comparator(self):
        """A two-argument comparator should drive the ordering."""
        array = ReactiveArray([3, 1, 2])

        assert array.sort(lambda a, b: b - a) == [3, 2, 1]

    def test_sort_with_key_and_reverse(self):
        """Python-style key and reverse should be accepted."""
        array = ReactiveArray(["bb", "a", "ccc"])

        assert array.sort(key=len, reverse=True) == ["ccc", "bb", "a"]

    def test_splice_without_items(self, numbers, aggregate, recorder):
        """splice should remove and report the removed elements."""
        channel = recorder()
        numbers.on_splice.add_observer(channel)

        assert numbers.splice(1, 2) == [1, 2]
        assert numbers.value == [0]
        assert aggregate.received == [[0]]
        assert channel.received == [[1, 2]]

    def test_splice_with_items(self, numbers, aggregate, recorder):
        """splice should insert the new items where it removed."""
        channel = recorder()
        numbers.on_splice.add_observer(channel)

        assert numbers.splice(1, 2, -1, -2) == [1, 2]
        assert numbers.value == [0, -1, -2]
        assert aggregate.received == [[0, -1, -2]]
        assert channel.received == [[1, 2]]

    def test_splice_without_count_removes_tail(self, numbers):
        """Omitting the count should remove everything from start."""
        assert numbers.splice(1) == [1, 2]
        assert numbers.value == [0]

    def test_splice_negative_start_and_insert_only(self, numbers):
        """A negative start counts from the end; a zero count only inserts."""
        assert numbers.splice(-1, 0, 9) == []
        assert numbers.value == [0, 1, 9, 2]

    def test_unshift(self, numbers, aggregate, recorder):
        """unshift should prepend and report only the new items."""
        channel = recorder()
        numbers.on_unshift.add_observer(channel)

        assert numbers.unshift(-2, -1) == 5
        assert numbers.value == [-2, -1, 0, 1, 2]
        assert aggregate.received == [[-2, -1, 0, 1, 2]]
        assert channel.received == [[-2, -1]]

    def test_sub_observable_fires_before_aggregate(self, numbers):
        """Channel observers added after construction should run after the aggregate relay."""
        order = []
        numbers.add_observer(lambda v: order.append("aggregate"))
        numbers.on_push.add_observer(lambda v: order.append("push"))

        numbers.push(1)

        # The relay to the aggregate channel was registered first.
        assert order == ["aggregate", "push"]

    def test_every_channel_relays_to_aggregate(self, numbers):
        """Notifying any channel directly should trigger the aggregate channel."""
        hits = []
        numbers.add_observer(lambda v: hits.append(list(v)))

        for channel in numbers.channels():
            channel.notify(None)

        assert len(hits) == 10
        assert all(hit == [0, 1, 2] for hit in hits)


class TestReactiveArrayReplay:
    """to_unreactive should match a plain list replaying the same mutations."""

    def test_matches_plain_list_replay(self):
        """A series of mutations should leave the same contents as on a plain list."""
        array = ReactiveArray([5, 3, 8])
        plain = [5, 3, 8]

        array.push(1, 9)
        plain.extend([1, 9])
        array.sort()
        plain.sort()
        array.unshift(0)
        plain.insert(0, 0)
        array.splice(2, 1, 4, 4)
        plain[2:3] = [4, 4]
        array.set_at(0, 7)
        plain[0] = 7
        array.pop()
        plain.pop()
        array.shift()
        plain.pop(0)
        array.reverse()
        plain.reverse()

        assert array.to_unreactive() == plain


class TestReactiveArraySequence:
    """Tests for read access helpers."""

    def test_len_iter_getitem_contains(self, numbers):
        """The array should support len, iteration, indexing and membership."""
        assert len(numbers) == 3
        assert list(numbers) == [0, 1, 2]
        assert numbers[1] == 1
        assert 2 in numbers
        assert 5 not in numbers

    def test_repr(self, numbers):
        assert repr(numbers) == "ReactiveArray([0, 1, 2])"
