import array
import pathlib
import random
import sys
import unittest
from collections import deque

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ouroboros.cyclic_deque import CyclicDeque  # noqa: E402


class ConstructionTest(unittest.TestCase):
    def test_default_is_empty_and_full(self):
        cdeque = CyclicDeque()
        self.assertEqual(cdeque.capacity(), 0)
        self.assertEqual(cdeque.size(), 0)
        self.assertEqual(cdeque.available(), 0)
        self.assertTrue(cdeque.empty())
        # A bit of an oddity, but understandable with 0 capacity.
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.begin(), cdeque.end())

    def test_capacity_from_buffer(self):
        data = [0] * 10
        cdeque = CyclicDeque(data)
        self.assertEqual(cdeque.capacity(), len(data))
        self.assertEqual(cdeque.size(), 0)
        self.assertEqual(cdeque.available(), cdeque.capacity())
        self.assertTrue(cdeque.empty())
        self.assertFalse(cdeque.full())

    def test_initial_occupancy(self):
        data = [0] * 10
        for occupied in range(len(data) + 1):
            cdeque = CyclicDeque(data, occupied)
            self.assertEqual(cdeque.size(), occupied)
            self.assertEqual(len(cdeque), occupied)
            self.assertEqual(cdeque.available(), len(data) - occupied)
            self.assertEqual(cdeque.full(), occupied == len(data))
            self.assertEqual(cdeque.empty(), occupied == 0)

    def test_size_tracks_wrapped_full_window(self):
        cdeque = CyclicDeque([0] * 3)
        for value in (1, 2, 3):
            cdeque.push_back(value)
        cdeque.pop_front()
        cdeque.push_back(4)
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.size(), 3)
        self.assertEqual(len(cdeque), 3)
        self.assertEqual(cdeque.end() - cdeque.begin(), 3)
        self.assertEqual(cdeque.to_array().tolist(), [2, 3, 4])
        for _ in range(3):
            cdeque.pop_back()
        self.assertTrue(cdeque.empty())
        self.assertEqual(cdeque.cend(), cdeque.cbegin())

    def test_full_then_clear(self):
        data = list(range(8))
        cdeque = CyclicDeque(data, 8)
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.to_list(), data)
        cdeque.clear()
        self.assertTrue(cdeque.empty())
        self.assertEqual(cdeque.begin(), cdeque.end())

    def test_rejects_occupancy_beyond_capacity(self):
        with self.assertRaises(ValueError):
            CyclicDeque([0] * 3, 4)

    def test_window_of_buffer(self):
        data = ["x"] * 10
        cdeque = CyclicDeque(data, start=2, stop=5)
        self.assertEqual(cdeque.capacity(), 3)
        for value in "abcde":
            if cdeque.full():
                cdeque.pop_front()
            cdeque.push_back(value)
        self.assertEqual(cdeque.to_list(), ["c", "d", "e"])
        self.assertEqual(data[:2], ["x", "x"])
        self.assertEqual(data[5:], ["x"] * 5)

    def test_rejects_window_outside_buffer(self):
        with self.assertRaises(ValueError):
            CyclicDeque([0] * 4, start=2, stop=6)
        with self.assertRaises(ValueError):
            CyclicDeque([0] * 4, start=3, stop=1)


class PushPopTest(unittest.TestCase):
    def test_lifo_back(self):
        buffer = [0] * 3
        cdeque = CyclicDeque(buffer)
        for i in range(cdeque.capacity()):
            cdeque.push_back(i + 1)
            self.assertEqual(cdeque.back(), i + 1)
        self.assertEqual(cdeque.size(), len(buffer))
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.front(), 1)
        for i in range(len(buffer)):
            self.assertEqual(cdeque[i], i + 1)

        for _ in range(len(buffer)):
            cdeque.pop_back()
        self.assertEqual(cdeque.size(), 0)
        self.assertTrue(cdeque.empty())
        self.assertFalse(cdeque.full())

    def test_lifo_front(self):
        buffer = [0] * 3
        cdeque = CyclicDeque(buffer)
        for i in range(cdeque.capacity()):
            cdeque.push_front(i + 1)
            self.assertEqual(cdeque.front(), i + 1)
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.front(), 3)
        self.assertEqual(cdeque.back(), 1)
        self.assertEqual([cdeque[0], cdeque[1], cdeque[2]], [3, 2, 1])

        for _ in range(len(buffer)):
            cdeque.pop_front()
        self.assertTrue(cdeque.empty())
        self.assertFalse(cdeque.full())

    def test_fifo_back_inserter(self):
        cdeque = CyclicDeque([0] * 3)
        for value in (1, 2, 3):
            cdeque.push_back(value)
        cdeque.pop_front()
        cdeque.push_back(4)
        self.assertEqual(cdeque.to_list(), [2, 3, 4])
        self.assertTrue(cdeque.full())

    def test_fifo_front_inserter(self):
        cdeque = CyclicDeque([0] * 3)
        for value in (1, 2, 3):
            cdeque.push_front(value)
        cdeque.pop_back()
        cdeque.push_front(4)
        self.assertEqual(cdeque.to_list(), [4, 3, 2])
        self.assertTrue(cdeque.full())

    def test_setitem_writes_through_wrapped_window(self):
        buffer = [0] * 4
        cdeque = CyclicDeque(buffer)
        for value in (1, 2, 3, 4):
            cdeque.push_back(value)
        cdeque.pop_front()
        cdeque.pop_front()
        cdeque.push_back(5)
        cdeque[2] = 50
        self.assertEqual(cdeque.to_list(), [3, 4, 50])
        self.assertEqual(buffer[0], 50)

    def test_random_operations_match_reference(self):
        rng = random.Random(1234)
        capacity = 7
        cdeque = CyclicDeque([None] * capacity)
        reference = deque()
        for step in range(2000):
            op = rng.randrange(4)
            if op == 0 and not cdeque.full():
                cdeque.push_back(step)
                reference.append(step)
            elif op == 1 and not cdeque.full():
                cdeque.push_front(step)
                reference.appendleft(step)
            elif op == 2 and not cdeque.empty():
                cdeque.pop_back()
                reference.pop()
            elif op == 3 and not cdeque.empty():
                cdeque.pop_front()
                reference.popleft()
            self.assertEqual(cdeque.size(), len(reference))
            for i in range(cdeque.size()):
                self.assertEqual(cdeque[i], reference[i])


class AtTest(unittest.TestCase):
    def test_at_bounds(self):
        cdeque = CyclicDeque([0] * 4)
        with self.assertRaises(IndexError):
            cdeque.at(0)
        for value in (7, 8, 9):
            cdeque.push_front(value)
            self.assertEqual(cdeque.at(cdeque.size() - 1), 7)
            with self.assertRaises(IndexError):
                cdeque.at(cdeque.size())

    def test_at_rejects_negative_index(self):
        cdeque = CyclicDeque([1, 2], 2)
        with self.assertRaises(IndexError):
            cdeque.at(-1)

    def test_subscript_negative_index_does_not_count_from_back(self):
        data = [1, 2, 3, 4]
        cdeque = CyclicDeque(data, 2)
        self.assertEqual(cdeque.back(), 2)
        self.assertEqual(cdeque[-1], 4)

    def test_at_message_names_index_and_size(self):
        cdeque = CyclicDeque([1, 2, 3], 2)
        with self.assertRaises(IndexError) as ctx:
            cdeque.at(5)
        self.assertIn("5", str(ctx.exception))
        self.assertIn("2", str(ctx.exception))


class RangeTest(unittest.TestCase):
    def test_append_range(self):
        v = [42] * 16
        r = [2, 3, 4, 5, 6, 7, 8, 9]

        cdeque = CyclicDeque(v)
        cdeque.push_back(0)
        cdeque.push_back(1)
        cdeque.append_range(r)
        self.assertEqual(cdeque.size(), len(r) + 2)
        for i in range(cdeque.size()):
            self.assertEqual(cdeque[i], i)
        for _ in range(4):
            cdeque.pop_front()
        self.assertEqual(cdeque.size(), len(r) - 2)
        cdeque.append_range(r)
        for i in range(6):
            self.assertEqual(cdeque[i], i + 4)
        for i in range(6, len(r) + 6):
            self.assertEqual(cdeque[i], i - 4)
        self.assertEqual(cdeque.size(), len(r) * 2 - 2)

    def test_prepend_range(self):
        v = [42] * 16
        r = [0, 1, 2, 3, 4, 5, 6, 7]

        cdeque = CyclicDeque(v)
        cdeque.push_front(9)
        cdeque.push_front(8)
        cdeque.prepend_range(r)
        self.assertEqual(cdeque.size(), len(r) + 2)
        for i in range(cdeque.size()):
            self.assertEqual(cdeque[i], i)
        for _ in range(4):
            cdeque.pop_back()
        self.assertEqual(cdeque.size(), len(r) - 2)
        cdeque.prepend_range(r)
        for i in range(len(r)):
            self.assertEqual(cdeque[i], i)
        for i in range(len(r), len(r) + 6):
            self.assertEqual(cdeque[i], i - len(r))
        self.assertEqual(cdeque.size(), len(r) * 2 - 2)

    def test_append_range_filling_to_physical_end_keeps_back_usable(self):
        buffer = [None] * 4
        cdeque = CyclicDeque(buffer)
        cdeque.append_range([1, 2, 3, 4])
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.back(), 4)
        cdeque.pop_front()
        cdeque.push_back(5)
        self.assertEqual(cdeque.to_list(), [2, 3, 4, 5])
        self.assertEqual(buffer, [5, 2, 3, 4])

    def test_ranges_match_single_pushes_at_every_offset(self):
        capacity = 6
        block = ["a", "b", "c", "d"]
        for offset in range(capacity):
            with self.subTest(offset=offset):
                bulk = CyclicDeque([None] * capacity)
                single = CyclicDeque([None] * capacity)
                for deq in (bulk, single):
                    # Rotate the physical window by ``offset`` slots.
                    for i in range(offset):
                        deq.push_back(i)
                        deq.pop_front()
                    deq.push_back("x")

                bulk.append_range(block[:2])
                for item in block[:2]:
                    single.push_back(item)
                bulk.prepend_range(block[2:])
                for item in reversed(block[2:]):
                    single.push_front(item)

                self.assertEqual(bulk.to_list(), ["c", "d", "x", "a", "b"])
                self.assertEqual(bulk.to_list(), single.to_list())
                self.assertEqual(bulk.buffer, single.buffer)

    def test_prepend_range_on_empty_deque_at_physical_start(self):
        buffer = [None] * 5
        cdeque = CyclicDeque(buffer)
        cdeque.prepend_range(iter([1, 2, 3]))
        self.assertEqual(cdeque.to_list(), [1, 2, 3])
        self.assertEqual(buffer, [None, None, 1, 2, 3])
        cdeque.push_back(4)
        self.assertEqual(cdeque.to_list(), [1, 2, 3, 4])
        self.assertEqual(buffer[0], 4)

    def test_empty_ranges_are_no_ops(self):
        cdeque = CyclicDeque()
        cdeque.append_range([])
        cdeque.prepend_range([])
        self.assertTrue(cdeque.empty())
        self.assertTrue(cdeque.full())

    def test_over_capacity_range_is_rejected_untouched(self):
        buffer = [0] * 4
        cdeque = CyclicDeque(buffer)
        cdeque.push_back(1)
        cdeque.push_back(2)
        with self.assertRaises(ValueError):
            cdeque.append_range([3, 4, 5])
        with self.assertRaises(ValueError):
            cdeque.prepend_range([3, 4, 5])
        self.assertEqual(cdeque.to_list(), [1, 2])
        self.assertEqual(buffer, [1, 2, 0, 0])


class ResizeTest(unittest.TestCase):
    def test_shrink_then_push_reuses_next_slot(self):
        buffer = list(range(10))
        cdeque = CyclicDeque(buffer, 5)
        cdeque.resize(3)
        self.assertEqual(cdeque.size(), 3)
        cdeque.push_back(99)
        self.assertEqual(buffer[3], 99)
        self.assertEqual(buffer[4], 4)
        self.assertEqual(cdeque.to_list(), [0, 1, 2, 99])

    def test_grow_exposes_existing_slots(self):
        buffer = list(range(6))
        cdeque = CyclicDeque(buffer, 2)
        cdeque.resize(6)
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.to_list(), buffer)

    def test_resize_on_wrapped_window(self):
        buffer = [0] * 4
        cdeque = CyclicDeque(buffer)
        for value in (1, 2, 3, 4):
            cdeque.push_back(value)
        for _ in range(3):
            cdeque.pop_front()
        cdeque.push_back(5)
        cdeque.push_back(6)
        self.assertEqual(cdeque.to_list(), [4, 5, 6])

        cdeque.resize(1)
        self.assertEqual(cdeque.to_list(), [4])
        cdeque.push_back(7)
        self.assertEqual(cdeque.to_list(), [4, 7])
        self.assertEqual(buffer, [7, 6, 3, 4])

        cdeque.resize(4)
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.to_list(), [4, 7, 6, 3])


class ArrayBufferTest(unittest.TestCase):
    def test_append_range_straddles_wrap(self):
        buffer = array.array("i", [0] * 4)
        cdeque = CyclicDeque(buffer)
        cdeque.append_range([1, 2, 3])
        cdeque.pop_front()
        cdeque.pop_front()
        cdeque.append_range([4, 5])
        self.assertEqual(cdeque.to_list(), [3, 4, 5])
        self.assertEqual(buffer, array.array("i", [5, 2, 3, 4]))

    def test_prepend_range_straddles_wrap(self):
        buffer = array.array("i", [0] * 4)
        cdeque = CyclicDeque(buffer)
        cdeque.push_back(0)
        cdeque.pop_front()
        cdeque.push_back(3)
        cdeque.prepend_range([1, 2])
        self.assertEqual(cdeque.to_list(), [1, 2, 3])
        self.assertEqual(buffer, array.array("i", [2, 3, 0, 1]))

    def test_bytearray_buffer(self):
        buffer = bytearray(b"....")
        cdeque = CyclicDeque(buffer)
        cdeque.push_back(ord("c"))
        cdeque.prepend_range(b"ab")
        self.assertEqual(bytes(cdeque.to_list()), b"abc")
        self.assertEqual(buffer, bytearray(b"c.ab"))


class WindowedRegionTest(unittest.TestCase):
    """Deques restricted to ``buffer[2:6]`` so positions are offset from 0."""

    def _rotated_window(self):
        data = ["x"] * 8
        cdeque = CyclicDeque(data, start=2, stop=6)
        # Move the front off the first slot of the window.
        cdeque.push_back(0)
        cdeque.pop_front()
        cdeque.push_back(1)
        cdeque.push_back(2)
        return data, cdeque

    def test_prepend_range_across_window_start(self):
        data, cdeque = self._rotated_window()
        cdeque.prepend_range(["a", "b"])
        self.assertTrue(cdeque.full())
        self.assertEqual(cdeque.to_list(), ["a", "b", 1, 2])
        self.assertEqual(data, ["x", "x", "b", 1, 2, "a", "x", "x"])

    def test_resize_on_wrapped_window(self):
        data, cdeque = self._rotated_window()
        cdeque.prepend_range(["a", "b"])
        cdeque.resize(2)
        self.assertEqual(cdeque.to_list(), ["a", "b"])
        cdeque.push_back(9)
        self.assertEqual(cdeque.to_list(), ["a", "b", 9])
        self.assertEqual(data, ["x", "x", "b", 9, 2, "a", "x", "x"])
        cdeque.resize(4)
        self.assertEqual(cdeque.to_list(), ["a", "b", 9, 2])

    def test_reverse_walk_and_iterator_arithmetic(self):
        data, cdeque = self._rotated_window()
        cdeque.prepend_range(["a", "b"])
        walked = []
        rit, rend = cdeque.rbegin(), cdeque.rend()
        while rit != rend:
            walked.append(rit.value)
            rit.inc()
        self.assertEqual(walked, [2, 1, "b", "a"])
        self.assertEqual(list(reversed(cdeque)), walked)

        self.assertEqual(cdeque.end() - cdeque.begin(), 4)
        self.assertEqual((cdeque.begin() + 3).value, 2)
        self.assertEqual(cdeque.rbegin()[3], "a")
        cdeque.rbegin().value = "z"
        self.assertEqual(data[4], "z")
        self.assertEqual(data[:2] + data[6:], ["x"] * 4)


if __name__ == "__main__":
    unittest.main()
