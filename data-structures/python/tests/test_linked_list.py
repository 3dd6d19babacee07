import sys
import os
import unittest

from hypothesis import given, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linked_list import ListNode


class TestListNode(unittest.TestCase):
    def test_new_list_is_empty(self):
        lst = ListNode()
        self.assertTrue(lst.is_empty())
        self.assertEqual(len(lst), 0)
        self.assertEqual(lst.to_list(), [])

    def test_value_on_empty_raises(self):
        lst = ListNode()
        with self.assertRaises(IndexError):
            lst.value

    def test_next_on_empty_raises(self):
        lst = ListNode()
        with self.assertRaises(IndexError):
            lst.next

    def test_insert_into_empty_returns_same_slot(self):
        lst = ListNode()
        position = lst.insert(42)
        self.assertIs(position, lst)
        self.assertEqual(lst.value, 42)
        self.assertTrue(lst.next.is_empty())

    def test_insert_after_head(self):
        lst = ListNode.from_iterable([1, 3])
        position = lst.insert(2)
        self.assertEqual(position.value, 2)
        self.assertEqual(lst.to_list(), [1, 2, 3])

    def test_insert_chain_from_handle(self):
        lst = ListNode()
        position = lst.insert(1)
        position = position.insert(2)
        position.insert(3)
        self.assertEqual(lst.to_list(), [1, 2, 3])

    def test_from_iterable_preserves_order(self):
        lst = ListNode.from_iterable([3, 1, 2])
        self.assertEqual(list(lst), [3, 1, 2])
        self.assertEqual(len(lst), 3)

    def test_delete_head(self):
        lst = ListNode.from_iterable([1, 2, 3])
        lst.delete()
        self.assertEqual(lst.to_list(), [2, 3])

    def test_delete_middle(self):
        lst = ListNode.from_iterable([1, 2, 3])
        lst.next.delete()
        self.assertEqual(lst.to_list(), [1, 3])

    def test_delete_last_leaves_empty(self):
        lst = ListNode.from_iterable([1])
        lst.delete()
        self.assertTrue(lst.is_empty())

    def test_delete_on_empty_is_no_op(self):
        lst = ListNode()
        lst.delete()
        self.assertTrue(lst.is_empty())

    def test_reverse(self):
        lst = ListNode.from_iterable([1, 2, 3, 4])
        lst.reverse()
        self.assertEqual(lst.to_list(), [4, 3, 2, 1])

    def test_reverse_empty_and_single(self):
        empty = ListNode()
        empty.reverse()
        self.assertTrue(empty.is_empty())
        single = ListNode.from_iterable([7])
        single.reverse()
        self.assertEqual(single.to_list(), [7])

    def test_reverse_long_list(self):
        lst = ListNode.from_iterable(range(10000))
        lst.reverse()
        self.assertEqual(lst.value, 9999)
        self.assertEqual(len(lst), 10000)

    def test_equality(self):
        self.assertEqual(ListNode.from_iterable([1, 2]), ListNode.from_iterable([1, 2]))
        self.assertNotEqual(ListNode.from_iterable([1, 2]), ListNode.from_iterable([1]))
        self.assertNotEqual(ListNode.from_iterable([1, 2]), ListNode.from_iterable([2, 1]))
        self.assertEqual(ListNode(), ListNode())

    def test_str(self):
        self.assertEqual(str(ListNode.from_iterable([1, 2, 3])), "1 -> 2 -> 3 -> Nil")
        self.assertEqual(str(ListNode()), "Nil")

    @given(st.lists(st.integers()))
    def test_round_trip(self, values):
        self.assertEqual(ListNode.from_iterable(values).to_list(), values)

    @given(st.lists(st.integers()))
    def test_reverse_twice_restores(self, values):
        lst = ListNode.from_iterable(values)
        lst.reverse()
        self.assertEqual(lst.to_list(), values[::-1])
        lst.reverse()
        self.assertEqual(lst, ListNode.from_iterable(values))


if __name__ == "__main__":
    unittest.main()
