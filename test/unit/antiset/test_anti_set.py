import unittest

from antiset.anti_set import AntiSet
from antiset.errors import InvalidSetError, UnsupportedOperationError


class TestAntiSet(unittest.TestCase):
    def setUp(self):
        self.sample_element_list = [1, "", 31531.425, ()]

    def test_any_element_should_belong_to_an_empty_anti_set(self):
        # arrange
        sut = AntiSet()

        # act
        membership = [x in sut for x in self.sample_element_list]

        # assert
        self.assertListEqual(membership, [True] * len(membership))

    def test_any_excluded_element_should_not_be_in_anti_set(self):
        # arrange
        sut = AntiSet(self.sample_element_list)

        # act
        membership = [x in sut for x in self.sample_element_list]

        # assert
        self.assertListEqual(membership, [False] * len(membership))

    def test_any_unhashable_value_is_always_contained(self):
        # arrange
        sut = AntiSet([1, 2])

        # act
        membership = [] in sut

        # assert
        self.assertTrue(membership)

    def test_remove_should_return_new_anti_set_without_element(self):
        # arrange
        sut = AntiSet()

        # act
        result = sut.remove(2)

        # assert
        self.assertNotIn(2, result)
        self.assertIn(2, sut)
        self.assertEqual(result, AntiSet([2]))

    def test_removing_twice_should_not_fail(self):
        # arrange
        sut = AntiSet().remove(2)

        # act
        result = sut.remove(2)

        # assert
        self.assertEqual(result, AntiSet([2]))

    def test_add_should_return_new_anti_set_with_element(self):
        # arrange
        sut = AntiSet([1, 2])

        # act
        result = sut.add(1)

        # assert
        self.assertIn(1, result)
        self.assertNotIn(1, sut)
        self.assertEqual(result.excluded, frozenset([2]))

    def test_calling_should_filter_elements(self):
        # arrange
        sut = AntiSet(["spam"])

        # act
        kept = sut("eggs")
        dropped = sut("spam")

        # assert
        self.assertEqual(kept, "eggs")
        self.assertIsNone(dropped)

    def test_equality_should_only_depend_on_excluded_elements(self):
        # arrange
        s1 = AntiSet([1, 2, 3])
        s2 = AntiSet((3, 2, 1))

        # act / assert
        self.assertEqual(s1, s2)
        self.assertEqual(hash(s1), hash(s2))
        self.assertNotEqual(s1, AntiSet([1, 2]))
        self.assertNotEqual(AntiSet(), frozenset())
        self.assertFalse(s1 == 1)

    def test_iterating_or_counting_should_raise_exception(self):
        # arrange
        sut = AntiSet([1])

        # act / assert
        with self.assertRaises(UnsupportedOperationError):
            len(sut)
        with self.assertRaises(UnsupportedOperationError):
            iter(sut)
        with self.assertRaises(UnsupportedOperationError):
            list(sut)
        with self.assertRaises(NotImplementedError):
            sorted(AntiSet())

    def test_anti_set_should_be_truthy(self):
        self.assertTrue(AntiSet([1]))

    def test_wrapping_an_anti_set_should_raise_exception(self):
        with self.assertRaises(InvalidSetError):
            AntiSet(AntiSet([1]))

    def test_repr_should_mark_excluded_elements(self):
        # arrange
        sut = AntiSet([3, 1, 2])

        # act
        representation = repr(sut)

        # assert
        self.assertEqual(representation, "#-{1 2 3}")
        self.assertEqual(str(AntiSet()), "#-{}")
        self.assertEqual(repr(AntiSet(["a"])), "#-{'a'}")

    def test_repr_should_handle_unorderable_elements(self):
        # arrange
        sut = AntiSet([1, "a"])

        # act
        representation = repr(sut)

        # assert
        self.assertIn(representation, ["#-{1 'a'}", "#-{'a' 1}"])


class TestAntiSetOperators(unittest.TestCase):
    def setUp(self):
        self.finite = frozenset([1, 2])
        self.anti = AntiSet([2, 3])

    def test_union_operators_should_work_from_both_sides(self):
        # act
        left = self.finite | self.anti
        right = self.anti | self.finite
        with_set = {1, 2} | self.anti

        # assert
        self.assertEqual(left, AntiSet([3]))
        self.assertEqual(right, AntiSet([3]))
        self.assertEqual(with_set, AntiSet([3]))

    def test_intersection_operators_should_work_from_both_sides(self):
        # act
        left = self.finite & self.anti
        right = self.anti & self.finite

        # assert
        self.assertEqual(left, frozenset([1]))
        self.assertEqual(right, frozenset([1]))

    def test_difference_operators_should_keep_operand_order(self):
        # act
        finite_minus_anti = self.finite - self.anti
        anti_minus_finite = self.anti - self.finite

        # assert
        self.assertEqual(finite_minus_anti, frozenset([2]))
        self.assertEqual(anti_minus_finite, AntiSet([1, 2, 3]))

    def test_symmetric_difference_operators(self):
        # act
        left = self.finite ^ self.anti
        right = self.anti ^ self.finite

        # assert
        self.assertEqual(left, AntiSet([1, 3]))
        self.assertEqual(right, AntiSet([1, 3]))

    def test_comparison_operators(self):
        # arrange
        s = AntiSet()
        s2 = AntiSet()

        # act / assert
        self.assertTrue(s2 <= s)
        self.assertTrue(s >= s2)
        self.assertFalse(s < s2)
        self.assertTrue(AntiSet([1, 2]) < s)
        self.assertTrue(s > AntiSet([1, 2]))
        self.assertFalse(s <= {1, 2, 3})
        self.assertTrue(s >= {1, 2, 3})
        self.assertTrue(frozenset([1]) < AntiSet([2]))
        self.assertFalse(AntiSet([1, 2]) <= AntiSet([2, 3, 4]))

    def test_named_methods_should_accept_several_operands(self):
        # act
        union = self.anti.union({3}, {2})
        difference = self.anti.difference({1}, {4})

        # assert
        self.assertEqual(union, AntiSet())
        self.assertEqual(difference, AntiSet([1, 2, 3, 4]))
        self.assertTrue(self.anti.isdisjoint({2, 3}))
        self.assertFalse(self.anti.isdisjoint(AntiSet([1])))

    def test_operators_with_non_sets_should_raise_type_error(self):
        with self.assertRaises(TypeError):
            self.anti | 2
        with self.assertRaises(TypeError):
            2 - self.anti
        with self.assertRaises(TypeError):
            self.anti <= [1, 2]
