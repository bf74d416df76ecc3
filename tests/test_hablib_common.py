from inspect import cleandoc
import unittest

from hablib.plumbing.common import Result, State, UNSET

from .plumbing import (collect_all, collect_pair, collect_unchanged, created, default, success,
                       success_value, unchanged)


class TestResult(unittest.TestCase):

    maxDiff = None

    def test_state_default(self):
        self.assertEqual(default().state, State.unchanged)

    def test_state_unchanged(self):
        self.assertEqual(unchanged().state, State.unchanged)

    def test_state_success(self):
        self.assertEqual(success().state, State.success)

    def test_state_parts_unchanged(self):
        self.assertEqual(collect_unchanged().state, State.unchanged)

    def test_state_parts_success(self):
        self.assertEqual(collect_pair().state, State.success)

    def test_state_parts_created(self):
        self.assertEqual(collect_all().state, State.created)

    def test_value_unset(self):
        with self.assertRaises(ValueError):
            success().value

    def test_value_set(self):
        self.assertEqual(success_value("test").value, "test")

    def test_value_collected(self):
        self.assertEqual(collect_all().value, "test")

    def test_caller_inspect(self):
        self.assertEqual(default().caller, "tests.plumbing:default")

    def test_caller_custom(self):
        self.assertEqual(Result(caller=default).caller, "tests.plumbing:default")

    def test_truthy_unchanged(self):
        self.assertFalse(unchanged())

    def test_truthy_success(self):
        self.assertTrue(success())

    def test_truthy_created(self):
        self.assertTrue(created())

    def test_collect(self):
        result = collect_pair()
        self.assertEqual(result.parts[0].caller, "tests.plumbing:unchanged")
        self.assertEqual(result.parts[1].caller, "tests.plumbing:success")

    def test_repr(self):
        self.assertEqual(repr(success_value("test")), "Result(State.success, 'test')")

    def test_str(self):
        self.assertEqual(str(collect_all()), cleandoc("""
        tests.plumbing:collect_all: created 'test'
            tests.plumbing:unchanged: unchanged
            tests.plumbing:success: success
            tests.plumbing:success_value: success 'test'
            tests.plumbing:created: created
        """))

    def test_unset_repr(self):
        self.assertEqual(repr(UNSET), "UNSET")


if __name__ == "__main__":
    unittest.main()
