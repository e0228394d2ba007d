"""Example suite: run with `python examples/calculator_suite.py`."""

from tinysuite import equal, fail, is_none, near_equal, new_suite, not_equal, ok

state: dict[str, int] = {}

suite = new_suite("Calculator")


def setup():
    state["base"] = 10


def teardown():
    state.clear()


suite.before(setup)
suite.after(teardown)

suite.test("adds", lambda: equal(12, state["base"] + 2))
suite.test("subtracts", lambda: not_equal(10, state["base"] - 1))
suite.test("divides", lambda: near_equal(3.3333, state["base"] / 3))
suite.test("has base", lambda: ok("base" in state))
suite.test("missing key", lambda: is_none(state.get("missing")))
suite.test("known bug", lambda: fail("division by zero is not handled yet"))
suite.test()

if __name__ == "__main__":
    suite.run()
