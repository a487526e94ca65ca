"""Example: the testbench self-test playground.

Cases whose name starts with "F /" are expected to fail and are wrapped in
``expect_failures``; cases starting with "P /" are expected to pass.

Run with:
    python examples/testbench_selftest.py
"""

import sys

from rich.text import Text

from testbench import Harness, check, current_case, fail, pass_, test


@test
def testbench_assert(harness, udata):
    with harness.describe("check()"):

        @harness.it("P / should assert true correctly")
        def _():
            check(True)

        with harness.expect_failures():

            @harness.it("F / should assert false correctly")
            def _():
                check(False)

        with harness.expect_failures():

            @harness.it("F / should display output on fail [two messages under this line]")
            def _():
                print("A message on STDOUT.")
                print("A message on STDERR.", file=sys.stderr)
                fail()


@test
def testbench_assert_desc(harness, udata):
    with harness.describe("check() with a message"):

        @harness.it("P / should assert true correctly")
        def _():
            check(True, "SHOULD NOT DISPLAY")

        with harness.expect_failures():

            @harness.it('F / should assert false correctly, and display "a nice message"')
            def _():
                check(False, "a %s message", "nice")


@test
def testbench_pass(harness, udata):
    with harness.describe("pass_()"):

        @harness.it("P / should pass, and not execute any further instruction")
        def _():
            pass_()
            fail("SHOULD NOT DISPLAY")


@test
def testbench_fail(harness, udata):
    with harness.describe("fail()"):

        with harness.expect_failures():

            @harness.it("F / should fail, and not execute any further instruction")
            def _():
                fail()
                fail("SHOULD NOT DISPLAY")


@test
def testbench_fail_desc(harness, udata):
    with harness.describe("fail() with a message"):

        with harness.expect_failures():

            @harness.it(
                'F / should fail, not execute any further instruction, and display "a nice message"'
            )
            def _():
                fail("a %s message", "nice")
                fail("SHOULD NOT DISPLAY")


@test
def testbench_run_context(harness, udata):
    @harness.it("P / should pass user data")
    def _():
        check(udata == 42)


@test
def testbench_run(harness, udata):
    with harness.describe("run()"):
        harness.run(testbench_run_context, 42)


def fixture_setup(udata):
    return 42 if udata["value"] == 42 else None


def fixture_teardown(udata, fixtures):
    udata["torn_down"] = fixtures


@test
def testbench_fixtures(harness, udata):
    with harness.describe("fixtures"):
        test_udata = {"value": 42}
        harness.set_setup(fixture_setup, test_udata)
        harness.set_teardown(fixture_teardown, test_udata)

        @harness.it("P / should run setup")
        def _(fixtures):
            check(fixtures == 42)

        @harness.it("P / should expose the running case")
        def _():
            check(current_case().fixtures == 42)


def main() -> int:
    harness = Harness()

    with harness.describe("Testbench"):
        harness.run(testbench_assert)
        harness.run(testbench_assert_desc)
        harness.run(testbench_pass)
        harness.run(testbench_fail)
        harness.run(testbench_fail_desc)
        harness.run(testbench_run)
        harness.run(testbench_fixtures)

    harness.results()

    console = harness.aggregator.reporters[0].summary_console
    if not harness.state.unmet_expectations:
        console.print(Text("✓ All tests expected to fail have failed.\n", style="bold green"))
        return 0
    console.print(Text("✗ Some tests expected to fail didn't.\n", style="bold red"))
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
