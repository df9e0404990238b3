"""Tests for idiombench.bench.runner: suite execution."""

from __future__ import annotations

import unittest

from bench_test_helpers import CountingWorkload, FailingWorkload, temp_suite

from idiombench.bench.config import BenchConfig
from idiombench.bench.errors import EmptySuite, InvalidArgument
from idiombench.bench.results import BaselineMode
from idiombench.bench.runner import BenchmarkRunner, BenchProgress


def _quiet_runner(config: BenchConfig, events: list[BenchProgress] | None = None) -> BenchmarkRunner:
    sink = events if events is not None else []
    return BenchmarkRunner(config, progress_callback=sink.append)


class TestMeasure(unittest.TestCase):
    """Tests for BenchmarkRunner.measure()."""

    def test_measure(self) -> None:
        w = CountingWorkload()
        elapsed = BenchmarkRunner.measure(w, 10)
        self.assertEqual(w.calls, 10)
        self.assertGreaterEqual(elapsed, 0)

    def test_measure_rejects_zero(self) -> None:
        with self.assertRaises(InvalidArgument):
            BenchmarkRunner().measure(lambda: None, 0)


class TestRunSuite(unittest.TestCase):
    """Tests for BenchmarkRunner.run_suite()."""

    def test_records_every_case_in_order(self) -> None:
        a, b, c = CountingWorkload(), CountingWorkload(), CountingWorkload()
        with temp_suite("runner-order", [("a", a), ("b", b), ("c", c)]) as sd:
            suite = _quiet_runner(BenchConfig(iterations=100)).run_suite(sd)
        self.assertEqual([case.name for case in suite.cases], ["a", "b", "c"])
        self.assertEqual((a.calls, b.calls, c.calls), (100, 100, 100))
        self.assertTrue(all(case.iterations == 100 for case in suite.cases))
        self.assertEqual(suite.title, "Runner-Order")

    def test_scale_divides_iterations(self) -> None:
        w = CountingWorkload()
        with temp_suite("runner-scale", [("w", w)], scale=20) as sd:
            suite = _quiet_runner(BenchConfig(iterations=1000)).run_suite(sd)
        self.assertEqual(suite.iterations, 50)
        self.assertEqual(w.calls, 50)

    def test_warmup_calls_are_untimed_extras(self) -> None:
        w = CountingWorkload()
        with temp_suite("runner-warmup", [("w", w)]) as sd:
            suite = _quiet_runner(BenchConfig(iterations=10, warmup=5)).run_suite(sd)
        self.assertEqual(w.calls, 15)
        self.assertEqual(suite.cases[0].iterations, 10)

    def test_progress_events(self) -> None:
        events: list[BenchProgress] = []
        with temp_suite("runner-progress", [("a", CountingWorkload()), ("b", CountingWorkload())]) as sd:
            _quiet_runner(BenchConfig(iterations=5, warmup=1), events).run_suite(sd)
        phases = [(e.case, e.phase) for e in events]
        self.assertEqual(
            phases,
            [
                ("a", "warmup"),
                ("a", "measure"),
                ("a", "done"),
                ("b", "warmup"),
                ("b", "measure"),
                ("b", "done"),
            ],
        )
        self.assertEqual([e.index for e in events if e.phase == "done"], [1, 2])

    def test_suite_setup_torn_down(self) -> None:
        state: list[str] = []

        def factory():
            state.append("setup")
            try:
                yield "only", CountingWorkload()
            finally:
                state.append("teardown")

        with temp_suite("runner-teardown", []) as sd:
            sd.factory = factory
            _quiet_runner(BenchConfig(iterations=3)).run_suite(sd)
        self.assertEqual(state, ["setup", "teardown"])


class TestRun(unittest.TestCase):
    """Tests for BenchmarkRunner.run()."""

    def test_reports_per_suite(self) -> None:
        with temp_suite("run-one", [("x", CountingWorkload())]) as one, temp_suite(
            "run-two", [("y", CountingWorkload()), ("z", CountingWorkload())]
        ) as two:
            reports = _quiet_runner(BenchConfig(iterations=10)).run([one, two])
        self.assertEqual([r.suite.name for r in reports], ["run-one", "run-two"])
        self.assertEqual(len(reports[1].rows), 2)

    def test_uses_suite_default_baseline(self) -> None:
        with temp_suite("run-min", [("x", CountingWorkload())], baseline=BaselineMode.MIN) as sd:
            (rep,) = _quiet_runner(BenchConfig(iterations=10)).run([sd])
        self.assertIs(rep.mode, BaselineMode.MIN)

    def test_config_baseline_overrides(self) -> None:
        with temp_suite("run-override", [("x", CountingWorkload())], baseline=BaselineMode.MIN) as sd:
            config = BenchConfig(iterations=10, baseline_mode=BaselineMode.MAX)
            (rep,) = _quiet_runner(config).run([sd])
        self.assertIs(rep.mode, BaselineMode.MAX)

    def test_baseline_case_ratio_is_one(self) -> None:
        with temp_suite("run-ratio", [("a", CountingWorkload()), ("b", CountingWorkload())]) as sd:
            (rep,) = _quiet_runner(BenchConfig(iterations=50)).run([sd])
        self.assertAlmostEqual(rep.rows[0].ratio, 1.0)  # MAX: slowest row first
        self.assertTrue(all(r.ratio <= 1.0 for r in rep.rows))

    def test_selects_from_config(self) -> None:
        with temp_suite("run-selected", [("x", CountingWorkload())]), temp_suite(
            "run-skipped", [("y", CountingWorkload())]
        ):
            reports = _quiet_runner(BenchConfig(iterations=10, suites=["run-selected"])).run()
        self.assertEqual([r.suite.name for r in reports], ["run-selected"])

    def test_invalid_config_raises_before_running(self) -> None:
        w = CountingWorkload()
        with temp_suite("run-invalid", [("w", w)]) as sd:
            runner = _quiet_runner(BenchConfig(iterations=0))
            with self.assertRaises(InvalidArgument):
                runner.run([sd])
        self.assertEqual(w.calls, 0)
        self.assertIsNone(runner.failure)

    def test_empty_suite_raises(self) -> None:
        with temp_suite("run-empty", []) as sd:
            with self.assertRaises(EmptySuite):
                _quiet_runner(BenchConfig(iterations=10)).run([sd])

    def test_float_warmup_rejected_before_any_case_runs(self) -> None:
        workload = CountingWorkload()
        with temp_suite("run-float-warmup", [("a", workload)]) as sd:
            runner = _quiet_runner(BenchConfig(iterations=10, warmup=1.5))  # type: ignore[arg-type]
            with self.assertRaises(InvalidArgument) as ctx:
                runner.run([sd])
        self.assertIn("warmup", str(ctx.exception))
        self.assertIsNone(runner.failure)
        self.assertEqual(workload.calls, 0)


class TestWorkloadFailure(unittest.TestCase):
    """A failing workload aborts the run and propagates unchanged."""

    def test_error_propagates_and_is_recorded(self) -> None:
        exc = ZeroDivisionError("division by zero")
        after = CountingWorkload()
        with temp_suite(
            "run-failing",
            [("ok", CountingWorkload()), ("bad", FailingWorkload(fail_on=4, exc=exc)), ("after", after)],
        ) as sd:
            runner = _quiet_runner(BenchConfig(iterations=10))
            with self.assertLogs("idiombench", level="ERROR") as logs:
                with self.assertRaises(ZeroDivisionError) as ctx:
                    runner.run([sd])
        self.assertIs(ctx.exception, exc)
        self.assertEqual(after.calls, 0)
        self.assertIsNotNone(runner.failure)
        assert runner.failure is not None
        self.assertEqual(runner.failure.suite, "run-failing")
        self.assertEqual(runner.failure.case, "bad")
        self.assertIs(runner.failure.error, exc)
        self.assertTrue(any("'bad'" in line for line in logs.output))
        self.assertEqual(logs.records[0].name, "idiombench.runner")

    def test_failure_during_warmup(self) -> None:
        with temp_suite("run-warmup-fail", [("bad", FailingWorkload(fail_on=1))]) as sd:
            runner = _quiet_runner(BenchConfig(iterations=10, warmup=2))
            with self.assertLogs("idiombench", level="ERROR"), self.assertRaises(RuntimeError):
                runner.run([sd])
        assert runner.failure is not None
        self.assertEqual(runner.failure.case, "bad")

    def test_later_suites_not_run(self) -> None:
        later = CountingWorkload()
        with temp_suite("run-first-fails", [("bad", FailingWorkload())]) as first, temp_suite(
            "run-never", [("later", later)]
        ) as second:
            runner = _quiet_runner(BenchConfig(iterations=10))
            with self.assertLogs("idiombench", level="ERROR"), self.assertRaises(RuntimeError):
                runner.run([first, second])
        self.assertEqual(later.calls, 0)


class TestDefaultProgress(unittest.TestCase):
    """Tests for the default progress callback."""

    def test_logs_finished_cases_only(self) -> None:
        with self.assertLogs("idiombench", level="INFO") as logs:
            BenchmarkRunner._default_progress(BenchProgress("measure", "s", "skipped", 1, 10))
            BenchmarkRunner._default_progress(
                BenchProgress("done", "s", "finished", 2, 10, elapsed_ns=1500)
            )
        self.assertEqual(len(logs.output), 1)
        self.assertIn("finished", logs.output[0])
        self.assertIn("1.50µs", logs.output[0])


if __name__ == "__main__":
    unittest.main()
