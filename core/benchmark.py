"""Timing comparison of the translation strategies.

Every round translates each fixture country into each expected locale and
checks the result, so a strategy cannot win by being wrong. Elapsed time is
wall clock measured with :func:`time.perf_counter`.
"""
from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel

from core.presets import BENCHMARK_ITERATIONS, COUNTRY_FIXTURES, EXPECTED_TRANSLATIONS
from paysbench.models import Country
from paysbench.strategies import STRATEGIES, Strategy, get_strategy

_LOGGER = logging.getLogger(__name__)


class BenchmarkMismatchError(AssertionError):
    """A strategy returned a wrong translation during a timed run."""


class ScenarioFailure(BaseModel):
    code: str
    locale: str
    expected: tuple
    actual: tuple


class BenchmarkResult(BaseModel):
    strategy: str
    iterations: int
    calls: int
    elapsed_ms: float

    @property
    def us_per_call(self) -> float:
        return self.elapsed_ms * 1000 / self.calls if self.calls else 0.0


def fixture_countries() -> Dict[str, Country]:
    """Build the fixture countries, keyed by code."""
    return {code: Country(code=code, **keys) for code, keys in COUNTRY_FIXTURES.items()}


def check_scenarios(strategy: Strategy, countries: Optional[Dict[str, Country]] = None) -> List[ScenarioFailure]:
    """Run each expected scenario once and return the ones that do not match."""
    if countries is None:
        countries = fixture_countries()
    failures: List[ScenarioFailure] = []
    for (code, locale), expected in EXPECTED_TRANSLATIONS.items():
        source = countries[code]
        result = strategy(source, locale)
        actual = (result.label, result.description)
        if actual != expected or result.code != source.code:
            failures.append(ScenarioFailure(code=source.code, locale=locale, expected=expected, actual=actual))
    return failures


def run_benchmark(
    strategy_name: str,
    iterations: int = BENCHMARK_ITERATIONS,
    countries: Optional[Dict[str, Country]] = None,
) -> BenchmarkResult:
    """Time ``iterations`` rounds of every scenario with one strategy."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    strategy = get_strategy(strategy_name)
    if countries is None:
        countries = fixture_countries()
    scenarios = [
        (countries[code], locale, expected)
        for (code, locale), expected in EXPECTED_TRANSLATIONS.items()
    ]

    start = time.perf_counter()
    for _ in range(iterations):
        for source, locale, expected in scenarios:
            result = strategy(source, locale)
            if (result.label, result.description) != expected or result.code != source.code:
                raise BenchmarkMismatchError(
                    f"{strategy_name} translated {source.code} for {locale} as "
                    f"{(result.label, result.description)!r}, expected {expected!r}"
                )
    elapsed_ms = (time.perf_counter() - start) * 1000

    calls = iterations * len(scenarios)
    _LOGGER.info("%s: %d calls in %.1f ms", strategy_name, calls, elapsed_ms)
    return BenchmarkResult(strategy=strategy_name, iterations=iterations, calls=calls, elapsed_ms=elapsed_ms)


def compare_strategies(iterations: int = BENCHMARK_ITERATIONS, names: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """Benchmark several strategies and tabulate them, fastest first.

    ``relative`` is each strategy's elapsed time divided by the fastest one.
    """

    names = list(names) if names is not None else list(STRATEGIES)
    countries = fixture_countries()
    rows = []
    for name in names:
        res = run_benchmark(name, iterations, countries)
        rows.append(
            {
                "strategy": res.strategy,
                "iterations": res.iterations,
                "calls": res.calls,
                "elapsed_ms": res.elapsed_ms,
                "us_per_call": res.us_per_call,
            }
        )
    df = pd.DataFrame(rows, columns=["strategy", "iterations", "calls", "elapsed_ms", "us_per_call"])
    if df.empty:
        df["relative"] = pd.Series(dtype=float)
        return df
    fastest = df["elapsed_ms"].min()
    df["relative"] = df["elapsed_ms"] / fastest if fastest > 0 else 1.0
    return df.sort_values("elapsed_ms").reset_index(drop=True)
