"""Tests for concurrent synthesis."""

import threading
from concurrent.futures import ThreadPoolExecutor

from synthwire.construction import InstanceBuilder, New
from synthwire.synthesizer import TypeSynthesizer

_THREAD_WORKERS = 12


class Report:
    def __init__(self, title: str) -> None:
        self.title = title

    @property
    def author(self) -> str:
        return "original"


class Invoice:
    pass


class TestConcurrentSynthesis:
    def test_concurrent_synthesis_creates_one_type(self, synthesizer: TypeSynthesizer) -> None:
        barrier = threading.Barrier(_THREAD_WORKERS)

        def synthesize() -> type:
            barrier.wait()
            return synthesizer.synthesize(Report)

        with ThreadPoolExecutor(max_workers=_THREAD_WORKERS) as pool:
            futures = [pool.submit(synthesize) for _ in range(_THREAD_WORKERS)]
            results = [future.result() for future in futures]

        assert all(result is results[0] for result in results)
        module = synthesizer.get_generation_module(__name__)
        assert module is not None
        assert module.type_names == (results[0].__name__,)

    def test_concurrent_builds_share_type(self, synthesizer: TypeSynthesizer) -> None:
        builder = InstanceBuilder(synthesizer)
        errors: list[Exception] = []
        results: list[Report] = []

        def build(index: int) -> None:
            try:
                results.append(builder.build(New(Report, f"report {index}")))
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        threads = [threading.Thread(target=build, args=(i,)) for i in range(_THREAD_WORKERS)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert len(results) == _THREAD_WORKERS
        assert len({type(result) for result in results}) == 1
        expected_titles = {f"report {i}" for i in range(_THREAD_WORKERS)}
        assert {result.title for result in results} == expected_titles

    def test_different_bases_synthesize_concurrently(self, synthesizer: TypeSynthesizer) -> None:
        with ThreadPoolExecutor(max_workers=4) as pool:
            report_future = pool.submit(synthesizer.synthesize, Report)
            invoice_future = pool.submit(synthesizer.synthesize, Invoice)
            report_type = report_future.result()
            invoice_type = invoice_future.result()

        assert report_type.__synthwire_base__ is Report
        assert invoice_type.__synthwire_base__ is Invoice
        assert report_type.__module__ == invoice_type.__module__


class TestExecutionContextSynthesizers:
    def test_per_thread_synthesizers_are_independent(self) -> None:
        errors: list[Exception] = []
        results: dict[int, type] = {}
        repeated: dict[int, type] = {}

        def synthesize_in_own_context(index: int) -> None:
            try:
                synthesizer = TypeSynthesizer()
                results[index] = synthesizer.synthesize(Report)
                repeated[index] = synthesizer.synthesize(Report)
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        threads = [
            threading.Thread(target=synthesize_in_own_context, args=(i,)) for i in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert all(repeated[index] is results[index] for index in range(4))
        assert len({id(result) for result in results.values()}) == 4

    def test_unlocked_synthesizer_caches_in_single_context(
        self,
        unlocked_synthesizer: TypeSynthesizer,
    ) -> None:
        first = unlocked_synthesizer.synthesize(Report)

        assert unlocked_synthesizer.synthesize(Report) is first
