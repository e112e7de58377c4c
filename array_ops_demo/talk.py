from __future__ import annotations

from operator import add
from typing import Any, Callable, Iterable, List, Sequence, Tuple

from array_ops_demo import samples
from array_ops_demo.models import FoldStep
from array_ops_demo.operators import concat_strings, fold_steps, greater_than, sum_numbers, uppercase_letters
from array_ops_demo.transcript import Transcript
from array_ops_demo.use_cases import CountData, GroupData, TransformAndFilterData, TransformData, UseCase


class TalkError(Exception):
    pass


class LightningTalk:
    def __init__(self, transcript: Transcript, prefix: str = "x", threshold: float = 2):
        self.transcript = transcript
        self.prefix = prefix
        self.threshold = threshold

    def _log_steps(self, title: str, steps: List[FoldStep]) -> None:
        for i, step in enumerate(steps, start=1):
            self.transcript.log(f"[{title}]   #{i}: previous={step.previous!r} current={step.current!r} => {step.result!r}")

    def present_operators(self) -> None:
        self.transcript.log(f"[map] {samples.LETTERS!r} => {uppercase_letters(samples.LETTERS)!r}")
        self.transcript.log(
            f"[filter] {samples.NUMBERS!r} > {self.threshold} => {greater_than(samples.NUMBERS, self.threshold)!r}"
        )

        self.transcript.log(f"[reduce] {samples.NUMBERS!r} => {sum_numbers(samples.NUMBERS)!r}")
        self._log_steps("reduce", fold_steps(add, samples.NUMBERS))

        self.transcript.log(f"[reduce] {samples.DIGITS!r} from '' => {concat_strings(samples.DIGITS)!r}")
        self._log_steps("reduce", fold_steps(add, samples.DIGITS, ""))

    def present(self, use_case: UseCase, data: Iterable[Any]) -> bool:
        name = type(use_case).__name__
        try:
            name = use_case.name()
            # итератор можно пройти только один раз: обе формы получают один и тот же список
            data = list(data)
            self.transcript.log(f"[{name}] CASE START input={data!r}")
            imperative = use_case.imperative(data)
            self.transcript.log(f"[{name}] imperative => {imperative!r}")
            declarative = use_case.declarative(data)
            self.transcript.log(f"[{name}] declarative => {declarative!r}")

            if imperative != declarative:
                raise TalkError(f"forms disagree: imperative={imperative!r} declarative={declarative!r}")

            self.transcript.log(f"[{name}] CASE OK")
            return True
        except Exception as e:
            self.transcript.log(f"[{name}] CASE FAILED: {e}")
            return False

    def cases(self) -> List[Tuple[UseCase, Callable[[], Sequence[Any]]]]:
        return [
            (TransformData(), lambda: list(samples.WORDS)),
            (TransformAndFilterData(prefix=self.prefix), lambda: list(samples.WORDS)),
            (GroupData(), samples.discounts),
            (CountData(), samples.orders),
        ]

    def run(self) -> bool:
        self.transcript.log("TALK START: array operators")
        self.present_operators()

        results = [self.present(use_case, load()) for use_case, load in self.cases()]
        ok = all(results)
        self.transcript.log("TALK OK" if ok else "TALK END (some cases failed)")
        return ok
