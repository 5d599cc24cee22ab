from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from saw.core import DEFAULT_OUTPUT_FIELD
from saw.method import MethodContext, SAWMethod
from saw.pipeline import run_saw


@dataclass
class Result:
    option: str
    score: float


@dataclass
class Project:
    name: str
    criteria: List[str] = field(default_factory=list)
    pivot_index: int = 0
    weights: List[float] = field(default_factory=list)
    options: List[str] = field(default_factory=list)
    scores: List[List[float]] = field(default_factory=list)
    output_field: str = DEFAULT_OUTPUT_FIELD
    results: List[Result] = field(default_factory=list)

    def option_scores(self) -> dict:
        return {option: list(row) for option, row in zip(self.options, self.scores)}

    def recompute_results(self) -> None:
        context = MethodContext(pivot_index=self.pivot_index)
        ranked = SAWMethod().compute_scores(self.weights, self.option_scores(), context=context)
        self.results = [Result(option=name, score=score) for name, score in ranked]

    def scored_records(self) -> List[Dict[str, Any]]:
        records = [
            {"option": option, **dict(zip(self.criteria, row))}
            for option, row in zip(self.options, self.scores)
        ]
        return run_saw(
            records,
            len(self.criteria),
            self.pivot_index,
            self.criteria,
            self.weights,
            output_field=self.output_field,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "criteria": list(self.criteria),
            "pivot_index": self.pivot_index,
            "weights": list(self.weights),
            "options": list(self.options),
            "scores": [list(row) for row in self.scores],
            "output_field": self.output_field,
            "results": [result.__dict__ for result in self.results],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        results = [Result(**item) for item in data.get("results", [])]
        return cls(
            name=data.get("name", "Untitled"),
            criteria=list(data.get("criteria", [])),
            pivot_index=int(data.get("pivot_index", 0)),
            weights=list(data.get("weights", [])),
            options=list(data.get("options", [])),
            scores=[list(row) for row in data.get("scores", [])],
            output_field=data.get("output_field", DEFAULT_OUTPUT_FIELD),
            results=results,
        )
