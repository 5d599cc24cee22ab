import unittest

from models import Project
from saw.core import DEFAULT_OUTPUT_FIELD


def laptop_project(**overrides) -> Project:
    values = dict(
        name="Laptops",
        criteria=["Battery", "Price"],
        weights=[0.5, 0.5],
        options=["A", "B", "C"],
        scores=[[10.0, 5.0], [20.0, 3.0], [30.0, 1.0]],
    )
    values.update(overrides)
    return Project(**values)


class TestProject(unittest.TestCase):
    def test_scored_records_use_output_field(self) -> None:
        records = laptop_project(output_field="rank_value").scored_records()
        self.assertEqual([row["option"] for row in records], ["A", "B", "C"])
        self.assertEqual(records[1]["Battery"], 20.0)
        self.assertNotIn(DEFAULT_OUTPUT_FIELD, records[0])
        self.assertAlmostEqual(records[0]["rank_value"], 0.2665, places=3)
        self.assertAlmostEqual(records[2]["rank_value"], 1.0, places=3)

    def test_scored_records_default_field(self) -> None:
        records = laptop_project().scored_records()
        self.assertAlmostEqual(records[1][DEFAULT_OUTPUT_FIELD], 0.5, places=3)

    def test_scored_records_match_recomputed_results(self) -> None:
        project = laptop_project(pivot_index=1)
        project.recompute_results()
        by_option = {row["option"]: row[DEFAULT_OUTPUT_FIELD] for row in project.scored_records()}
        for result in project.results:
            self.assertAlmostEqual(by_option[result.option], result.score)

    def test_round_trip_dict(self) -> None:
        project = laptop_project(output_field="score")
        self.assertEqual(Project.from_dict(project.to_dict()), project)
