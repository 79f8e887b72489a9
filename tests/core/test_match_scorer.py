from __future__ import annotations

from typing import Any

import pytest

from dentalmatch.core import MatchScorer, calculate_match_score
from dentalmatch.schemas import CandidateCV, JobPosting


def build_job(**kwargs: Any) -> JobPosting:
    defaults: dict[str, Any] = {
        "job_id": "J-001",
        "title": "Dentist",
        "location": "Baghdad",
        "employment_type": "full_time",
        "salary": {"min": 800, "max": 1000},
        "skills": [],
    }
    defaults.update(kwargs)
    return JobPosting(**defaults)


def build_cv(**kwargs: Any) -> CandidateCV:
    defaults: dict[str, Any] = {"cv_id": "CV-001"}
    defaults.update(kwargs)
    return CandidateCV(**defaults)


def test_full_match_sums_every_factor():
    job = build_job(skills=["Endodontics", "Implants"], min_experience=2)
    cv = build_cv(
        bio="General dentist with clinic experience",
        city="baghdad",
        availability_type="full_time",
        skills=["endodontics", "IMPLANTS"],
        salary_expected=900,
        experience=[{"title": "Dentist"}, {"title": "Intern"}],
    )

    result = calculate_match_score(job, cv)

    assert result.breakdown.as_dict() == {
        "title": 40.0,
        "location": 45.0,
        "salary": 20.0,
        "type": 15.0,
        "experience": 15.0,
        "skills": 20.0,
    }
    assert result.score == pytest.approx(155.0)


def test_score_is_deterministic():
    job = build_job(skills=["Orthodontics"])
    cv = build_cv(bio="dentist", skills=["orthodontics"], location_preferred=["Najaf"])

    first = calculate_match_score(job, cv)
    second = calculate_match_score(job, cv)

    assert first.score == second.score
    assert first.breakdown == second.breakdown


def test_title_match_ignores_case():
    job = build_job(title="Dentist")
    cv = build_cv(bio="I am a DENTIST with experience")

    result = calculate_match_score(job, cv)

    assert result.breakdown.title == 40.0


def test_title_partial_credit_from_skill_in_title():
    job = build_job(title="Orthodontics Specialist")
    cv = build_cv(bio="Looking for new opportunities", skills=["orthodontics"])

    result = calculate_match_score(job, cv)

    assert result.breakdown.title == 20.0


def test_empty_bio_and_skills_give_no_title_credit():
    result = calculate_match_score(build_job(), build_cv(bio="", skills=[]))

    assert result.breakdown.title == 0.0
    assert result.breakdown.skills == 0.0


@pytest.mark.parametrize(
    ("expected", "points"),
    [(1000, 20.0), (1200, 10.0), (2000, 0.0)],
)
def test_salary_gating(expected: float, points: float):
    job = build_job(salary={"min": 500, "max": 1000})
    cv = build_cv(salary_expected=expected)

    result = calculate_match_score(job, cv)

    assert result.breakdown.salary == points


def test_skills_are_clamped():
    skills = [f"skill-{idx}" for idx in range(10)]
    job = build_job(skills=skills)
    cv = build_cv(skills=[skill.upper() for skill in skills])

    result = calculate_match_score(job, cv)

    assert result.breakdown.skills == 50.0


def test_location_partial_match_from_preferred_location():
    job = build_job(location="Baghdad")
    cv = build_cv(city="Basra", location_preferred=["Greater Baghdad Area"])

    result = calculate_match_score(job, cv)

    assert result.breakdown.location == 30.0


def test_location_exact_preferred_match():
    job = build_job(location="Najaf")
    cv = build_cv(city="Basra", location_preferred=["Karbala", "NAJAF"])

    assert calculate_match_score(job, cv).breakdown.location == 45.0


def test_employment_type_requires_exact_value():
    job = build_job(employment_type="part_time")

    assert calculate_match_score(job, build_cv(availability_type="part_time")).breakdown.type == 15.0
    assert calculate_match_score(job, build_cv(availability_type="full_time")).breakdown.type == 0.0
    assert calculate_match_score(job, build_cv()).breakdown.type == 0.0
    assert calculate_match_score(build_job(employment_type=None), build_cv()).breakdown.type == 15.0


def test_experience_counts_one_year_per_entry():
    job = build_job(min_experience=3)
    short = build_cv(experience=[{"title": "A"}, {"title": "B"}])
    enough = build_cv(experience=[{"title": "A"}, {"title": "B"}, {"title": "C"}])

    assert calculate_match_score(job, short).breakdown.experience == 0.0
    assert calculate_match_score(job, enough).breakdown.experience == 15.0


def test_no_experience_meets_absent_minimum():
    job = build_job()
    cv = build_cv(experience=[])

    assert calculate_match_score(job, cv).breakdown.experience == 15.0


def test_malformed_numbers_coerce_to_zero():
    job = build_job(salary={"min": "n/a", "max": "lots"}, min_experience="three")
    cv = build_cv(salary_expected=float("nan"))

    result = calculate_match_score(job, cv)

    assert result.breakdown.salary == 20.0
    assert result.breakdown.experience == 15.0
    assert result.score == result.breakdown.total()


def test_components_stay_within_bounds():
    scorer = MatchScorer()
    job = build_job(skills=[f"s{idx}" for idx in range(20)], title="dentist")
    cv = build_cv(
        bio="dentist",
        city="Baghdad",
        location_preferred=["Baghdad"],
        availability_type="full_time",
        skills=[f"S{idx}" for idx in range(20)],
        experience=[{}],
    )

    result = scorer.score(job, cv)

    assert all(value >= 0 for value in result.breakdown.as_dict().values())
    assert result.breakdown.skills <= 50.0
    assert result.score <= scorer.max_score == 185.0


def test_scorer_records_evaluator_metadata():
    job = build_job(location="Baghdad")
    cv = build_cv(location_preferred=["Greater Baghdad Area"])

    result = calculate_match_score(job, cv)
    statuses = {ev.method: ev.metadata.get("status") for ev in result.evaluations}

    assert statuses["location"] == "partial"
    assert statuses["title"] == "no_match"


def test_scorer_rejects_evaluator_without_method():
    class BrokenEvaluator:
        max_points = 1.0

        def evaluate(self, job: JobPosting, cv: CandidateCV) -> dict:
            return {"scores": {"title": 1.0}}

    scorer = MatchScorer(evaluators=[BrokenEvaluator()])

    with pytest.raises(ValueError):
        scorer.score(build_job(), build_cv())


def test_blank_profiles_compare_as_equal_values():
    result = calculate_match_score(JobPosting(), CandidateCV())

    assert result.breakdown.as_dict() == {
        "title": 0.0,
        "location": 45.0,
        "salary": 20.0,
        "type": 15.0,
        "experience": 15.0,
        "skills": 0.0,
    }
    assert result.score == 95.0


def test_blank_title_gets_full_credit_against_bio():
    result = calculate_match_score(JobPosting(), CandidateCV(bio="dentist"))

    assert result.breakdown.title == 40.0


def test_trailing_whitespace_is_not_normalized():
    job = build_job(title="Dentist ")
    cv = build_cv(bio="dentist")

    assert calculate_match_score(job, cv).breakdown.title == 0.0


def test_match_result_evaluations_are_read_only():
    job = build_job(title="Orthodontics Specialist")
    cv = build_cv(skills=["orthodontics"])

    result = calculate_match_score(job, cv)
    title_eval = next(ev for ev in result.evaluations if ev.method == "title")

    assert title_eval.metadata["matched_skills"] == ("orthodontics",)
    with pytest.raises(TypeError):
        title_eval.scores["title"] = 40.0  # type: ignore[index]
    with pytest.raises(TypeError):
        title_eval.metadata["status"] = "bio_match"  # type: ignore[index]
    assert title_eval.as_dict()["metadata"]["matched_skills"] == ["orthodontics"]
