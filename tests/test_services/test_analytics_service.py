"""
Tests for the analytics service and its aggregation functions.
"""

import itertools
import random
from datetime import datetime, UTC

import pytest

from course_feedback.models.course import Course
from course_feedback.models.feedback import Feedback, FeedbackCreate
from course_feedback.services.analytics_service import (
    AnalyticsService,
    department_rollup,
    overall_stats,
    rating_distribution,
)
from tests.helpers import add_course


def _course(course_id, department):
    return Course(
        id=course_id,
        code=course_id.upper(),
        name=course_id,
        instructor="Prof. Test",
        department=department,
    )


_ids = itertools.count(1)


def _feedback(course_id, rating):
    return Feedback(
        id=f"f{next(_ids)}", course_id=course_id, rating=rating, created_at=datetime.now(UTC)
    )


def test_rating_distribution_always_has_five_buckets():
    distribution = rating_distribution([])

    assert [row.rating for row in distribution] == [1, 2, 3, 4, 5]
    assert all(row.count == 0 for row in distribution)


def test_rating_distribution_sums_to_total():
    rng = random.Random(7)
    feedback = [_feedback("c1", rng.randint(1, 5)) for _ in range(50)]

    distribution = rating_distribution(feedback)

    assert len(distribution) == 5
    assert sum(row.count for row in distribution) == len(feedback)
    for row in distribution:
        assert row.count == sum(1 for fb in feedback if fb.rating == row.rating)


def test_department_average_example():
    """Ratings 5, 4, 4, 5, 3 across a department average to 4.2."""
    courses = [_course("cs1", "Computer Science"), _course("cs2", "Computer Science")]
    feedback = [
        _feedback("cs1", 5),
        _feedback("cs1", 4),
        _feedback("cs2", 4),
        _feedback("cs2", 5),
        _feedback("cs2", 3),
    ]

    [row] = department_rollup(courses, feedback)

    assert row.department == "Computer Science"
    assert row.course_count == 2
    assert row.total_reviews == 5
    assert row.average_rating == 4.2
    assert row.trend is None


def test_department_rollup_sorted_descending_with_stable_ties():
    courses = [
        _course("a", "Alpha"),
        _course("b", "Beta"),
        _course("c", "Gamma"),
        _course("d", "Delta"),
    ]
    feedback = [
        _feedback("a", 3),
        _feedback("b", 5),
        _feedback("c", 3),
    ]

    rows = department_rollup(courses, feedback)

    assert [row.department for row in rows] == ["Beta", "Alpha", "Gamma", "Delta"]
    assert rows[-1].average_rating == 0
    assert rows[-1].total_reviews == 0
    for earlier, later in zip(rows, rows[1:]):
        assert earlier.average_rating >= later.average_rating


def test_department_rollup_is_non_increasing_for_random_input():
    rng = random.Random(11)
    departments = ["A", "B", "C", "D", "E", "F"]
    courses = [_course(f"c{i}", rng.choice(departments)) for i in range(20)]
    feedback = [
        _feedback(f"c{rng.randrange(20)}", rng.randint(1, 5)) for _ in range(200)
    ]

    rows = department_rollup(courses, feedback)

    assert len(rows) == len({c.department for c in courses})
    assert sum(row.course_count for row in rows) == len(courses)
    assert sum(row.total_reviews for row in rows) == len(feedback)
    for earlier, later in zip(rows, rows[1:]):
        assert earlier.average_rating >= later.average_rating


def test_department_rollup_ignores_feedback_for_unknown_courses():
    rows = department_rollup([_course("a", "Alpha")], [_feedback("zzz", 1)])

    assert rows[0].total_reviews == 0


def test_overall_stats():
    courses = [_course("a", "Alpha"), _course("b", "Beta"), _course("c", "Gamma")]
    feedback = [_feedback("a", 4), _feedback("a", 4), _feedback("b", 5), _feedback("b", 4)]

    stats = overall_stats(courses, feedback)

    assert stats.total_reviews == 4
    assert stats.average_rating == 4.3
    assert stats.active_courses == 3
    assert stats.response_rate is None


def test_overall_stats_empty():
    stats = overall_stats([], [])

    assert stats.total_reviews == 0
    assert stats.average_rating == 0
    assert stats.active_courses == 0


@pytest.mark.asyncio
async def test_new_feedback_increments_only_its_bucket(repository):
    service = AnalyticsService(repository)
    course = await add_course(repository, "CS 101", ratings=[1, 3, 3, 5])

    before = {row.rating: row.count for row in await service.get_rating_distribution()}
    await repository.create_feedback(FeedbackCreate(course_id=course.id, rating=3))
    after = {row.rating: row.count for row in await service.get_rating_distribution()}

    assert after[3] == before[3] + 1
    for rating in (1, 2, 4, 5):
        assert after[rating] == before[rating]


@pytest.mark.asyncio
async def test_department_analytics_recompute_after_delete(repository):
    service = AnalyticsService(repository)
    await add_course(repository, "CS 101", ratings=[5, 5])
    doomed = await add_course(repository, "CS 102", ratings=[1])
    await add_course(repository, "MATH 1", department="Mathematics", ratings=[4])

    before = {row.department: row for row in await service.get_department_analytics()}
    assert before["Computer Science"].course_count == 2
    assert before["Computer Science"].average_rating == 3.7

    await repository.delete_course(doomed.id)

    after = await service.get_department_analytics()
    assert [row.department for row in after] == ["Computer Science", "Mathematics"]
    assert after[0].course_count == 1
    assert after[0].total_reviews == 2
    assert after[0].average_rating == 5.0


@pytest.mark.asyncio
async def test_seeded_catalog_analytics(seeded_repository):
    service = AnalyticsService(seeded_repository)

    overview = await service.get_overall_stats()
    departments = await service.get_department_analytics()
    distribution = await service.get_rating_distribution()

    assert overview.total_reviews == 22
    assert overview.average_rating == 4.0
    assert overview.active_courses == 6
    assert [row.department for row in departments] == [
        "Physics",
        "History",
        "Computer Science",
        "Mathematics",
        "English",
    ]
    assert [row.average_rating for row in departments] == [4.5, 4.3, 4.1, 3.8, 3.3]
    assert [row.count for row in distribution] == [0, 0, 4, 13, 5]
