import pytest

from dsakit.dynamic import knapsack
from dsakit.greedy import Activity, Job, fractional_knapsack, schedule_jobs, select_activities

ACTIVITIES = [Activity(1, 2), Activity(3, 4), Activity(0, 6), Activity(5, 7), Activity(8, 9), Activity(5, 9)]
JOBS = [Job("a", 2, 100), Job("b", 1, 19), Job("c", 2, 27), Job("d", 1, 25), Job("e", 3, 15)]


def test_select_activities_example():
    assert select_activities(ACTIVITIES) == [
        Activity(1, 2),
        Activity(3, 4),
        Activity(5, 7),
        Activity(8, 9),
    ]


def test_selected_activities_do_not_overlap():
    selected = select_activities(reversed(ACTIVITIES))
    assert all(activity in ACTIVITIES for activity in selected)
    assert all(a.finish <= b.start for a, b in zip(selected, selected[1:]))
    assert selected[0].finish == min(activity.finish for activity in ACTIVITIES)


def test_select_activities_empty():
    assert select_activities([]) == []


def test_fractional_knapsack_example():
    profits, weights = [60, 100, 120], [10, 20, 30]
    result = fractional_knapsack(50, profits, weights)
    assert result == 240.0
    assert result >= knapsack(50, weights, profits)


def test_fractional_knapsack_bounds():
    profits, weights = [10, 40, 30, 50], [5, 4, 6, 3]
    assert fractional_knapsack(sum(weights), profits, weights) == sum(profits)
    assert fractional_knapsack(sum(weights) + 7, profits, weights) == sum(profits)
    assert fractional_knapsack(0, profits, weights) == 0
    for capacity in range(sum(weights)):
        assert fractional_knapsack(capacity, profits, weights) <= fractional_knapsack(
            capacity + 1, profits, weights
        )


def test_fractional_knapsack_errors():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [1, 2], [1])
    with pytest.raises(ValueError):
        fractional_knapsack(10, [1], [0])
    with pytest.raises(ValueError):
        fractional_knapsack(-1, [1], [1])


def test_schedule_jobs_example():
    assert [job.id for job in schedule_jobs(JOBS)] == ["c", "a", "e"]


def test_scheduled_jobs_meet_deadlines():
    scheduled = schedule_jobs(reversed(JOBS))
    assert len(scheduled) == len(set(scheduled))
    assert all(job in JOBS for job in scheduled)
    for position, job in enumerate(scheduled):
        assert position < job.deadline
    assert max(job.profit for job in JOBS) in [job.profit for job in scheduled]


def test_schedule_jobs_empty():
    assert schedule_jobs([]) == []