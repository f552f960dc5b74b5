"""Greedy algorithms: activity selection, fractional knapsack and job sequencing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Activity:
    """An activity occupying the interval from ``start`` to ``finish``."""

    start: int
    finish: int


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by slot ``deadline``."""

    id: str
    deadline: int
    profit: int


def select_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Return a largest set of mutually compatible activities, by earliest finish."""
    selected: list[Activity] = []
    for activity in sorted(activities, key=attrgetter("finish")):
        if not selected or activity.start >= selected[-1].finish:
            selected.append(activity)
    return selected


def fractional_knapsack(
    capacity: float, profits: Iterable[float], weights: Iterable[float]
) -> float:
    """Return the largest profit when items may be taken in fractions."""
    profits = list(profits)
    weights = list(weights)
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    items = sorted(zip(profits, weights), key=lambda item: item[0] / item[1], reverse=True)
    remaining = capacity
    total = 0.0
    for profit, weight in items:
        if remaining <= 0:
            break
        if weight <= remaining:
            remaining -= weight
            total += profit
        else:
            total += profit * remaining / weight
            break
    return total


def schedule_jobs(jobs: Iterable[Job]) -> list[Job]:
    """Return the jobs chosen for maximum profit, in the order they are run.

    Jobs are taken by decreasing profit, each placed in the latest free slot
    before its deadline.
    """
    ordered = sorted(jobs, key=attrgetter("profit"), reverse=True)
    slots: list[Job | None] = [None] * len(ordered)
    for job in ordered:
        for slot in reversed(range(min(len(slots), job.deadline))):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job for job in slots if job is not None]