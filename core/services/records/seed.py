"""Fixed sample data the dashboard starts from."""
from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone

from core.domain import Budget, Expenditure, Project, ProjectStatus
from core.services.common.numeric import round_half_up

EXPENDITURE_CATEGORIES = ("Procurement", "Labor", "Logistics", "Training", "Consulting")
EXPENDITURES_PER_PROJECT = 3

# (id, department, category, allocated, spent, region)
_BUDGET_ROWS = (
    ("b1", "Health", "Public Services", 50_000_000, 21_500_000, "National"),
    ("b2", "Education", "Public Services", 42_000_000, 28_900_000, "National"),
    ("b3", "Transport", "Infrastructure", 65_000_000, 41_200_000, "National"),
    ("b4", "Agriculture", "Economic", 18_000_000, 9_000_000, "Rural"),
    ("b5", "Energy", "Infrastructure", 30_000_000, 11_000_000, "National"),
    ("b6", "Tourism", "Economic", 8_000_000, 3_500_000, "Coastal"),
    ("b7", "Defense", "Security", 90_000_000, 61_000_000, "National"),
    ("b8", "Justice", "Security", 27_000_000, 14_000_000, "National"),
)

# (id, name, department, budget, spent, status, progress, start, end, region, risk, description)
_PROJECT_ROWS = (
    ("p1", "Rural Clinic Expansion", "Health", 12_000_000, 4_600_000, ProjectStatus.ON_TRACK, 39,
     date(2024, 1, 15), date(2025, 7, 30), "Rural", 25,
     "Building and upgrading rural health clinics to expand access."),
    ("p2", "Highway Modernization", "Transport", 30_000_000, 15_800_000, ProjectStatus.DELAYED, 52,
     date(2023, 9, 1), date(2025, 12, 31), "National", 55,
     "Modernizing key national highway corridors for safety and capacity."),
    ("p3", "Digital Classrooms Initiative", "Education", 15_000_000, 7_200_000, ProjectStatus.ON_TRACK, 47,
     date(2024, 2, 1), date(2025, 6, 15), "National", 30,
     "Deploying digital tools and connectivity in public schools."),
    ("p4", "Green Energy Pilot", "Energy", 10_000_000, 4_800_000, ProjectStatus.ON_TRACK, 49,
     date(2024, 3, 1), date(2025, 3, 1), "National", 35,
     "Pilot renewable microgrid systems for remote areas."),
    ("p5", "Agri Supply Chain Upgrade", "Agriculture", 8_000_000, 2_700_000, ProjectStatus.AT_RISK, 28,
     date(2024, 4, 1), date(2025, 10, 1), "Rural", 68,
     "Improving cold storage and logistics for produce."),
    ("p6", "Judicial Case System", "Justice", 6_000_000, 2_400_000, ProjectStatus.ON_TRACK, 36,
     date(2024, 1, 10), date(2025, 1, 10), "National", 40,
     "Implementing digital case management for courts."),
    ("p7", "Border Security Upgrade", "Defense", 22_000_000, 9_600_000, ProjectStatus.DELAYED, 44,
     date(2023, 12, 1), date(2025, 8, 1), "National", 58,
     "Deploying modern surveillance and control infrastructure."),
    ("p8", "Eco Tourism Campaign", "Tourism", 5_000_000, 1_700_000, ProjectStatus.ON_TRACK, 34,
     date(2024, 5, 1), date(2025, 5, 1), "Coastal", 32,
     "Promoting sustainable tourism development."),
    ("p9", "School Nutrition Upgrade", "Education", 9_000_000, 3_000_000, ProjectStatus.ON_TRACK, 33,
     date(2024, 3, 15), date(2025, 9, 15), "National", 29,
     "Enhancing nutritional standards for school meals."),
)


def seed_budgets(now: datetime) -> list[Budget]:
    return [
        Budget.create(
            id=bid,
            department=department,
            category=category,
            allocated=allocated,
            spent=spent,
            region=region,
            last_updated=now,
        )
        for bid, department, category, allocated, spent, region in _BUDGET_ROWS
    ]


def seed_projects(now: datetime) -> list[Project]:
    projects: list[Project] = []
    for (pid, name, department, budget, spent, status, progress,
         start, end, region, risk, description) in _PROJECT_ROWS:
        projects.append(
            Project.create(
                id=pid,
                name=name,
                department=department,
                budget=budget,
                spent=spent,
                status=status,
                progress=progress,
                start_date=start,
                end_date=end,
                region=region,
                description=description,
                updated_at=now,
                risk=risk,
            )
        )
    return projects


def seed_expenditures(projects: list[Project], rng: random.Random, now: datetime) -> list[Expenditure]:
    """Three transactions per project, amounts 20k-220k, dated within the last ~11.5 days."""
    rows: list[Expenditure] = []
    for project in projects:
        for i in range(EXPENDITURES_PER_PROJECT):
            category = EXPENDITURE_CATEGORIES[i]
            amount = round_half_up(rng.random() * 200_000) + 20_000
            when = now - timedelta(milliseconds=rng.random() * 1e9)
            rows.append(
                Expenditure.create(
                    id=f"{project.id}-tx{i}",
                    project_id=project.id,
                    department=project.department,
                    description=f"{category} expense",
                    amount=amount,
                    date=when,
                    category=category,
                )
            )
    return rows


def seed_records(rng: random.Random | None = None, now: datetime | None = None):
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    budgets = seed_budgets(now)
    projects = seed_projects(now)
    expenditures = seed_expenditures(projects, rng, now)
    return budgets, projects, expenditures


__all__ = [
    "EXPENDITURE_CATEGORIES",
    "seed_budgets",
    "seed_projects",
    "seed_expenditures",
    "seed_records",
]
