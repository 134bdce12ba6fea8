"""The seed catalogue.

`register_all_seeds` binds every seed body to the run's database handle and
registers it with its dependencies. Seed groups are named subsets for partial
runs from the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from seed_orchestrator.orchestrator.config import SeederSettings
from seed_orchestrator.orchestrator.persistence import SeedDatabase
from seed_orchestrator.orchestrator.tasks import TaskRegistry

from .certificates import seed_certificate_templates
from .core import seed_admin_user, seed_roles, seed_users
from .courses import (
    seed_course_areas,
    seed_course_categories,
    seed_course_modalities,
    seed_course_types,
    seed_courses,
    seed_exam_types,
    seed_lesson_types,
)
from .jobs import seed_job_applications, seed_job_offers, seed_resumes
from .payments import seed_coupons, seed_payment_methods, seed_subscription_plans


@dataclass(frozen=True, slots=True)
class SeedGroup:
    name: str
    description: str
    tasks: tuple[str, ...]


SEED_GROUPS: dict[str, SeedGroup] = {
    group.name: group
    for group in [
        SeedGroup("core", "Roles, administrator and test users", ("roles", "adminUser", "users")),
        SeedGroup(
            "payments",
            "Subscription plans, payment methods and coupons",
            ("subscriptionPlans", "paymentMethods", "coupons"),
        ),
        SeedGroup(
            "courses",
            "Course taxonomy, lesson and exam types and example courses",
            (
                "courseAreas",
                "courseCategories",
                "courseTypes",
                "lessonTypes",
                "examTypes",
                "courseModalities",
                "courses",
            ),
        ),
        SeedGroup("certificates", "Certificate templates", ("certificateTemplates",)),
        SeedGroup(
            "jobs",
            "Resumes, job offers and applications",
            ("resumes", "jobOffers", "jobApplications"),
        ),
    ]
}


def register_all_seeds(
    registry: TaskRegistry, db: SeedDatabase, settings: SeederSettings
) -> TaskRegistry:
    """Register every known seed task, bound to `db`."""

    (
        registry.register("roles", partial(seed_roles, db))
        .register("adminUser", partial(seed_admin_user, db), ["roles"])
        .register(
            "users",
            partial(seed_users, db, password_hash=settings.default_password_hash),
            ["roles", "adminUser"],
        )
        .register("subscriptionPlans", partial(seed_subscription_plans, db))
        .register("paymentMethods", partial(seed_payment_methods, db))
        .register("coupons", partial(seed_coupons, db), ["adminUser", "subscriptionPlans"])
        .register("courseAreas", partial(seed_course_areas, db), ["adminUser"])
        .register("courseCategories", partial(seed_course_categories, db), ["courseAreas"])
        .register("courseTypes", partial(seed_course_types, db))
        .register("lessonTypes", partial(seed_lesson_types, db), ["adminUser"])
        .register("examTypes", partial(seed_exam_types, db), ["adminUser"])
        .register("courseModalities", partial(seed_course_modalities, db))
        .register(
            "courses",
            partial(seed_courses, db),
            ["adminUser", "users", "courseCategories", "courseTypes", "courseModalities"],
        )
        .register(
            "certificateTemplates",
            partial(seed_certificate_templates, db),
            ["adminUser", "courseTypes", "courseModalities"],
        )
        .register("resumes", partial(seed_resumes, db), ["users"])
        .register("jobOffers", partial(seed_job_offers, db), ["users", "subscriptionPlans"])
        .register("jobApplications", partial(seed_job_applications, db), ["jobOffers", "resumes"])
    )
    return registry


__all__ = ["SEED_GROUPS", "SeedGroup", "register_all_seeds"]
