"""Learning-platform seeds: course taxonomy and example courses."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from seed_orchestrator.orchestrator.persistence import SeedDatabase, SeedRecord
from seed_orchestrator.orchestrator.tasks import require_context

from .data import (
    COURSE_AREAS,
    COURSE_CATEGORIES,
    COURSE_MODALITIES,
    COURSE_TYPES,
    COURSES,
    EXAM_TYPES,
    LESSON_TYPES,
    Roles,
)
from .helpers import index_by_key, lookup, slugify

logger = logging.getLogger(__name__)


def seed_course_areas(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(context, ["adminUser"], "courseAreas")
    admin = context["adminUser"]
    items = [
        {**area, "slug": slugify(area["name"]), "createdById": admin.id} for area in COURSE_AREAS
    ]
    return {"courseAreas": db.upsert_many("course_area", items, key_fn=lambda a: a["name"])}


def seed_course_categories(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(context, ["courseAreas"], "courseCategories")
    areas = index_by_key(context["courseAreas"])
    items = [
        {
            "name": category["name"],
            "slug": slugify(category["name"]),
            "areaId": lookup(
                areas, category["area"], entity="course area", caller="courseCategories"
            ).id,
        }
        for category in COURSE_CATEGORIES
    ]
    return {
        "courseCategories": db.upsert_many("course_category", items, key_fn=lambda c: c["name"])
    }


def seed_course_types(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    return {"courseTypes": db.upsert_many("course_type", COURSE_TYPES, key_fn=lambda t: t["name"])}


def seed_course_modalities(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    modalities = db.upsert_many("course_modality", COURSE_MODALITIES, key_fn=lambda m: m["name"])
    return {"courseModalities": modalities}


def _seed_admin_owned_types(
    db: SeedDatabase,
    context: Mapping[str, Any],
    *,
    entity: str,
    items: list[dict[str, Any]],
    caller: str,
) -> list[SeedRecord]:
    require_context(context, ["adminUser"], caller)
    admin = context["adminUser"]
    owned = [{**item, "status": "ACTIVE", "createdById": admin.id} for item in items]
    return db.upsert_many(entity, owned, key_fn=lambda t: t["name"])


def seed_lesson_types(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    lesson_types = _seed_admin_owned_types(
        db, context, entity="lesson_type", items=LESSON_TYPES, caller="lessonTypes"
    )
    return {"lessonTypes": lesson_types}


def seed_exam_types(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    exam_types = _seed_admin_owned_types(
        db, context, entity="exam_type", items=EXAM_TYPES, caller="examTypes"
    )
    return {"examTypes": exam_types}


def seed_courses(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(
        context,
        ["adminUser", "courseCategories", "courseTypes", "courseModalities"],
        "courses",
    )
    categories = index_by_key(context["courseCategories"])
    types = index_by_key(context["courseTypes"])
    modalities = index_by_key(context["courseModalities"])

    coordinator = next(
        (user for user in context.get("testUsers") or [] if user.get("role") == Roles.PEDAGOGICAL),
        None,
    )
    if coordinator is None:
        logger.warning("No pedagogical user seeded; the administrator coordinates every course")
        coordinator = context["adminUser"]

    items: list[dict[str, Any]] = []
    for course in COURSES:
        category = lookup(categories, course["category"], entity="category", caller="courses")
        course_type = lookup(types, course["type"], entity="course type", caller="courses")
        modality = lookup(modalities, course["modality"], entity="modality", caller="courses")
        items.append(
            {
                "title": course["title"],
                "slug": slugify(course["title"]),
                "workload": course["workload"],
                "price": course["price"],
                "status": "PUBLISHED",
                "categoryId": category.id,
                "courseTypeId": course_type.id,
                "modalityId": modality.id,
                "coordinatorId": coordinator.id,
            }
        )

    return {"courses": db.upsert_many("course", items, key_fn=lambda c: c["slug"])}
