"""Recruitment seeds: resumes, job offers and applications."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from seed_orchestrator.orchestrator.persistence import SeedDatabase, SeedRecord
from seed_orchestrator.orchestrator.tasks import require_context

from .data import JOB_OFFERS, Roles
from .helpers import index_by_key, lookup, slugify

logger = logging.getLogger(__name__)

# Plan assigned to the seeded company account.
COMPANY_PLAN = "Avançado"


def _users_with_role(context: Mapping[str, Any], role: str) -> list[SeedRecord]:
    return [user for user in context["testUsers"] if user.get("role") == role]


def seed_resumes(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(context, ["testUsers"], "resumes")
    items = [
        {
            "userId": student.id,
            "email": student.key,
            "title": f"Currículo de {student.get('personalInfo', {}).get('name', student.key)}",
            "isPrimary": True,
        }
        for student in _users_with_role(context, Roles.STUDENT)
    ]
    return {"resumes": db.upsert_many("resume", items, key_fn=lambda r: r["email"])}


def seed_job_offers(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(context, ["testUsers", "subscriptionPlans"], "jobOffers")

    companies = _users_with_role(context, Roles.COMPANY)
    if not companies:
        logger.warning("No company user seeded; skipping job offers")
        return {}

    plan = lookup(
        index_by_key(context["subscriptionPlans"]),
        COMPANY_PLAN,
        entity="subscription plan",
        caller="jobOffers",
    )
    jobs_config = plan["jobsConfig"]
    offers = [
        offer
        for offer in JOB_OFFERS
        if jobs_config["confidentialOffers"] or not offer["isConfidential"]
    ]
    if jobs_config["maxJobOffers"] != -1:
        offers = offers[: jobs_config["maxJobOffers"]]

    items: list[dict[str, Any]] = []
    for company in companies:
        for offer in offers:
            items.append(
                {
                    **offer,
                    "slug": f"{slugify(company.key.split('@')[0])}-{slugify(offer['title'])}",
                    "companyId": company.id,
                    "planId": plan.id,
                    "status": "PUBLISHED",
                }
            )

    return {"jobOffers": db.upsert_many("job_offer", items, key_fn=lambda o: o["slug"])}


def seed_job_applications(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(context, ["jobOffers", "resumes"], "jobApplications")

    items: list[dict[str, Any]] = []
    for offer in context["jobOffers"]:
        if offer.get("isConfidential"):
            continue
        for resume in context["resumes"]:
            items.append(
                {
                    "key": f"{offer.key}:{resume.key}",
                    "jobOfferId": offer.id,
                    "resumeId": resume.id,
                    "candidateId": resume["userId"],
                    "status": "SUBMITTED",
                }
            )

    applications = db.upsert_many("job_application", items, key_fn=lambda a: a["key"])
    return {"jobApplications": applications}
