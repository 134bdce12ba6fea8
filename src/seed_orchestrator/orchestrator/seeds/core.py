"""Core seeds: roles, the administrator account and one test user per role."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from seed_orchestrator.orchestrator.persistence import SeedDatabase, SeedRecord
from seed_orchestrator.orchestrator.tasks import require_context

from .data import ADMIN_USER, ROLES, Roles
from .helpers import slugify

logger = logging.getLogger(__name__)


def seed_roles(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    roles = db.upsert_many("role", ROLES, key_fn=lambda role: role["name"])

    admin_role = next((role for role in roles if role.key == Roles.SUPER_ADMIN), None)
    if admin_role is None:
        raise RuntimeError(f"Role {Roles.SUPER_ADMIN!r} was not created")

    return {"roles": roles, "adminRole": admin_role}


def seed_admin_user(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(context, ["adminRole"], "adminUser")
    admin_role: SeedRecord = context["adminRole"]

    # An existing administrator is never modified.
    admin = db.upsert(
        "user",
        ADMIN_USER["email"],
        {**ADMIN_USER, "roleId": admin_role.id, "role": admin_role.key},
        update=False,
    )
    logger.info("Administrator ready", extra={"email": admin.key, "user_id": admin.id})
    return {"adminUser": admin}


def seed_users(
    db: SeedDatabase, context: Mapping[str, Any], *, password_hash: str
) -> dict[str, object]:
    require_context(context, ["roles", "adminUser"], "users")

    test_users: list[SeedRecord] = []
    for role in context["roles"]:
        if role.key == Roles.SUPER_ADMIN:
            continue

        is_company = role.key == Roles.COMPANY
        user_type = "PESSOA_JURIDICA" if is_company else "PESSOA_FISICA"
        email = f"{slugify(role.key, separator='')}@teste.com"
        data: dict[str, Any] = {
            "email": email,
            "password": password_hash,
            "userType": user_type,
            "matricula": f"{'PJ' if is_company else 'PF'}{role['level']:05d}",
            "isActive": True,
            "roleId": role.id,
            "role": role.key,
        }
        if is_company:
            data["companyInfo"] = {
                "companyName": f"Empresa {role.key}",
                "tradeName": f"{role.key} LTDA",
            }
        else:
            data["personalInfo"] = {
                "name": f"Usuário {role.key}",
                "educationLevel": "ENSINO_SUPERIOR_COMPLETO",
            }

        test_users.append(db.upsert("user", email, data, update=False))

    logger.info("Test users ready", extra={"count": len(test_users)})
    return {"testUsers": test_users}
