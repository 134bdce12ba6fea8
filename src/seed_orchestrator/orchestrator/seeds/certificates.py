from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seed_orchestrator.orchestrator.persistence import SeedDatabase
from seed_orchestrator.orchestrator.tasks import require_context

from .data import CERTIFICATE_TEMPLATES
from .helpers import index_by_key, lookup

_TEMPLATE_PLACEHOLDERS = [
    "aluno_nome",
    "curso_titulo",
    "certificado_carga_horaria",
    "data_emissao",
    "certificateCode",
]


def seed_certificate_templates(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(
        context, ["adminUser", "courseTypes", "courseModalities"], "certificateTemplates"
    )
    admin = context["adminUser"]
    types = index_by_key(context["courseTypes"])
    online = lookup(
        index_by_key(context["courseModalities"]),
        "ONLINE",
        entity="modality",
        caller="certificateTemplates",
    )

    items: list[dict[str, Any]] = []
    for template in CERTIFICATE_TEMPLATES:
        item = {key: value for key, value in template.items() if key != "courseType"}
        if "courseType" in template:
            item["courseTypeId"] = lookup(
                types, template["courseType"], entity="course type", caller="certificateTemplates"
            ).id
        item.update(
            {
                "placeholders": _TEMPLATE_PLACEHOLDERS,
                "modalityId": online.id,
                "createdById": admin.id,
            }
        )
        items.append(item)

    templates = db.upsert_many("certificate_template", items, key_fn=lambda t: t["name"])
    return {"certificateTemplates": templates}
