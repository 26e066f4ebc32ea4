from hotel_cms.extensions import db
from hotel_cms.models.audit_log import AuditLog
from typing import Optional


def log_action(
    *,
    actor_id: Optional[str],
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    if not actor_id:
        return  # Seeding and CLI work run without an admin

    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id or "*"
    log.payload = payload or {}

    db.session.add(log)
