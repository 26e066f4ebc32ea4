# hotel_cms/normalizers/audit.py
from typing import Any, Dict, Mapping, Optional

from hotel_cms.models.audit_log import AuditLog


def normalize_audit_log(log: AuditLog, actor_names: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    One audit trail entry for the back-office history view.

    `actor_names` maps admin ids to usernames; entries of deleted admins
    keep their id and a null username.
    """
    return {
        "id": log.id,
        "action": log.action,
        "entity_type": log.entity_type,
        "entity_id": log.entity_id,
        "actor_id": log.actor_id,
        "actor_username": (actor_names or {}).get(log.actor_id),
        "payload": log.payload or {},
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }
