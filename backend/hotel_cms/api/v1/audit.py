from flask import request, jsonify
from hotel_cms.models.admin import Admin
from hotel_cms.models.audit_log import AuditLog
from hotel_cms.normalizers.audit import normalize_audit_log
from hotel_cms.utils.decorators import admin_required
from . import v1_bp


@v1_bp.route("/audit", methods=["GET"])
@admin_required
def list_audit_logs():
    limit = min(request.args.get("limit", 50, type=int), 200)

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs = query.order_by(AuditLog.created_at.desc(), AuditLog.id.desc()).limit(limit).all()

    actor_ids = {log.actor_id for log in logs}
    actor_names = {
        admin.id: admin.username
        for admin in Admin.query.filter(Admin.id.in_(actor_ids)).all()
    } if actor_ids else {}

    return jsonify({"items": [normalize_audit_log(log, actor_names) for log in logs]})
