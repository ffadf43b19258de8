"""
Audit logging for back-office operations.

Logs logins and every change to stored records as one JSON line on the
`audit` logger, so the stream can be shipped to centralized logging.

Passwords never appear in audit entries.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Separate logger for audit events
audit_logger = logging.getLogger("audit")

_REDACTED_FIELDS = {"password"}


def _redact(changes: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: ("***" if key in _REDACTED_FIELDS else value)
        for key, value in changes.items()
    }


class AuditLog:
    """Central audit logging for login and data-changing events."""

    @staticmethod
    def log_authentication(
        action: str,  # "login", "failed_login"
        username: str,
        ip_address: str,
        success: bool,
        reason: str = "",
    ):
        """
        Log authentication events.

        Usage:
            AuditLog.log_authentication("login", "admin", "192.168.1.1", True)
            AuditLog.log_authentication("failed_login", "admin", "192.168.1.1", False, reason="Invalid password")
        """
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": f"auth.{action}",
            "username": username,
            "ip_address": ip_address,
            "success": success,
        }

        if reason and not success:
            log_entry["reason"] = reason

        if success:
            audit_logger.info(json.dumps(log_entry))
        else:
            audit_logger.warning(json.dumps(log_entry))

    @staticmethod
    def log_action(
        action: str,  # "create", "update", "delete", "status"
        resource_type: str,  # "medication", "order", "supply_order", ...
        resource_id: int,
        changes: Optional[Dict[str, Any]] = None,
        ip_address: str = "",
    ):
        """
        Log a change to a stored record.

        Usage:
            AuditLog.log_action("delete", "medication", 4)
            AuditLog.log_action("status", "supply_order", 2, changes={"status": "received"})
        """
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": f"{resource_type}.{action}",
            "resource_id": resource_id,
        }

        if ip_address:
            log_entry["ip_address"] = ip_address
        if changes:
            log_entry["changes"] = _redact(changes)

        audit_logger.info(json.dumps(log_entry, default=str))
