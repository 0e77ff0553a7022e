"""JSON backup export and import.

The backup file is a JSON array of subscriptions using camelCase field names
(``dayOfMonth``, ``isActive``, ...) with the recurrence nested under
``recurrence``. Import is tolerant: records without ``name`` or ``type`` are
skipped, missing optional fields fall back to defaults, and a failure on one
record does not stop the others.
"""

import json
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, TextIO

from dateutil import parser as date_parser

from subtrack.database.base import Database
from subtrack.domain.entities import (
    DEFAULT_CURRENCY,
    DEFAULT_REMINDERS,
    Category,
    Frequency,
    ImportResult,
    Subscription,
)
from subtrack.domain.errors import DomainError
from subtrack.domain.subscription import SubscriptionService

logger = logging.getLogger(__name__)


def _isoformat(value: Optional[date | datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_backup_date(value: Any) -> Optional[date]:
    if not value:
        return None
    return date_parser.isoparse(str(value)).date()


def subscription_to_record(subscription: Subscription) -> dict[str, Any]:
    """Serialize a subscription into a backup record."""
    return {
        "id": subscription.id,
        "name": subscription.name,
        "type": subscription.type.value,
        "category": subscription.category.value,
        "recurrence": {
            "frequency": subscription.recurrence.frequency.value,
            "dayOfMonth": subscription.recurrence.day_of_month,
        },
        "amount": float(subscription.amount) if subscription.amount is not None else None,
        "currency": subscription.currency,
        "paymentMethod": subscription.payment_method,
        "reminders": list(subscription.reminders),
        "isActive": subscription.is_active,
        "notes": subscription.notes,
        "statementDay": subscription.statement_day,
        "dueDay": subscription.due_day,
        "startDate": _isoformat(subscription.start_date),
        "endDate": _isoformat(subscription.end_date),
        "sortOrder": subscription.sort_order,
        "createdAt": _isoformat(subscription.created_at),
        "updatedAt": _isoformat(subscription.updated_at),
    }


def record_to_fields(record: dict[str, Any]) -> dict[str, Any]:
    """Map a backup record onto SubscriptionService.create_subscription arguments."""
    recurrence = record.get("recurrence")
    if not isinstance(recurrence, dict):
        recurrence = {}
    amount = record.get("amount")
    reminders = record.get("reminders")
    return {
        "name": record["name"],
        "type": record["type"],
        "category": record.get("category") or Category.OTHER,
        "frequency": recurrence.get("frequency") or Frequency.MONTHLY,
        "day_of_month": recurrence.get("dayOfMonth"),
        "amount": Decimal(str(amount)) if amount is not None else None,
        "currency": record.get("currency") or DEFAULT_CURRENCY,
        "reminders": reminders if reminders is not None else DEFAULT_REMINDERS,
        "is_active": record.get("isActive") is not False,
        "statement_day": record.get("statementDay"),
        "due_day": record.get("dueDay"),
        "payment_method": record.get("paymentMethod"),
        "notes": record.get("notes"),
        "start_date": _parse_backup_date(record.get("startDate")),
        "end_date": _parse_backup_date(record.get("endDate")),
    }


class BackupService:
    """Service for whole-collection JSON backups."""

    def __init__(self, db: Database):
        """Initialize backup service.

        Args:
            db: Database instance
        """
        self.db = db
        self.subscription_service = SubscriptionService(db)

    def export_data(self, stream: TextIO) -> int:
        """Write all subscriptions to ``stream`` as JSON.

        Returns:
            Number of exported subscriptions
        """
        subscriptions = self.db.list_subscriptions()
        records = [subscription_to_record(subscription) for subscription in subscriptions]
        json.dump(records, stream, indent=2, ensure_ascii=False)
        stream.write("\n")
        logger.info("Exported %d subscription(s)", len(records))
        return len(records)

    def import_data(self, stream: TextIO) -> ImportResult:
        """Create subscriptions from a JSON backup.

        Imported records always get new IDs and are appended to the current
        ordering in file order.

        Raises:
            DomainError: If the file is not a JSON array
        """
        try:
            records = json.load(stream)
        except json.JSONDecodeError as exc:
            raise DomainError(f"Backup is not valid JSON: {exc}") from exc
        if not isinstance(records, list):
            raise DomainError("Backup must contain a JSON array of subscriptions")

        imported = skipped = failed = 0
        for index, record in enumerate(records):
            if not isinstance(record, dict) or not record.get("name") or not record.get("type"):
                logger.warning("Skipping backup record %d: missing name or type", index)
                skipped += 1
                continue

            try:
                self.subscription_service.create_subscription(**record_to_fields(record))
            except (DomainError, InvalidOperation, ValueError, TypeError) as exc:
                logger.error("Failed to import subscription %r: %s", record.get("name"), exc)
                failed += 1
                continue
            imported += 1

        logger.info(
            "Imported %d subscription(s), skipped %d, failed %d", imported, skipped, failed
        )
        return ImportResult(imported=imported, skipped=skipped, failed=failed)
