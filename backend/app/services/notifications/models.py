from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

# Raw alias data as stored by the user directory. Normally a JSON text
# array or an already decoded list, but any value may arrive here.
RawAliases = Any

STORE_MANAGER_ROLE = "StoreManager"

# Department heads receive every report regardless of store
DEPARTMENT_HEAD_ROLES = frozenset({"CleaningHead", "ProcurementHead", "MaintenanceHead"})


@dataclass(frozen=True)
class StoreManagerAccount:
    """User account (store manager or department head) as read from the user store."""
    id: str
    email: str
    display_name: str = ""
    assigned_store_aliases: RawAliases = None
    email_notifications_enabled: bool = True
    is_active: bool = True
    is_approved: bool = True
    role: str = STORE_MANAGER_ROLE
    department: str = ""

    @property
    def name(self) -> str:
        return self.display_name or self.email


@dataclass(frozen=True)
class AliasParseResult:
    """Outcome of parsing an account's alias data."""
    aliases: tuple[str, ...] = ()
    skip_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.skip_reason is None


@dataclass(frozen=True)
class NotificationTarget:
    """An account selected to receive a notification.

    ``matched_alias`` is empty for department heads, who are not matched by store.
    """
    account: StoreManagerAccount
    matched_alias: str


@dataclass(frozen=True)
class ReportNotification:
    """Report details included in a notification email."""
    document_number: str
    store_name: str
    audit_date: str
    overall_percentage: Optional[float]
    auditor: str = ""
    report_url: str = ""


@dataclass
class DeliveryResult:
    """Outcome of one notification email."""
    email: str
    status: str  # sent, failed
    error: Optional[str] = None


@dataclass
class NotificationSummary:
    """Outcome of a notification run."""
    sent: int = 0
    failed: int = 0
    total: int = 0
    results: list[DeliveryResult] = field(default_factory=list)
    message: str = ""


@dataclass(frozen=True)
class NotificationRecord:
    """History entry for one attempted notification."""
    document_number: str
    recipient_id: str
    recipient_email: str
    recipient_name: str
    recipient_role: str
    notification_type: str
    status: str  # Sent, Failed
    email_subject: str
    sent_at: datetime
    sent_by: str = ""
    error_message: Optional[str] = None
