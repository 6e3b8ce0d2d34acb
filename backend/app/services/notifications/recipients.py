"""
Recipient Resolver - finds the accounts to notify about a store's report.

Pipeline:
1. Keep store managers; drop inactive, unapproved or opted-out accounts
2. Parse each account's assigned store aliases (bad data skips the account)
3. Keep accounts where any alias equals, contains, or is contained in
   the store identifier (case-sensitive)

Department heads are not store-matched; report notifications add every
notifiable department head after the matched store managers.
"""

import json
from typing import Iterable

from app.logger import get_logger
from app.services.notifications.models import (
    DEPARTMENT_HEAD_ROLES,
    STORE_MANAGER_ROLE,
    AliasParseResult,
    NotificationTarget,
    RawAliases,
    StoreManagerAccount,
)

logger = get_logger("notifications")


def parse_store_aliases(raw: RawAliases) -> AliasParseResult:
    """Parse stored alias data into a tuple of alias strings.

    Accepts a JSON array of strings or a list of strings. Anything else
    yields a result with ``skip_reason`` set instead of raising.
    """
    if raw is None:
        return AliasParseResult(skip_reason="no assigned stores")

    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as e:
            return AliasParseResult(skip_reason=f"invalid JSON: {e.msg}")
    else:
        decoded = raw

    if not isinstance(decoded, (list, tuple)):
        return AliasParseResult(skip_reason=f"expected a list, got {type(decoded).__name__}")

    if not all(isinstance(alias, str) for alias in decoded):
        return AliasParseResult(skip_reason="aliases must all be strings")

    return AliasParseResult(aliases=tuple(decoded))


def alias_matches(alias: str, store_identifier: str) -> bool:
    """Three-way fuzzy match between an alias and a store identifier."""
    if not alias or not store_identifier:
        return False
    return alias == store_identifier or alias in store_identifier or store_identifier in alias


def is_notifiable(account: StoreManagerAccount) -> bool:
    return account.is_active and account.is_approved and account.email_notifications_enabled


class RecipientResolver:
    """Resolves notification recipients for a store."""

    def resolve(
        self, store_identifier: str, candidates: Iterable[StoreManagerAccount]
    ) -> list[NotificationTarget]:
        """Match store manager accounts against a store identifier.

        Args:
            store_identifier: Store code or name from the audit
            candidates: Accounts to consider; only store managers can match

        Returns:
            One NotificationTarget per matching account, in candidate order
        """
        targets = []
        if not store_identifier:
            logger.warning("Empty store identifier, no recipients resolved")
            return targets

        for account in candidates:
            if account.role != STORE_MANAGER_ROLE or not is_notifiable(account):
                continue

            parsed = parse_store_aliases(account.assigned_store_aliases)
            if not parsed.ok:
                logger.warning(f"Skipping {account.email}: {parsed.skip_reason}")
                continue

            matched = next((a for a in parsed.aliases if alias_matches(a, store_identifier)), None)
            if matched is not None:
                targets.append(NotificationTarget(account=account, matched_alias=matched))
                logger.info(f"Store manager {account.email} matched via '{matched}'")

        logger.info(f"Found {len(targets)} store managers for store '{store_identifier}'")
        return targets

    def department_heads(self, candidates: Iterable[StoreManagerAccount]) -> list[NotificationTarget]:
        """Every notifiable department head; they see all reports."""
        return [
            NotificationTarget(account=account, matched_alias="")
            for account in candidates
            if account.role in DEPARTMENT_HEAD_ROLES and is_notifiable(account)
        ]

    def resolve_report_recipients(
        self, store_identifier: str, candidates: Iterable[StoreManagerAccount]
    ) -> list[NotificationTarget]:
        """Matched store managers followed by department heads."""
        candidates = list(candidates)
        targets = self.resolve(store_identifier, candidates)
        heads = self.department_heads(candidates)
        for head in heads:
            logger.info(f"Department head ({head.account.role}): {head.account.email}")
        return targets + heads


def resolve_recipients(
    store_identifier: str, candidates: Iterable[StoreManagerAccount]
) -> list[NotificationTarget]:
    """Resolve recipients with a default resolver."""
    return RecipientResolver().resolve(store_identifier, candidates)
