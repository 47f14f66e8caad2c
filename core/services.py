"""
Points ledger for the F-Coin reward system.

Every balance change goes through PointsLedger.grant so that an account's
balance always equals the sum of its PointTransaction history.
"""

import logging
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import F

from .exceptions import ValidationFailed
from .models import PointTransaction, User

logger = logging.getLogger('core.services')


class PointsLedger:
    """Append-only F-Coin grants against an account's balance."""

    AWARDS = settings.FOUNDIC_CONFIG['point_awards']

    @classmethod
    def grant(
        cls,
        user: User,
        amount: int,
        action: str,
        description: str = '',
        clamp: bool = False,
    ) -> Optional[PointTransaction]:
        """
        Apply a signed point delta to a user and record it.

        The account row is locked for the duration of the transaction so two
        concurrent grants cannot lose an update. With clamp=True a debit is
        cut down to the locked balance instead of failing; nothing is
        recorded when the balance is already zero.

        Raises:
            ValidationFailed: amount is zero or would take the balance below zero
        """
        if not isinstance(amount, int) or amount == 0:
            raise ValidationFailed('Point amount must be a non-zero integer', details={'amount': amount})

        with transaction.atomic():
            locked = User.objects.select_for_update().get(pk=user.pk)
            if clamp:
                amount = max(amount, -locked.points)
                if not amount:
                    user.points = locked.points
                    return None
            if locked.points + amount < 0:
                raise ValidationFailed(
                    'Insufficient points',
                    details={'balance': locked.points, 'amount': amount},
                )

            User.objects.filter(pk=user.pk).update(points=F('points') + amount)
            entry = PointTransaction.objects.create(
                user=locked,
                amount=amount,
                action=action,
                description=description,
            )

        user.points = locked.points + amount
        logger.info("Points %+d to user=%s (%s)", amount, user.pk, action)
        return entry

    @classmethod
    def award_amount(cls, award_key: str, variant: Optional[str] = None) -> int:
        """Look up the configured award, resolving per-variant tables."""
        award = cls.AWARDS.get(award_key, 0)
        if isinstance(award, dict):
            award = award.get(variant, 0)
        return award or 0

    @classmethod
    def award(
        cls,
        user: User,
        award_key: str,
        description: str = '',
        variant: Optional[str] = None,
    ) -> Optional[PointTransaction]:
        """Grant the configured award for an action; no-op when none applies."""
        amount = cls.award_amount(award_key, variant)
        if not amount:
            return None
        return cls.grant(user, amount, award_key, description)

    @classmethod
    def revoke(
        cls,
        user: User,
        award_key: str,
        description: str = '',
        variant: Optional[str] = None,
    ) -> Optional[PointTransaction]:
        """Record the negative of an award, never taking the balance below zero."""
        amount = cls.award_amount(award_key, variant)
        if not amount:
            return None
        return cls.grant(user, -amount, f'{award_key}_revoked', description, clamp=True)

    @staticmethod
    def verify_balance(user: User) -> bool:
        user.refresh_from_db(fields=['points'])
        return user.points == user.history_total()
