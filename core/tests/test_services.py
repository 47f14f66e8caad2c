"""
Tests for core/services.py: the F-Coin points ledger.

Covers:
- grant(): balance update, history append, zero / overdraw rejection
- award(): configured amounts, per-variant tables, unknown keys
- revoke(): deduction clamped to the locked balance
- verify_balance(): balance == sum of history
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')

import pytest

from core.exceptions import ValidationFailed
from core.models import PointTransaction, User
from core.services import PointsLedger


@pytest.mark.django_db
class TestGrant:

    def test_grant_updates_balance_and_history(self, founder):
        entry = PointsLedger.grant(founder, 15, 'post_created', 'Created fail_forward post')

        founder.refresh_from_db()
        assert founder.points == 15
        assert entry.amount == 15
        assert entry.action == 'post_created'
        assert list(founder.point_transactions.values_list('amount', flat=True)) == [15]

    def test_negative_grant_within_balance(self, founder):
        PointsLedger.grant(founder, 10, 'post_liked')
        PointsLedger.grant(founder, -4, 'adjustment')

        founder.refresh_from_db()
        assert founder.points == 6

    def test_zero_amount_rejected(self, founder):
        with pytest.raises(ValidationFailed):
            PointsLedger.grant(founder, 0, 'noop')
        assert PointTransaction.objects.count() == 0

    def test_overdraw_rejected(self, founder):
        PointsLedger.grant(founder, 5, 'post_liked')

        with pytest.raises(ValidationFailed) as exc:
            PointsLedger.grant(founder, -6, 'adjustment')

        assert exc.value.details == {'balance': 5, 'amount': -6}
        founder.refresh_from_db()
        assert founder.points == 5
        assert founder.point_transactions.count() == 1

    def test_in_memory_instance_reflects_new_balance(self, founder):
        PointsLedger.grant(founder, 3, 'post_shared')
        assert founder.points == 3


@pytest.mark.django_db
class TestAward:

    def test_flat_award(self, founder):
        entry = PointsLedger.award(founder, 'investor_interest')
        assert entry.amount == 25

    @pytest.mark.parametrize('post_type,expected', [
        ('general', 10),
        ('fail_forward', 15),
        ('signal_boost', 20),
        ('investor_connect', 10),
    ])
    def test_post_created_by_type(self, founder, post_type, expected):
        entry = PointsLedger.award(founder, 'post_created', variant=post_type)
        assert entry.amount == expected

    @pytest.mark.parametrize('stage,expected', [
        ('mvp', 50), ('users', 100), ('revenue', 200), ('scaling', 500),
    ])
    def test_stage_progression(self, founder, stage, expected):
        assert PointsLedger.award_amount('stage_progression', stage) == expected

    def test_stage_without_award_is_noop(self, founder):
        assert PointsLedger.award(founder, 'stage_progression', variant='idea') is None
        assert founder.point_transactions.count() == 0

    def test_unknown_key_is_noop(self, founder):
        assert PointsLedger.award(founder, 'no_such_action') is None


@pytest.mark.django_db
class TestRevokeAndVerify:

    def test_revoke_deducts_award(self, founder):
        PointsLedger.award(founder, 'post_liked')
        PointsLedger.award(founder, 'post_liked')

        entry = PointsLedger.revoke(founder, 'post_liked')

        assert entry.amount == -1
        assert entry.action == 'post_liked_revoked'
        founder.refresh_from_db()
        assert founder.points == 1

    def test_revoke_never_goes_negative(self, founder):
        assert PointsLedger.revoke(founder, 'post_liked') is None
        founder.refresh_from_db()
        assert founder.points == 0

    def test_revoke_clamps_against_locked_balance(self, founder):
        PointsLedger.award(founder, 'post_shared')
        # a debit through another instance leaves founder.points stale at 3
        PointsLedger.grant(User.objects.get(pk=founder.pk), -2, 'adjustment')

        entry = PointsLedger.revoke(founder, 'post_shared')

        assert entry.amount == -1
        assert founder.points == 0
        assert PointsLedger.verify_balance(founder)

    def test_clamped_grant_on_empty_balance_records_nothing(self, founder):
        assert PointsLedger.grant(founder, -3, 'adjustment', clamp=True) is None
        assert not founder.point_transactions.exists()

    def test_balance_matches_history(self, founder):
        PointsLedger.award(founder, 'match_accepted')
        PointsLedger.award(founder, 'post_commented')
        PointsLedger.grant(founder, -5, 'adjustment')
        PointsLedger.revoke(founder, 'post_liked')

        assert PointsLedger.verify_balance(founder)
        assert founder.points == founder.history_total() == 6
