"""
Tests for core/views.py: authentication and account endpoints.

Covers:
- Register / login / logout
- 401 JSON for anonymous callers
- Profile, mindset, startup and stage updates
- Points history, leaderboard, search, public profile
- Investor interest
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')

import pytest
from django.urls import reverse

from core.models import User
from posts.models import Post


# ===========================================================================
# Authentication
# ===========================================================================

@pytest.mark.django_db
class TestAuthentication:

    def test_register_creates_account_and_session(self, api):
        response = api.post(reverse('core:register'), {
            'username': 'carol',
            'email': 'Carol@Example.com',
            'name': 'Carol',
            'role': 'founder',
            'password1': 'a-Strong-pass-42',
            'password2': 'a-Strong-pass-42',
        })

        assert response.status_code == 201
        body = response.json()
        assert body['user']['email'] == 'carol@example.com'
        assert 'password' not in body['user']
        assert api.get(reverse('core:me')).status_code == 200

    def test_register_rejects_duplicate_email(self, api, founder):
        response = api.post(reverse('core:register'), {
            'username': 'alice2',
            'email': 'ALICE@example.com',
            'name': 'Alice Again',
            'role': 'founder',
            'password1': 'a-Strong-pass-42',
            'password2': 'a-Strong-pass-42',
        })

        assert response.status_code == 400
        error = response.json()['error']
        assert error['kind'] == 'validation'
        assert 'email' in error['details']

    def test_register_rejects_admin_role(self, api):
        response = api.post(reverse('core:register'), {
            'username': 'mallory',
            'email': 'mallory@example.com',
            'name': 'Mallory',
            'role': 'admin',
            'password1': 'a-Strong-pass-42',
            'password2': 'a-Strong-pass-42',
        })
        assert response.status_code == 400
        assert 'role' in response.json()['error']['details']

    def test_login_and_logout(self, api, founder):
        response = api.post(reverse('core:login'), {'username': 'alice', 'password': 'pass-Word-123'})
        assert response.status_code == 200
        assert response.json()['user']['id'] == founder.pk

        assert api.post(reverse('core:logout')).status_code == 200
        assert api.get(reverse('core:me')).status_code == 401

    def test_login_bad_password(self, api, founder):
        response = api.post(reverse('core:login'), {'username': 'alice', 'password': 'wrong'})
        assert response.status_code == 401
        assert response.json()['error']['kind'] == 'unauthorized'

    def test_banned_account_cannot_login(self, api, make_account):
        make_account('eve', is_banned=True)
        response = api.post(reverse('core:login'), {'username': 'eve', 'password': 'pass-Word-123'})
        assert response.status_code == 401

    def test_anonymous_gets_json_401(self, api):
        response = api.get(reverse('core:me'))
        assert response.status_code == 401
        assert response.json()['error']['message'] == 'Authentication required'


# ===========================================================================
# Own account
# ===========================================================================

@pytest.mark.django_db
class TestOwnAccount:

    def test_partial_profile_update(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:me'), {'bio': 'Building things', 'skills': [' Go ', 'go', 'Rust']})

        assert response.status_code == 200
        founder.refresh_from_db()
        assert founder.bio == 'Building things'
        assert founder.skills == ['Go', 'go', 'Rust']
        assert founder.name == 'Alice'

    def test_invalid_experience_rejected(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:me'), {'experience': 'guru'})
        assert response.status_code == 400

    def test_mindset_update(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:mindset'), {
            'risk_tolerance': 'aggressive',
            'work_style': 'structured',
            'communication_style': 'direct',
        })

        assert response.status_code == 200
        assert response.json()['mindset'] == {
            'risk_tolerance': 'aggressive',
            'work_style': 'structured',
            'communication_style': 'direct',
        }

    def test_mindset_requires_all_three(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:mindset'), {'risk_tolerance': 'aggressive'})
        assert response.status_code == 400

    def test_startup_update_founders_only(self, api, investor):
        api.login(investor)
        response = api.post(reverse('core:startup'), {'name': 'Fund', 'stage': 'idea'})
        assert response.status_code == 403

    def test_startup_update(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:startup'), {
            'name': 'Acme Labs', 'stage': 'users', 'industry': 'ai',
        })

        assert response.status_code == 200
        startup = response.json()['startup']
        assert startup['name'] == 'Acme Labs'
        assert startup['stage'] == 'users'
        assert startup['industry'] == 'ai'

    def test_stage_progression_awards_points(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:stage'), {'stage': 'revenue'})

        assert response.status_code == 200
        assert response.json()['coins_earned'] == 200
        founder.refresh_from_db()
        assert founder.points == 200
        assert founder.startup_stage == 'revenue'

    def test_same_stage_earns_nothing(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:stage'), {'stage': 'mvp'})
        assert response.json()['coins_earned'] == 0

    def test_stage_milestone_creates_signal_boost_post(self, api, founder):
        api.login(founder)
        response = api.post(reverse('core:stage'), {'stage': 'users', 'milestone': 'First 100 users'})

        post = Post.objects.get(pk=response.json()['post_id'])
        assert post.post_type == Post.PostType.SIGNAL_BOOST
        assert post.title == 'Milestone: First 100 users'
        assert post.details['signal']['type'] == 'milestone'
        # milestone posts do not earn the post creation bonus
        founder.refresh_from_db()
        assert founder.points == 100

    def test_points_history_newest_first(self, api, founder):
        api.login(founder)
        api.post(reverse('core:stage'), {'stage': 'users'})
        api.post(reverse('core:stage'), {'stage': 'revenue'})

        body = api.get(reverse('core:points')).json()
        assert body['balance'] == 300
        assert [entry['amount'] for entry in body['history']] == [200, 100]
        assert body['pagination']['count'] == 2


# ===========================================================================
# Directory
# ===========================================================================

@pytest.mark.django_db
class TestDirectory:

    def test_leaderboard_orders_by_points(self, api, make_account):
        make_account('low', points=5)
        make_account('high', points=50)
        make_account('banned', points=500, is_banned=True)
        make_account('money', role='investor', points=1000)

        body = api.get(reverse('core:leaders')).json()
        assert [leader['name'] for leader in body['leaders']] == ['High', 'Low']

    def test_search_by_skill_case_insensitive(self, api, founder, other_founder, investor):
        api.login(investor)
        body = api.get(reverse('core:search'), {'skills': 'SALES'}).json()
        assert [user['id'] for user in body['results']] == [other_founder.pk]

    def test_search_by_text_and_role(self, api, founder, other_founder, investor):
        api.login(investor)
        body = api.get(reverse('core:search'), {'q': 'acme', 'role': 'founder'}).json()
        assert [user['id'] for user in body['results']] == [founder.pk]

    def test_public_profile_hides_email(self, api, founder):
        body = api.get(reverse('core:account_detail', args=[founder.pk])).json()
        assert body['name'] == 'Alice'
        assert 'email' not in body
        assert body['startup']['name'] == 'Acme'

    def test_missing_profile_is_404_json(self, api):
        response = api.get(reverse('core:account_detail', args=[999]))
        assert response.status_code == 404
        assert response.json()['error']['kind'] == 'not_found'


# ===========================================================================
# Investor interest
# ===========================================================================

@pytest.mark.django_db
class TestInvestorInterest:

    def test_interest_creates_post_and_awards_founder(self, api, founder, investor):
        api.login(investor)
        response = api.post(
            reverse('core:investor_interest', args=[founder.pk]),
            {'message': 'Love what you are building', 'investment_max': 50000},
        )

        assert response.status_code == 201
        post = Post.objects.get(pk=response.json()['post']['id'])
        assert post.author == investor
        assert post.post_type == Post.PostType.INVESTOR_CONNECT
        assert post.details['investor']['stage'] == 'mvp'
        assert post.details['investor']['funding']['amount'] == 50000
        founder.refresh_from_db()
        investor.refresh_from_db()
        assert founder.points == 25
        assert investor.points == 0

    def test_founders_cannot_express_interest(self, api, founder, other_founder):
        api.login(other_founder)
        response = api.post(reverse('core:investor_interest', args=[founder.pk]), {'message': 'hi'})
        assert response.status_code == 403

    def test_target_must_be_founder(self, api, investor, make_account):
        other_investor = make_account('vic', role='investor')
        api.login(investor)
        response = api.post(reverse('core:investor_interest', args=[other_investor.pk]), {'message': 'hi'})
        assert response.status_code == 404
        assert User.objects.get(pk=other_investor.pk).points == 0
