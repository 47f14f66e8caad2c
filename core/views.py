"""
Core views for the Foundic platform.
Handles authentication, account profiles, points and the leaderboard.
"""

import logging

from django.conf import settings
from django.contrib.auth import authenticate, login, logout
from django.db.models import Q
from django.http import JsonResponse
from django.views import View

from .api import ApiLoginRequiredMixin, bounded_limit, get_object_or_not_found, paginate, parse_body
from .exceptions import AuthenticationRequired, NotFoundError, UnauthorizedError, ValidationFailed
from .forms import InvestorInterestForm, MindsetForm, ProfileForm, SignupForm, StageForm, StartupForm
from .models import User
from .services import PointsLedger

logger = logging.getLogger(__name__)


def active_accounts():
    return User.objects.filter(is_active=True, is_banned=False)


# =============================================================================
# AUTHENTICATION
# =============================================================================

class SignupView(View):
    """Register a founder or investor and start a session."""

    def post(self, request):
        form = SignupForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Registration failed')

        user = form.save()
        login(request, user, backend='django.contrib.auth.backends.ModelBackend')
        logger.info("Registered user=%s role=%s", user.pk, user.role)
        return JsonResponse({'user': user.as_private_dict()}, status=201)


class LoginView(View):

    def post(self, request):
        data = parse_body(request)
        user = authenticate(
            request,
            username=data.get('username', ''),
            password=data.get('password', ''),
        )
        if user is None or user.is_banned:
            raise AuthenticationRequired('Invalid credentials')

        login(request, user)
        return JsonResponse({'user': user.as_private_dict()})


class LogoutView(View):

    def post(self, request):
        logout(request)
        return JsonResponse({'message': 'Logged out'})


# =============================================================================
# OWN ACCOUNT
# =============================================================================

class MyProfileView(ApiLoginRequiredMixin, View):
    """Read or partially update the caller's profile."""

    def get(self, request):
        return JsonResponse(request.user.as_private_dict())

    def post(self, request):
        data = parse_body(request)
        form = ProfileForm(data)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid profile')

        user = request.user
        changed = [field for field in form.cleaned_data if field in data]
        for field in changed:
            setattr(user, field, form.cleaned_data[field])
        if changed:
            user.save(update_fields=changed + ['updated_at'])

        return JsonResponse(user.as_private_dict())

    put = post


class MindsetView(ApiLoginRequiredMixin, View):
    """Update the mindset attributes used by compatibility matching."""

    def post(self, request):
        form = MindsetForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid mindset')

        user = request.user
        for field, value in form.cleaned_data.items():
            setattr(user, field, value)
        user.save(update_fields=list(form.cleaned_data) + ['updated_at'])
        return JsonResponse(user.as_private_dict())

    put = post


class StartupView(ApiLoginRequiredMixin, View):
    """Update startup information (founders only)."""

    def post(self, request):
        user = request.user
        if not user.is_founder:
            raise UnauthorizedError('Only founders can update startup information')

        data = parse_body(request)
        form = StartupForm(data)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid startup information')

        user.startup_name = form.cleaned_data['name']
        user.startup_stage = form.cleaned_data['stage']
        for field in ('description', 'industry', 'website'):
            if field in data:
                setattr(user, f'startup_{field}', form.cleaned_data[field])
        user.save()
        return JsonResponse(user.as_private_dict())

    put = post


class StageProgressionView(ApiLoginRequiredMixin, View):
    """
    Move the caller's startup to a new stage.

    Reaching a new stage earns the configured stage_progression award; an
    optional milestone text is published as a signal-boost post.
    """

    def post(self, request):
        user = request.user
        if not user.is_founder:
            raise UnauthorizedError('Only founders can update stage')

        form = StageForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid stage')

        stage = form.cleaned_data['stage']
        milestone = form.cleaned_data['milestone']
        old_stage = user.startup_stage

        user.startup_stage = stage
        user.save(update_fields=['startup_stage', 'updated_at'])

        coins_earned = 0
        if stage != old_stage:
            entry = PointsLedger.award(
                user, 'stage_progression',
                description=f'Advanced to {stage} stage',
                variant=stage,
            )
            coins_earned = entry.amount if entry else 0

        post = None
        if milestone:
            from posts.services import PostService
            post = PostService.create_milestone_post(user, stage, milestone)

        return JsonResponse({
            'message': 'Stage updated successfully',
            'user': user.as_private_dict(),
            'coins_earned': coins_earned,
            'post_id': post.pk if post else None,
        })

    put = post


class MyPointsView(ApiLoginRequiredMixin, View):
    """Balance plus the paginated, newest-first point history."""

    def get(self, request):
        history = request.user.point_transactions.order_by('-created_at', '-id')
        payload = paginate(request, history, lambda entry: entry.as_dict(), key='history')
        payload['balance'] = request.user.points
        return JsonResponse(payload)


# =============================================================================
# DIRECTORY
# =============================================================================

class LeaderboardView(View):
    """Public leaderboard of accounts by F-Coin balance."""

    def get(self, request):
        role = request.GET.get('role', User.Role.FOUNDER)
        limit = bounded_limit(request, settings.FOUNDIC_CONFIG['leaderboard_size'])

        leaders = active_accounts().filter(role=role).order_by('-points', 'id')[:limit]
        return JsonResponse({
            'leaders': [
                {**user.as_summary(), 'points': user.points, 'bio': user.bio}
                for user in leaders
            ],
        })


class AccountSearchView(ApiLoginRequiredMixin, View):
    """Search accounts by free text, role, skills or startup stage."""

    def get(self, request):
        queryset = active_accounts()

        q = request.GET.get('q', '').strip()
        if q:
            queryset = queryset.filter(
                Q(name__icontains=q) |
                Q(startup_name__icontains=q) |
                Q(bio__icontains=q)
            )

        role = request.GET.get('role', '').strip()
        if role:
            queryset = queryset.filter(role=role)

        stage = request.GET.get('stage', '').strip()
        if stage:
            queryset = queryset.filter(startup_stage=stage)

        limit = bounded_limit(request, settings.FOUNDIC_CONFIG['default_page_size'])
        wanted = {s.strip().lower() for s in request.GET.get('skills', '').split(',') if s.strip()}
        if wanted:
            # skills is a JSON list; match in Python to stay portable across databases
            results = [
                user for user in queryset.order_by('-points', 'id')
                if wanted & {skill.lower() for skill in user.skills or []}
            ][:limit]
        else:
            results = list(queryset.order_by('-points', 'id')[:limit])

        return JsonResponse({'results': [user.as_public_dict() for user in results]})


class AccountDetailView(View):
    """Public profile of any active account."""

    def get(self, request, pk):
        user = get_object_or_not_found(active_accounts(), 'User not found', pk=pk)
        return JsonResponse(user.as_public_dict())


class InvestorInterestView(ApiLoginRequiredMixin, View):
    """
    An investor expresses interest in a founder.

    Publishes an investor_connect post and awards the founder the
    investor_interest bonus.
    """

    def post(self, request, pk):
        investor = request.user
        if not investor.is_investor:
            raise UnauthorizedError('Only investors can express interest')

        founder = active_accounts().filter(pk=pk, role=User.Role.FOUNDER).first()
        if founder is None:
            raise NotFoundError('Founder not found')

        form = InvestorInterestForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid interest request')

        from posts.services import PostService
        post = PostService.create_interest_post(
            investor,
            founder,
            message=form.cleaned_data['message'],
            amount=form.cleaned_data.get('investment_max') or 0,
        )
        PointsLedger.award(founder, 'investor_interest', description='Received investor interest')

        return JsonResponse({
            'message': 'Interest expressed successfully',
            'post': post.as_dict(),
        }, status=201)
