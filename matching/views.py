"""
Views for the matching module.

JSON endpoints for listing, generating and working through co-founder
matches. Lifecycle rules live in services.MatchLifecycleService.
"""

import logging

from django.http import JsonResponse
from django.views import View

from core.api import ApiLoginRequiredMixin, paginate, parse_body
from core.exceptions import ValidationFailed

from .forms import MatchFeedbackForm, MatchFilterForm
from .services import MatchGenerationService, MatchLifecycleService

logger = logging.getLogger(__name__)


class MatchListView(ApiLoginRequiredMixin, View):
    """
    List the caller's matches, best score first.

    Filters: ?status=, ?quality=; paginated with ?page= and ?limit=.
    """

    def get(self, request):
        form = MatchFilterForm(request.GET)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid filters')

        queryset = MatchLifecycleService.participant_matches(request.user)
        if form.cleaned_data['status']:
            queryset = queryset.filter(status=form.cleaned_data['status'])
        if form.cleaned_data['quality']:
            queryset = queryset.filter(quality=form.cleaned_data['quality'])

        queryset = queryset.order_by('-overall_score', '-created_at', 'id')
        return JsonResponse(
            paginate(request, queryset, lambda match: match.as_summary(request.user), key='matches')
        )


class MatchDetailView(ApiLoginRequiredMixin, View):
    """Full match including the message log."""

    def get(self, request, pk):
        service = MatchLifecycleService.for_participant(pk, request.user)
        return JsonResponse(service.match.as_dict(request.user))


class GenerateMatchesView(ApiLoginRequiredMixin, View):
    """Score eligible founders and propose new pending matches."""

    def post(self, request):
        created = MatchGenerationService(request.user).generate()
        return JsonResponse({
            'message': f'Generated {len(created)} new matches',
            'count': len(created),
            'matches': [match.as_summary(request.user) for match in created],
        }, status=201 if created else 200)


class AcceptMatchView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        service = MatchLifecycleService.for_participant(pk, request.user)
        match = service.accept(request.user)
        return JsonResponse({
            'message': 'Match accepted' if match.is_mutual else 'Interest recorded',
            'match': match.as_dict(request.user),
        })


class RejectMatchView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        service = MatchLifecycleService.for_participant(pk, request.user)
        match = service.reject(request.user)
        return JsonResponse({'message': 'Match rejected', 'match': match.as_dict(request.user)})


class MatchMessageView(ApiLoginRequiredMixin, View):
    """Append a message to the match's log."""

    def post(self, request, pk):
        service = MatchLifecycleService.for_participant(pk, request.user)
        data = parse_body(request)
        service.add_message(request.user, data.get('content', ''))
        return JsonResponse(
            {'message': 'Message sent', 'match': service.match.as_dict(request.user)},
            status=201,
        )


class MarkReadView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        service = MatchLifecycleService.for_participant(pk, request.user)
        updated = service.mark_read(request.user)
        return JsonResponse({'message': 'Messages marked as read', 'updated': updated})

    put = post


class UnreadCountView(ApiLoginRequiredMixin, View):

    def get(self, request):
        return JsonResponse({'unread_count': MatchLifecycleService.unread_count(request.user)})


class MatchFeedbackView(ApiLoginRequiredMixin, View):
    """Rate a match (1-5); re-submitting replaces the earlier rating."""

    def post(self, request, pk):
        service = MatchLifecycleService.for_participant(pk, request.user)
        form = MatchFeedbackForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid feedback')

        feedback = service.submit_feedback(
            request.user,
            form.cleaned_data['rating'],
            form.cleaned_data['comment'],
        )
        return JsonResponse({'feedback': feedback.as_dict()})
