# journal/views.py
import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import render, redirect
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.views import View
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from . import services
from .display import vibe_emoji, category_color
from .exceptions import AuthenticationMissing, EntryError, EntryReadError, EntryWriteError
from .filters import ArchiveFilters, filter_entries
from .forms import JournalEntryForm
from .models import JournalEntry, JournalCategory, MediaType, EntryVibe
from .policies import ENTRY_POLICY, IsEntryOwner
from .serializers import JournalEntrySerializer

logger = logging.getLogger(__name__)


def filter_query(request):
    """Query string of the current filters, without the dialog toggle"""
    params = request.GET.copy()
    params.pop('new', None)
    return params.urlencode()


def archive_url(request):
    """Archive URL keeping the filters currently selected"""
    url = reverse('journal:archive')
    query = filter_query(request)
    if query:
        url = f"{url}?{query}"
    return url


def render_archive(request, form, dialog_open=False):
    filters = ArchiveFilters.from_params(request.GET)
    try:
        entries = services.fetch_entries(request.user)
    except EntryReadError as exc:
        messages.error(request, exc.user_message)
        entries = []

    context = {
        'entries': filter_entries(entries, filters),
        'has_entries': bool(entries),
        'filters': filters.as_params(),
        'form': form,
        'dialog_open': dialog_open,
        'category_choices': JournalCategory.choices,
        'media_type_choices': MediaType.choices,
        'vibe_choices': [(value, f"{label} {vibe_emoji(value)}") for value, label in EntryVibe.choices],
        'query_string': filter_query(request),
    }
    return render(request, 'journal/archive.html', context)


class ArchiveView(View):
    """Filterable card grid of the caller's entries"""

    @method_decorator(login_required)
    def dispatch(self, *args, **kwargs):
        return super().dispatch(*args, **kwargs)

    def get(self, request):
        return render_archive(request, JournalEntryForm(), dialog_open='new' in request.GET)


class EntryCreateView(View):
    """Handle the new entry dialog"""

    def get(self, request):
        return redirect(f"{reverse('journal:archive')}?new=1")

    def post(self, request):
        if not request.user.is_authenticated:
            messages.error(request, AuthenticationMissing.user_message)
            return redirect('accounts:login')

        form = JournalEntryForm(request.POST)
        if form.is_valid():
            try:
                services.create_entry(request.user, **form.cleaned_data)
            except EntryError as exc:
                messages.error(request, exc.user_message)
            else:
                messages.success(request, 'Your journal entry has been created.')
                return redirect(archive_url(request))
        else:
            messages.error(request, EntryWriteError.user_message)

        return render_archive(request, form, dialog_open=True)


# API Views for REST endpoints
class JournalEntryViewSet(viewsets.ModelViewSet):
    """API endpoints for journal entries"""

    serializer_class = JournalEntrySerializer
    permission_classes = [IsAuthenticated, IsEntryOwner]

    def get_queryset(self):
        return ENTRY_POLICY.scope(JournalEntry.objects.all(), self.request.user).newest_first()

    def list(self, request, *args, **kwargs):
        try:
            entries = services.fetch_entries(request.user)
        except EntryReadError as exc:
            raise APIException(exc.user_message) from exc
        filters = ArchiveFilters.from_params(request.query_params)
        serializer = self.get_serializer(filter_entries(entries, filters), many=True)
        return Response(serializer.data)

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        owner = data.pop('user', None)
        try:
            serializer.instance = services.create_entry(self.request.user, owner=owner, **data)
        except EntryWriteError as exc:
            raise ValidationError({'detail': exc.user_message}) from exc

    def perform_update(self, serializer):
        entry = serializer.save()
        logger.info("Updated entry %s for user %s", entry.pk, self.request.user.pk)

    def perform_destroy(self, instance):
        logger.info("Deleted entry %s for user %s", instance.pk, self.request.user.pk)
        instance.delete()

    @action(detail=False, methods=['get'])
    def choices(self, request):
        """Enumerated values accepted for category, media type and vibe"""
        return Response({
            'category': [
                {'value': value, 'label': label, 'color': category_color(value)}
                for value, label in JournalCategory.choices
            ],
            'media_type': [
                {'value': value, 'label': label} for value, label in MediaType.choices
            ],
            'vibe': [
                {'value': value, 'label': label, 'emoji': vibe_emoji(value)}
                for value, label in EntryVibe.choices
            ],
        })
