from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .controller import NotificationLevel, brew_log_setting, build_controller
from .exceptions import StoreUnavailableError
from .serializers import (
    BrewCreateSerializer,
    BrewFilterSerializer,
    BrewListResponseSerializer,
    BrewRecordSerializer,
    ErrorSerializer,
)
from .services import FilterWindow, InvalidBrewInputError, StoreError

MESSAGE_LEVELS = {
    NotificationLevel.SUCCESS: messages.SUCCESS,
    NotificationLevel.ERROR: messages.ERROR,
}

LOAD_FAILURE_MESSAGE = "Couldn't load brew history. Try again shortly."


# =============================================================================
# Page
# =============================================================================

def _message_notifier(request):
    """Route controller notifications into django.contrib.messages."""
    def notify(notification):
        extra_tags = 'toast' if notification.dismiss_after else 'alert'
        messages.add_message(
            request,
            MESSAGE_LEVELS[notification.level],
            notification.message,
            extra_tags=extra_tags,
        )
    return notify


def _page_context(controller, form_values=None, form_errors=None):
    return {
        'table': controller.table,
        'filters': FilterWindow.choices,
        'form_values': form_values or {},
        'form_errors': form_errors or [],
        'toast_dismiss_ms': int(brew_log_setting('TOAST_DISMISS_SECONDS', 2) * 1000),
    }


def _load_history(request, controller, window):
    """
    Reload the history and apply ``window``.

    Returns False when the store could not be read (propagate policy); the
    table is then rendered from whatever the controller still holds.
    """
    try:
        controller.initialize()
        loaded = True
    except StoreError:
        messages.error(request, LOAD_FAILURE_MESSAGE, extra_tags='alert')
        loaded = False
    controller.change_filter(window)
    return loaded


@require_http_methods(['GET', 'POST'])
def brew_log(request):
    """Single-page brew log: entry form, filter tabs and history table."""
    controller = build_controller(notify=_message_notifier(request))
    window = FilterWindow.parse(request.GET.get('filter', controller.active_filter))

    if request.method == 'GET':
        loaded = _load_history(request, controller, window)
        return render(
            request,
            'brews/brew_log.html',
            _page_context(controller),
            status=status.HTTP_200_OK if loaded else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    form_values = {
        'weight': request.POST.get('weight', ''),
        'time': request.POST.get('time', ''),
        'grind': request.POST.get('grind', ''),
    }

    try:
        outcome = controller.submit(**form_values)
    except StoreError:
        # Reload failed after the append; the notification is already queued
        outcome = controller.last_submit
    except InvalidBrewInputError as e:
        _load_history(request, controller, window)
        return render(
            request,
            'brews/brew_log.html',
            _page_context(controller, form_values, form_errors=e.fields),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if outcome.clear_form:
        return redirect(f"{reverse('brews:log')}?filter={window.value}")

    # Save failed: keep what the user typed
    controller.change_filter(window)
    return render(
        request,
        'brews/brew_log.html',
        _page_context(controller, form_values),
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


# =============================================================================
# API
# =============================================================================

@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter(
            'filter', OpenApiTypes.STR,
            description="Time window: 'today', 'week' or 'all'. Defaults to BREW_LOG['DEFAULT_FILTER']",
        ),
    ],
    responses={200: BrewListResponseSerializer, 503: ErrorSerializer},
    description="List logged brews for a time window with counters and statistics.",
    tags=['brews'],
)
@extend_schema(
    methods=['POST'],
    request=BrewCreateSerializer,
    responses={
        201: BrewRecordSerializer,
        400: ErrorSerializer,
        503: ErrorSerializer,
    },
    description="Log a new brew. Timestamp and shift are set by the server.",
    tags=['brews'],
)
@api_view(['GET', 'POST'])
def brew_list(request):
    """List or log brews - thin HTTP handler over BrewLogController."""
    controller = build_controller()

    if request.method == 'POST':
        serializer = BrewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            outcome = controller.submit(
                weight=data['extraction_weight'],
                time=data['extraction_time'],
                grind=data['grind_time'],
            )
        except StoreError:
            # Reload failed after the append; the write itself may have landed
            outcome = controller.last_submit
        except InvalidBrewInputError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        if not outcome.saved:
            raise StoreUnavailableError()

        return Response(
            BrewRecordSerializer(outcome.record, context={'now': controller.clock()}).data,
            status=status.HTTP_201_CREATED
        )

    query_serializer = BrewFilterSerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    try:
        controller.initialize()
    except StoreError:
        raise StoreUnavailableError('Failed to load brews. Please try again later.')
    table = controller.change_filter(params.get('filter', controller.active_filter))

    return Response({
        'filter': table.active_filter,
        'total_count': table.total_count,
        'showing_count': table.showing_count,
        'stats': table.stats,
        'results': BrewRecordSerializer(
            controller.visible,
            many=True,
            context={'now': controller.clock()},
        ).data,
    })
