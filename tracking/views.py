"""
Email Tracking Views and API Endpoints
"""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from django.conf import settings
from django.core.exceptions import DisallowedRedirect
from django.http import HttpResponse, HttpResponseRedirect, JsonResponse
from django.views.decorators.http import require_safe
import logging

from core.exceptions import ValidationError
from .serializers import ContactSummarySerializer, RegisterSerializer, StatsSerializer
from .services import get_tracking_service

logger = logging.getLogger(__name__)

# 1x1 transparent GIF for tracking pixel (43 bytes)
TRACKING_PIXEL = bytes([
    0x47, 0x49, 0x46, 0x38, 0x39, 0x61, 0x01, 0x00, 0x01, 0x00, 0x80, 0x00,
    0x00, 0xFF, 0xFF, 0xFF, 0x00, 0x00, 0x00, 0x21, 0xF9, 0x04, 0x01, 0x00,
    0x00, 0x00, 0x00, 0x2C, 0x00, 0x00, 0x00, 0x00, 0x01, 0x00, 0x01, 0x00,
    0x00, 0x02, 0x02, 0x44, 0x01, 0x00, 0x3B
])

PIXEL_CACHE_CONTROL = "no-store, no-cache, must-revalidate, private"


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """
    Register a recipient and issue a tracking id

    POST /track/register   (also /register)
    {
        "email": "user@example.com",
        "name": "Jane Doe",       // optional
        "campaign": "spring"      // optional
    }
    """
    serializer = RegisterSerializer(data=request.data)
    if not serializer.is_valid():
        field, errors = next(iter(serializer.errors.items()))
        raise ValidationError(
            str(errors[0]),
            field=None if field == "non_field_errors" else field,
        )

    data = serializer.validated_data
    service = get_tracking_service()
    registration = service.register(
        data.get('email'),
        name=data.get('name'),
        campaign=data.get('campaign'),
    )

    return Response(
        {
            'trackingId': registration.tracking_id,
            'message': 'Email registered successfully',
            'pixelUrl': service.pixel_url(registration.tracking_id),
            'clickUrl': service.click_url(registration.tracking_id),
        },
        status=status.HTTP_201_CREATED
    )


@require_safe
def track_open(request, tracking_id):
    """
    Track email open via pixel

    GET /track/<tracking_id>/open.gif

    Always answers 200 with the pixel: whether the id exists or the
    write fails must not be observable from the image load.
    """
    # Outcome (recorded / unknown / failed) is not reflected in the response
    try:
        get_tracking_service().record_open(tracking_id)
    except Exception:
        logger.exception("Open tracking error for %s", tracking_id)

    response = HttpResponse(TRACKING_PIXEL, content_type='image/gif')
    response['Content-Length'] = str(len(TRACKING_PIXEL))
    response['Cache-Control'] = PIXEL_CACHE_CONTROL
    return response


@require_safe
def track_click(request, tracking_id):
    """
    Track email link click and redirect

    GET /track/<tracking_id>/click?url=<redirect_url>

    Always redirects once a destination is given, whatever the tracking
    outcome.
    """
    redirect_url = request.GET.get('url')
    if not redirect_url:
        error = ValidationError("URL parameter is required", field="url")
        return JsonResponse(error.to_dict(), status=error.status_code)

    # Outcome (recorded / unknown / failed) is not reflected in the response
    try:
        get_tracking_service().record_click(tracking_id)
    except Exception:
        logger.exception("Click tracking error for %s", tracking_id)

    return _redirect(redirect_url)


@api_view(['GET'])
@permission_classes([AllowAny])
def stats(request):
    """
    Aggregate open/click statistics

    GET /stats
    """
    data = get_tracking_service().stats()
    return Response(StatsSerializer(data).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def filter_contacts(request):
    """
    Contacts by engagement segment

    GET /contacts/filter?type=<clicked|opened|inactive>
    """
    contacts = get_tracking_service().filter_contacts(request.query_params.get('type'))
    return Response(ContactSummarySerializer(contacts, many=True).data)


def _redirect(url):
    """Redirect to ``url``; unsafe schemes fall back to the service root."""
    try:
        return HttpResponseRedirect(url)
    except DisallowedRedirect:
        logger.warning("Rejected click destination %r", url)
        return HttpResponseRedirect(settings.TRACKING_DEFAULT_REDIRECT_URL)
