"""
Mailtrack URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse

from mailtrack.config import config


def api_root(request):
    """
    Service root. The dashboard page is served separately; this returns
    a minimal descriptor and is also the fallback click-redirect target.
    """
    return JsonResponse({
        "service": "Mailtrack",
        "version": "1.0.0",
        "endpoints": {
            "register": "/track/register",
            "open": "/track/<tracking_id>/open.gif",
            "click": "/track/<tracking_id>/click?url=<destination>",
            "stats": "/stats",
            "filter": "/contacts/filter?type=<clicked|opened|inactive>",
        },
    })


urlpatterns = [
    path('', api_root, name='api_root'),
    path(f'{config.security.admin_url}/', admin.site.urls),  # Dynamic admin URL from ADMIN_URL env var
    path('', include('tracking.urls')),
]
