"""
URL routes for the tracking app
"""

from django.urls import path
from . import views

app_name = 'tracking'

urlpatterns = [
    # Registration
    path('track/register', views.register, name='register'),
    path('register', views.register, name='register_legacy'),

    # Tracking endpoints
    path('track/<str:tracking_id>/open.gif', views.track_open, name='open'),
    path('track/<str:tracking_id>/click', views.track_click, name='click'),

    # Reporting
    path('stats', views.stats, name='stats'),
    path('contacts/filter', views.filter_contacts, name='filter_contacts'),
]
