"""
Django Admin for Email Tracking
"""

from django.contrib import admin
from django.utils.html import format_html
from .models import Contact, TrackingRecord


class TrackingRecordInline(admin.TabularInline):
    model = TrackingRecord
    extra = 0
    fields = ['tracking_id', 'campaign', 'sent_at', 'opened_at', 'clicked_at']
    readonly_fields = fields
    can_delete = False
    show_change_link = True


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = [
        'email',
        'name',
        'engagement_display',
        'last_opened_at',
        'last_clicked_at',
        'created_at'
    ]
    list_filter = ['opened', 'clicked', 'created_at']
    search_fields = ['email', 'name']
    readonly_fields = [
        'opened',
        'clicked',
        'last_opened_at',
        'last_clicked_at',
        'created_at',
        'updated_at'
    ]
    date_hierarchy = 'created_at'
    inlines = [TrackingRecordInline]

    fieldsets = (
        ('Basic Info', {
            'fields': ('email', 'name')
        }),
        ('Engagement', {
            'fields': (
                'opened',
                'last_opened_at',
                'clicked',
                'last_clicked_at'
            )
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def engagement_display(self, obj):
        if obj.clicked:
            label, color = 'Clicked', 'green'
        elif obj.opened:
            label, color = 'Opened', 'orange'
        else:
            label, color = 'Inactive', 'gray'
        return format_html('<span style="color: {};">{}</span>', color, label)
    engagement_display.short_description = 'Engagement'


@admin.register(TrackingRecord)
class TrackingRecordAdmin(admin.ModelAdmin):
    list_display = [
        'tracking_id',
        'contact',
        'campaign',
        'sent_at',
        'opened_at',
        'clicked_at'
    ]
    list_filter = ['campaign', 'sent_at']
    search_fields = ['tracking_id', 'contact__email', 'campaign']
    list_select_related = ['contact']
    readonly_fields = [
        'tracking_id',
        'sent_at',
        'opened_at',
        'clicked_at'
    ]
    date_hierarchy = 'sent_at'

    fieldsets = (
        ('Send Info', {
            'fields': ('contact', 'campaign', 'tracking_id', 'sent_at')
        }),
        ('Engagement', {
            'fields': ('opened_at', 'clicked_at')
        }),
    )
