from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('email', 'username', 'coins', 'status', 'account_level', 'referrer_id', 'is_staff')
    search_fields = ('email', 'username', 'name')
    list_filter = ('status', 'account_level', 'is_staff')
    raw_id_fields = ('referrer',)

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Referral Program', {
            'fields': ('coins', 'status', 'account_level', 'referrer')
        }),
        ('Profile', {
            'fields': ('name', 'bio', 'facebook_link', 'linkedin_link', 'profile_image_url', 'cover_image_url')
        }),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Referral Program', {
            'fields': ('email', 'coins', 'referrer')
        }),
    )
