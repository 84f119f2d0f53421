from django.contrib import admin

from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ('user', 'transaction_type', 'amount', 'level', 'generation', 'source_user', 'created_at')
    list_filter = ('transaction_type', 'level', 'created_at')
    search_fields = ('user__username', 'user__email', 'description')
    raw_id_fields = ('user', 'source_user')
    readonly_fields = ('created_at',)

    fieldsets = (
        ('Transaction Info', {
            'fields': ('user', 'transaction_type', 'amount', 'level', 'generation', 'source_user', 'description')
        }),
        ('Timestamps', {
            'fields': ('created_at',)
        }),
    )

    def has_change_permission(self, request, obj=None):
        return False
