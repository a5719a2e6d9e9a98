from django.contrib import admin

from transactions.models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ('user', 'transaction_type', 'category', 'amount', 'cost', 'date')
    list_filter = ('transaction_type',)
    search_fields = ('category', 'user__email')
    readonly_fields = ('cost',)
    ordering = ('-date',)
