from django.contrib import admin
from .models import Client, Lead


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ('business_name', 'manager_name', 'place', 'status', 'next_visit', 'user', 'created_at')
    list_filter = ('status',)
    search_fields = ('business_name', 'manager_name', 'place')


admin.site.register(Lead)
