import django_filters
from django.db.models import Q
from .models import Client


class ClientFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method='filter_search', label="Search")
    status = django_filters.ChoiceFilter(choices=Client.StatusChoices.choices, label="Status")
    place = django_filters.CharFilter(lookup_expr='icontains', label="Place")

    class Meta:
        model = Client
        fields = ['status', 'place']

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(business_name__icontains=value) |
            Q(manager_name__icontains=value) |
            Q(place__icontains=value)
        )
