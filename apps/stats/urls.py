from django.urls import path
from . import views

urlpatterns = [
    path('', views.stats_api_view, name='stats_api'),
    path('calendar/', views.calendar_month_view, name='stats_calendar'),
    path('day/', views.day_detail_view, name='stats_day'),
]
