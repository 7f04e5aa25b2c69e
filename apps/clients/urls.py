from django.urls import path
from . import views

urlpatterns = [
    path('', views.client_list_view, name='client_list'),
    path('<int:pk>/', views.client_detail_view, name='client_detail'),
    path('call-today/', views.call_today_view, name='call_today'),
    path('by-date/', views.clients_by_date_view, name='clients_by_date'),
    path('by-period/', views.clients_by_period_view, name='clients_by_period'),
    path('leads/', views.lead_list_view, name='lead_list'),
    path('leads/<int:pk>/', views.lead_detail_view, name='lead_detail'),
]
