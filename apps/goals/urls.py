from django.urls import path
from . import views

urlpatterns = [
    path('periods/', views.goal_period_list_view, name='goal_period_list'),
    path('periods/<int:pk>/', views.goal_period_detail_view, name='goal_period_detail'),
    path('periods/<int:pk>/deactivate/', views.goal_period_deactivate_view, name='goal_period_deactivate'),
    path('resolve/', views.resolve_goal_view, name='goal_resolve'),
]
