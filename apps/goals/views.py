import logging
from dataclasses import asdict

from django.contrib.auth.decorators import login_required
from django.forms.models import model_to_dict
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods, require_POST, require_GET

from apps.core.dates import local_today
from apps.core.http import parse_json_body, parse_date_param, form_error_response
from .adapters.orm_repositories import DjangoGoalPeriodRepository
from .application.use_cases import AddGoalPeriodInput, AddGoalPeriodUseCase, DeactivateGoalPeriodUseCase
from .domain.services import GoalResolver
from .forms import GoalPeriodForm
from .models import GoalPeriod

logger = logging.getLogger(__name__)

PERIOD_FIELDS = ['goal', 'start_date', 'end_date', 'is_active']


def serialize_periods(user_id: int, repo: DjangoGoalPeriodRepository = None) -> list:
    repo = repo or DjangoGoalPeriodRepository()
    return [asdict(p) for p in repo.list_for_user(user_id)]


@login_required
@require_http_methods(["GET", "POST"])
def goal_period_list_view(request):
    """GET: okresy celu użytkownika. POST: nowy okres."""
    repo = DjangoGoalPeriodRepository()

    if request.method == 'POST':
        # Nowy okres jest zawsze aktywny
        data = {**parse_json_body(request), 'is_active': True}
        form = GoalPeriodForm(data)
        if not form.is_valid():
            logger.warning("Rejected goal period for user %s: %s", request.user.id, form.errors.as_json())
            return form_error_response(form)

        use_case = AddGoalPeriodUseCase(repo)
        period = use_case.execute(AddGoalPeriodInput(
            user_id=request.user.id,
            goal=form.cleaned_data['goal'],
            start_date=form.cleaned_data['start_date'],
            end_date=form.cleaned_data['end_date']
        ))
        return JsonResponse({
            'period': asdict(period),
            'goal_periods': serialize_periods(request.user.id, repo)
        }, status=201)

    periods = repo.list_for_user(request.user.id)
    default_goal = repo.get_default_goal(request.user.id)
    today = local_today()

    return JsonResponse({
        'default_goal': default_goal,
        'today': today,
        'today_goal': GoalResolver().resolve(today, default_goal, periods),
        'goal_periods': [asdict(p) for p in periods]
    })


@login_required
@require_http_methods(["GET", "PUT", "POST", "DELETE"])
def goal_period_detail_view(request, pk):
    period = get_object_or_404(GoalPeriod, pk=pk, user=request.user)
    repo = DjangoGoalPeriodRepository()

    if request.method == 'DELETE':
        period.delete()
        logger.info("Goal period %s deleted for user %s", pk, request.user.id)
        return JsonResponse({'goal_periods': serialize_periods(request.user.id, repo)})

    if request.method in ('PUT', 'POST'):
        # Częściowa aktualizacja: brakujące pola bierzemy z bazy
        data = {**model_to_dict(period, fields=PERIOD_FIELDS), **parse_json_body(request)}
        form = GoalPeriodForm(data, instance=period)
        if not form.is_valid():
            return form_error_response(form)
        period = form.save()
        logger.info("Goal period %s updated for user %s", pk, request.user.id)

    return JsonResponse({'period': asdict(repo.to_entity(period))})


@login_required
@require_POST
def goal_period_deactivate_view(request, pk):
    use_case = DeactivateGoalPeriodUseCase(DjangoGoalPeriodRepository())
    period = use_case.execute(request.user.id, pk)
    if period is None:
        return JsonResponse({'message': 'Goal period not found'}, status=404)
    return JsonResponse({'period': asdict(period)})


@login_required
@require_GET
def resolve_goal_view(request):
    """Cel obowiązujący w danym dniu (?date=YYYY-MM-DD, domyślnie dziś)."""
    day = parse_date_param(request.GET.get('date'), default=local_today())
    repo = DjangoGoalPeriodRepository()
    periods = repo.list_for_user(request.user.id)
    default_goal = repo.get_default_goal(request.user.id)

    resolver = GoalResolver()
    period = resolver.find_period(day, periods)

    return JsonResponse({
        'date': day,
        'goal': resolver.resolve(day, default_goal, periods),
        'default_goal': default_goal,
        'period_id': period.id if period else None
    })
