from dataclasses import asdict

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.core.exceptions import BadRequest
from django.db.models import Count
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from apps.clients.adapters.orm_repositories import DjangoClientRepository
from apps.clients.models import Client
from apps.clients.views import serialize_client
from apps.core.dates import local_today
from apps.core.http import parse_date_param
from apps.goals.adapters.orm_repositories import DjangoGoalPeriodRepository
from .domain.entities import MonthGrid, RangeSummary, SummaryPeriod
from .domain.exceptions import InvalidRangeError
from .services import build_summary_service, build_grid_builder


def serialize_summary(summary: RangeSummary, with_days=False) -> dict:
    data = {
        'start': summary.start,
        'end': summary.end,
        'count': summary.count,
        'goal': summary.goal,
        'status': summary.status.value,
    }
    if with_days:
        data['days'] = [asdict(b) for b in summary.days]
    return data


def serialize_grid(grid: MonthGrid) -> dict:
    prev_year, prev_month = grid.previous_month()
    next_year, next_month = grid.next_month()
    return {
        'year': grid.year,
        'month': grid.month,
        'month_total': grid.month_total,
        'weeks': [[asdict(cell) for cell in week] for week in grid.weeks],
        'prev': {'year': prev_year, 'month': prev_month},
        'next': {'year': next_year, 'month': next_month},
    }


def _int_param(request, name, default):
    value = request.GET.get(name)
    if value in (None, ''):
        return default
    try:
        return int(value)
    except ValueError:
        raise BadRequest(f"Parameter '{name}' must be an integer")


@login_required
@require_GET
def stats_api_view(request):
    """
    API ze statystykami dodawania klientów:
    dziś / tydzień (Nd-Sb) / miesiąc z celem i statusem, historia dzienna, podział po statusach.
    """
    today = parse_date_param(request.GET.get('date'), default=local_today())
    history_days = getattr(settings, 'TRACKER_HISTORY_DAYS', 30)
    service = build_summary_service()

    # 1. Zakres potrzebnych zdarzeń: najwcześniejszy dzień z okien i historii
    try:
        ranges = [service.period_range(p, today) for p in SummaryPeriod]
        ranges.append(service.history_range(today, history_days))
    except InvalidRangeError as e:
        return JsonResponse({'message': str(e)}, status=400)

    start = min(r[0] for r in ranges)
    end = max(r[1] for r in ranges)

    events = DjangoClientRepository().list_created_between(request.user.id, start, end)

    goal_repo = DjangoGoalPeriodRepository()
    periods = goal_repo.list_for_user(request.user.id)
    default_goal = goal_repo.get_default_goal(request.user.id)

    # 2. Podsumowania okresów
    overview = service.overview(events, today, default_goal, periods)

    # 3. Historia dzienna (ostatnie N dni)
    history = service.daily_history(events, today, days=history_days)

    # 4. Stan obecny (Snapshot)
    breakdown = Client.objects.filter(user=request.user).values('status').annotate(total=Count('id'))

    return JsonResponse({
        'date': today,
        'default_goal': default_goal,
        'today': serialize_summary(overview[SummaryPeriod.TODAY]),
        'week': serialize_summary(overview[SummaryPeriod.WEEK], with_days=True),
        'month': serialize_summary(overview[SummaryPeriod.MONTH]),
        'daily': [asdict(d) for d in history],
        'breakdown': {item['status']: item['total'] for item in breakdown},
    })


@login_required
@require_GET
def calendar_month_view(request):
    """Siatka miesiąca (?year=&month=, domyślnie bieżący)."""
    today = local_today()
    year = _int_param(request, 'year', today.year)
    month = _int_param(request, 'month', today.month)

    goal_repo = DjangoGoalPeriodRepository()
    builder = build_grid_builder()

    try:
        # Najpierw zakres siatki (walidacja), potem jedno zapytanie o klientów z tego zakresu
        start, end = builder.grid_range(year, month)
        events = DjangoClientRepository().list_created_between(request.user.id, start, end)
        grid = builder.build_month_grid(
            year, month, events,
            goal_repo.get_default_goal(request.user.id),
            goal_repo.list_for_user(request.user.id)
        )
    except InvalidRangeError as e:
        return JsonResponse({'message': str(e)}, status=400)

    data = serialize_grid(grid)
    data['today'] = today
    return JsonResponse(data)


@login_required
@require_GET
def day_detail_view(request):
    """Jeden dzień: licznik, cel, status oraz lista dodanych klientów."""
    day = parse_date_param(request.GET.get('date'))
    service = build_summary_service()

    candidates = DjangoClientRepository().list_created_between(request.user.id, day, day)
    goal_repo = DjangoGoalPeriodRepository()
    summary = service.summarize_range(
        candidates, day, day,
        goal_repo.get_default_goal(request.user.id),
        goal_repo.list_for_user(request.user.id)
    )

    return JsonResponse({
        'bucket': asdict(summary.days[0]),
        'clients': [serialize_client(c) for c in service.by_date(candidates, day)],
    })
