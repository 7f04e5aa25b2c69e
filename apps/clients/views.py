import logging
from dataclasses import asdict

from django.contrib.auth.decorators import login_required
from django.core.exceptions import BadRequest
from django.forms.models import model_to_dict
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods, require_GET

from apps.core.dates import local_today
from apps.core.http import parse_json_body, parse_date_param, form_error_response
from apps.stats.domain.entities import SummaryPeriod
from apps.stats.domain.exceptions import InvalidRangeError
from apps.stats.services import build_summary_service
from .adapters.orm_repositories import DjangoClientRepository
from .domain.entities import ClientEntity
from .filters import ClientFilter
from .forms import ClientForm, LeadForm
from .models import Client, Lead

logger = logging.getLogger(__name__)

CLIENT_FIELDS = [
    'business_name', 'manager_name', 'place', 'first_visit', 'next_visit',
    'status', 'deal', 'description', 'phone_numbers', 'primary_phone_index'
]


def serialize_client(client: ClientEntity) -> dict:
    data = asdict(client)
    data['primary_phone'] = client.primary_phone
    return data


def serialize_lead(lead: Lead) -> dict:
    return {
        'id': lead.id,
        'name': lead.name,
        'place': lead.place,
        'created_at': lead.created_at,
        'updated_at': lead.updated_at,
    }


@login_required
@require_http_methods(["GET", "POST"])
def client_list_view(request):
    repo = DjangoClientRepository()

    if request.method == 'POST':
        form = ClientForm(parse_json_body(request))
        if not form.is_valid():
            logger.warning("Rejected client for user %s: %s", request.user.id, form.errors.as_json())
            return form_error_response(form)

        client = form.save(commit=False)
        client.user = request.user
        client.save()
        logger.info("Client %s created for user %s", client.id, request.user.id)
        return JsonResponse(serialize_client(repo.to_entity(client)), status=201)

    qs = Client.objects.filter(user=request.user)
    client_filter = ClientFilter(request.GET, queryset=qs)
    if not client_filter.is_valid():
        return JsonResponse({'message': 'Invalid filter', 'errors': client_filter.errors.get_json_data()}, status=400)

    clients = [serialize_client(repo.to_entity(c)) for c in client_filter.qs]
    return JsonResponse({'count': len(clients), 'clients': clients})


@login_required
@require_http_methods(["GET", "PUT", "POST", "DELETE"])
def client_detail_view(request, pk):
    client = get_object_or_404(Client, pk=pk, user=request.user)
    repo = DjangoClientRepository()

    if request.method == 'DELETE':
        client.delete()
        logger.info("Client %s deleted for user %s", pk, request.user.id)
        return JsonResponse({'message': 'Client deleted'})

    if request.method in ('PUT', 'POST'):
        # Częściowa aktualizacja: brakujące pola bierzemy z bazy
        data = {**model_to_dict(client, fields=CLIENT_FIELDS), **parse_json_body(request)}
        form = ClientForm(data, instance=client)
        if not form.is_valid():
            return form_error_response(form)
        client = form.save()
        logger.info("Client %s updated for user %s", pk, request.user.id)

    return JsonResponse(serialize_client(repo.to_entity(client)))


@login_required
@require_GET
def call_today_view(request):
    """Klienci do telefonu: next_visit dziś lub wcześniej (bez 'dead')."""
    today = parse_date_param(request.GET.get('date'), default=local_today())
    clients = DjangoClientRepository().list_due_for_call(request.user.id, today)
    return JsonResponse({
        'date': today,
        'count': len(clients),
        'clients': [serialize_client(c) for c in clients]
    })


@login_required
@require_GET
def clients_by_date_view(request):
    """Drill-down: klienci dodani danego dnia."""
    day = parse_date_param(request.GET.get('date'))
    candidates = DjangoClientRepository().list_created_between(request.user.id, day, day)
    clients = build_summary_service().by_date(candidates, day)

    return JsonResponse({
        'date': day,
        'count': len(clients),
        'clients': [serialize_client(c) for c in clients]
    })


@login_required
@require_GET
def clients_by_period_view(request):
    """Klienci dodani dziś / w tym tygodniu (Nd-Sb) / w tym miesiącu."""
    try:
        period = SummaryPeriod(request.GET.get('period', SummaryPeriod.TODAY.value))
    except ValueError:
        raise BadRequest("Period must be one of: today, week, month")

    today = parse_date_param(request.GET.get('date'), default=local_today())
    service = build_summary_service()
    try:
        start, end = service.period_range(period, today)
    except InvalidRangeError as e:
        return JsonResponse({'message': str(e)}, status=400)

    candidates = DjangoClientRepository().list_created_between(request.user.id, start, end)
    clients = service.by_period(candidates, period, today)

    return JsonResponse({
        'period': period.value,
        'start': start,
        'end': end,
        'count': len(clients),
        'clients': [serialize_client(c) for c in clients]
    })


@login_required
@require_http_methods(["GET", "POST"])
def lead_list_view(request):
    if request.method == 'POST':
        form = LeadForm(parse_json_body(request))
        if not form.is_valid():
            return form_error_response(form)
        lead = form.save(commit=False)
        lead.user = request.user
        lead.save()
        logger.info("Lead %s created for user %s", lead.id, request.user.id)
        return JsonResponse(serialize_lead(lead), status=201)

    leads = Lead.objects.filter(user=request.user)
    return JsonResponse({'leads': [serialize_lead(l) for l in leads]})


@login_required
@require_http_methods(["GET", "PUT", "POST", "DELETE"])
def lead_detail_view(request, pk):
    lead = get_object_or_404(Lead, pk=pk, user=request.user)

    if request.method == 'DELETE':
        lead.delete()
        return JsonResponse({'message': 'Lead deleted'})

    if request.method in ('PUT', 'POST'):
        data = {**model_to_dict(lead, fields=['name', 'place']), **parse_json_body(request)}
        form = LeadForm(data, instance=lead)
        if not form.is_valid():
            return form_error_response(form)
        lead = form.save()

    return JsonResponse(serialize_lead(lead))
