import logging

from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.decorators import login_required
from django.contrib.auth.models import User
from django.db import transaction
from django.http import JsonResponse
from django.middleware.csrf import get_token
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_http_methods, require_POST, require_GET

from apps.goals.views import serialize_periods
from .forms import RegisterForm, LoginForm, DailyGoalForm
from .http import parse_json_body, form_error_response

logger = logging.getLogger(__name__)


def serialize_profile(user, with_periods=False) -> dict:
    data = {
        'id': user.id,
        'phone_number': user.profile.phone_number,
        'daily_goal': user.profile.daily_goal,
    }
    if with_periods:
        data['goal_periods'] = serialize_periods(user.id)
    return data


@ensure_csrf_cookie
@require_GET
def csrf_view(request):
    """Ustawia ciasteczko csrftoken. Zapisy (POST/PUT/DELETE) wysyłają je w nagłówku X-CSRFToken."""
    return JsonResponse({'csrf_token': get_token(request)})


@require_POST
def register_view(request):
    form = RegisterForm(parse_json_body(request))
    if not form.is_valid():
        logger.warning("Registration rejected: %s", form.errors.as_json())
        return form_error_response(form, message="Invalid user data")

    with transaction.atomic():
        # Profil tworzy sygnał post_save
        user = User.objects.create_user(
            username=form.cleaned_data['phone_number'],
            password=form.cleaned_data['password']
        )

    login(request, user)
    logger.info("User %s registered", user.id)
    return JsonResponse(serialize_profile(user), status=201)


@ensure_csrf_cookie
@require_http_methods(["GET", "POST"])
def login_view(request):
    if request.method == 'GET':
        # Tu przekierowuje login_required
        return JsonResponse({'message': 'Authentication required', 'next': request.GET.get('next')}, status=401)

    form = LoginForm(parse_json_body(request))
    if not form.is_valid():
        return form_error_response(form)

    user = authenticate(
        request,
        username=form.cleaned_data['phone_number'],
        password=form.cleaned_data['password']
    )
    if user is None:
        return JsonResponse({'message': 'Invalid phone number or password'}, status=401)

    login(request, user)
    return JsonResponse(serialize_profile(user))


@require_POST
def logout_view(request):
    logout(request)
    return JsonResponse({'message': 'Logged out'})


@login_required
@require_GET
def profile_view(request):
    return JsonResponse(serialize_profile(request.user, with_periods=True))


@login_required
@require_http_methods(["PUT", "POST"])
def daily_goal_view(request):
    profile = request.user.profile
    form = DailyGoalForm(parse_json_body(request), instance=profile)
    if not form.is_valid():
        return form_error_response(form, message="Daily goal must be a number between 1 and 50")

    form.save()
    logger.info("Daily goal of user %s set to %s", request.user.id, profile.daily_goal)
    return JsonResponse(serialize_profile(request.user, with_periods=True))
