# apps/core/http.py
import json
from datetime import date

from dateutil import parser as date_parser
from django.core.exceptions import BadRequest
from django.http import JsonResponse


def parse_json_body(request) -> dict:
    """Zwraca ciało żądania jako dict (pusty dict dla pustego body)."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    return data


def parse_date_param(value, default: date = None) -> date:
    """Parsuje datę YYYY-MM-DD z query stringa."""
    if value in (None, ''):
        if default is None:
            raise BadRequest("Date parameter is required")
        return default
    try:
        return date_parser.isoparse(value).date()
    except (ValueError, OverflowError):
        raise BadRequest(f"Invalid date format: {value}")


def form_error_response(form, message="Validation failed", status=400):
    return JsonResponse({
        'message': message,
        'errors': form.errors.get_json_data(),
    }, status=status)
