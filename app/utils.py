from dateutil.relativedelta import relativedelta
from django.utils import timezone
from rest_framework.response import Response
from rest_framework.views import exception_handler

def api_response(status_code, message, data=None):
    if data is None:
        data = []
    return Response({
        "status": status_code,
        "message": message,
        "data": data
    }, status=status_code)


def api_exception_handler(exc, context):
    """
    Wrap DRF error responses (401, 403, 404, 405, ...) in the api_response envelope.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    if detail is not None:
        message, data = str(detail), []
    else:
        message, data = "Invalid data", response.data

    response.data = {
        "status": response.status_code,
        "message": message,
        "data": data
    }
    return response


def _count(number, unit):
    return f"{number} {unit}" if number == 1 else f"{number} {unit}s"


def time_ago(value, now=None):
    """
    Human readable distance between ``value`` and now, e.g. "about 3 hours ago"
    or "in 2 days". Buckets and wording follow date-fns formatDistanceToNow,
    which django.utils.timesince ("3 days, 2 hours") does not match.
    """
    if value is None:
        return ''

    now = now or timezone.now()
    if timezone.is_naive(value):
        value = timezone.make_aware(value)

    future = value > now
    earlier, later = (now, value) if future else (value, now)
    seconds = (later - earlier).total_seconds()
    minutes = int((seconds + 30) // 60)

    if seconds < 30:
        distance = "less than a minute"
    elif minutes < 45:
        distance = _count(minutes, "minute")
    elif minutes < 90:
        distance = "about 1 hour"
    elif minutes < 24 * 60:
        distance = f"about {_count(int((minutes + 30) // 60), 'hour')}"
    elif minutes < 42 * 60:
        distance = "1 day"
    elif minutes < 30 * 24 * 60:
        distance = _count(int((minutes + 12 * 60) // (24 * 60)), "day")
    elif minutes < 45 * 24 * 60:
        distance = "about 1 month"
    elif minutes < 60 * 24 * 60:
        distance = "about 2 months"
    else:
        delta = relativedelta(later, earlier)
        months = delta.years * 12 + delta.months
        if months < 12:
            distance = _count(max(months, 2), "month")
        else:
            years, remainder = divmod(months, 12)
            if remainder < 3:
                distance = f"about {_count(years, 'year')}"
            elif remainder < 9:
                distance = f"over {_count(years, 'year')}"
            else:
                distance = f"almost {_count(years + 1, 'year')}"

    return f"in {distance}" if future else f"{distance} ago"
