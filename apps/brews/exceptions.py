"""
HTTP-facing exceptions for brews app.

Service-layer errors live in ``apps.brews.services.exceptions``; the
classes here translate them into API responses.
"""
from rest_framework.exceptions import APIException


class StoreUnavailableError(APIException):
    """The brew store rejected a read or write."""
    status_code = 503
    default_detail = 'Failed to save brew. Please try again later.'
    default_code = 'store_unavailable'
