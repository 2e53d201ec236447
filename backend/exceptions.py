import logging

from django.conf import settings
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    Render every API error as ``{"error": ...}``.

    Authentication problems become 401 "Unauthorized", ownership problems
    403 "Forbidden", missing objects 404 and serializer errors 400 with the
    field messages. Anything DRF does not know about is logged and turned
    into a 500; the exception text is only exposed when DEBUG is on.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound(str(exc) or "Not found.")
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}",
            exc_info=exc,
        )
        data = {"error": "Internal server error"}
        if settings.DEBUG:
            data["details"] = str(exc)
        return Response(data, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response.data = {"error": "Unauthorized"}
        if settings.DEBUG:
            response.data["details"] = str(exc.detail)
    elif isinstance(exc, exceptions.PermissionDenied):
        response.data = {"error": "Forbidden"}
    elif isinstance(exc, exceptions.ValidationError):
        detail = exc.detail
        # A single message raised without a field renders as a plain string.
        if isinstance(detail, list) and len(detail) == 1:
            detail = str(detail[0])
        response.data = {"error": detail}
    elif isinstance(exc, exceptions.MethodNotAllowed):
        response.data = {"error": "Method not allowed"}
    else:
        response.data = {"error": str(exc.detail)}

    return response
