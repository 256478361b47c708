import logging
import os
import threading

from django.conf import settings
from django.shortcuts import redirect
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.exceptions import APIException
from rest_framework.response import Response

from .exceptions import JobError, PayloadError, ValidationError
from .handler import BuildRequest, build_handler
from .utils import log_conditionally

logger = logging.getLogger(__name__)

PAYLOAD_FIELDS = ("css", "preset", "content")


def error_response(message, status_code):
    return Response({"status": "error", "errors": message}, status=status_code)


def read_payload(request):
    try:
        payload = request.data
    except APIException as e:
        raise PayloadError(f"The request body could not be read: {e.detail}", e.status_code)

    if not isinstance(payload, dict):
        raise ValidationError("The request body must be a JSON object.")

    fields = {}
    for name in PAYLOAD_FIELDS:
        value = payload.get(name, "")
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValidationError(f"The {name} must be a string.")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError(f"The {name} must be valid UTF-8 text.")
        fields[name] = value
    return fields


@api_view(['GET', 'POST'])
def compile_css(request):
    if request.method == 'GET':
        return redirect(settings.HOMEPAGE_URL)

    log_conditionally(logging.INFO, f"Handling request on worker: {os.getpid()}-{threading.get_ident()}")

    try:
        build_request = BuildRequest(
            caller_agent=request.headers.get("User-Agent", ""),
            **read_payload(request),
        )
        result = build_handler().handle(build_request)
    except JobError as e:
        if e.status_code >= 500:
            logger.warning(f"❌ Build failed: {type(e).__name__}: {e}")
        else:
            log_conditionally(logging.INFO, f"Rejected build: {e}")
        return error_response(str(e), e.status_code)
    except Exception:
        logger.exception("❌ Unexpected failure while building css")
        return error_response("The compiler failed unexpectedly.", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        "status": "success",
        "uuid": str(result.job_id),
        "css": result.css,
    }, status=status.HTTP_200_OK)


@api_view(['GET'])
def health_check(request):
    port = os.getenv("PORT", "8000")
    return Response({"status": "ok", "message": f"Server running on PORT {port}"}, status=200)
