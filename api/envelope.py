# api/envelope.py
"""
Uniform success envelope: {success, statusCode, message, data}.
"""

import json
from typing import Any, Callable, Coroutine, Dict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

SUCCESS_MESSAGE = "Success"


def is_enveloped(payload: Any) -> bool:
    return isinstance(payload, dict) and "success" in payload and "statusCode" in payload


def wrap_payload(payload: Any, status_code: int) -> Dict[str, Any]:
    """Wrap a handler result unless it already carries the envelope shape"""
    if is_enveloped(payload):
        return payload
    return {
        "success": True,
        "statusCode": status_code,
        "message": SUCCESS_MESSAGE,
        "data": payload,
    }


def envelope_response(request: Request, response: Response) -> Response:
    # DELETE answered with 204 No Content carries no body at all
    if request.method == "DELETE" and response.status_code == 204:
        return Response(status_code=204, background=response.background)

    if response.media_type != "application/json":
        return response

    payload = json.loads(response.body) if response.body else None
    return JSONResponse(
        content=wrap_payload(payload, response.status_code),
        status_code=response.status_code,
        background=response.background,
    )


class EnvelopeRoute(APIRoute):
    """APIRoute that wraps every successful JSON response in the success envelope.

    Errors never reach here: they propagate to the exception handlers
    installed by api.errors.setup_error_handling.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def envelope_handler(request: Request) -> Response:
            response = await handler(request)
            return envelope_response(request, response)

        return envelope_handler
