"""REST request runner using endpoint specs.

The runner is the dispatch primitive: it validates the call, builds the
path, attaches query/body/headers as the endpoint spec dictates, awaits the transport
and turns every expected failure into an ``Err``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.enums import HttpMethod
from ...core.exceptions import (
    ApiResponseError,
    InternalServerError,
    ResponseDecodeError,
    ServerNotRespondingError,
    ValidationError,
)
from ...core.result import Err, Ok, Result
from .transport import FORM_CONTENT_TYPE, RESTTransport

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_PREFIX = "Internal Server Error (500): "
NOT_RESPONDING_PREFIX = "Error: Server not responding, due to: "


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: HttpMethod
    build_path: Callable[[dict[str, Any]], str]
    uses_query: bool = False
    sends_body: bool = False
    # Params that must be truthy before anything is sent
    required: tuple[str, ...] = ()
    missing_message: str = "Missing required arguments"


def validate(spec: RestEndpointSpec, params: dict[str, Any]) -> None:
    """Raise ``ValidationError`` if a required param is empty."""
    if any(not params.get(name) for name in spec.required):
        raise ValidationError(spec.missing_message)


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        query: dict[str, Any] | None = None,
    ) -> Result:
        try:
            validate(spec, params)
        except ValidationError as e:
            logger.debug("Skipped %s: %s", spec.id, e)
            return Err(str(e))

        path = spec.build_path(params)
        body = params.get("data") if spec.sends_body else None
        headers = {"Content-Type": FORM_CONTENT_TYPE} if body is not None else None

        try:
            data = await self._t.request(
                spec.method.value,
                path,
                params=query if spec.uses_query else None,
                payload=body,
                headers=headers,
            )
        except InternalServerError as e:
            return Err(INTERNAL_SERVER_ERROR_PREFIX + str(e))
        except ServerNotRespondingError as e:
            return Err(NOT_RESPONDING_PREFIX + str(e))
        except ApiResponseError as e:
            return Err(str(e), payload=e.body)
        except ResponseDecodeError as e:
            return Err(str(e))

        return Ok(data)
