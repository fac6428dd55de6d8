"""
Horno Shadow Bridge Lambda.

Entry point behind the function URL / HTTP API used by the front-end.

Routes:
    GET  /shadow    -> merged reported + desired shadow state
    POST /shadow    -> patch one desired attribute ({attribute, value})
    POST /procesar  -> run one change-processing pass
    *               -> 404

Every response carries an open CORS header. Any uncaught failure becomes a
500 with the raw error message.
"""
import base64
import json
from typing import Any, Dict, Optional, Tuple

from horno_bridge import constants as CONSTANTS
from horno_bridge import services
from horno_bridge.config import get_settings
from horno_bridge.core.models import ShadowAttributeUpdate
from horno_bridge.logger import configure_logger, logger, print_stack_trace


def _response(status_code: int, body: Any) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {**CONSTANTS.CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def _route(event: Dict[str, Any]) -> Tuple[str, str]:
    """Extract (method, path) from an HTTP API v2 or REST API v1 event."""
    http = (event.get("requestContext") or {}).get("http")
    if http:
        return http["method"].upper(), http.get("path") or event.get("rawPath", "")
    if "httpMethod" in event:
        return event["httpMethod"].upper(), event.get("path", "")
    raise ValueError("Unsupported event: no HTTP method found")


def _json_body(event: Dict[str, Any]) -> Optional[Any]:
    body = event.get("body")
    if body is None:
        return None
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body)


def lambda_handler(event, context):
    try:
        configure_logger(get_settings().LOG_MODE)
        method, path = _route(event)
        logger.info(f"{method} {path}")

        if method == "GET" and path == CONSTANTS.ROUTE_SHADOW:
            return _response(200, services.get_gateway().read_shadow())

        if method == "POST" and path == CONSTANTS.ROUTE_SHADOW:
            update = ShadowAttributeUpdate.model_validate(_json_body(event))
            services.get_gateway().write_shadow_attribute(update.attribute, update.value)
            return _response(200, {"ok": True})

        if method == "POST" and path == CONSTANTS.ROUTE_PROCESS:
            services.get_processor().process(services.get_cache())
            return _response(200, {"ok": True})

        return _response(404, {"error": "Not found"})

    except Exception as e:
        logger.error(f"Request failed: {e}")
        print_stack_trace()
        return _response(500, {"error": str(e)})
