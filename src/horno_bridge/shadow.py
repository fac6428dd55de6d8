"""
Device shadow gateway.

Thin wrapper around the AWS IoT Data Plane client for the oven's thing:
reads the shadow document (reported + desired) and patches single desired
attributes for the front-end.

Design Decision:
    The boto3 client is created lazily and can be injected, so tests and the
    FastAPI dev server can swap in a MagicMock without touching AWS.
"""

import json
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from horno_bridge import constants as CONSTANTS
from horno_bridge.core.exceptions import ShadowServiceError
from horno_bridge.logger import logger


def create_iot_data_client(
    region: str = CONSTANTS.AWS_REGION,
    endpoint_url: str = CONSTANTS.IOT_DATA_ENDPOINT
):
    """Create the IoT Data Plane client bound to the account's ATS endpoint."""
    return boto3.client("iot-data", region_name=region, endpoint_url=endpoint_url)


def _read_payload(payload: Any) -> bytes:
    # GetThingShadow returns a StreamingBody; tests may hand back raw bytes
    if hasattr(payload, "read"):
        return payload.read()
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return payload


class ShadowGateway:
    def __init__(self, client=None, thing_name: str = CONSTANTS.THING_NAME) -> None:
        self._client = client
        self.thing_name = thing_name

    @property
    def client(self):
        if self._client is None:
            self._client = create_iot_data_client()
        return self._client

    def get_document(self) -> Dict[str, Any]:
        """
        Fetch and decode the full shadow document.

        Raises:
            ShadowServiceError: If the service call fails or the payload
                is not a JSON object.
        """
        try:
            response = self.client.get_thing_shadow(thingName=self.thing_name)
        except (ClientError, BotoCoreError) as e:
            raise ShadowServiceError(f"Failed to read shadow: {e}", thing_name=self.thing_name) from e

        try:
            document = json.loads(_read_payload(response["payload"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ShadowServiceError(f"Malformed shadow payload: {e}", thing_name=self.thing_name) from e

        if not isinstance(document, dict):
            raise ShadowServiceError("Malformed shadow payload: expected a JSON object", thing_name=self.thing_name)

        logger.debug(f"Shadow document version: {document.get('version')}")
        return document

    def _section(self, document: Dict[str, Any], name: str) -> Dict[str, Any]:
        state = document.get("state") or {}
        if not isinstance(state, dict):
            raise ShadowServiceError("Malformed shadow payload: 'state' is not an object", thing_name=self.thing_name)
        section = state.get(name) or {}
        if not isinstance(section, dict):
            raise ShadowServiceError(
                f"Malformed shadow payload: 'state.{name}' is not an object",
                thing_name=self.thing_name
            )
        return section

    def read_reported(self) -> Dict[str, Any]:
        """Return only the device-authoritative reported state."""
        return self._section(self.get_document(), "reported")

    def read_shadow(self) -> Dict[str, Any]:
        """
        Return reported state merged with desired state.

        Desired values win when an attribute appears in both.
        """
        document = self.get_document()
        return {
            **self._section(document, "reported"),
            **self._section(document, "desired"),
        }

    def write_shadow_attribute(self, attribute: str, value: Any) -> bool:
        """
        Patch a single attribute into the desired state.

        The device applies the change asynchronously; this only confirms
        that the shadow service accepted the update.
        """
        payload = {"state": {"desired": {attribute: value}}}
        try:
            self.client.update_thing_shadow(
                thingName=self.thing_name,
                payload=json.dumps(payload).encode("utf-8")
            )
        except (ClientError, BotoCoreError) as e:
            raise ShadowServiceError(f"Failed to update shadow: {e}", thing_name=self.thing_name) from e

        logger.info(f"Desired state updated: {attribute}={value!r}")
        return True
