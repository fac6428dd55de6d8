"""
Event store client.

Inserts reading/event records into the Supabase `eventos_industriales` table
through its PostgREST endpoint. One POST per record, no batching, no retries.

Failures never propagate: a rejected or failed insert is logged and reported
as False so the rest of a processing pass still runs. Missing credentials turn
every insert into a logged no-op.
"""

import json
from typing import Optional

import requests

from horno_bridge import constants as CONSTANTS
from horno_bridge.config import Settings
from horno_bridge.core.exceptions import ConfigurationError, EventStoreError
from horno_bridge.core.models import Record, record_subject
from horno_bridge.logger import logger, print_stack_trace


class EventStore:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        if settings.STORE_TIMEOUT_SECONDS <= 0:
            raise ConfigurationError(
                f"STORE_TIMEOUT_SECONDS must be positive, got {settings.STORE_TIMEOUT_SECONDS}"
            )
        self.settings = settings
        self.session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return self.settings.store_configured

    @property
    def table_url(self) -> str:
        base = self.settings.SUPABASE_URL.strip().rstrip("/")
        return f"{base}{CONSTANTS.REST_PATH_PREFIX}/{self.settings.EVENT_TABLE}"

    def _headers(self) -> dict:
        key = self.settings.SUPABASE_ANON_KEY.strip()
        return {
            "Content-Type": "application/json",
            "apikey": key,
            "Authorization": f"Bearer {key}",
        }

    def _post(self, record: Record) -> None:
        body = record.model_dump(mode="json")
        resp = self.session.post(
            self.table_url,
            headers=self._headers(),
            data=json.dumps(body, ensure_ascii=False).encode("utf-8"),
            timeout=self.settings.STORE_TIMEOUT_SECONDS,
        )
        if not 200 <= resp.status_code < 300:
            raise EventStoreError(
                f"Error guardando: {resp.status_code} {resp.reason} {resp.text[:300]}",
                status_code=resp.status_code,
                signal_id=record.signal_id,
            )

    def insert(self, record: Record) -> Optional[bool]:
        """
        Insert one record.

        Returns:
            True if stored, False if the store rejected it or the request
            failed, None if the insert was skipped for missing credentials.
        """
        if not self.configured:
            logger.error("Faltan variables de entorno de Supabase (SUPABASE_URL / SUPABASE_ANON_KEY)")
            return None

        try:
            self._post(record)
        except (EventStoreError, requests.RequestException) as e:
            logger.error(f"Error guardando en tabla única: {e}")
            print_stack_trace()
            return False

        logger.info(f"Guardado: {record.tipo} - {record_subject(record)}")
        return True
