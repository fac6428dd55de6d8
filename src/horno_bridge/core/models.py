"""
Records written to the industrial event log.

Field names are the column names of the `eventos_industriales` table.
"""

from datetime import datetime, timezone
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from horno_bridge import constants as CONSTANTS


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class ReadingRecord(BaseModel):
    """Analog reading, stored on every processing pass."""
    tipo: Literal["lectura"] = CONSTANTS.RECORD_TYPE_READING
    signal_id: str
    sensor: str
    valor: Optional[float]  # None when the raw value is not numeric
    unidad: str
    timestamp: datetime


class EventRecord(BaseModel):
    """Operational event derived from a digital edge."""
    tipo: Literal["evento"] = CONSTANTS.RECORD_TYPE_EVENT
    maquina: str
    modo_operacion: Literal["automático", "manual"]
    comentario: str
    signal_id: str
    timestamp: datetime


Record = Union[ReadingRecord, EventRecord]


def record_subject(record: Record) -> str:
    """What a log line should name the record by: signal for readings, machine for events."""
    if isinstance(record, EventRecord):
        return record.signal_id or record.maquina
    return record.signal_id


class ShadowAttributeUpdate(BaseModel):
    attribute: str = Field(..., min_length=1, description="Shadow attribute to set in the desired state.")
    value: Any = Field(None, description="New desired value for the attribute.")
