"""
Change processor.

One pass fetches the reported shadow state once, walks the monitored signals
in catalogue order and writes:
    - a reading for every analog signal present in the snapshot,
    - event records for digital edges, as classified by rules.evaluate_rules.

The previous-value cache is owned by the caller and passed into process(),
so its lifetime (one warm Lambda container, one test, ...) is explicit.
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Optional

from horno_bridge.core.models import Record, ReadingRecord, utcnow
from horno_bridge.core.signals import MONITORED_SIGNALS, Signal
from horno_bridge.core.state import PreviousValueCache
from horno_bridge.event_store import EventStore
from horno_bridge.logger import logger
from horno_bridge.rules import evaluate_rules
from horno_bridge.shadow import ShadowGateway

_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_reading(raw: Any) -> Optional[float]:
    """
    Parse an analog value the lenient way the PLC gateway formats them.

    A leading numeric prefix is enough ("12.5 bar" -> 12.5). Values with no
    numeric prefix, and non-finite results, give None.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        match = _NUMERIC_PREFIX.match(raw)
        if match is None:
            return None
        value = float(match.group(1))
    else:
        return None
    return value if math.isfinite(value) else None


@dataclass
class ProcessingSummary:
    signals_seen: int = 0
    readings: int = 0
    events: int = 0
    written: int = 0
    skipped: int = 0
    failed: int = 0

    def count_write(self, result: Optional[bool]) -> None:
        if result is True:
            self.written += 1
        elif result is False:
            self.failed += 1
        else:
            self.skipped += 1


class ChangeProcessor:
    def __init__(
        self,
        gateway: ShadowGateway,
        store: EventStore,
        signals: Optional[List[Signal]] = None,
        clock: Callable[[], datetime] = utcnow
    ) -> None:
        self.gateway = gateway
        self.store = store
        self.signals = signals if signals is not None else MONITORED_SIGNALS
        self.clock = clock

    def _write(self, record: Record, summary: ProcessingSummary) -> None:
        summary.count_write(self.store.insert(record))

    def _reading(self, signal: Signal, current, timestamp: datetime) -> ReadingRecord:
        value = parse_reading(current)
        if value is None:
            logger.warning(f"Lectura no numérica para {signal.id}: {current!r}")
        return ReadingRecord(
            signal_id=signal.id,
            sensor=signal.label,
            valor=value,
            unidad=signal.unit or "",
            timestamp=timestamp,
        )

    def process(self, cache: PreviousValueCache) -> ProcessingSummary:
        """
        Run one processing pass against the given cache.

        Raises:
            ShadowServiceError: If the reported state cannot be fetched.
        """
        reported = self.gateway.read_reported()
        timestamp = self.clock()
        summary = ProcessingSummary()

        for signal in self.signals:
            current = reported.get(signal.id)
            if current is None:
                continue
            summary.signals_seen += 1

            previous = cache.get(signal.id)

            if signal.is_analog:
                summary.readings += 1
                self._write(self._reading(signal, current, timestamp), summary)

            if previous is not None and previous != current:
                logger.debug(f"Cambio en {signal.id}: {previous!r} -> {current!r}")
                for record in evaluate_rules(signal.id, previous, current, reported, timestamp):
                    summary.events += 1
                    self._write(record, summary)

            cache.set(signal.id, current)

        logger.info(
            f"Procesamiento completado: señales={summary.signals_seen} lecturas={summary.readings} "
            f"eventos={summary.events} guardados={summary.written} omitidos={summary.skipped} "
            f"fallidos={summary.failed}"
        )
        return summary
