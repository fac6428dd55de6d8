"""
Rule evaluation for digital signal transitions.

A transition (previous -> current) of one monitored signal is mapped to zero
or more EventRecords. Rules are independent: a single transition may match
several of them.

Guards look at the *current* reported snapshot, i.e. the state of the other
signal at fetch time, not at the moment of this signal's own edge.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, List, Mapping, Optional

from horno_bridge import constants as CONSTANTS
from horno_bridge.core.models import EventRecord
from horno_bridge.core.signals import SignalLevel


class Edge(str, Enum):
    RISE = "rise"
    FALL = "fall"


def is_rise(prev: Any, curr: Any) -> bool:
    """True only for OFF -> ON ("00" -> "01")."""
    return SignalLevel.from_raw(prev) == SignalLevel.OFF and SignalLevel.from_raw(curr) == SignalLevel.ON


def is_fall(prev: Any, curr: Any) -> bool:
    """True only for ON -> OFF ("01" -> "00")."""
    return SignalLevel.from_raw(prev) == SignalLevel.ON and SignalLevel.from_raw(curr) == SignalLevel.OFF


def detect_edge(prev: Any, curr: Any) -> Optional[Edge]:
    if is_rise(prev, curr):
        return Edge.RISE
    if is_fall(prev, curr):
        return Edge.FALL
    return None


@dataclass(frozen=True)
class EdgeRule:
    signal_id: str
    edge: Edge
    maquina: str
    modo_operacion: str
    comentario: str
    # Mode-select signal that must read OFF (machine in manual) for the rule to fire
    manual_guard: Optional[str] = None

    def guard_passes(self, reported: Mapping[str, Any]) -> bool:
        if self.manual_guard is None:
            return True
        return SignalLevel.from_raw(reported.get(self.manual_guard)) == SignalLevel.OFF


@dataclass(frozen=True)
class EmergencyTarget:
    maquina: str
    mode_signal: str
    suffix: str


EDGE_RULES: List[EdgeRule] = [
    # Automatic mode of the vulcanizer
    EdgeRule(CONSTANTS.SIGNAL_AUTO_VULCANIZER, Edge.RISE, "vulcanizadora", CONSTANTS.MODE_AUTOMATIC,
             "Vulcanizadora activada en modo automático"),
    EdgeRule(CONSTANTS.SIGNAL_AUTO_VULCANIZER, Edge.FALL, "vulcanizadora", CONSTANTS.MODE_AUTOMATIC,
             "Modo automático finalizado de la vulcanizadora"),
    # Automatic mode of the centrifugal oven
    EdgeRule(CONSTANTS.SIGNAL_AUTO_CENTRIFUGE, Edge.RISE, CONSTANTS.MACHINE_CENTRIFUGE, CONSTANTS.MODE_AUTOMATIC,
             "Horno centrifugo activado en modo automático"),
    EdgeRule(CONSTANTS.SIGNAL_AUTO_CENTRIFUGE, Edge.FALL, CONSTANTS.MACHINE_CENTRIFUGE, CONSTANTS.MODE_AUTOMATIC,
             "Modo automático finalizado del Horno centrifugo"),
    # Manual actuation, centrifugal oven
    EdgeRule(CONSTANTS.SIGNAL_PISTON, Edge.RISE, CONSTANTS.MACHINE_CENTRIFUGE, CONSTANTS.MODE_MANUAL,
             "Pistón activado", manual_guard=CONSTANTS.SIGNAL_AUTO_CENTRIFUGE),
    EdgeRule(CONSTANTS.SIGNAL_CENTRIFUGE_MOTOR, Edge.RISE, CONSTANTS.MACHINE_CENTRIFUGE, CONSTANTS.MODE_MANUAL,
             "Motor del horno centrifugo activado", manual_guard=CONSTANTS.SIGNAL_AUTO_CENTRIFUGE),
    # Manual actuation, vulcanizer
    EdgeRule(CONSTANTS.SIGNAL_HEATERS, Edge.RISE, CONSTANTS.MACHINE_VULCANIZER, CONSTANTS.MODE_MANUAL,
             "Resistencias activadas", manual_guard=CONSTANTS.SIGNAL_AUTO_VULCANIZER),
    EdgeRule(CONSTANTS.SIGNAL_VULCANIZER_MOTOR, Edge.RISE, CONSTANTS.MACHINE_VULCANIZER, CONSTANTS.MODE_MANUAL,
             "Motor vulcanizadora activado", manual_guard=CONSTANTS.SIGNAL_AUTO_VULCANIZER),
]

# One record per machine when the emergency input falls
EMERGENCY_TARGETS: List[EmergencyTarget] = [
    EmergencyTarget(CONSTANTS.MACHINE_VULCANIZER, CONSTANTS.SIGNAL_AUTO_VULCANIZER, "vulcanizadora"),
    EmergencyTarget(CONSTANTS.MACHINE_CENTRIFUGE, CONSTANTS.SIGNAL_AUTO_CENTRIFUGE, "centrifugadora"),
]


def _emergency_records(signal_id: str, reported: Mapping[str, Any], timestamp: datetime) -> List[EventRecord]:
    records = []
    for target in EMERGENCY_TARGETS:
        automatic = SignalLevel.from_raw(reported.get(target.mode_signal)) == SignalLevel.ON
        mode = CONSTANTS.MODE_AUTOMATIC if automatic else CONSTANTS.MODE_MANUAL
        records.append(EventRecord(
            maquina=target.maquina,
            modo_operacion=mode,
            comentario=f"Emergencia en modo {mode} {target.suffix}",
            signal_id=signal_id,
            timestamp=timestamp,
        ))
    return records


def evaluate_rules(
    signal_id: str,
    prev: Any,
    curr: Any,
    reported: Mapping[str, Any],
    timestamp: datetime
) -> List[EventRecord]:
    """
    Classify one transition into event records.

    Args:
        signal_id: Monitored signal that changed
        prev: Previous raw value (from the cache)
        curr: Current raw value (from the snapshot)
        reported: Full reported snapshot of this pass, used for guards
        timestamp: Pass timestamp shared by every emitted record

    Returns:
        Records in rule-table order, emergency records last.
    """
    edge = detect_edge(prev, curr)
    if edge is None:
        return []

    records = [
        EventRecord(
            maquina=rule.maquina,
            modo_operacion=rule.modo_operacion,
            comentario=rule.comentario,
            signal_id=signal_id,
            timestamp=timestamp,
        )
        for rule in EDGE_RULES
        if rule.signal_id == signal_id and rule.edge == edge and rule.guard_passes(reported)
    ]

    if signal_id == CONSTANTS.SIGNAL_EMERGENCY and edge == Edge.FALL:
        records.extend(_emergency_records(signal_id, reported, timestamp))

    return records
