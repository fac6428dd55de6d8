"""
PLC signal catalogue.

Digital points arrive from the shadow as raw two-character codes ("00" / "01").
They are translated into SignalLevel here, at the ingestion boundary, so the
rule logic never compares raw strings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from horno_bridge import constants as CONSTANTS


class SignalCategory(str, Enum):
    DIGITAL = "digital"
    ANALOG = "analog"


class SignalLevel(Enum):
    OFF = CONSTANTS.RAW_OFF
    ON = CONSTANTS.RAW_ON

    @classmethod
    def from_raw(cls, raw: Union[str, "SignalLevel", None]) -> Optional["SignalLevel"]:
        """
        Translate a raw PLC code into a level.

        Returns None for anything that is not exactly "00" or "01".
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True)
class Signal:
    """One physical I/O point on the PLC."""
    id: str
    category: SignalCategory
    label: str
    unit: Optional[str] = None  # analog only

    @property
    def is_analog(self) -> bool:
        return self.category == SignalCategory.ANALOG


MONITORED_SIGNALS: List[Signal] = [
    # Digital (rule inputs)
    Signal(CONSTANTS.SIGNAL_AUTO_VULCANIZER, SignalCategory.DIGITAL, "Auto Vulcanizadora"),
    Signal(CONSTANTS.SIGNAL_AUTO_CENTRIFUGE, SignalCategory.DIGITAL, "Auto Centrifugo"),
    Signal(CONSTANTS.SIGNAL_PISTON, SignalCategory.DIGITAL, "Pistón"),
    Signal(CONSTANTS.SIGNAL_CENTRIFUGE_MOTOR, SignalCategory.DIGITAL, "Motor centrifugo"),
    Signal(CONSTANTS.SIGNAL_HEATERS, SignalCategory.DIGITAL, "Resistencias"),
    Signal(CONSTANTS.SIGNAL_VULCANIZER_MOTOR, SignalCategory.DIGITAL, "Motor vulcanizadora"),
    Signal(CONSTANTS.SIGNAL_EMERGENCY, SignalCategory.DIGITAL, "Emergencia"),
    # Analog (stored on every pass)
    Signal(CONSTANTS.SIGNAL_VULCANIZER_PRESSURE, SignalCategory.ANALOG, "Presión vulcanizadora", "bar"),
    Signal(CONSTANTS.SIGNAL_VULCANIZER_TEMPERATURE, SignalCategory.ANALOG, "Temperatura vulcanizadora", "°C"),
]

SIGNALS_BY_ID: Dict[str, Signal] = {s.id: s for s in MONITORED_SIGNALS}


def get_signal(signal_id: str) -> Optional[Signal]:
    return SIGNALS_BY_ID.get(signal_id)

