from typing import Any, Dict, Optional


class PreviousValueCache:
    '''Last observed raw value per signal.
    Lives only as long as its owner keeps it (one warm Lambda container
    for the handler); nothing is persisted.'''

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(initial or {})

    def get(self, signal_id: str) -> Optional[Any]:
        '''Previous value, or None if the signal was never observed'''
        return self._values.get(signal_id)

    def set(self, signal_id: str, value: Any) -> None:
        self._values[signal_id] = value

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, signal_id: str) -> bool:
        return signal_id in self._values

    def __len__(self) -> int:
        return len(self._values)
