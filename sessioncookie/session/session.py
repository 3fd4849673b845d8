"""
Session
Request-scoped key-value bag decoded from the session cookie
"""
from typing import Any, Dict, Iterator, List, Optional, Union

# Values must survive a JSON round trip
JSONValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]


def flash_key(key: str) -> str:
    """Internal storage key of a flash value"""
    return f"__flash_{key}__"


class Session:
    """
    In-memory session data

    Provides dictionary-like interface with additional methods:
    - get(), set(), has(), unset(), clear()
    - flash() for values readable exactly once

    A Session is only ever built by a session store, from the incoming
    cookie, and is not persisted until the store commits it.
    """

    def __init__(self, data: Optional[Dict[str, JSONValue]] = None, session_id: str = ''):
        """
        Initialize session

        Args:
            data: Decoded session data (copied)
            session_id: Session identifier, always empty for cookie sessions
        """
        self.id = session_id
        self._data: Dict[str, JSONValue] = dict(data or {})

    @property
    def data(self) -> Dict[str, JSONValue]:
        """Copy of the raw session mapping, flash keys included"""
        return dict(self._data)

    # === Data Retrieval ===

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get session value

        Flash values are returned once and then removed.

        Args:
            key: Session key
            default: Default value if key doesn't exist

        Returns:
            Session value or default
        """
        if key in self._data:
            return self._data[key]

        flashed = flash_key(key)
        if flashed in self._data:
            return self._data.pop(flashed)

        return default

    def has(self, key: str) -> bool:
        """Check if key (or a flash value for it) exists in session"""
        return key in self._data or flash_key(key) in self._data

    # === Data Storage ===

    def set(self, key: str, value: JSONValue) -> None:
        """
        Store value in session

        Args:
            key: Session key
            value: JSON serializable value
        """
        self._data[key] = value

    def flash(self, key: str, value: JSONValue) -> None:
        """
        Store a value that is removed the first time it is read

        Args:
            key: Flash key
            value: Flash value
        """
        self._data[flash_key(key)] = value

    # === Data Removal ===

    def unset(self, key: str) -> None:
        """Remove key (and its flash value) from session"""
        self._data.pop(key, None)
        self._data.pop(flash_key(key), None)

    def clear(self) -> None:
        """Clear all session data"""
        self._data.clear()

    # === Dictionary Interface ===

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: JSONValue) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.unset(key)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"<Session keys={sorted(self._data)}>"
