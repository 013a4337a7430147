"""Persisted key-value store backing one visitor.

Mirrors the browser's localStorage contract: string keys, string values,
missing keys read as None.
"""

CURRENCY_KEY = "selectedCurrency"
USER_KEY = "user"


class KeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
