from typing import Any, MutableMapping, Optional


class RequestSession:
    """
    Typed view over Starlette's cookie-backed `request.session` dict.

    Setting a field to None removes the key, so a logged-out cookie carries
    no stale user id.
    """

    USER_KEY = "user_id"
    VISITOR_KEY = "visitor_id"

    def __init__(self, data: MutableMapping[str, Any]):
        self._data = data

    def _get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value

    @property
    def user_id(self) -> Optional[str]:
        return self._get(self.USER_KEY)

    @user_id.setter
    def user_id(self, value: Optional[str]) -> None:
        self._set(self.USER_KEY, value)

    @property
    def visitor_id(self) -> Optional[str]:
        return self._get(self.VISITOR_KEY)

    @visitor_id.setter
    def visitor_id(self, value: Optional[str]) -> None:
        self._set(self.VISITOR_KEY, value)
