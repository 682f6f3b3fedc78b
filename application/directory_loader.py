# application/directory_loader.py
from __future__ import annotations
from typing import Any, Callable, List, Optional
import logging

from application.ports import DirectoryConfig, DirectorySource
from domain.errors import FetchError, InvalidTransition, ParseError
from domain.models.company import Company
from domain.models.load_state import Failed, Loading, LoadState, Ready

StateListener = Callable[[LoadState], None]


class DirectoryLoader:
    """
    Fetches the company list once and owns the Loading/Ready/Failed state.

    Loading -> Ready on success, Loading -> Failed on FetchError/ParseError.
    There is no way back to Loading. After close() a late completion is dropped.
    """

    def __init__(
        self,
        source: DirectorySource,
        config: Optional[DirectoryConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.source = source
        self.config = config or DirectoryConfig()
        self.log = logger or logging.getLogger("directory.loader")
        self._state: LoadState = Loading()
        self._started = False
        self._closed = False
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def on_change(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def close(self) -> None:
        self._closed = True
        self._listeners.clear()

    def load(self) -> LoadState:
        if self._started:
            raise InvalidTransition("directory already fetched for this session")
        self._started = True

        url = self.config.resource_url
        self.log.info("Fetching directory from %s", url)
        try:
            raw = self.source.fetch(url)
            companies = tuple(Company.from_record(r) for r in raw)
        except (FetchError, ParseError) as e:
            self._fail(e)
        else:
            self._complete(companies)
        return self._state

    # ---------- completions ----------

    def _complete(self, companies: tuple) -> None:
        if self._closed:
            self.log.debug("Loader closed before fetch completed; dropping %d records", len(companies))
            return
        self._transition(Ready(companies=companies))
        self.log.info("Directory ready: %d companies", len(companies))

    def _fail(self, error: Exception) -> None:
        if self._closed:
            self.log.debug("Loader closed before fetch failed; dropping %s", error.__class__.__name__)
            return
        self.log.error("Error fetching data: %s: %s", error.__class__.__name__, error)
        self._transition(Failed(message=self.config.failure_message))

    def _transition(self, new_state: Any) -> None:
        if not isinstance(self._state, Loading):
            raise InvalidTransition(
                f"cannot move from {type(self._state).__name__} to {type(new_state).__name__}"
            )
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
