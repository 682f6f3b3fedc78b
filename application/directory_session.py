# application/directory_session.py
from __future__ import annotations
from typing import List, Optional
import logging

from application.directory_loader import DirectoryLoader
from application.ports import DirectoryConfig, DirectorySource
from domain.models.company import Company
from domain.models.company_card import CompanyCard
from domain.models.disclosure_state import Collapsed, DisclosureState
from domain.models.load_state import LoadState, Ready
from domain.services import disclosure
from domain.services.card_builder import build_cards, render_keys
from domain.services.search_filter import SearchFilter


class DirectorySession:
    """
    Single owner of the directory view state: load state, query and disclosure.

    The rendering layer reads load_state / filtered_list / cards / disclosure_state
    and reports user events through set_query, request_reveal and dismiss.
    """

    def __init__(
        self,
        source: DirectorySource,
        config: Optional[DirectoryConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or DirectoryConfig()
        self.log = logger or logging.getLogger("directory.session")
        self.loader = DirectoryLoader(source, self.config, logger=self.log.getChild("loader"))
        self._query = ""
        self._disclosure: DisclosureState = Collapsed()
        self._filter = SearchFilter()

    # ---------- read side ----------

    @property
    def load_state(self) -> LoadState:
        return self.loader.state

    @property
    def query(self) -> str:
        return self._query

    @property
    def disclosure_state(self) -> DisclosureState:
        return self._disclosure

    def filtered_list(self, query: Optional[str] = None) -> List[Company]:
        state = self.loader.state
        if not isinstance(state, Ready):
            return []
        return self._filter(state.companies, self._query if query is None else query)

    def short_label(self, region: Optional[str], threshold: Optional[int] = None) -> str:
        t = self.config.label_threshold if threshold is None else threshold
        return disclosure.short_label(region, t, self.config.label_marker)

    def cards(self, threshold: Optional[int] = None) -> List[CompanyCard]:
        state = self.loader.state
        if not isinstance(state, Ready):
            return []
        # keys come from the full list so a card keeps its key while filtering
        key_by_id = {id(c): k for k, c in zip(render_keys(state.companies), state.companies)}
        visible = self.filtered_list()
        return build_cards(
            visible,
            threshold=self.config.label_threshold if threshold is None else threshold,
            marker=self.config.label_marker,
            keys=[key_by_id[id(c)] for c in visible],
        )

    # ---------- actions ----------

    def start(self) -> LoadState:
        return self.loader.load()

    def set_query(self, query: str) -> None:
        self._query = query
        self.log.debug("Query set to %r", query)

    def request_reveal(self, region: Optional[str]) -> DisclosureState:
        self._disclosure = disclosure.request_reveal(self._disclosure, region)
        return self._disclosure

    def dismiss(self) -> DisclosureState:
        self._disclosure = disclosure.dismiss(self._disclosure)
        return self._disclosure

    def close(self) -> None:
        self.loader.close()
