"""
Staged vs. applied filter state per category.

Edits land in ``staged`` only. ``apply`` commits staged into applied,
``clear`` rolls both back to the category defaults at once. Only applied
criteria should feed the search engine; ``version`` changes exactly when
applied criteria change, so callers can use it to decide when to re-run a
search and reset pagination.
"""
import copy
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .models import CATEGORIES, Criteria, default_criteria
from .validation import CriteriaError, criteria_from_mapping

logger = logging.getLogger(__name__)


@dataclass
class StagedFilterState:
    staged: Criteria
    applied: Criteria
    version: int = 0


class FilterStagingStore:
    """Two-phase filter state for the property and vehicle categories."""

    def __init__(self):
        self._lock = threading.Lock()
        self._states: Dict[str, StagedFilterState] = {
            c: StagedFilterState(staged=default_criteria(c), applied=default_criteria(c))
            for c in CATEGORIES
        }

    def _state(self, category: str) -> StagedFilterState:
        try:
            return self._states[category]
        except KeyError:
            raise ValueError(f"Unknown category: {category!r}") from None

    def staged(self, category: str) -> Criteria:
        with self._lock:
            return self._state(category).staged

    def applied(self, category: str) -> Criteria:
        with self._lock:
            return self._state(category).applied

    def version(self, category: str) -> int:
        with self._lock:
            return self._state(category).version

    def snapshot(self, category: str) -> StagedFilterState:
        with self._lock:
            return copy.deepcopy(self._state(category))

    def is_dirty(self, category: str) -> bool:
        """True while staged edits are waiting to be applied."""
        with self._lock:
            st = self._state(category)
            return st.staged != st.applied

    def set_staged(self, category: str, patch: Optional[Mapping[str, Any]] = None, **fields) -> Criteria:
        """
        Shallow-merge ``patch`` into the staged criteria.

        Values are validated like persisted data; unknown fields raise
        CriteriaError. Applied criteria are untouched.
        """
        updates = dict(patch or {}, **fields)
        with self._lock:
            st = self._state(category)
            st.staged = criteria_from_mapping(category, updates, base=st.staged)
            return st.staged

    def apply(self, category: str) -> Criteria:
        """Commit staged criteria; applied becomes a copy of staged."""
        with self._lock:
            st = self._state(category)
            st.applied = copy.deepcopy(st.staged)
            st.version += 1
            logger.debug(f"Applied {category} filters (version {st.version})")
            return st.applied

    def clear(self, category: str) -> Criteria:
        """Reset staged and applied to the defaults together."""
        with self._lock:
            st = self._state(category)
            st.staged = default_criteria(category)
            st.applied = default_criteria(category)
            st.version += 1
            logger.debug(f"Cleared {category} filters (version {st.version})")
            return st.applied

    def discard(self, category: str) -> Criteria:
        """Drop unapplied edits; staged goes back to the applied criteria."""
        with self._lock:
            st = self._state(category)
            st.staged = copy.deepcopy(st.applied)
            return st.staged

    def load_persisted(self, category: str, data: Any) -> bool:
        """
        Restore applied criteria saved by a previous session.

        ``data`` is merged over the defaults. On success staged starts equal
        to applied. Invalid data is logged and leaves the state unchanged.
        """
        if category not in self._states:
            raise ValueError(f"Unknown category: {category!r}")
        try:
            criteria = criteria_from_mapping(category, data, base=default_criteria(category))
        except CriteriaError as e:
            logger.warning(f"Ignoring persisted {category} filters: {e}")
            return False

        with self._lock:
            st = self._state(category)
            st.applied = criteria
            st.staged = copy.deepcopy(criteria)
            st.version += 1
        return True

    def reset_all(self) -> None:
        for category in CATEGORIES:
            self.clear(category)
