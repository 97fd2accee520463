# core/state_manager.py
import logging
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

from core.config import SUBMIT_MODE

logger = logging.getLogger(__name__)

STATE_KEY = "app_state_dict"

class AppState:
    """
    A centralized class to manage the form's session state.

    The instance's __dict__ points at a dict stored in st.session_state, so
    attribute reads and writes persist across Streamlit reruns. Tests can pass
    any mutable mapping as the store instead.
    """
    def __init__(self, store: Optional[MutableMapping[str, Any]] = None):
        store = st.session_state if store is None else store
        if STATE_KEY not in store:
            store[STATE_KEY] = self._get_initial_state()
        self.__dict__ = store[STATE_KEY]

    def _get_initial_state(self) -> Dict[str, Any]:
        """Defines the initial state of the form."""
        return {
            "submit_mode": SUBMIT_MODE,
            "image": None,
            "questions": [],
            "in_flight": False,
            "submit_generation": 0,
            "pending_token": None,
            "last_result": None,
        }

    def begin_submit(self) -> int:
        """Starts a submit attempt and returns its generation token."""
        self.submit_generation += 1
        self.in_flight = True
        self.pending_token = self.submit_generation
        logger.info(f"Submit {self.submit_generation} started")
        return self.submit_generation

    def is_current(self, token: int) -> bool:
        return token == self.submit_generation

    def complete_submit(self, token: int, result) -> bool:
        """
        Applies an extraction result if it belongs to the latest submit.

        Results of superseded submits are dropped. A failed result leaves the
        current question list untouched.
        """
        if not self.is_current(token):
            logger.info(f"Ignoring stale result of submit {token} (latest is {self.submit_generation})")
            return False

        self.last_result = result
        if result.success:
            self.questions = list(result.questions)
        return True

    def end_submit(self, token: int):
        """Clears the busy flag once the latest submit has settled."""
        if self.pending_token == token:
            self.pending_token = None
        if self.is_current(token):
            self.in_flight = False

    def report(self, result):
        """Records feedback for an attempt that never reached the network."""
        self.last_result = result

    def reset(self):
        """Resets the entire form state to its initial values."""
        # Reset in place so the session keeps pointing at the same dict
        self.__dict__.clear()
        self.__dict__.update(self._get_initial_state())


def get_app_state() -> AppState:
    """Returns the state bound to the current Streamlit session."""
    return AppState()
