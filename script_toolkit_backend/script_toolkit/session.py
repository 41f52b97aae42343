"""
Explicit state for one generation submission.

A session is created when a request is submitted, mutated only by the
completion of its own generators, and finalized once all of them have
settled. Observers registered with ``subscribe`` are called after every
transition with the session itself.
"""
import logging
import uuid
from typing import Callable, Dict, List, Optional

from .models import AssetKind, AudioPrompt, GenerationRequest, GenerationResult, Payload, ResultStatus, SessionSnapshot

logger = logging.getLogger(__name__)

Observer = Callable[["GenerationSession"], None]


class GenerationSession:
    def __init__(self, request: GenerationRequest, session_id: Optional[str] = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.request = request
        self.is_loading = False
        self.error: Optional[str] = None
        self.results: Dict[AssetKind, GenerationResult] = {
            kind: GenerationResult(kind=kind) for kind in sorted(request.enabled_kinds, key=lambda k: k.value)
        }
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a function that removes it again."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            try:
                observer(self)
            except Exception as e:
                logger.error(f"Session observer failed for {self.session_id}: {e}")

    # Transitions

    def begin(self) -> None:
        self.is_loading = True
        self.error = None
        for kind in self.results:
            self.results[kind] = GenerationResult(kind=kind)
        self._notify()

    def record_success(self, kind: AssetKind, payload: Payload) -> None:
        slot = self.results[kind]
        if slot.status != ResultStatus.PENDING:
            logger.warning(f"Ignoring late {kind.value} result for session {self.session_id}")
            return
        self.results[kind] = GenerationResult(kind=kind, status=ResultStatus.SUCCEEDED, payload=payload)
        self._notify()

    def fail(self, message: str) -> None:
        """Poison the whole session: one error, no partial payloads."""
        self.error = message
        for kind in self.results:
            self.results[kind] = GenerationResult(kind=kind, status=ResultStatus.FAILED, error=message)
        self._notify()

    def finish(self) -> None:
        self.is_loading = False
        self._notify()

    # Views

    def payload(self, kind: AssetKind) -> Optional[Payload]:
        slot = self.results.get(kind)
        if slot is None or slot.status != ResultStatus.SUCCEEDED:
            return None
        return slot.payload

    @property
    def blueprint_result(self) -> str:
        return self.payload(AssetKind.BLUEPRINT) or ""

    @property
    def audio_prompt_result(self) -> Optional[AudioPrompt]:
        return self.payload(AssetKind.AUDIO_PROMPT)

    @property
    def storyboard_result(self) -> str:
        return self.payload(AssetKind.STORYBOARD) or ""

    @property
    def is_complete(self) -> bool:
        return not self.is_loading and all(r.status != ResultStatus.PENDING for r in self.results.values())

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.session_id,
            is_loading=self.is_loading,
            error=self.error,
            results={kind: result.model_copy() for kind, result in self.results.items()},
        )
