import itertools
import logging
import threading
from typing import Any, Optional

from app.graph.graph import build_graph
from app.graph.state import TurnState
from app.graph.transitions import after_offer_selected, after_payment
from app.llm import synthetic
from app.llm.persona import welcome_message
from app.models import Language, OfferKind, OptionSet, Role, SessionState, Turn
from app.providers.base import GenerationProvider, OfferCatalog
from app.providers.static_offers import StaticOfferCatalog
from app.transcript import Transcript
from app.utils.language import speech_locale
from app.voice import CaptureError, VoiceCapture

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Owns one chat session: transcript, booking stage, active option set,
    selected offer and language.

    Every outbound message (typed, voice or synthetic) runs one turn cycle:
    append the user turn, hide the option set, ask the generation service,
    then append the reply and apply the signal it carries. At most one
    request is outstanding; outbound actions while busy are dropped.

    State is only mutated under `_lock`. The generation call itself runs
    outside the lock so `stop()` can clear the busy flag meanwhile; results
    of a stopped cycle are discarded.
    """

    def __init__(
        self,
        provider: GenerationProvider,
        catalog: Optional[OfferCatalog] = None,
        language: Language = Language.EN,
        voice: Optional[VoiceCapture] = None,
    ):
        self.catalog = catalog or StaticOfferCatalog()
        self.transcript = Transcript()
        self.state = SessionState(language=language)
        self.voice = voice or VoiceCapture()

        self._graph = build_graph(provider)
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._cycle = 0

        self._append(Role.ASSISTANT, welcome_message(language))

    # ---------------------------
    # Outbound actions
    # ---------------------------
    def send(self, text: str) -> bool:
        """Typed or voice-captured input. False when ignored."""
        with self._lock:
            request = self._begin(text)
        if request is None:
            return False
        return self._run(request)

    def select_offer(self, kind: OfferKind | str, offer_id: str) -> bool:
        with self._lock:
            if self._is_busy():
                return False
            kind = OfferKind(kind)
            offer = self.catalog.find(kind, offer_id)
            if offer is None:
                logger.warning("Ignoring selection of unknown %s offer %r", kind.value, offer_id)
                return False

            self.state.selected_offer_id = offer.id
            self.state.stage, self.state.option_set = after_offer_selected(self.state.stage)
            request = self._begin(synthetic.offer_selected(offer))

        return self._run(request)

    def complete_payment(self) -> bool:
        # no real settlement, the user just tells the assistant it's done
        with self._lock:
            if self._is_busy():
                return False
            self.state.stage, self.state.option_set = after_payment()
            request = self._begin(synthetic.payment_completed())

        return self._run(request)

    def switch_language(self) -> bool:
        with self._lock:
            if self._is_busy():
                return False
            self.state.language = self.state.language.toggled()
            request = self._begin(synthetic.language_switched(self.state.language))

        return self._run(request)

    def stop(self) -> bool:
        """
        Stop waiting for the in-flight reply. The HTTP call keeps running;
        whatever it returns is ignored.
        """
        with self._lock:
            if not self.state.busy:
                return False
            self.state.busy = False
            self._cycle += 1
            logger.info("Stopped waiting for cycle %s", self._cycle - 1)
            return True

    # ---------------------------
    # Voice capture
    # ---------------------------
    def start_listening(self) -> Optional[str]:
        """Returns the speech locale to capture with, or None if capture can't start."""
        with self._lock:
            if self.state.busy:
                return None
            try:
                started = self.voice.start()
            except CaptureError as e:
                logger.warning("Voice capture unavailable: %s", e)
                return None
            return speech_locale(self.state.language) if started else None

    def voice_result(self, text: Optional[str]) -> Optional[str]:
        """Captured speech lands in the input draft, exactly like typing."""
        with self._lock:
            captured = self.voice.result(text)
            if captured:
                self.state.draft = captured
            return captured

    def voice_ended(self, error: Optional[str] = None) -> None:
        with self._lock:
            self.voice.end(error)

    # ---------------------------
    # Render state
    # ---------------------------
    def render_state(self) -> dict[str, Any]:
        with self._lock:
            s = self.state
            if s.option_set is OptionSet.FLIGHTS:
                offers = [o.to_dict() for o in self.catalog.flight_offers()]
            elif s.option_set is OptionSet.HOTELS:
                offers = [o.to_dict() for o in self.catalog.hotel_offers()]
            else:
                offers = []

            return {
                "messages": [t.to_dict() for t in self.transcript.visible_turns()],
                "stage": s.stage.value,
                "option_set": s.option_set.value,
                "offers": offers,
                "selected": s.selected_offer_id,
                "language": s.language.value,
                "busy": s.busy,
                "listening": self.voice.listening,
                "draft": s.draft,
                "error": s.error,
                "banner": f"Error: {s.error}. Please try again." if s.error else None,
                "trace": list(s.trace),
            }

    # ---------------------------
    # Turn cycle internals
    # ---------------------------
    def _is_busy(self) -> bool:
        if self.state.busy:
            logger.info("Request in flight, dropping outbound action")
            return True
        return False

    def _append(self, role: Role, content: str) -> Turn:
        turn = Turn(id=str(next(self._ids)), role=role, content=content)
        self.transcript.append(turn)
        return turn

    def _begin(self, text: str) -> Optional[TurnState]:
        # caller holds the lock
        text = (text or "").strip()
        if not text or self._is_busy():
            return None

        self._append(Role.USER, text)
        self.state.option_set = OptionSet.NONE
        self.state.error = None
        self.state.draft = ""
        self.state.busy = True
        self._cycle += 1

        return {
            "cycle": self._cycle,
            "messages": self.transcript.as_service_request(),
            "stage": self.state.stage,
            "option_set": self.state.option_set,
            "trace": [],
        }

    def _run(self, request: TurnState) -> bool:
        try:
            out = self._graph.invoke(request)
        except Exception as e:
            logger.exception("Turn graph failed for cycle %s", request["cycle"])
            out = {"error": f"Failed to process request: {e}", "trace": request.get("trace", [])}
        return self._commit(request["cycle"], out)

    def _commit(self, cycle: int, out: dict) -> bool:
        with self._lock:
            if cycle != self._cycle or not self.state.busy:
                logger.info("Discarding stale result of cycle %s (current %s)", cycle, self._cycle)
                return False

            self.state.busy = False
            self.state.trace = out.get("trace", [])

            if out.get("error"):
                logger.warning("Turn %s failed: %s", cycle, out["error"])
                self.state.error = out["error"]
                return False

            self._append(Role.ASSISTANT, out.get("reply") or "")
            self.state.stage = out["stage"]
            self.state.option_set = out["option_set"]
            return True
