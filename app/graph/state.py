from typing import TypedDict, Optional, Any

from app.models import BookingSignal, BookingStage, OptionSet


class TurnState(TypedDict, total=False):
    cycle: int

    # inputs, snapshotted under the orchestrator lock
    messages: list[dict[str, Any]]   # transcript as {role, content}
    stage: BookingStage
    option_set: OptionSet            # already cleared for the outbound message

    # outputs
    reply: str
    signal: BookingSignal
    error: Optional[str]
    status: Optional[int]
    trace: list[dict]
