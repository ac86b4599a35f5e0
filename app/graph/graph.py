import logging

from langgraph.graph import StateGraph, END

from app.graph.intent import classify
from app.graph.state import TurnState
from app.graph.transitions import apply_signal
from app.providers.base import GenerationError, GenerationProvider

logger = logging.getLogger(__name__)


# ---------------------------
# Utilities
# ---------------------------
def add_trace(state: TurnState, node: str, detail: dict):
    state.setdefault("trace", [])
    state["trace"].append({"node": node, "detail": detail})


# ---------------------------
# Nodes
# ---------------------------
def make_generate_node(provider: GenerationProvider):
    def node_generate(state: TurnState) -> TurnState:
        try:
            reply = provider.generate(state.get("messages") or [])
        except GenerationError as e:
            state["error"] = str(e)
            state["status"] = e.status
            add_trace(state, "generate_error", {"error": str(e), "status": e.status})
            return state
        except Exception as e:
            logger.exception("Unexpected generation failure")
            state["error"] = f"Failed to process request: {e}"
            state["status"] = 500
            add_trace(state, "generate_error", {"error": str(e), "status": 500})
            return state

        state["reply"] = str(reply or "")
        state["error"] = None
        add_trace(state, "generate_ok", {"chars": len(state["reply"])})
        return state

    return node_generate


def node_route(state: TurnState) -> str:
    return "failed" if state.get("error") else "classify"


def node_classify(state: TurnState) -> TurnState:
    signal = classify(state.get("reply", ""))
    state["signal"] = signal
    add_trace(state, "classify", {"signal": signal.value})
    return state


def node_transition(state: TurnState) -> TurnState:
    stage, option_set = apply_signal(state["stage"], state["option_set"], state["signal"])
    add_trace(state, "transition", {
        "from": state["stage"].value,
        "to": stage.value,
        "option_set": option_set.value,
    })
    state["stage"] = stage
    state["option_set"] = option_set
    return state


# ---------------------------
# Build graph
# ---------------------------
def build_graph(provider: GenerationProvider):
    """
    generate -> classify -> transition. A failed generation ends the turn
    without touching stage or option set.
    """
    g = StateGraph(TurnState)

    g.add_node("generate", make_generate_node(provider))
    g.add_node("classify", node_classify)
    g.add_node("transition", node_transition)

    g.set_entry_point("generate")

    g.add_conditional_edges("generate", node_route, {
        "classify": "classify",
        "failed": END,
    })

    g.add_edge("classify", "transition")
    g.add_edge("transition", END)

    return g.compile()
