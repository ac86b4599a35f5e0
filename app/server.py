import logging

from flask import Flask, request, jsonify

from app import config
from app.models import OfferKind
from app.orchestrator import Orchestrator
from app.providers.base import GenerationError
from app.providers.gemini import GeminiProvider

logger = logging.getLogger(__name__)

app = Flask(__name__)
provider = GeminiProvider()

# single in-process session; /session/restart replaces it
session = Orchestrator(provider)


def _session_reply(accepted: bool, **extra):
    body = session.render_state()
    body["accepted"] = accepted
    body.update(extra)
    return jsonify(body)


@app.get("/health")
def health():
    return jsonify({"status": "ok"})


@app.post("/api/chat")
def chat():
    """
    Stateless proxy to the generation service.
    Body: {"messages": [{"role": "user"|"assistant"|"system", "content": "..."}]}
    """
    body = request.get_json(silent=True) or {}
    messages = body.get("messages")
    if not isinstance(messages, list):
        return jsonify({"error": "messages must be a list"}), 400

    try:
        content = provider.generate(messages)
    except GenerationError as e:
        return jsonify({"error": str(e)}), e.status
    except Exception as e:
        logger.exception("Error in chat API")
        return jsonify({"error": f"Failed to process request: {e}"}), 500

    return jsonify({"role": "assistant", "content": content})


# ---------------------------
# Session (orchestrator) endpoints
# ---------------------------
@app.get("/session")
def session_state():
    return _session_reply(True)


@app.post("/session/messages")
def session_message():
    body = request.get_json(silent=True) or {}
    text = (body.get("message") or "").strip()
    if not text:
        return jsonify({"error": "message is required"}), 400
    return _session_reply(session.send(text))


@app.post("/session/offers/<kind>/<offer_id>")
def session_select_offer(kind: str, offer_id: str):
    try:
        kind = OfferKind(kind)
    except ValueError:
        return jsonify({"error": f"unknown offer kind: {kind}"}), 404
    return _session_reply(session.select_offer(kind, offer_id))


@app.post("/session/payment")
def session_payment():
    return _session_reply(session.complete_payment())


@app.post("/session/language")
def session_language():
    return _session_reply(session.switch_language())


@app.post("/session/stop")
def session_stop():
    return _session_reply(session.stop())


@app.post("/session/voice/start")
def session_voice_start():
    locale = session.start_listening()
    return _session_reply(locale is not None, locale=locale)


@app.post("/session/voice/result")
def session_voice_result():
    body = request.get_json(silent=True) or {}
    return _session_reply(session.voice_result(body.get("text")) is not None)


@app.post("/session/voice/end")
def session_voice_end():
    body = request.get_json(silent=True) or {}
    session.voice_ended(body.get("error"))
    return _session_reply(True)


@app.post("/session/restart")
def session_restart():
    global session
    session.stop()
    session = Orchestrator(provider)
    return _session_reply(True)


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    app.run(host=config.HOST, port=config.PORT, debug=True)
