from app.models import BookingSignal


OFFER_WORDS = ("option", "available", "choose")

# Evaluated top to bottom, first match wins. Order matters:
# "confirmed flight options" must stay flights-offered.
RULES: list[tuple[BookingSignal, tuple[tuple[str, ...], ...]]] = [
    (BookingSignal.FLIGHTS_OFFERED, (("flight", "air"), OFFER_WORDS)),
    (BookingSignal.HOTELS_OFFERED, (("hotel", "stay", "accommodation"), OFFER_WORDS)),
    (BookingSignal.PAYMENT_REQUESTED, (("payment", "pay", "credit card", "proceed to"),)),
    (BookingSignal.BOOKING_CONFIRMABLE, (("confirm",), ("book", "reservation"))),
    (BookingSignal.BOOKING_COMPLETED, (("success", "confirmed", "reference"),)),
]


def _matches(text: str, groups: tuple[tuple[str, ...], ...]) -> bool:
    # every group must hit; within a group any word is enough
    return all(any(w in text for w in words) for words in groups)


def classify(utterance: str) -> BookingSignal:
    """
    Map an assistant reply to the booking signal it implies.
    Plain substring matching, so "pay" also hits "payment" and "air" hits "chair".
    """
    t = (utterance or "").lower()
    if not t:
        return BookingSignal.NONE

    for signal, groups in RULES:
        if _matches(t, groups):
            return signal

    return BookingSignal.NONE
