from app.models import BookingSignal, BookingStage, OptionSet

# signal -> (next stage, next option set); None keeps the current option set
TRANSITIONS: dict[BookingSignal, tuple[BookingStage, OptionSet | None]] = {
    BookingSignal.FLIGHTS_OFFERED: (BookingStage.SELECTING, OptionSet.FLIGHTS),
    BookingSignal.HOTELS_OFFERED: (BookingStage.SELECTING, OptionSet.HOTELS),
    BookingSignal.PAYMENT_REQUESTED: (BookingStage.PAYMENT, OptionSet.PAYMENT),
    BookingSignal.BOOKING_CONFIRMABLE: (BookingStage.DETAILS, None),
    BookingSignal.BOOKING_COMPLETED: (BookingStage.CONFIRMED, OptionSet.NONE),
}


def apply_signal(
    stage: BookingStage,
    option_set: OptionSet,
    signal: BookingSignal,
) -> tuple[BookingStage, OptionSet]:
    """
    Signal-driven: the current stage is only consulted to keep `confirmed` terminal.
    """
    if stage is BookingStage.CONFIRMED:
        return stage, option_set

    nxt = TRANSITIONS.get(signal)
    if nxt is None:
        return stage, option_set

    next_stage, next_options = nxt
    return next_stage, option_set if next_options is None else next_options


def after_offer_selected(stage: BookingStage) -> tuple[BookingStage, OptionSet]:
    if stage is BookingStage.CONFIRMED:
        return stage, OptionSet.NONE
    return BookingStage.DETAILS, OptionSet.NONE


def after_payment() -> tuple[BookingStage, OptionSet]:
    return BookingStage.CONFIRMED, OptionSet.NONE
