import pytest

from app.graph.intent import classify
from app.models import BookingSignal


class TestClassify:
    @pytest.mark.parametrize("text, expected", [
        ("Here are the available flights for your trip.", BookingSignal.FLIGHTS_OFFERED),
        ("Which AIR INDIA option works for you?", BookingSignal.FLIGHTS_OFFERED),
        ("I found a few hotel options in Manali.", BookingSignal.HOTELS_OFFERED),
        ("Where would you like to stay? Choose one below.", BookingSignal.HOTELS_OFFERED),
        ("Please proceed to payment.", BookingSignal.PAYMENT_REQUESTED),
        ("You can pay by credit card or UPI.", BookingSignal.PAYMENT_REQUESTED),
        ("Shall I confirm the reservation?", BookingSignal.BOOKING_CONFIRMABLE),
        ("Please confirm and I will book it.", BookingSignal.BOOKING_CONFIRMABLE),
        ("Your booking was a success!", BookingSignal.BOOKING_COMPLETED),
        ("Your reference number is ABC123.", BookingSignal.BOOKING_COMPLETED),
        ("Where are you travelling to?", BookingSignal.NONE),
    ])
    def test_rule_table(self, text, expected):
        assert classify(text) is expected

    def test_flight_rule_wins_over_completion(self):
        text = "Your previous trip is confirmed. Here are new flight options."
        assert classify(text) is BookingSignal.FLIGHTS_OFFERED

    def test_flight_word_alone_is_not_an_offer(self):
        assert classify("Tell me more about your flight.") is BookingSignal.NONE

    def test_hotel_before_payment(self):
        assert classify("Choose a hotel option, then pay.") is BookingSignal.HOTELS_OFFERED

    def test_payment_before_confirmation(self):
        # "confirm" + "book" also present, payment rule is higher
        assert classify("Confirm your booking and proceed to payment.") is BookingSignal.PAYMENT_REQUESTED

    def test_confirmed_booking_hits_confirmable_first(self):
        # "confirmed" contains "confirm" and "booking" contains "book"
        assert classify("Your booking is confirmed.") is BookingSignal.BOOKING_CONFIRMABLE

    def test_substring_matching(self):
        # "air" inside "chair", "available" makes it an offer
        assert classify("Is a wheelchair available?") is BookingSignal.FLIGHTS_OFFERED

    @pytest.mark.parametrize("text", ["", None, "   "])
    def test_empty_input(self, text):
        assert classify(text) is BookingSignal.NONE

    def test_deterministic(self):
        text = "Here are some hotel options with availability."
        assert classify(text) is classify(text)
