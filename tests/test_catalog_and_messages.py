from datetime import date

from app.llm import synthetic
from app.llm.persona import WELCOME, persona_prompt, welcome_message
from app.models import FlightOffer, HotelOffer, Language, OfferKind, Role, Turn
from app.providers.static_offers import StaticOfferCatalog
from app.transcript import Transcript
from app.utils.language import language_name, speech_locale


class TestCatalog:
    def test_offers_in_order(self):
        catalog = StaticOfferCatalog()
        assert [f.id for f in catalog.flight_offers()] == ["f1", "f2"]
        assert [h.id for h in catalog.hotel_offers()] == ["h1", "h2"]

    def test_find(self):
        catalog = StaticOfferCatalog()
        f1 = catalog.find(OfferKind.FLIGHTS, "f1")
        assert isinstance(f1, FlightOffer)
        assert f1.carrier == "IndiGo"
        assert catalog.find(OfferKind.HOTELS, "h2").name == "Riverside Retreat"

    def test_find_unknown_or_wrong_kind(self):
        catalog = StaticOfferCatalog()
        assert catalog.find(OfferKind.FLIGHTS, "f9") is None
        assert catalog.find(OfferKind.HOTELS, "f1") is None

    def test_returned_lists_are_copies(self):
        catalog = StaticOfferCatalog()
        catalog.flight_offers().clear()
        assert len(catalog.flight_offers()) == 2

    def test_hotel_to_dict(self):
        h1 = StaticOfferCatalog().find(OfferKind.HOTELS, "h1")
        assert h1.to_dict()["amenities"] == ["Free WiFi", "Breakfast", "Mountain View"]


class TestSyntheticMessages:
    def test_flight_selected(self):
        f1 = StaticOfferCatalog().find(OfferKind.FLIGHTS, "f1")
        text = synthetic.offer_selected(f1)
        assert text == "I'd like to book this flight: IndiGo from Delhi to Manali on 2025-05-15 at 06:30 for ₹4500"

    def test_hotel_selected(self):
        hotel = HotelOffer(id="h9", name="Snow Inn", location="Shimla", price=1500, rating=3.8)
        text = synthetic.offer_selected(hotel)
        assert text == "I'd like to book this hotel: Snow Inn in Shimla for ₹1500 per night with a rating of 3.8"

    def test_payment_completed(self):
        assert synthetic.payment_completed() == "I've completed the payment for my booking."

    def test_language_switched(self):
        assert synthetic.language_switched(Language.HI) == "Please respond in Hindi from now on."
        assert synthetic.language_switched(Language.EN) == "Please respond in English from now on."


class TestLanguage:
    def test_language_name(self):
        assert language_name("hi") == "Hindi"
        assert language_name("EN") == "English"
        assert language_name("") is None

    def test_toggle(self):
        assert Language.EN.toggled() is Language.HI
        assert Language.HI.toggled() is Language.EN

    def test_speech_locale(self):
        assert speech_locale(Language.EN) == "en-US"
        assert speech_locale(Language.HI) == "hi-IN"


class TestPersona:
    def test_prompt_carries_date(self):
        assert persona_prompt(date(2025, 5, 1)).endswith("Current date: 2025-05-01")

    def test_welcome_per_language(self):
        assert welcome_message(Language.EN).startswith("Hello!")
        assert welcome_message(Language.HI) == WELCOME[Language.HI]


class TestTranscript:
    def test_visible_turns_skip_system(self):
        t = Transcript()
        t.append(Turn("1", Role.ASSISTANT, "hi"))
        t.append(Turn("2", Role.SYSTEM, "internal"))
        t.append(Turn("3", Role.USER, "flights please"))

        assert [x.id for x in t.visible_turns()] == ["1", "3"]
        assert len(t) == 3

    def test_service_request_keeps_order_and_system_turns(self):
        t = Transcript()
        t.append(Turn("1", Role.USER, "a"))
        t.append(Turn("2", Role.SYSTEM, "b"))
        t.append(Turn("3", Role.ASSISTANT, "c"))

        assert t.as_service_request() == [
            {"role": "user", "content": "a"},
            {"role": "system", "content": "b"},
            {"role": "assistant", "content": "c"},
        ]
