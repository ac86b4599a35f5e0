"""
User-role messages standing in for UI actions.

The generation service only ever sees transcript text, so clicking an offer,
paying or switching language is re-expressed as something the user "said".
"""
from app.models import FlightOffer, HotelOffer, Language, Offer
from app.utils.language import language_name


def describe_offer(offer: Offer) -> str:
    if isinstance(offer, FlightOffer):
        return (
            f"{offer.carrier} from {offer.origin} to {offer.destination} "
            f"on {offer.depart_date} at {offer.depart_time} for ₹{offer.price}"
        )
    if isinstance(offer, HotelOffer):
        return f"{offer.name} in {offer.location} for ₹{offer.price} per night with a rating of {offer.rating}"
    raise TypeError(f"Unsupported offer type: {type(offer).__name__}")


def offer_selected(offer: Offer) -> str:
    noun = "flight" if isinstance(offer, FlightOffer) else "hotel"
    return f"I'd like to book this {noun}: {describe_offer(offer)}"


def payment_completed() -> str:
    return "I've completed the payment for my booking."


def language_switched(language: Language) -> str:
    name = language_name(language.value) or language.value
    return f"Please respond in {name} from now on."
