from app.models import FlightOffer, HotelOffer
from .base import OfferCatalog

FLIGHT_OFFERS = (
    FlightOffer(
        id="f1",
        carrier="IndiGo",
        origin="Delhi",
        destination="Manali",
        depart_date="2025-05-15",
        depart_time="06:30",
        arrive_time="08:00",
        price=4500,
        duration="1h 30m",
    ),
    FlightOffer(
        id="f2",
        carrier="Air India",
        origin="Delhi",
        destination="Manali",
        depart_date="2025-05-15",
        depart_time="10:15",
        arrive_time="11:45",
        price=5200,
        duration="1h 30m",
    ),
)

HOTEL_OFFERS = (
    HotelOffer(
        id="h1",
        name="Mountain View Resort",
        location="Manali",
        price=2800,
        rating=4.5,
        amenities=("Free WiFi", "Breakfast", "Mountain View"),
    ),
    HotelOffer(
        id="h2",
        name="Riverside Retreat",
        location="Manali",
        price=1950,
        rating=4.2,
        amenities=("Free WiFi", "Restaurant", "River View"),
    ),
)


class StaticOfferCatalog(OfferCatalog):
    """Fixed demo inventory, same for every session."""

    def __init__(self, flights=FLIGHT_OFFERS, hotels=HOTEL_OFFERS):
        self._flights = tuple(flights)
        self._hotels = tuple(hotels)

    def flight_offers(self) -> list[FlightOffer]:
        return list(self._flights)

    def hotel_offers(self) -> list[HotelOffer]:
        return list(self._hotels)
