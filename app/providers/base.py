from abc import ABC, abstractmethod
from typing import Optional

from app.models import FlightOffer, HotelOffer, Offer, OfferKind


class GenerationError(Exception):
    """Generation request failed; `status` is the HTTP status to report."""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message)
        self.status = status


class ConfigurationError(GenerationError):
    def __init__(self, message: str):
        super().__init__(message, status=500)


class UpstreamError(GenerationError):
    def __init__(self, status: int, body: str = ""):
        super().__init__(f"Generation service error: {status}", status=status)
        self.body = body


class GenerationProvider(ABC):
    @abstractmethod
    def generate(self, messages: list[dict]) -> str:
        """messages: ordered [{role, content}] with role in user|assistant|system."""
        ...


class FlightsProvider(ABC):
    @abstractmethod
    def flight_offers(self) -> list[FlightOffer]:
        ...


class HotelsProvider(ABC):
    @abstractmethod
    def hotel_offers(self) -> list[HotelOffer]:
        ...


class OfferCatalog(FlightsProvider, HotelsProvider):
    def find(self, kind: OfferKind, offer_id: str) -> Optional[Offer]:
        offers = self.flight_offers() if kind is OfferKind.FLIGHTS else self.hotel_offers()
        for offer in offers:
            if offer.id == offer_id:
                return offer
        return None
