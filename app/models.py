from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, Union


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class BookingStage(str, Enum):
    INITIAL = "initial"
    SEARCHING = "searching"
    SELECTING = "selecting"
    DETAILS = "details"
    PAYMENT = "payment"
    CONFIRMED = "confirmed"


class OptionSet(str, Enum):
    """Which structured widget is shown next to the chat."""
    NONE = "none"
    FLIGHTS = "flights"
    HOTELS = "hotels"
    PAYMENT = "payment"


class BookingSignal(str, Enum):
    FLIGHTS_OFFERED = "flights-offered"
    HOTELS_OFFERED = "hotels-offered"
    PAYMENT_REQUESTED = "payment-requested"
    BOOKING_CONFIRMABLE = "booking-confirmable"
    BOOKING_COMPLETED = "booking-completed"
    NONE = "none"


class OfferKind(str, Enum):
    FLIGHTS = "flights"
    HOTELS = "hotels"


class Language(str, Enum):
    EN = "en"   # primary
    HI = "hi"   # secondary

    def toggled(self) -> "Language":
        return Language.HI if self is Language.EN else Language.EN


@dataclass(frozen=True)
class Turn:
    id: str
    role: Role
    content: str

    def to_dict(self) -> dict:
        return {"id": self.id, "role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class FlightOffer:
    id: str
    carrier: str
    origin: str
    destination: str
    depart_date: str     # YYYY-MM-DD
    depart_time: str     # HH:MM
    arrive_time: str
    price: int           # INR
    duration: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class HotelOffer:
    id: str
    name: str
    location: str
    price: int           # INR per night
    rating: float        # 0-5
    amenities: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        d = asdict(self)
        d["amenities"] = list(self.amenities)
        return d


Offer = Union[FlightOffer, HotelOffer]


@dataclass
class SessionState:
    """
    Mutable per-session UI state. Only the Orchestrator writes to it.
    """
    stage: BookingStage = BookingStage.INITIAL
    option_set: OptionSet = OptionSet.NONE
    selected_offer_id: Optional[str] = None
    language: Language = Language.EN
    busy: bool = False
    error: Optional[str] = None
    draft: str = ""
    trace: list[dict] = field(default_factory=list)
