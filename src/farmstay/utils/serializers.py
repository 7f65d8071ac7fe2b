from farmstay.models.bookings import Booking
from farmstay.models.pricing import PricingRule, Quote
from farmstay.models.rooms import Room
from farmstay.models.settings import SiteSettings


def room_to_dict(room: Room) -> dict:
    return {
        "room_id": room.room_id,
        "name": room.name,
        "description": room.description,
        "base_price": float(room.base_price),
        "capacity": room.capacity,
        "amenities": room.amenities,
        "images": room.images,
    }


def booking_to_dict(booking: Booking) -> dict:
    return {
        "booking_id": booking.booking_id,
        "room_id": booking.room_id,
        "guest_name": booking.guest_name,
        "guest_phone": booking.guest_phone,
        "check_in": booking.check_in.isoformat(),
        "check_out": booking.check_out.isoformat(),
        "nights": booking.nights,
        "total_amount": float(booking.total_amount),
        "status": booking.status.value,
        "created_at": booking.created_at.isoformat(),
    }


def rule_to_dict(rule: PricingRule) -> dict:
    return {
        "rule_id": rule.rule_id,
        "name": rule.name,
        "start_date": rule.start_date.isoformat(),
        "end_date": rule.end_date.isoformat(),
        "multiplier": float(rule.multiplier),
    }


def quote_to_dict(quote: Quote) -> dict:
    return {
        "nights": quote.nights,
        "total_amount": float(quote.total_amount),
        "avg_per_night": float(quote.avg_per_night),
        "discount_amount": float(quote.discount_amount),
        "nightly_breakdown": [
            {
                "night": c.night.isoformat(),
                "multiplier": float(c.multiplier),
                "amount": float(c.amount),
            }
            for c in quote.nightly_breakdown
        ],
    }


def settings_to_dict(settings: SiteSettings) -> dict:
    d = settings.long_stay_discount
    return {
        "long_stay_discount": {
            "enabled": d.enabled,
            "min_nights": d.min_nights,
            "percentage": float(d.percentage),
        }
    }
