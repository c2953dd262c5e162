from eventdesk.api.system import BookingSystem, parse_id

__all__ = ["BookingSystem", "parse_id"]
