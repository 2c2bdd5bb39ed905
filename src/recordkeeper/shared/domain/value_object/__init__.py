from .calendar_date import CalendarDate
from .quantity import MAX_QUANTITY, Quantity
from .record_name import RecordName

__all__ = ["CalendarDate", "Quantity", "MAX_QUANTITY", "RecordName"]
