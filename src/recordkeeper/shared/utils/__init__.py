from .logger import get_logger
from .validators import reject_blank

__all__ = ["get_logger", "reject_blank"]
