from .logger import setup_logger
from .errors import CatalogError, register_exception_handlers, validation_messages

__all__ = ["setup_logger", "CatalogError", "register_exception_handlers", "validation_messages"]
