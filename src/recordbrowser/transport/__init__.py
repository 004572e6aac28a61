from .models import ResultSet
from .protocol import TransportProtocol
from .adapter import SQLAlchemyTransport

__all__ = ["ResultSet", "TransportProtocol", "SQLAlchemyTransport"]
