"""Domain protocols (ports) implemented by infrastructure adapters."""

from type_more.domain.protocols.password_hashing_protocol import PasswordHashingProtocol

__all__ = ["PasswordHashingProtocol"]
