# errors.py
"""
Domain exceptions raised by the service layer.

Routers never catch these; ``main.py`` maps them onto HTTP responses.
Lookups that cross owner boundaries raise ``NotFoundError`` rather than a
permission error so callers cannot probe for other owners' records.
"""


class PortfolioError(Exception):
     """Base class for domain errors."""

     def __init__(self, message: str):
          super().__init__(message)
          self.message = message


class NotFoundError(PortfolioError):
     """Referenced entity is absent or not owned by the caller."""

     def __init__(self, entity: str, entity_id: int):
          super().__init__(f"{entity} with ID {entity_id} not found")
          self.entity = entity
          self.entity_id = entity_id


class InvalidStateError(PortfolioError):
     """Operation refused because of the entity's current state."""
