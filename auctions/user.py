"""User identities and their ``Kind|id|name`` text form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidUserError


@dataclass(frozen=True)
class UserId:
    """Opaque identifier of a user."""

    value: str

    def __str__(self) -> str:
        return self.value


class User:
    """A user of the auction site: a buyer or seller, or support staff."""

    id: UserId

    @classmethod
    def parse(cls, text: str) -> "User":
        """Parse ``BuyerOrSeller|id[|name]`` or ``Support|id``."""
        parts = text.split("|")
        kind = parts[0]
        if not kind:
            raise InvalidUserError("Invalid user string format")
        if kind == "BuyerOrSeller":
            if len(parts) < 2:
                raise InvalidUserError("Missing BuyerOrSeller ID")
            name = parts[2] if len(parts) > 2 else None
            return BuyerOrSeller(UserId(parts[1]), name)
        if kind == "Support":
            if len(parts) < 2:
                raise InvalidUserError("Missing Support ID")
            return Support(UserId(parts[1]))
        raise InvalidUserError(f"Unknown user type: {kind}")


@dataclass(frozen=True)
class BuyerOrSeller(User):
    id: UserId
    name: Optional[str] = None

    def __str__(self) -> str:
        if self.name is not None:
            return f"BuyerOrSeller|{self.id}|{self.name}"
        return f"BuyerOrSeller|{self.id}"


@dataclass(frozen=True)
class Support(User):
    id: UserId

    def __str__(self) -> str:
        return f"Support|{self.id}"