"""Employee gender."""
from __future__ import annotations

from enum import IntEnum

from routine.kernel.errors import InvalidArgumentError


class Gender(IntEnum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2

    @classmethod
    def parse(cls, value: str) -> "Gender":
        """Parse a request value by member name or numeric value.

        Names ignore case and surrounding whitespace; ``"1"`` parses as
        :attr:`MALE`.
        """
        token = value.strip()
        try:
            if token.isdigit():
                return cls(int(token))
            return cls[token.upper()]
        except (KeyError, ValueError) as exc:
            raise InvalidArgumentError(
                "gender",
                f"'{value}' is not a valid gender; expected one of "
                + ", ".join(m.name.title() for m in cls),
            ) from exc


__all__ = ["Gender"]
