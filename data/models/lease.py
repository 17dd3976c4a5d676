import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class LeaseId:
    value: uuid.UUID

    @staticmethod
    def parse(raw: "str | uuid.UUID | LeaseId") -> "LeaseId":
        if isinstance(raw, LeaseId):
            return raw
        if isinstance(raw, uuid.UUID):
            return LeaseId(raw)
        try:
            return LeaseId(uuid.UUID(str(raw)))
        except ValueError as e:
            raise ValueError(f"invalid lease id: {raw!r}") from e

    def __str__(self) -> str:
        return str(self.value)
