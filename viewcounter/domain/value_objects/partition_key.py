"""PartitionKey value object — immutable (host, path) pair identifying one counter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PartitionKey:
    host: str
    path: str

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("PartitionKey requires a non-empty host")
        if not self.path.startswith("/"):
            raise ValueError(f"PartitionKey path must start with '/': {self.path!r}")

    def __str__(self) -> str:
        return f"{self.host}{self.path}"
