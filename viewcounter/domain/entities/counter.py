"""Counter entity — the view count owned by one partition actor."""

from dataclasses import dataclass

from viewcounter.domain.value_objects.partition_key import PartitionKey


@dataclass(frozen=True)
class Counter:
    key: PartitionKey
    views: int = 0

    def __post_init__(self) -> None:
        if self.views < 0:
            raise ValueError(f"Counter {self.key} cannot hold a negative value ({self.views})")

    def incremented(self) -> "Counter":
        return Counter(key=self.key, views=self.views + 1)
