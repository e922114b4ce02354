"""Copywriting snippet models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CopywritingItem:
    id: int
    content: str
    length: int
    added_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "length": self.length,
            "addedAt": self.added_at,
        }


@dataclass
class CopywritingOutput:
    type: str
    updated: str
    update_time: str
    target_count: int
    converted_to_traditional: bool
    copywritings: list[CopywritingItem] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.copywritings)

    @property
    def completion_rate(self) -> str:
        if self.target_count <= 0:
            return "0.0%"
        return f"{self.total_count / self.target_count * 100:.1f}%"

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "updated": self.updated,
            "updateTime": self.update_time,
            "totalCount": self.total_count,
            "targetCount": self.target_count,
            "completionRate": self.completion_rate,
            "convertedToTraditional": self.converted_to_traditional,
            "copywritings": [c.to_dict() for c in self.copywritings],
        }


@dataclass(frozen=True)
class SourceResult:
    success: bool
    count: int
