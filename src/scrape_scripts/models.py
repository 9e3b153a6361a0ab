"""Data models for the scrape_scripts pipeline stage."""

from dataclasses import dataclass, field

SUCCESS = "success"
FAILURE = "failure"


@dataclass
class WorkItem:
    """One validated input record."""
    title: str
    content_rating: str
    raw_line: str


@dataclass
class DocumentNode:
    """Node of a parsed document; owns its children in document order."""
    kind: str
    data: str = ""
    children: list["DocumentNode"] = field(default_factory=list)

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCUMENT = "document"
    OTHER = "other"

    @property
    def is_element(self) -> bool:
        return self.kind == self.ELEMENT


@dataclass
class ReportEvent:
    """Outcome of processing a single work item."""
    status: str
    title: str
    category: str = ""
    message: str = ""

    def format(self) -> str:
        if self.status == SUCCESS:
            return f"{SUCCESS}:\t{self.title}"
        if self.category:
            return f"{FAILURE}:\t{self.title}\t{self.category}:{self.message}"
        return f"{FAILURE}:\t{self.title}\t{self.message}"


@dataclass
class RunStats:
    dispatched: int = 0
    succeeded: int = 0
    failed: int = 0
