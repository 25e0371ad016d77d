"""Chain of Responsibility: support tickets escalated through three levels."""

from abc import ABC, abstractmethod

from src.pattern_lab.core.console import Narrator
from src.pattern_lab.patterns.base import PatternExample
from src.pattern_lab.patterns.registry import example_defn

BASIC_ISSUE = "Basic Issue"
INTERMEDIATE_ISSUE = "Intermediate Issue"
COMPLEX_ISSUE = "Complex Issue"


class SupportHandler(ABC):
    def __init__(self, narrator: Narrator):
        self._narrator = narrator
        self._next_handler: SupportHandler | None = None

    @property
    def next_handler(self) -> "SupportHandler | None":
        return self._next_handler

    def set_next(self, next_handler: "SupportHandler") -> "SupportHandler":
        """Link ``next_handler`` after this one and return it for chaining."""
        self._next_handler = next_handler
        return next_handler

    @abstractmethod
    def handle_request(self, request: str) -> None:
        ...


class Level1SupportHandler(SupportHandler):
    def handle_request(self, request: str) -> None:
        if request == BASIC_ISSUE:
            self._narrator.line("Level 1 Support: Resolved basic issue.")
        elif self._next_handler is not None:
            self._narrator.line("Level 1 Support: Passing to the next level...")
            self._next_handler.handle_request(request)


class Level2SupportHandler(SupportHandler):
    def handle_request(self, request: str) -> None:
        if request == INTERMEDIATE_ISSUE:
            self._narrator.line("Level 2 Support: Resolved intermediate issue.")
        elif self._next_handler is not None:
            self._narrator.line("Level 2 Support: Passing to the next level...")
            self._next_handler.handle_request(request)


class Level3SupportHandler(SupportHandler):
    def handle_request(self, request: str) -> None:
        if request == COMPLEX_ISSUE:
            self._narrator.line("Level 3 Support: Resolved complex issue.")
        elif self._next_handler is not None:
            self._narrator.line(
                "Level 3 Support: Issue could not be resolved at this level. Escalating..."
            )
            self._next_handler.handle_request(request)
        else:
            self._narrator.line("Level 3 Support: Issue cannot be resolved by the support team.")


class SupportTicketSystem:
    """Client that builds the chain and feeds tickets into its first link."""

    def __init__(self, narrator: Narrator):
        self._narrator = narrator
        self._first_handler = Level1SupportHandler(narrator)
        self._first_handler.set_next(Level2SupportHandler(narrator)).set_next(
            Level3SupportHandler(narrator)
        )

    @property
    def first_handler(self) -> SupportHandler:
        return self._first_handler

    def process_request(self, issue: str) -> None:
        self._narrator.line(f"Support Ticket: Processing request for '{issue}'")
        self._first_handler.handle_request(issue)


@example_defn(group="behavioral", order=50)
class ChainOfResponsibilityExample(PatternExample):
    name = "chain-of-responsibility"

    def run(self, narrator: Narrator) -> None:
        narrator.title("Chain of Responsibility Pattern Example:")

        support_system = SupportTicketSystem(narrator)
        scenarios = (
            ("Scenario 1: Handling Basic Issue", BASIC_ISSUE),
            ("Scenario 2: Handling Intermediate Issue", INTERMEDIATE_ISSUE),
            ("Scenario 3: Handling Complex Issue", COMPLEX_ISSUE),
            ("Scenario 4: Handling Unknown Issue", "Unknown Issue"),
        )
        for index, (title, issue) in enumerate(scenarios):
            if index:
                narrator.blank()
            narrator.line(title)
            support_system.process_request(issue)
        narrator.blank()
