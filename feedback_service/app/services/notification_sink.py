"""
Notification sink interface.

Sending is fire-and-forget for callers: a sink reports failure through the
returned DispatchResult instead of raising.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MailMessage:
    to: str
    subject: str
    body: str


@dataclass(frozen=True)
class DispatchResult:
    delivered: bool
    warning: Optional[str] = None

    @classmethod
    def sent(cls) -> "DispatchResult":
        return cls(delivered=True)

    @classmethod
    def failed(cls, warning: str) -> "DispatchResult":
        return cls(delivered=False, warning=warning)


class INotificationSink(ABC):
    """Outbound notification channel - application layer"""

    @abstractmethod
    async def send(self, message: MailMessage) -> DispatchResult:
        """Dispatch message; never raises for delivery problems"""
        pass
