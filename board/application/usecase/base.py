"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One externally visible operation: request model in, response model out."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the operation."""
