# vendor_api/schemas/base.py
from abc import ABC, abstractmethod
from typing import ClassVar, Dict

from pydantic import BaseModel, ConfigDict, PositiveInt


class OperationInput(BaseModel):
    """
    Input of one dispatcher operation.

    ``required_messages`` maps a wire field name to the message reported
    when that field is missing or invalid.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    required_messages: ClassVar[Dict[str, str]] = {}


class NoInput(OperationInput):
    pass


class ListingForm(OperationInput, ABC):
    """Form fields shared by every listing that is created with a price row."""

    user_id: PositiveInt

    @abstractmethod
    def listing_fields(self) -> dict:
        """Column values of the parent row, keyed by model attribute."""

    @abstractmethod
    def price_fields(self) -> dict:
        """Column values of the initial price row, keyed by model attribute."""
