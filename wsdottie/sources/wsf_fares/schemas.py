"""Models for the WSF Fares API."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from wsdottie.endpoints.types import WsdotInput, WsdotModel


class TripDateInput(WsdotInput):
    tripDate: date = Field(description="Trip date; must fall within the valid date range.")


class TerminalMatesInput(TripDateInput):
    terminalID: int


class TerminalComboInput(TripDateInput):
    departingTerminalID: int
    arrivingTerminalID: int


class FareLineItemsInput(TerminalComboInput):
    roundTrip: bool = Field(description="True for round trip fares, False for one-way.")


class FareTotalsInput(FareLineItemsInput):
    fareLineItemIDs: list[int] = Field(description="Line items to total.")
    quantities: list[int] = Field(description="Quantity per line item, each >= 0.")


class ValidDateRange(WsdotModel):
    DateFrom: datetime
    DateThru: datetime


class FaresTerminal(WsdotModel):
    TerminalID: int
    Description: str


class TerminalCombo(WsdotModel):
    DepartingDescription: Optional[str] = None
    ArrivingDescription: Optional[str] = None
    CollectionDescription: Optional[str] = None


class TerminalComboVerbose(TerminalCombo):
    DepartingTerminalID: int
    ArrivingTerminalID: int


class LineItem(WsdotModel):
    FareLineItemID: int
    FareLineItem: Optional[str] = None
    Category: Optional[str] = None
    DirectionIndependent: Optional[bool] = None
    Amount: float = Field(description="Cost of the fare in dollars.")


class LineItemXref(WsdotModel):
    TerminalComboIndex: int
    LineItemIndex: int
    RoundTripLineItemIndex: int


# Field below shares the model name
TerminalComboVerboseList = list[TerminalComboVerbose]


class LineItemVerbose(WsdotModel):
    """Every fare for a trip date, indexed by terminal combination."""

    TerminalComboVerbose: Optional[TerminalComboVerboseList] = None
    LineItemLookup: Optional[list[LineItemXref]] = None
    LineItems: Optional[list[list[LineItem]]] = None
    RoundTripLineItems: Optional[list[list[LineItem]]] = None


class FareTotal(WsdotModel):
    TotalType: int = Field(description="1 = Depart, 2 = Return, 3 = Either, 4 = Total.")
    Description: Optional[str] = None
    BriefDescription: Optional[str] = None
    Amount: float
