"""
Pydantic request models for order and withdrawal calls.

Each model validates the typed arguments of one family of endpoint methods
and renders them as query params in the order the exchange documents them.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bittrex_api.api.constants import ConditionType, OrderType, TimeInEffect
from bittrex_api.api.uri import ParamValue


class LimitOrderRequest(BaseModel):
    """v1.1 buy/sell limit order"""

    model_config = ConfigDict(frozen=True)

    market: str = Field(..., min_length=1, description="Market name, e.g. 'BTC-LTC'")
    quantity: Decimal = Field(..., gt=0, description="Amount to buy or sell")
    rate: Decimal = Field(..., gt=0, description="Limit price")

    def to_params(self) -> dict[str, ParamValue]:
        return {
            "market": self.market,
            "quantity": self.quantity,
            "rate": self.rate,
        }


class TradeOrderRequest(BaseModel):
    """v2.0 trade order with order type, time in effect and condition"""

    model_config = ConfigDict(frozen=True)

    market: str = Field(..., min_length=1, description="Market name, e.g. 'BTC-LTC'")
    order_type: OrderType = Field(..., description="LIMIT or MARKET")
    quantity: Decimal = Field(..., gt=0, description="Amount to buy or sell")
    rate: Decimal | None = Field(
        default=None,
        gt=0,
        description="Limit price, not needed for market orders",
    )
    time_in_effect: TimeInEffect | None = Field(default=None)
    condition_type: ConditionType = Field(default=ConditionType.NONE)
    target: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Trigger value used together with condition_type",
    )

    @model_validator(mode="after")
    def validate_rate(self) -> "TradeOrderRequest":
        """Limit orders need a rate"""
        if self.order_type is OrderType.LIMIT and self.rate is None:
            raise ValueError("rate is required for LIMIT orders")
        return self

    def to_params(self) -> dict[str, ParamValue]:
        return {
            "marketname": self.market,
            "ordertype": self.order_type,
            "quantity": self.quantity,
            "rate": self.rate,
            "timeInEffect": self.time_in_effect,
            "conditiontype": self.condition_type,
            "target": self.target,
        }


class WithdrawalRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency: str = Field(..., min_length=1, description="Currency code, e.g. 'BTC'")
    quantity: Decimal = Field(..., gt=0)
    address: str = Field(..., min_length=1, description="Destination address")

    def to_params(self) -> dict[str, ParamValue]:
        return {
            "currency": self.currency,
            "quantity": self.quantity,
            "address": self.address,
        }
