"""GraphQL schema: equity cash flow pricing and risk queries."""

from typing import Optional

import strawberry

from eqpricing_api.services import price_equity_cash_flow
from eqpricing_api.types import (
    EquityCashFlowInput,
    EquityMarketInput,
    EquityPricingResult,
    QuantoInput,
)


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return "0.1.0"

    @strawberry.field
    def price_equity_cash_flow(
        self,
        cash_flow: EquityCashFlowInput,
        market: EquityMarketInput,
        quanto: Optional[QuantoInput] = None,
        calculate_spot_delta: bool = False,
        spot_delta_bump_pct: float = 0.01,
        pv01_curve: Optional[str] = None,
        pv01_bump_bp: float = 1.0,
    ) -> EquityPricingResult:
        """Price an equity return cash flow, quanto-adjusted when `quanto` is given."""
        return price_equity_cash_flow(
            cash_flow=cash_flow,
            market=market,
            quanto=quanto,
            calculate_spot_delta=calculate_spot_delta,
            spot_delta_bump_pct=spot_delta_bump_pct,
            pv01_curve=pv01_curve,
            pv01_bump_bp=pv01_bump_bp,
        )


schema = strawberry.Schema(query=Query)
