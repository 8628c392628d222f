"""GraphQL valuation service for equity cash flows."""
