"""FastAPI app with Strawberry GraphQL."""

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from eqpricing.config import get_config
from eqpricing.logging_config import configure_logging

from eqpricing_api.schema import schema

configure_logging()

app = FastAPI(title=get_config().api_title, version="0.1.0")
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/health")
def health() -> dict[str, str]:
    """Health check for load balancers and Docker."""
    return {"status": "ok"}
