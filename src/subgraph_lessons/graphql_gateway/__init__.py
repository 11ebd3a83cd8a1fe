"""GraphQL gateway exports."""

from .gateway_errors import GatewayError, GatewayRequestError, GraphQLResponseError
from .subgraph_gateway import SubgraphGateway

__all__ = [
    "GatewayError",
    "GatewayRequestError",
    "GraphQLResponseError",
    "SubgraphGateway",
]
