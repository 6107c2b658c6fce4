from ai_gateway.gateway.schema import GenerationMode, GenerationRequest, GenerationResult
from ai_gateway.gateway.dispatcher import GatewayDispatcher

__all__ = ["GatewayDispatcher", "GenerationMode", "GenerationRequest", "GenerationResult"]
