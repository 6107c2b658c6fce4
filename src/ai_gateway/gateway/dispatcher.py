import time
from types import MappingProxyType
from typing import Mapping, Optional

from ai_gateway.adapters.base import AdapterResponse, ProviderAdapter
from ai_gateway.core.models.catalog import ModelCatalog
from ai_gateway.core.models.modelspec import ModelDefinition, Provider
from ai_gateway.core.pricing.cost_estimate import CostBreakdown, format_usd
from ai_gateway.core.pricing.token_estimator import estimate_cost_usd
from ai_gateway.core.pricing.token_pricing_policy import compute_cost_usd
from ai_gateway.errors import GatewayError, ModelNotFoundError, ProviderError, UnknownModelError
from ai_gateway.logging import get_logger
from ai_gateway.util.cancellation import CancellationToken
from .schema import GenerationMode, GenerationRequest, GenerationResult


class GatewayDispatcher:
    """
    Single entry point for generation requests.

    Resolves the model in the catalog, hands the prompt to the adapter of the
    model's provider and prices the answer. Failures surface as GatewayError
    subclasses tagged with the requested model id; nothing is retried,
    cached or swapped for a fallback here.
    """

    def __init__(self, catalog: ModelCatalog, adapters: Mapping[Provider, ProviderAdapter]):
        missing = catalog.providers() - set(adapters)
        if missing:
            names = ", ".join(sorted(p.value for p in missing))
            raise RuntimeError(f"No adapter registered for catalog provider(s): {names}")
        self._catalog = catalog
        self._adapters = MappingProxyType(dict(adapters))

    @property
    def catalog(self) -> ModelCatalog:
        return self._catalog

    def _resolve_model(self, model_id: str) -> ModelDefinition:
        try:
            return self._catalog.get_model_by_id(model_id)
        except ModelNotFoundError:
            error = UnknownModelError(f"Model not found: {model_id}", model_id=model_id)
            get_logger().gateway_error(error, f"Unknown model requested: {model_id}")
            raise error from None

    def _adapter_for(self, model: ModelDefinition) -> ProviderAdapter:
        adapter = self._adapters.get(model.provider)
        if adapter is None:
            # Catalog and adapter map are checked against each other in __init__
            raise RuntimeError(f"No adapter for provider {model.provider.value} (model {model.id})")
        return adapter

    def dispatch(self, request: GenerationRequest, cancellation: Optional[CancellationToken] = None) -> GenerationResult:
        """
        Run one generation request.

        Raises:
            UnknownModelError: model_id is not in the catalog; no adapter is called.
            ProviderError: the provider call failed or the caller cancelled first.
            ParseError: JSON mode was requested and the answer is not valid JSON.
        """
        model = self._resolve_model(request.model_id)
        adapter = self._adapter_for(model)

        if cancellation is not None and cancellation.is_cancelled:
            get_logger().warning("Dispatch cancelled before provider call", model_id=model.id)
            raise ProviderError("Operation was cancelled", model_id=model.id)

        start_time = time.perf_counter()
        try:
            if request.mode is GenerationMode.JSON:
                response: AdapterResponse = adapter.generate_json(request.prompt, model)
            else:
                response = adapter.generate_text(request.prompt, model)
        except GatewayError as e:
            e.with_model(model.id)
            raise
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        cost_usd = compute_cost_usd(response.usage, model)
        get_logger().debug(
            f"{adapter.name} call completed in {elapsed_ms:.0f}ms",
            model_id=model.id,
            mode=request.mode.value,
            prompt_tokens=response.usage.prompt_tokens,
            completion_tokens=response.usage.completion_tokens,
            cost=format_usd(cost_usd),
        )

        return GenerationResult(
            payload=response.result,
            usage=response.usage,
            cost_usd=cost_usd,
            model_id=model.id,
            provider=model.provider,
            latency_ms=elapsed_ms,
        )

    def generate_text(self, prompt: str, model_id: Optional[str] = None) -> GenerationResult:
        return self.dispatch(GenerationRequest(prompt, model_id or self._catalog.default_model_id, GenerationMode.TEXT))

    def generate_json(self, prompt: str, model_id: Optional[str] = None) -> GenerationResult:
        return self.dispatch(GenerationRequest(prompt, model_id or self._catalog.default_model_id, GenerationMode.JSON))

    def estimate(self, request: GenerationRequest, expected_output_tokens: Optional[int] = None) -> CostBreakdown:
        """Pre-call cost estimate. Resolves the model like dispatch() but never calls a provider."""
        model = self._resolve_model(request.model_id)
        return estimate_cost_usd(request.prompt, model, expected_output_tokens)
