"""
Router: GET /providers
Listuje providery funkcji w kolejności zapytań.
"""
from fastapi import APIRouter, Depends

from adapters.function_provider.registry import FunctionProviderRegistry
from api.dependencies import get_registry
from api.schemas import ProvidersResponse

router = APIRouter(prefix="/providers", tags=["providers"])


@router.get("", response_model=ProvidersResponse)
def list_providers(
    registry: FunctionProviderRegistry = Depends(get_registry),
) -> ProvidersResponse:
    return ProvidersResponse(providers=registry.describe())
