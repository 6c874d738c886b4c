"""Reference data routes."""

from fastapi import APIRouter, Depends

from src.api.deps import get_settings
from src.api.schemas import TransferTaxRateResponse
from src.config import Settings

router = APIRouter(prefix="/api/v1/reference", tags=["reference"])


@router.get("/transfer-tax", response_model=list[TransferTaxRateResponse])
def transfer_tax_rates(settings: Settings = Depends(get_settings)):
    """Grunderwerbsteuer by Bundesland, lowest first."""
    rates = sorted(settings.transfer_tax_by_state.items(), key=lambda kv: (kv[1], kv[0]))
    return [TransferTaxRateResponse(state=state, rate=rate) for state, rate in rates]
