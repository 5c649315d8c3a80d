from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from sugar_oracle.routers.price import get_oracle
from sugar_oracle.services.candy_bag import quote_candies
from sugar_oracle.services.clock import ClockUnavailableError
from sugar_oracle.services.waveform_oracle import WaveformOracle

router = APIRouter(tags=["candy"])

class CandyQuoteRequest(BaseModel):
    tokens: int = Field(..., ge=0, description="GC tokens paid into the machine")
    member_card: bool = Field(False, description="Holder of a GC member card (50% off)")

class CandyQuoteResponse(BaseModel):
    tokens: int
    member_card: bool
    price: str
    candies: int

@router.post("/candy/quote", response_model=CandyQuoteResponse)
def quote(req: CandyQuoteRequest, oracle: WaveformOracle = Depends(get_oracle)):
    try:
        price = oracle.get_price()
    except ClockUnavailableError:
        raise HTTPException(status_code=503, detail="time source unavailable")
    try:
        candies = quote_candies(req.tokens, price, req.member_card)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CandyQuoteResponse(tokens=req.tokens, member_card=req.member_card, price=str(price), candies=candies)
