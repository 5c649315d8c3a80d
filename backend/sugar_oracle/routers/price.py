from fastapi import APIRouter, Depends, HTTPException, Request, WebSocket, WebSocketDisconnect
from pydantic import BaseModel
import asyncio
import logging

from sugar_oracle.services.clock import ClockUnavailableError
from sugar_oracle.services.waveform_oracle import WaveformOracle

logger = logging.getLogger(__name__)

router = APIRouter(tags=["price"])

class PriceResponse(BaseModel):
    price: str
    ts: int

class OracleStateResponse(BaseModel):
    starting_time: int
    now: int
    elapsed: int
    phase: int
    segment: str
    price: str

def get_oracle(request: Request) -> WaveformOracle:
    return request.app.state.oracle

def _quote(oracle: WaveformOracle) -> dict:
    now = oracle.now()
    return {"price": str(oracle.price_at(now)), "ts": now}

@router.get("/price", response_model=PriceResponse)
def get_price(oracle: WaveformOracle = Depends(get_oracle)):
    try:
        return _quote(oracle)
    except ClockUnavailableError as e:
        logger.error("Price query failed: %s", e)
        raise HTTPException(status_code=503, detail="time source unavailable")

@router.get("/price/state", response_model=OracleStateResponse)
def get_state(oracle: WaveformOracle = Depends(get_oracle)):
    try:
        state = oracle.describe()
    except ClockUnavailableError as e:
        logger.error("State query failed: %s", e)
        raise HTTPException(status_code=503, detail="time source unavailable")
    return OracleStateResponse(**{**state, "price": str(state["price"])})

@router.websocket("/ws/price")
async def ws_price(ws: WebSocket):
    await ws.accept()
    oracle: WaveformOracle = ws.app.state.oracle
    interval = ws.app.state.settings.stream_interval_seconds
    loop = asyncio.get_running_loop()
    try:
        while True:
            await ws.send_json(_quote(oracle))
            deadline = loop.time() + interval
            # inbound frames are ignored; only a disconnect ends the wait early
            while True:
                remaining = deadline - loop.time()
                if remaining <= 0:
                    break
                try:
                    message = await asyncio.wait_for(ws.receive(), timeout=remaining)
                except asyncio.TimeoutError:
                    break
                if message["type"] == "websocket.disconnect":
                    return
    except WebSocketDisconnect:
        return
    except ClockUnavailableError as e:
        logger.error("Price stream stopped: %s", e)
        await ws.close(code=1011)
