"""JSON API for the poker hand evaluator.

Endpoints:
- POST /api/classify   {"hand": "Ah Kh Qh Jh Th"}        classify and remember
- POST /api/compare    {"first": "...", "second": "..."} compare two hands
                       {"second": "..."}                 compare with the remembered hand
- POST /api/clear                                        forget the remembered hand
- GET  /api/deal?hands=2&seed=42                         deal and rank random hands
- GET  /api/state                                        remembered hand, if any

Each browser gets its own session (cookie), holding the remembered hand.
"""

import logging
import os
import threading
import time
import uuid
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from pydantic import BaseModel

from poker_hands.engine import Deck, deal_hands
from poker_hands.errors import PokerError
from poker_hands.rules import Hand, best_hand, compare_hands, describe_outcome, format_cards, parse_hand
from poker_hands.session import EvaluatorSession
from poker_hands.utils.seeding import make_rng

logger = logging.getLogger(__name__)

# ==============================================================================
# Serialization
# ==============================================================================

def hand_to_dict(hand: Hand) -> dict:
    return {
        "cards": [str(c) for c in hand.cards],
        "notation": format_cards(hand.cards),
        "category": hand.category,
        "rank": int(hand.hand_type),
        "key": list(hand.key),
    }


# ==============================================================================
# Web Server
# ==============================================================================

app = FastAPI(title="Poker Hands")

SESSION_TTL_SECONDS = int(os.getenv("POKER_HANDS_SESSION_TTL", "3600"))
SESSION_CLEANUP_INTERVAL = int(os.getenv("POKER_HANDS_SESSION_CLEANUP", "60"))
COOKIE_SECURE = os.getenv("POKER_HANDS_SECURE_COOKIE", "").lower() in ("1", "true", "yes")
MAX_DEAL_HANDS = 10
_last_cleanup = 0.0

sessions: Dict[str, EvaluatorSession] = {}
sessions_lock = threading.Lock()


def _prune_sessions(now: float, keep_sid: Optional[str] = None) -> None:
    global _last_cleanup
    if SESSION_TTL_SECONDS <= 0:
        return
    if now - _last_cleanup < SESSION_CLEANUP_INTERVAL:
        return
    _last_cleanup = now
    expired = [
        sid
        for sid, sess in sessions.items()
        if sid != keep_sid and now - sess.last_access > SESSION_TTL_SECONDS
    ]
    for sid in expired:
        del sessions[sid]
    if expired:
        logger.info("Pruned %d idle sessions", len(expired))


def _get_session(request: Request) -> EvaluatorSession:
    sid = request.state.session_id
    with sessions_lock:
        return sessions[sid]


@app.middleware("http")
async def session_middleware(request: Request, call_next):
    sid = request.cookies.get("poker_hands_session")
    new = False
    now = time.time()
    with sessions_lock:
        if not sid or sid not in sessions:
            sid = uuid.uuid4().hex
            sessions[sid] = EvaluatorSession()
            new = True
        sessions[sid].touch()
        _prune_sessions(now, keep_sid=sid)
    request.state.session_id = sid
    response = await call_next(request)
    if new:
        max_age = SESSION_TTL_SECONDS if SESSION_TTL_SECONDS > 0 else None
        response.set_cookie(
            "poker_hands_session",
            sid,
            httponly=True,
            samesite="lax",
            secure=COOKIE_SECURE,
            max_age=max_age,
        )
    return response


class ClassifyRequest(BaseModel):
    hand: str


class CompareRequest(BaseModel):
    first: Optional[str] = None  # Defaults to the remembered hand
    second: str


@app.get("/api/state")
def api_state(request: Request):
    session = _get_session(request)
    with session.lock:
        last = session.last_hand
    return {"last_hand": hand_to_dict(last) if last else None}


@app.post("/api/classify")
def api_classify(req: ClassifyRequest, request: Request):
    session = _get_session(request)
    with session.lock:
        try:
            hand = session.submit(req.hand)
        except PokerError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    return hand_to_dict(hand)


@app.post("/api/compare")
def api_compare(req: CompareRequest, request: Request):
    session = _get_session(request)
    with session.lock:
        try:
            if req.first is None:
                reply = session.compare(req.second)
                first, second, outcome = reply.previous, reply.hand, reply.outcome
            else:
                first = parse_hand(req.first)
                second = parse_hand(req.second)
                outcome = describe_outcome(compare_hands(first, second))
        except PokerError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    return {"result": outcome, "first": hand_to_dict(first), "second": hand_to_dict(second)}


@app.post("/api/clear")
def api_clear(request: Request):
    session = _get_session(request)
    with session.lock:
        session.clear()
    return {"status": "cleared"}


@app.get("/api/deal")
def api_deal(
    hands: int = Query(2, ge=1, le=MAX_DEAL_HANDS),
    seed: Optional[int] = Query(None, ge=0),
):
    # One deck per request; decks are never shared
    deck = Deck.standard().shuffle(make_rng(seed))
    try:
        dealt: List[Hand] = deal_hands(deck, hands)
    except PokerError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {
        "hands": [hand_to_dict(h) for h in dealt],
        "winners": best_hand(dealt),
        "remaining": len(deck),
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    host = os.getenv("POKER_HANDS_HOST", "127.0.0.1")
    port = int(os.getenv("POKER_HANDS_PORT", "8000"))
    logger.info("Starting server at http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
