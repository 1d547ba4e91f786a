from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from game_server.card_utils.reference_lists import ATTRIBUTES, RACES
from game_server.controller import RoundRegistry
from game_server.errors import GameError
from game_server.server_classes import StartRoundRequest, GuessRequest
from game_server.utils.card_api import CardLookup, YgoProDeckClient

#logging stuff
from server_logs.loggers import server_logger
from server_logs.endpoints import router as logs_router
from server_logs.middleware import RequestLoggingMiddleware

app = FastAPI(title="Monster Guess")
app.include_router(logs_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware, logger=server_logger)

rounds = RoundRegistry()
_card_lookup = None


def get_card_lookup() -> CardLookup:
    global _card_lookup
    if _card_lookup is None:
        _card_lookup = YgoProDeckClient()
    return _card_lookup


@app.exception_handler(GameError)
async def game_error_handler(request: Request, exc: GameError):
    server_logger.warning(
        "game_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        status=exc.status_code,
        error=str(exc)
    )
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.get("/")
async def read_root():
    return {"game": "Monster Guess", "rounds_active": len(rounds)}


@app.get("/reference_lists")
async def reference_lists():
    """Attribute and race lists in random order, for display."""
    return {"attributes": ATTRIBUTES.shuffled(), "races": RACES.shuffled()}


@app.post("/round/start")
async def start_round(req: StartRoundRequest, lookup: CardLookup = Depends(get_card_lookup)):
    controller = rounds.create(lookup)
    try:
        state = await run_in_threadpool(controller.start, req.difficulty)
    except GameError:
        rounds.discard(controller.round_id)
        raise

    return JSONResponse(status_code=201, content={
        "round_id": state.round_id,
        "status": state.status.value,
        "difficulty": state.difficulty,
        "hint_count": state.hint_count,
        "attributes": ATTRIBUTES.shuffled(),
        "races": RACES.shuffled(),
    })


@app.post("/round/guess")
async def submit_guess(req: GuessRequest):
    controller = rounds.get(req.round_id)
    entry = await run_in_threadpool(controller.submit_guess, req.guess)
    state = controller.state

    return JSONResponse(status_code=200, content={
        "result": entry.to_dict(),
        "status": state.status.value,
        "guesses": list(state.guessed_names),
        "answer": state.answer_summary(),
    })


@app.get("/round/{round_id}")
async def get_round(round_id: str):
    return rounds.get(round_id).state.to_dict()


if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
