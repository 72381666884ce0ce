from fastapi import FastAPI, HTTPException, Request
import logging
import os

from draftboard import config
from draftboard.errors import StoreUnavailable
from draftboard.hero_catalog import HeroCatalog
from draftboard.record_builder import header_row
from draftboard.row_store import MemoryRowStore, SqliteRowStore
from draftboard.service import MatchStatsService

logging.basicConfig(level=os.environ.get("DRAFTBOARD_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("draftboard.web")

app = FastAPI(title="Draftboard API")


def _open_store():
    try:
        return SqliteRowStore(config.db_path())
    except StoreUnavailable as e:
        # Serve empty analytics rather than refusing to start.
        logger.warning("Row store unavailable (%s); serving an empty in-memory store.", e)
        return MemoryRowStore()


store = _open_store()
service = MatchStatsService(store, HeroCatalog.from_file(config.hero_catalog_path()))
logger.info("Using row store at %s", getattr(store, "db_path", "<memory>"))


def _clamp_count(count: int) -> int:
    return max(0, min(count, config.MAX_LAST_MATCHES))


@app.get("/api/summary")
async def summary(stage: str = "") -> dict:
    try:
        return service.get_summary(stage)
    except Exception:
        logger.exception("Summary failed")
        raise HTTPException(status_code=500, detail="Failed to compute summary")


@app.get("/api/player-stats")
async def player_stats(stage: str = "") -> dict:
    try:
        players = service.get_player_stats(stage)
        return {"stage": stage or config.ALL_STAGES, "players": players, "count": len(players)}
    except Exception:
        logger.exception("Player stats failed")
        raise HTTPException(status_code=500, detail="Failed to compute player stats")


@app.get("/api/hero-stats")
async def hero_stats(stage: str = "") -> dict:
    try:
        return service.get_hero_stats(stage)
    except Exception:
        logger.exception("Hero stats failed")
        raise HTTPException(status_code=500, detail="Failed to compute hero stats")


@app.get("/api/draft-analytics")
async def draft_analytics(stage: str = "") -> dict:
    try:
        return service.get_draft_analytics(stage)
    except Exception:
        logger.exception("Draft analytics failed")
        raise HTTPException(status_code=500, detail="Failed to compute draft analytics")


@app.get("/api/stages")
async def stages() -> dict:
    names = service.get_stages()
    return {"stages": names, "count": len(names)}


@app.get("/api/player-names")
async def player_names() -> dict:
    names = service.get_player_names()
    return {"players": names, "count": len(names)}


@app.get("/api/last-matches")
async def last_matches(count: int = config.DEFAULT_LAST_MATCHES) -> dict:
    matches = service.get_last_matches(_clamp_count(count))
    return {"matches": matches, "count": len(matches)}


@app.get("/api/heroes")
async def heroes() -> dict:
    catalog = service.get_heroes()
    return {"heroes": catalog, "count": len(catalog)}


@app.get("/api/battle-id-exists")
async def battle_id_exists(battle_id: str = "") -> dict:
    return {"battle_id": battle_id.strip(), "exists": service.battle_id_exists(battle_id)}


@app.get("/api/next-sequence-number")
async def next_sequence_number() -> dict:
    return {"sequence_number": service.next_sequence_number()}


@app.get("/api/header")
async def header() -> dict:
    return {"columns": header_row()}


@app.post("/api/matches")
async def submit_match(request: Request) -> dict:
    try:
        payload = await request.json()
    except Exception:
        payload = None
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return service.submit_match(payload)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=int(os.environ.get("DRAFTBOARD_PORT", "5000")))
