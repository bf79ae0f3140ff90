# coinapp/api/health.py
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Response
from sqlalchemy import text

from coinapp.db import session as db_session

router = APIRouter(tags=["health"])

APP_STARTED_AT = time.time()


def _now_meta() -> Dict[str, Any]:
    now_ts = time.time()
    now_dt = datetime.fromtimestamp(now_ts, tz=timezone.utc)
    return {
        "now_unix": int(now_ts),
        "now_iso": now_dt.isoformat().replace("+00:00", "Z"),
        "uptime_s": int(now_ts - APP_STARTED_AT),
    }


async def _check_db() -> Dict[str, Any]:
    t0 = time.time()
    try:
        async with db_session.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return {"ok": True, "latency_ms": int((time.time() - t0) * 1000)}
    except Exception as e:
        return {
            "ok": False,
            "latency_ms": int((time.time() - t0) * 1000),
            "error": str(e),
        }


@router.get("/live")
async def live():
    return {"status": "ok"}


@router.get("/health")
async def health(response: Response):
    db = await _check_db()
    payload: Dict[str, Any] = {"checks": {"db": db}, **_now_meta()}

    if db["ok"]:
        payload["status"] = "ok"
    else:
        payload["status"] = "degraded"
        response.status_code = 503
    return payload
