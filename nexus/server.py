"""
Nexus FastAPI Server
Serves root systems, projections and decay channels to the viewer.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import uvicorn

from .basis import Basis, default_basis, petrie_basis
from .config import Config
from .cosmos import cosmic_state
from .decay import resolve_decay
from .groups import LIE_GROUPS, RootVector, as_root, get_group_info, get_subgroup
from .projection import project, root_edges
from .roots import generate_roots

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Nexus Server",
    description="Projections of exceptional Lie group root systems",
    version="1.0.0",
)

# CORS for the browser viewer
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Request/Response Models
# ============================================================================

class BasisModel(BaseModel):
    x: List[float]
    y: List[float]


class ProjectRequest(BaseModel):
    group: Optional[str] = None
    roots: Optional[List[List[float]]] = None
    subgroup: Optional[str] = None
    angle: float = 0.0
    basis: Optional[BasisModel] = None
    progress: float = 1.0
    wick_rotation: float = 0.0
    universe_time: float = 0.0
    include_edges: bool = False


class DecayRequest(BaseModel):
    group: str = "E8"
    alpha: Optional[List[float]] = None
    index: Optional[int] = None


# ============================================================================
# Helper Functions
# ============================================================================

def _roots_for_group(group: str) -> List[RootVector]:
    if get_group_info(group) is None:
        raise HTTPException(status_code=404, detail=f"Unknown group '{group}'")
    return generate_roots(group)


def _to_basis(model: Optional[BasisModel], group: Optional[str]) -> Basis:
    if model is None:
        return default_basis(group or Config.projection.DEFAULT_GROUP)
    try:
        return Basis(model.x, model.y)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "running",
        "service": "Nexus Server",
        "version": "1.0.0",
        "groups": [g.id.value for g in LIE_GROUPS],
    }


@app.get("/groups")
async def list_groups():
    return {"groups": [g.to_dict() for g in LIE_GROUPS]}


@app.get("/roots/{group}")
async def get_roots(group: str):
    roots = _roots_for_group(group)
    return {
        "group": group,
        "count": len(roots),
        "roots": [r.to_dict() for r in roots],
    }


@app.get("/basis/{rank}")
async def get_basis(rank: int):
    try:
        return petrie_basis(rank).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/project")
async def project_roots(req: ProjectRequest):
    """
    Project a group's roots (or explicitly supplied coordinates) to 2D.

    Without an explicit basis the group's default Petrie basis is used.
    """
    if req.roots is not None:
        try:
            roots = [as_root(c) for c in req.roots]
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
    else:
        roots = _roots_for_group(req.group or Config.projection.DEFAULT_GROUP)

    subgroup = None
    if req.subgroup:
        subgroup = get_subgroup(req.subgroup)
        if subgroup is None:
            raise HTTPException(status_code=404, detail=f"Unknown subgroup '{req.subgroup}'")

    basis = _to_basis(req.basis, req.group)
    # Project the whole set so ids and drift stay tied to the full root list
    points = project(
        roots,
        req.angle,
        basis,
        progress=req.progress,
        wick_rotation=req.wick_rotation,
        universe_time=req.universe_time,
    )
    if subgroup is not None:
        points = [p for p in points if subgroup.contains(p.original)]

    result: Dict[str, Any] = {
        "count": len(points),
        "basis": basis.to_dict(),
        "nodes": [p.to_dict() for p in points],
    }
    if req.include_edges:
        kept = {p.id for p in points}
        result["edges"] = [[i, j] for i, j in root_edges(roots) if i in kept and j in kept]
    return result


@app.post("/decay")
async def decay(req: DecayRequest):
    """
    Resolve a decay channel for a root of the given group.

    `found` is false when no pair exists; that is a normal answer, not an error.
    """
    roots = _roots_for_group(req.group)
    if req.alpha is not None:
        try:
            alpha = as_root(req.alpha)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
    elif req.index is not None:
        if not 0 <= req.index < len(roots):
            raise HTTPException(status_code=404, detail=f"Root index {req.index} out of range")
        alpha = roots[req.index]
    else:
        raise HTTPException(status_code=422, detail="Provide either 'alpha' or 'index'")

    interaction = resolve_decay(alpha, roots)
    if interaction is None:
        return {"found": False, "parent": alpha.to_dict()}
    return {"found": True, **interaction.to_dict()}


@app.get("/cosmos")
async def cosmos(temperature: float = 0.0):
    try:
        return cosmic_state(temperature).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def run(host: Optional[str] = None, port: Optional[int] = None):
    host = host or Config.server.HOST
    port = port or Config.server.PORT
    logger.info(f"[Server] Starting on {host}:{port}")
    uvicorn.run("nexus.server:app", host=host, port=port, reload=Config.server.RELOAD)
