"""Board generation API routes."""
import time

from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import (
    GenerateRequest,
    GenerateResponse,
    SimulateRequest,
    SimulationStats,
    TileModel,
)
from ...models.layout import Layout
from ...models.tile import Position
from ...core.catalog import LayoutCatalog
from ...core.generator import BoardGenerator
from ...core.simulator import SolvabilitySimulator
from ...utils.helpers import board_from_dicts, board_to_dicts
from ..deps import get_layout_catalog, get_solvability_simulator

router = APIRouter(prefix="/api", tags=["generate"])


@router.post("/generate", response_model=GenerateResponse)
async def generate_board(
    request: GenerateRequest,
    catalog: LayoutCatalog = Depends(get_layout_catalog),
    simulator: SolvabilitySimulator = Depends(get_solvability_simulator),
) -> GenerateResponse:
    """
    Generate a board from a catalog layout or custom positions.

    Args:
        request: GenerateRequest with layout and difficulty.
        catalog: LayoutCatalog dependency.
        simulator: SolvabilitySimulator dependency.

    Returns:
        GenerateResponse with tiles and playout statistics.
    """
    if request.layout_id is not None:
        if not catalog.has_layout(request.layout_id):
            raise HTTPException(status_code=404, detail=f"Layout not found: {request.layout_id}")
        layout = catalog.get_layout_by_id(request.layout_id)
    elif request.positions:
        positions = [Position(p.x, p.y, p.z) for p in request.positions]
        if len(set(positions)) != len(positions):
            raise HTTPException(status_code=400, detail="Duplicate positions")
        layout = Layout("custom", "Custom", "Custom positions", 1, positions)
        if not layout.is_valid():
            raise HTTPException(status_code=400, detail="Custom layout needs at least two positions")
    else:
        raise HTTPException(
            status_code=400,
            detail="Either 'layout_id' or 'positions' must be provided",
        )

    start_time = time.time()
    generator = BoardGenerator(seed=request.seed, simulator=simulator)

    solvable = request.solvable
    if solvable is None:
        solvable = request.difficulty.requires_solvable

    if solvable:
        board = generator.generate_solvable_board(layout, request.difficulty)
    else:
        board = generator.generate_board(layout, request.difficulty)

    result = simulator.simulate(board)
    generation_time_ms = int((time.time() - start_time) * 1000)

    return GenerateResponse(
        layout_id=layout.id,
        tiles=[TileModel(**t) for t in board_to_dicts(board)],
        simulation=SimulationStats(**result.to_dict()),
        generation_time_ms=generation_time_ms,
    )


@router.post("/simulate", response_model=SimulationStats)
async def simulate_board(
    request: SimulateRequest,
    simulator: SolvabilitySimulator = Depends(get_solvability_simulator),
) -> SimulationStats:
    """
    Run the solvability playout on a board.

    Tiles already flagged removed are ignored by the playout.
    """
    live_tiles = [t.model_dump() for t in request.tiles if not t.removed]
    try:
        board = board_from_dicts(request.layout_id, live_tiles)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Simulation failed: {str(e)}")

    result = simulator.simulate(board)
    return SimulationStats(**result.to_dict())
