# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI
from pydantic import BaseModel, conlist, conint
from typing import Dict, List

from solver.sudoku_tools import sanity_check, compute_candidates_tool, solve_tool

app = FastAPI(title="Sudoku Solver Tool API")

CellValue = conint(ge=0, le=9)
Row = conlist(CellValue, min_length=9, max_length=9)
GridField = conlist(Row, min_length=9, max_length=9)

class GridModel(BaseModel):
    grid: GridField

class SolveRequest(BaseModel):
    grid: GridField
    indexed: bool = False

class SanityRequest(BaseModel):
    original: GridField
    current: GridField

class SolveResponse(BaseModel):
    solved: bool
    solution: List[List[int]] | None = None
    stats: Dict[str, int]
    elapsed_ms: float

@app.post("/solve", response_model=SolveResponse)
def api_solve(req: SolveRequest):
    return solve_tool(req.grid, indexed=req.indexed)

@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)

@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)
