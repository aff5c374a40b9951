from __future__ import annotations

import logging
import os
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from crlfstat.classify import DEFAULT_CHUNK_SIZE
from crlfstat.fs_scan import scan_tree
from crlfstat.model import ScanResult


logger = logging.getLogger(__name__)

app = FastAPI(title="crlfstat")


class AnalyzeRequest(BaseModel):
	root_path: str
	chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)
	exclude: List[str] = []


@app.post("/analyze", response_model=ScanResult)
def analyze(req: AnalyzeRequest) -> ScanResult:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	try:
		return scan_tree(root, chunk_size=req.chunk_size, exclude=req.exclude)
	except OSError as e:
		logger.exception("Scan of %s failed", root)
		raise HTTPException(status_code=500, detail=str(e))


def create_app() -> FastAPI:
	return app
