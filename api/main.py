import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from fastapi.middleware.cors import CORSMiddleware

from algorithms.similarity import compute_similarity
from utils.config import get_settings
from utils.formatting import format_result

logger = logging.getLogger(__name__)

app = FastAPI(title="LCS Plagiarism Checker API", version="1.0")

# CORS for demos; restrict origins in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class SimilarityRequest(BaseModel):
    original: Optional[str] = None   # null scores 0.0
    candidate: Optional[str] = None

class SimilarityResponse(BaseModel):
    similarity: float
    percentage: str

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/api/similarity", response_model=SimilarityResponse)
def similarity(req: SimilarityRequest):
    # the DP is quadratic in document length, so oversized input is refused
    limit = get_settings().max_chars
    for name, text in (("original", req.original), ("candidate", req.candidate)):
        if text is not None and len(text) > limit:
            logger.warning("[api] %s too long: %d > %d chars", name, len(text), limit)
            raise HTTPException(status_code=413, detail=f"{name} exceeds {limit} characters")

    sim = compute_similarity(req.original, req.candidate)
    return SimilarityResponse(similarity=sim, percentage=format_result(sim))

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
