import logging
import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Dict, Any, Optional
from vectorqa import config
from vectorqa.database.client import get_client
from vectorqa.database.run_manager import setup_index
from vectorqa.database.storage_manager import IndexUpdater
from vectorqa.indexing.chunker import DocumentChunker
from vectorqa.indexing.embedder import Embedder
from vectorqa.rag.generator import GeminiGenerator
from vectorqa.rag.pipeline import QueryPipeline
from vectorqa.rag.retriever import IndexRetriever

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Vector QA API", version="1.0.0")

# Built once on startup to avoid reloading models
updater = None
pipeline = None

@app.on_event("startup")
async def startup_event():
    global updater, pipeline
    try:
        client = get_client()
        embedder = Embedder(config.EMBEDDING_MODEL)
        updater = IndexUpdater(
            client=client,
            embedder=embedder,
            chunker=DocumentChunker(config.CHUNK_SIZE, config.CHUNK_OVERLAP),
            batch_size=config.UPSERT_BATCH_SIZE,
        )
        pipeline = QueryPipeline(
            retriever=IndexRetriever(client, embedder),
            generator=GeminiGenerator(config.GEMINI_MODEL),
            top_k=config.TOP_K,
        )
        logger.info("Index components loaded successfully.")
    except Exception as e:
        logger.critical(f"Failed to load index components: {e}")
        raise e

class SetupRequest(BaseModel):
    docs_dir: Optional[str] = None
    index_name: Optional[str] = None

class SetupResponse(BaseModel):
    index_name: str
    created: bool
    documents: int
    vectors_upserted: int

class QueryRequest(BaseModel):
    query: str
    index_name: Optional[str] = None

class SourceDocument(BaseModel):
    content: str
    metadata: Dict[str, Any]
    score: Optional[float] = None

class QueryResponse(BaseModel):
    answer: Optional[str] = None
    sources: List[SourceDocument]

@app.get("/health")
async def health_check():
    return {"status": "healthy", "pipeline_loaded": pipeline is not None}

@app.post("/setup", response_model=SetupResponse)
def setup(request: SetupRequest):
    if not updater:
        raise HTTPException(status_code=503, detail="Index updater not initialized")

    try:
        result = setup_index(
            updater,
            request.index_name or config.INDEX_NAME,
            request.docs_dir or config.DOCUMENTS_DIR,
        )
        return SetupResponse(**result)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error setting up index: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@app.post("/query", response_model=QueryResponse)
def query_index(request: QueryRequest):
    if not pipeline:
        raise HTTPException(status_code=503, detail="Pipeline not initialized")

    try:
        result = pipeline.run(request.index_name or config.INDEX_NAME, request.query)

        sources = [
            SourceDocument(
                content=doc.get('content', ''),
                metadata=doc.get('metadata', {}),
                score=doc.get('score')
            )
            for doc in result.get('source_documents', [])
        ]

        return QueryResponse(answer=result.get('answer'), sources=sources)
    except Exception as e:
        logger.error(f"Error processing query: {e}")
        raise HTTPException(status_code=500, detail=str(e))

if __name__ == "__main__":
    uvicorn.run("vectorqa.api.main:app", host="0.0.0.0", port=8000, reload=True)
