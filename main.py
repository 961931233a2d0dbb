import argparse
import logging
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager

import sys
from pathlib import Path

# Add project root to path for package imports
base_dir = Path(__file__).parent
sys.path.insert(0, str(base_dir))

from db.database import init_db
from config import load_config
from models.vocabulary import load_vocabulary
from utils.queue import ReviewSession
from routes import review, progress, stats  # Import routers

logger = logging.getLogger(__name__)

# First-run init
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: init DB and config, load the deck, open a fresh session
    config = load_config()  # Ensures config exists
    init_db()
    vocabulary_path = Path(config["vocabulary"]["path"])
    app.state.vocabulary = load_vocabulary(vocabulary_path)
    app.state.session = ReviewSession()
    logger.info("Loaded %d cards from %s", len(app.state.vocabulary.vocabulary), vocabulary_path)
    yield

app = FastAPI(
    title="Senderos",
    description="Spanish vocabulary flashcards with spaced repetition",
    lifespan=lifespan,
)

# Include routers
app.include_router(review.router, prefix="/review", tags=["review"])
app.include_router(progress.router, prefix="/progress", tags=["progress"])
app.include_router(stats.router, prefix="/stats", tags=["stats"])

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Senderos App")
    parser.add_argument("--init", action="store_true", help="Initialize DB and config")
    parser.add_argument("--dev", action="store_true", help="Run in dev mode with reload")
    parser.add_argument("--port", type=int, default=8000, help="Port to serve on")
    args = parser.parse_args()
    if args.init:
        logging.basicConfig(level=logging.INFO)
        load_config()  # Ensures config is copied if missing
        init_db()
        logger.info("DB initialized and config copied to ~/.senderos/")
        sys.exit(0)
    # Run server
    uvicorn.run("main:app", host="127.0.0.1", port=args.port, reload=args.dev, log_level="info")
