"""
spellfix API - FastAPI correction service
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Mapping, Optional

from fastapi import APIRouter, Depends, FastAPI, Request

from .config import Settings, get_settings
from .corpus import load_table
from .spellcheck import SpellChecker

logger = logging.getLogger(__name__)

router = APIRouter()


def get_spell_checker(request: Request) -> SpellChecker:
    return request.app.state.spell_checker


# ============================================================
# ROUTES
# ============================================================
# Plain `def` endpoints: the edit search is CPU bound and runs in the threadpool
@router.get("/correct/{word}")
def correct_word(word: str, checker: SpellChecker = Depends(get_spell_checker)):
    """Most probable correction for a single word"""
    return checker.correct(word).to_dict()


@router.get("/health")
def health(checker: SpellChecker = Depends(get_spell_checker)):
    """Health check endpoint"""
    return {
        "status": "ok",
        "words": len(checker),
        "timestamp": datetime.utcnow().isoformat(),
    }


# ============================================================
# APP FACTORY
# ============================================================
def create_app(table: Optional[Mapping[str, int]] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the service. With no `table`, the lifespan loads
    settings.CORPUS_PATH and a load failure aborts startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        vocab = table if table is not None else load_table(settings.CORPUS_PATH)
        app.state.spell_checker = SpellChecker(vocab, max_word_length=settings.max_word_length)
        logger.info(f"✅ Spell checker ready ({len(app.state.spell_checker)} words)")
        yield

    app = FastAPI(title="spellfix", lifespan=lifespan)
    app.include_router(router)
    return app


app = create_app()
