"""
FastAPI JSON API for textispell.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from textispell.core.errors import StartupError, InvalidInputError, ProtocolDesyncError
from textispell.core.speller import Speller
from textispell.server.deps import get_speller, shutdown


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    shutdown()


app = FastAPI(title="textispell API", lifespan=lifespan)


# === Request/Response Models ===

class SpellcheckRequest(BaseModel):
    text: str
    terse: bool = False


class WordRequest(BaseModel):
    word: str
    lowercase: bool = False


# === Errors ===

@app.exception_handler(StartupError)
async def startup_error(request: Request, exc: StartupError):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(InvalidInputError)
async def invalid_input(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(ProtocolDesyncError)
async def protocol_desync(request: Request, exc: ProtocolDesyncError):
    return JSONResponse(
        status_code=502,
        content={"detail": str(exc), "terms": exc.terms, "commentary": exc.commentary},
    )


# === Routes ===

def set_terse(speller: Speller, enabled: bool):
    if speller.terse == enabled:
        return
    if enabled:
        speller.enter_terse_mode()
    else:
        speller.exit_terse_mode()


@app.post("/api/spellcheck")
def spellcheck(req: SpellcheckRequest, speller: Speller = Depends(get_speller)):
    """Spellcheck each line of the text."""
    with speller.session.lock:
        previous = speller.terse
        set_terse(speller, req.terse)
        try:
            lines = speller.check_text(req.text)
        finally:
            set_terse(speller, previous)
    
    return {"lines": [[r.to_dict() for r in results] for results in lines]}


@app.post("/api/words")
def add_word(req: WordRequest, speller: Speller = Depends(get_speller)):
    """Add a word to the personal dictionary."""
    if req.lowercase:
        speller.add_word_lowercase(req.word)
    else:
        speller.add_word(req.word)
    return {"success": True, "word": req.word}


@app.post("/api/words/accept")
def accept_word(req: WordRequest, speller: Speller = Depends(get_speller)):
    """Accept a word for the lifetime of the server's session."""
    speller.accept_word(req.word)
    return {"success": True, "word": req.word}


@app.post("/api/dictionary/save")
def save_dictionary(speller: Speller = Depends(get_speller)):
    speller.save_dictionary()
    return {"success": True}
