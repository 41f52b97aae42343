import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import ValidationError

# Ensure .env is loaded before importing modules that initialize API clients
from .settings import has_all_keys, ALLOWED_ORIGINS
from .export import attachment_headers, render_export
from .guidance import GuidanceRequester
from .llm import get_llm_client
from .models import AssetKind, GenerateForm, GuidanceForm, GuidanceResponse, SessionSnapshot
from .orchestrator import GenerationOrchestrator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.orchestrator is None or app.state.guidance is None:
        # Raises ConfigurationError when the credential is missing, which aborts startup.
        client = get_llm_client()
        if app.state.orchestrator is None:
            app.state.orchestrator = GenerationOrchestrator(client)
        if app.state.guidance is None:
            app.state.guidance = GuidanceRequester(client)
    yield
    for task in list(app.state.tasks):
        task.cancel()


def create_app(orchestrator: Optional[GenerationOrchestrator] = None,
               guidance: Optional[GuidanceRequester] = None) -> FastAPI:
    app = FastAPI(title="Cinematic Script Toolkit", lifespan=lifespan)
    app.state.orchestrator = orchestrator
    app.state.guidance = guidance
    app.state.tasks = set()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        keys_ok = has_all_keys()
        logger.info(f"Health check: API keys present = {keys_ok}")
        return {"ok": True, "has_keys": keys_ok}

    @app.post("/v1/generate", response_model=SessionSnapshot)
    async def start_generation(form: GenerateForm, request: Request, wait: bool = False):
        orchestrator: GenerationOrchestrator = request.app.state.orchestrator
        current = orchestrator.session
        if current is not None and current.is_loading:
            raise HTTPException(409, "a generation is already in progress")
        try:
            gen_request = form.to_request()
        except ValidationError as e:
            raise HTTPException(422, [err["msg"] for err in e.errors()])

        request.app.state.guidance.reset()
        session = orchestrator.begin(gen_request)
        logger.info(f"Starting session {session.session_id} with theme: {gen_request.theme[:50]}")
        if wait:
            await orchestrator.run(session)
        else:
            task = asyncio.create_task(orchestrator.run(session))
            request.app.state.tasks.add(task)
            task.add_done_callback(request.app.state.tasks.discard)
        return session.snapshot()

    def _current_session(request: Request, session_id: str):
        session = request.app.state.orchestrator.session
        if session is None or session.session_id != session_id:
            raise HTTPException(404, "session not found")
        return session

    @app.get("/v1/generate/{session_id}", response_model=SessionSnapshot)
    async def session_status(session_id: str, request: Request):
        return _current_session(request, session_id).snapshot()

    @app.get("/v1/generate/{session_id}/download/{kind}")
    async def download(session_id: str, kind: AssetKind, request: Request):
        session = _current_session(request, session_id)
        payload = session.payload(kind)
        if payload is None:
            raise HTTPException(409, f"{kind.value} result not available")
        export = render_export(kind, payload)
        return Response(content=export.content, media_type=export.media_type,
                        headers=attachment_headers(export.filename))

    @app.post("/v1/guidance", response_model=GuidanceResponse)
    async def guidance_feedback(form: GuidanceForm, request: Request):
        guidance: GuidanceRequester = request.app.state.guidance
        if guidance.is_loading:
            raise HTTPException(409, "feedback is already being generated")
        text = await guidance.request_guidance(form.script_text)
        return GuidanceResponse(guidance=text)

    return app


app = create_app()
