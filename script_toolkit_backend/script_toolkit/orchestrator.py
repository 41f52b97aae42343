import logging
from typing import Dict, List, Optional

from langgraph.graph import END, START, StateGraph

from .generators import GENERATORS, AssetGenerator
from .models import AssetKind, AudioPrompt, FanOutState, GenerationRequest
from .session import GenerationSession

logger = logging.getLogger(__name__)


def _node_name(kind: AssetKind) -> str:
    return f"generate_{kind.value}"


class GenerationOrchestrator:
    """
    Fans one submission out to one generator per enabled asset kind.

    The fan-out is all-or-nothing: the graph runs the enabled generator nodes
    in a single step, and the first failure aborts the invocation, so the
    session either receives every result or none of them.
    """

    def __init__(self, client, generators: Optional[Dict[AssetKind, AssetGenerator]] = None):
        self.client = client
        self.generators = dict(generators or GENERATORS)
        self.session: Optional[GenerationSession] = None
        self.graph = self._build_graph()

    def _build_graph(self):
        g = StateGraph(FanOutState)
        for kind in self.generators:
            g.add_node(_node_name(kind), self._make_node(kind))
            g.add_edge(_node_name(kind), END)
        g.add_conditional_edges(START, self._route, [_node_name(k) for k in self.generators] + [END])
        return g.compile()

    def _route(self, state: FanOutState) -> List[str]:
        targets = [_node_name(kind) for kind in state.kinds if kind in self.generators]
        return targets or [END]

    def _make_node(self, kind: AssetKind):
        generator = self.generators[kind]

        async def node(state: FanOutState) -> dict:
            try:
                payload = await generator(self.client, state.script_text, state.theme)
            except Exception as e:
                logger.error(f"{kind.value} generator failed: {str(e)}")
                raise
            logger.info(f"{kind.value} generator finished")
            return {kind.value: payload}

        return node

    def begin(self, request: GenerationRequest) -> GenerationSession:
        """Create the session for ``request`` and mark it loading. Replaces any previous session."""
        session = GenerationSession(request)
        self.session = session
        session.begin()
        return session

    async def run(self, session: GenerationSession) -> GenerationSession:
        request = session.request
        kinds = sorted(request.enabled_kinds, key=lambda k: k.value)
        state = FanOutState(script_text=request.script_text, theme=request.theme, kinds=kinds)
        try:
            logger.info(f"Starting session {session.session_id} for {[k.value for k in kinds]}")
            missing = [k.value for k in kinds if k not in self.generators]
            if missing:
                raise ValueError(f"no generator registered for {', '.join(missing)}")
            final_state = await self.graph.ainvoke(state)
            for kind in kinds:
                payload = final_state.get(kind.value) if hasattr(final_state, "get") else getattr(final_state, kind.value)
                if kind == AssetKind.AUDIO_PROMPT:
                    payload = AudioPrompt.model_validate(payload)
                session.record_success(kind, payload)
            logger.info(f"Session {session.session_id} completed")
        except Exception as e:
            logger.error(f"Session {session.session_id} failed: {str(e)}")
            error_message = str(e) or "An unknown error occurred."
            session.fail(f"Failed to generate content. Details: {error_message}")
        finally:
            session.finish()
        return session

    async def submit(self, request: GenerationRequest) -> GenerationSession:
        return await self.run(self.begin(request))
