# =============================================================================
# tests/test_main.py  -  Reference host event rendering
# =============================================================================
# A scripted runner stands in for the ADK Runner, so the tool trace and the
# final answer can be checked without an LLM or a tool subprocess.
# =============================================================================

from types import SimpleNamespace

from google.genai import types
import pytest

import main


def _event(*parts):
    return SimpleNamespace(content=types.Content(role="model", parts=list(parts)))


def _call(name, **args):
    return types.Part(function_call=types.FunctionCall(name=name, args=args))


def _result(name, response):
    return types.Part(function_response=types.FunctionResponse(name=name, response=response))


class ScriptedRunner:
    def __init__(self, events):
        self.events = events
        self.messages = []

    async def run_async(self, user_id, session_id, new_message):
        self.messages.append((user_id, session_id, new_message))
        for event in self.events:
            yield event


class TestToolErrorText:
    def test_mcp_error_result(self):
        response = {"isError": True, "content": [{"type": "text", "text": "Reddit returned HTTP 404"}]}

        assert main.tool_error_text(response) == "Reddit returned HTTP 404"

    def test_adk_error_key(self):
        assert main.tool_error_text({"error": "boom"}) == "boom"

    def test_success_is_not_an_error(self):
        assert main.tool_error_text({"isError": False, "content": [{"type": "text", "text": "{}"}]}) is None
        assert main.tool_error_text(None) is None


class TestAsk:
    @pytest.mark.asyncio
    async def test_traces_calls_and_failures_and_returns_last_text(self, capsys):
        runner = ScriptedRunner([
            _event(_call("get_hot", subreddit="nope", limit=5)),
            _event(_result("get_hot", {"isError": True, "content": [{"type": "text", "text": "Reddit returned HTTP 404"}]})),
            _event(_call("search", query="rust")),
            _event(_result("search", {"isError": False, "content": [{"type": "text", "text": "{\"count\": 0}"}]})),
            _event(types.Part(text="r/nope does not exist.")),
        ])

        answer = await main.ask(runner, "s1", "what's hot on r/nope?")

        out = capsys.readouterr().out
        assert answer == "r/nope does not exist."
        assert "🔧 get_hot {'subreddit': 'nope', 'limit': 5}" in out
        assert "❌ get_hot failed: Reddit returned HTTP 404" in out
        assert "🔧 search" in out
        assert "search failed" not in out

        user_id, session_id, message = runner.messages[0]
        assert (user_id, session_id) == (main.USER_ID, "s1")
        assert message.parts[0].text == "what's hot on r/nope?"

    @pytest.mark.asyncio
    async def test_events_without_content_are_skipped(self):
        runner = ScriptedRunner([SimpleNamespace(content=None), _event(types.Part(text="done"))])

        assert await main.ask(runner, "s1", "hi") == "done"


class TestRunAgent:
    @pytest.mark.asyncio
    async def test_one_shot_question(self, monkeypatch, capsys):
        runner = ScriptedRunner([_event(types.Part(text="Mostly async."))])

        class FakeSessions:
            async def create_session(self, app_name, user_id):
                return SimpleNamespace(id="session-1")

        monkeypatch.setattr(main, "create_agent", lambda: "agent")
        monkeypatch.setattr(main, "InMemorySessionService", FakeSessions)
        monkeypatch.setattr(main, "Runner", lambda **kwargs: runner)

        await main.run_agent("what is r/rust talking about?")

        assert len(runner.messages) == 1
        assert runner.messages[0][1] == "session-1"
        assert "Mostly async." in capsys.readouterr().out
