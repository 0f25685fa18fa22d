# =============================================================================
# main.py  -  Entry Point for the Reddit Research Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                          # interactive
#   uv run python main.py "what is r/rust excited about this week?"
#
# WHAT HAPPENS:
#   1. Loads .env (OPENROUTER_API_KEY, REDDIT_* settings)
#   2. Creates the ADK agent (agent/reddit_agent.py), which spawns the MCP
#      tool server (tools/mcp_server.py) over stdio
#   3. Answers the question given on the command line, or opens a prompt
#      loop.  Every Reddit tool call is traced as it happens, including the
#      ones the server rejected (bad subreddit, HTTP 404/429, timeouts).
#
# To use the tools from a different MCP host, skip this file and point the
# host at `python -m tools.mcp_server` instead.
# =============================================================================

import asyncio
import sys
from typing import Optional

from dotenv import load_dotenv

# LiteLlm reads the provider API key from the environment when the agent is
# created, so .env must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.reddit_agent import create_agent

APP_NAME = "reddit_research"
USER_ID = "demo_user"

QUIT_WORDS = ("quit", "exit", "q")


def tool_error_text(response) -> Optional[str]:
    """Return the error message carried by a tool response, or None.

    MCP tool errors reach ADK as a CallToolResult dump with `isError` set and
    the message in the first text block; ADK's own failures use an `error` key.
    """
    if not isinstance(response, dict):
        return None
    if response.get("error"):
        return str(response["error"])
    if response.get("isError"):
        for block in response.get("content") or []:
            if isinstance(block, dict) and block.get("text"):
                return block["text"]
        return "tool reported an error"
    return None


def describe_part(part) -> Optional[str]:
    """One trace line for a tool call or a failed tool result, else None."""
    call = getattr(part, "function_call", None)
    if call:
        return f"  🔧 {call.name} {dict(call.args or {})}"
    result = getattr(part, "function_response", None)
    if result:
        error = tool_error_text(result.response)
        if error:
            return f"  ❌ {result.name} failed: {error}"
    return None


async def ask(runner, session_id: str, question: str) -> str:
    """Send one question through the runner; return the agent's final text."""
    message = types.Content(role="user", parts=[types.Part(text=question)])

    answer = ""
    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            line = describe_part(part)
            if line:
                print(line)
            elif getattr(part, "text", None):
                answer = part.text
    return answer


def _show(answer: str) -> None:
    print("-" * 70)
    if answer:
        print(f"\n🤖 Agent:\n\n{answer}")
    else:
        print("\n⚠️  No answer. Check the tool trace above for failed Reddit calls.")


async def run_agent(question: Optional[str] = None):
    """Answer `question` once, or run an interactive session if it is None."""
    agent = create_agent()
    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    if question:
        _show(await ask(runner, session.id, question))
        return

    print("💬 Reddit research agent. Ask about a subreddit, post or topic ('quit' to exit).")
    while True:
        try:
            line = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.lower() in QUIT_WORDS:
            break
        if line:
            _show(await ask(runner, session.id, line))


def main() -> None:
    asyncio.run(run_agent(" ".join(sys.argv[1:]) or None))


if __name__ == "__main__":
    main()
