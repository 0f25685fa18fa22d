# =============================================================================
# agent/reddit_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds a Google ADK agent that answers questions about Reddit by calling
#   the tools in tools/mcp_server.py.  It is a reference HOST for the MCP
#   server: any other MCP client could drive the same tools.
#
#   ┌──────────────────────────┐   stdio (MCP)   ┌──────────────────────┐
#   │  ADK Agent               │ ──────────────▶ │  FastMCP Server      │
#   │  LLM via LiteLlm         │                 │  (tools/mcp_server)  │
#   │  prompt: agent/prompt.py │ ◀────────────── │  5 Reddit tools      │
#   └──────────────────────────┘                 └──────────────────────┘
#                                                           │
#                                                           ▼
#                                                core/ gateway → reddit.com
#
# MODEL:
#   LiteLlm routes to any provider.  The model string comes from
#   REDDIT_AGENT_MODEL (default "openrouter/openai/gpt-4o"); LiteLlm reads
#   the matching API key (e.g. OPENROUTER_API_KEY) from the environment.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_research_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def mcp_server_path() -> str:
    """Absolute path of tools/mcp_server.py, independent of the cwd."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(project_root, "tools", "mcp_server.py")


def create_agent() -> Agent:
    """Create the Reddit research agent wired to the MCP tool server.

    The MCP server is spawned as a subprocess with `uv run python`, so it
    runs inside the project's virtual environment.  ADK discovers the five
    tools from it on first use.

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", mcp_server_path()],
        ),
    )

    model_name = os.environ.get("REDDIT_AGENT_MODEL", DEFAULT_MODEL)

    return Agent(
        name="reddit_research_assistant",
        model=LiteLlm(model=model_name),
        instruction=get_research_prompt(),
        tools=[mcp_tools],
    )
