"""MCP server implementation."""
import asyncio
import json
from typing import Any, Dict, List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.models import InitializationOptions
from mcp.server import stdio

from measure_runner.config import load_settings
from measure_runner.environments.sanitizer import build_clean_environment
from measure_runner.errors import MeasureRunnerError, log_error
from measure_runner.logging import configure_logging, get_logger
from measure_runner.runner import ProjectRunner

logger = get_logger("server")

tools = [
    types.Tool(
        name="measure_runner_test_measures",
        description="Configure a project's bundle and run its measures with the OpenStudio CLI",
        inputSchema={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": "Project directory"}
            },
            "required": ["path"],
        },
    ),
    types.Tool(
        name="measure_runner_run_command",
        description="Run a shell command in a project directory with a clean bundle environment",
        inputSchema={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": "Project directory"},
                "command": {"type": "string", "description": "Shell command"},
            },
            "required": ["path", "command"],
        },
    ),
]


def _text(payload: Dict[str, Any]) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=json.dumps(payload))]


def _test_measures(path: str) -> Dict[str, Any]:
    runner = ProjectRunner(path)
    success = runner.test_measures()
    return {
        "success": success,
        "data": {
            "path": str(runner.directory),
            "gemfile": runner.manifest_path,
            "bundle_path": runner.bundle_install_path,
        },
    }


def _run_command(path: str, command: str) -> Dict[str, Any]:
    runner = ProjectRunner(path)
    success = runner.run_command(command, build_clean_environment())
    return {
        "success": success,
        "data": {"path": str(runner.directory), "command": command},
    }


async def handle_tool_call(name: str, arguments: Dict[str, Any]) -> list[types.TextContent]:
    """Dispatch a tool call and wrap the outcome as a JSON text result.

    Runner work blocks on subprocesses, so it runs in a worker thread.
    """
    logger.debug({"event": "tool_call", "name": name, "arguments": arguments})
    try:
        if name == "measure_runner_test_measures":
            return _text(await asyncio.to_thread(_test_measures, arguments["path"]))

        elif name == "measure_runner_run_command":
            return _text(await asyncio.to_thread(
                _run_command, arguments["path"], arguments["command"]
            ))

        return _text({"success": False, "error": f"Unknown tool: {name}"})

    except (MeasureRunnerError, KeyError) as e:
        log_error(e, context={"tool": name}, logger=logger)
        return _text({"success": False, "error": str(e)})


async def init_server() -> Server:
    logger.info(f"Registered tools: {', '.join(t.name for t in tools)}")

    server = Server("measure-runner")

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        logger.debug("Tools requested")
        return tools

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> list[types.TextContent]:
        return await handle_tool_call(name, arguments)

    return server


async def serve() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Starting measure runner server")
    server = await init_server()
    async with stdio.stdio_server() as (read_stream, write_stream):
        init_options = InitializationOptions(
            server_name="measure-runner",
            server_version="0.1.0",
            capabilities=types.ServerCapabilities(
                tools=types.ToolsCapability(listChanged=False),
                logging=types.LoggingCapability(),
            ),
        )
        await server.run(read_stream, write_stream, init_options)


def main() -> None:
    """Run the MCP server."""
    asyncio.run(serve())
