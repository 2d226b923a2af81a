"""
Web server - aiohttp application for debug interface.
"""

import logging

from aiohttp import web

from circle_seeker.config import WEB_HOST, WEB_PORT

logger = logging.getLogger(__name__)

INDEX_HTML = """
<!DOCTYPE html>
<html>
<head><title>Circle Seeker</title></head>
<body>
    <h1>Circle Seeker Debug Interface</h1>
    <nav>
        <a href="/api/status">Status</a> |
        <a href="/api/sectors">Sectors</a> |
        <a href="/api/params">Parameters</a>
    </nav>
</body>
</html>
"""


class WebServer:
    """
    Debug web interface server.

    Provides:
    - Controller status (mode, wall side, clearance flags, last command)
    - Latest sector minima
    - Loaded motion parameters (read-only)
    """

    def __init__(self, controller=None):
        """
        Args:
            controller: Optional Controller instance for live data
        """
        self.controller = controller
        self.app = web.Application()
        self._setup_routes()

    def _setup_routes(self):
        """Configure routes."""
        self.app.router.add_get("/", self.index)
        self.app.router.add_get("/api/status", self.api_status)
        self.app.router.add_get("/api/sectors", self.api_sectors)
        self.app.router.add_get("/api/params", self.api_params)

    async def index(self, request):
        """Dashboard page."""
        return web.Response(text=INDEX_HTML, content_type="text/html")

    async def api_status(self, request):
        """Get current controller status."""
        if self.controller is None:
            return web.json_response({"state": "unknown"})

        status = self.controller.state_machine.snapshot()
        command = self.controller.emitter.last_command
        status["last_command"] = None if command is None else {
            "linear": command.linear,
            "angular": command.angular,
        }
        status["running"] = self.controller.is_running
        status["skipped_cycles"] = self.controller.skipped_cycles
        return web.json_response(status)

    async def api_sectors(self, request):
        """Get latest sector minima and scan coverage."""
        if self.controller is None:
            return web.json_response({"sectors": None})

        frame = self.controller.lidar.get_frame()
        return web.json_response({
            "sectors": self.controller.state_machine.snapshot()["sectors"],
            "beams": None if frame is None else len(frame),
            "valid_beams": None if frame is None else frame.valid_count,
        })

    async def api_params(self, request):
        """Get loaded motion parameters."""
        if self.controller is None:
            return web.json_response({})
        return web.json_response(self.controller.specs.to_dict())


def create_app(controller=None) -> web.Application:
    """Create the web application."""
    server = WebServer(controller)
    return server.app


async def run_server(controller=None, host=WEB_HOST, port=WEB_PORT):
    """Run the web server."""
    app = create_app(controller)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info(f"Web server running at http://{host}:{port}")
    return runner
