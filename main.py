#!/usr/bin/env python3
"""ytdash - browse a paginated video listing API with client-side filters."""

import argparse
import asyncio
import logging
import os
import secrets
import signal

import uvicorn
from starlette.middleware.sessions import SessionMiddleware

from config import load_config, Config
from data.settings_store import SettingsStore
from data.video_source import VideoSource
from data.view_state import ViewState
from web.app import app as fastapi_app
from web.middleware import SecurityHeadersMiddleware
from web.sessions import init_app_state

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("ytdash")


class YtDash:
    """Main orchestrator - wires stores onto the FastAPI app and runs uvicorn."""

    def __init__(self, config: Config):
        self.config = config
        self.settings_store = None
        self.server = None
        self.running = False

    def _session_secret(self) -> str:
        """Configured secret, else one persisted in the settings store."""
        if self.config.web.session_secret:
            return self.config.web.session_secret
        secret = self.settings_store.get_setting("session_secret")
        if not secret:
            secret = secrets.token_hex(32)
            self.settings_store.set_setting("session_secret", secret)
            logger.info("Generated and persisted new session secret")
        return secret

    def setup(self, app=fastapi_app) -> None:
        """Initialize all components."""
        db_path = self.config.database.path
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self.settings_store = SettingsStore(db_path=db_path)
        logger.info("Settings database initialized at %s", db_path)

        state = app.state
        state.settings_store = self.settings_store
        state.video_source = VideoSource.from_config(self.config.source)
        state.view_state = ViewState(self.settings_store)
        state.web_config = self.config.web
        state.source_config = self.config.source
        init_app_state(state)

        app.add_middleware(SecurityHeadersMiddleware)
        app.add_middleware(SessionMiddleware, secret_key=self._session_secret(), max_age=86400)

        logger.info("Web app initialized (source: %s, page size %d)",
                    self.config.source.url, self.config.source.page_size)

    async def run(self) -> None:
        """Start everything."""
        self.running = True
        self.setup()

        config = uvicorn.Config(
            fastapi_app,
            host=self.config.web.host,
            port=self.config.web.port,
            log_level="info",
        )
        self.server = uvicorn.Server(config)
        logger.info("ytdash started on %s:%d", self.config.web.host, self.config.web.port)

        try:
            await self.server.serve()
        except asyncio.CancelledError:
            logger.info("Server cancelled")

    async def stop(self) -> None:
        """Stop all components."""
        self.running = False
        if self.server:
            self.server.should_exit = True
        if self.settings_store:
            self.settings_store.close()
        logger.info("ytdash stopped")


async def main() -> None:
    parser = argparse.ArgumentParser(description="ytdash")
    parser.add_argument("-c", "--config", help="Path to config file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(args.config)
    app = YtDash(config)

    loop = asyncio.get_running_loop()

    def signal_handler():
        asyncio.create_task(app.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, signal_handler)
        except NotImplementedError:
            signal.signal(sig, lambda s, f: signal_handler())

    try:
        await app.run()
    except KeyboardInterrupt:
        await app.stop()


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
