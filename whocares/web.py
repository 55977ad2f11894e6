"""HTTP application: service container, page handlers, middleware and the entry point."""

import argparse
import gzip
import logging
import os
import random
import secrets

from flask import Flask, g, redirect, request, send_from_directory

from whocares import pages as ui
from whocares.cleaner import Cleaner
from whocares.config import Config, load
from whocares.counter import Counter
from whocares.messages import MessageSet, Messages, Variant
from whocares.og_render import Generator
from whocares.og_utils import ThemeName

CONFIG_KEY = "config"
REQUEST_ID_HEADER = "X-Request-ID"

log = logging.getLogger(__name__)


class Container:
    """Holds the services the application is built from."""

    def __init__(self, config: Config | None = None, rng: random.Random | None = None) -> None:
        self.config = config if config is not None else load()
        self.cleanup = Cleaner(self.config)
        self.message = Messages(self.config.static.messages_dir)
        self.counter = Counter(self.config, rng)
        self.og = Generator(self.config, f"{self.config.static.public_dir}/og")


class Pages:
    """The home page and the counter fragment it refreshes."""

    def __init__(self, container: Container, rng: random.Random | None = None) -> None:
        self.counter = container.counter
        self.messages = container.message
        self.og = container.og
        self._rng = rng if rng is not None else random.Random()

    def routes(self, app: Flask) -> None:
        app.add_url_rule("/", "home", self._home)
        app.add_url_rule("/counter", "counter", self._count)

    def _home(self) -> str:
        data = self.build_page_data(request.args.get("target", ""), True)
        config = g.get(CONFIG_KEY)
        if config is not None:
            page_request = ui.PageRequest(config=config, current_path=request.path)
        else:
            page_request = ui.PageRequest(current_path=request.path)
        return ui.home(page_request, data)

    def _count(self) -> str:
        data = self.build_page_data(request.args.get("target", ""), False)
        return ui.counter_content(data.count, data.message, data.subtext)

    def build_page_data(self, target: str = "", include_og: bool = False) -> ui.CounterData:
        """Gather the count, messages and, when asked, the Open Graph image URL."""
        data = ui.CounterData(count=self.counter.get_count(), target=target)
        message_set: MessageSet = self.messages.load_variant(Variant.DEFAULT)
        data.message = self.select_random_message(message_set.primary)
        data.subtext = self.select_random_message(message_set.secondary)
        if include_og:
            data.og_image_url = self._generate_og_image(data)
        return data

    def select_random_message(self, messages) -> str:
        """A random entry of messages, or an empty string when there is none."""
        if not messages:
            return ""
        return self._rng.choice(list(messages))

    def _generate_og_image(self, data: ui.CounterData) -> str:
        path = self.og.generate(data, ThemeName.BRUTALIST)
        if path and not path.startswith("/"):
            path = "/" + path
        return path


HANDLERS = (Pages,)


def _install_middleware(app: Flask, config: Config) -> None:
    @app.before_request
    def remove_trailing_slash():
        path = request.path
        if path != "/" and path.endswith("/"):
            target = path.rstrip("/") or "/"
            query = request.query_string.decode("latin-1")
            if query:
                target = f"{target}?{query}"
            return redirect(target, code=301)
        return None

    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(16)
        setattr(g, CONFIG_KEY, config)

    @app.after_request
    def compress(response):
        accepted = request.headers.get("Accept-Encoding", "").lower()
        if "gzip" not in accepted:
            return response
        if response.direct_passthrough or response.is_streamed:
            return response
        if "Content-Encoding" in response.headers:
            return response
        response.set_data(gzip.compress(response.get_data()))
        response.headers["Content-Encoding"] = "gzip"
        response.vary.add("Accept-Encoding")
        return response

    @app.after_request
    def add_request_id(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.after_request
    def log_request(response):
        log.info("%s %s %s", request.method, request.path, response.status_code)
        return response


def create_app(container: Container) -> Flask:
    """Build the web application with static mounts, middleware and page routes."""
    public_dir = os.path.abspath(container.config.static.public_dir)
    app = Flask(__name__, static_folder=None)

    def serve_public(filename: str):
        return send_from_directory(public_dir, filename)

    app.add_url_rule("/public/<path:filename>", "public", serve_public)
    app.add_url_rule("/<path:filename>", "static_root", serve_public)

    _install_middleware(app, container.config)

    for handler_cls in HANDLERS:
        handler_cls(container).routes(app)
    return app


def main(argv=None) -> int:
    """Load the configuration and serve the application until interrupted."""
    parser = argparse.ArgumentParser(prog="whocares", description="Serve the silence counter.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    container = Container()
    app = create_app(container)
    host, port = container.config.server.host, container.config.server.port
    log.info("Server started on %s:%s", host, port)
    app.run(host=host, port=port, threaded=True)
    return 0