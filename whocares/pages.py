"""HTML pages: request data, head tags, the base layout and the counter page."""

import time
from dataclasses import dataclass, field

from whocares.config import Config

_CACHE_BUSTER = str(int(time.time()))

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)
_VOID_ELEMENTS = frozenset({"meta", "link"})

HTMX_SRC = "https://unpkg.com/htmx.org@2.0.0/dist/htmx.min.js"
ALPINE_SRC = "https://unpkg.com/alpinejs@3.x.x/dist/cdn.min.js"


@dataclass
class CounterData:
    count: str = ""
    message: str = ""
    subtext: str = ""
    target: str = ""
    og_image_url: str = ""


@dataclass
class PageRequest:
    """What the layout and head components need to know about a request."""

    config: Config = field(default_factory=Config)
    title: str = ""
    current_path: str = "/"
    description: str = ""
    keywords: list[str] = field(default_factory=list)
    og_title: str = ""
    og_description: str = ""
    og_image_url: str = ""


def _escape(value: str) -> str:
    return str(value).translate(_ESCAPES)


def _element(tag: str, attrs=(), *children: str) -> str:
    rendered = []
    for name, value in attrs:
        if value is True:
            rendered.append(f" {name}")
        else:
            rendered.append(f' {name}="{_escape(value)}"')
    opening = f"<{tag}{''.join(rendered)}>"
    if tag in _VOID_ELEMENTS:
        return opening
    return f"{opening}{''.join(children)}</{tag}>"


def public_file(path: str) -> str:
    """URL of a file under the /public mount."""
    return f"/public/{path}"


def static_file(request: PageRequest, path: str) -> str:
    """URL of a static file with a cache-busting query parameter."""
    return f"/{request.config.static.public_dir}/{path}?v={_CACHE_BUSTER}"


def scripts() -> str:
    return "".join(
        _element("script", (("src", src), ("defer", True)))
        for src in (HTMX_SRC, ALPINE_SRC)
    )


def stylesheet(request: PageRequest) -> str:
    return _element(
        "link",
        (
            ("href", static_file(request, "css/main.css")),
            ("rel", "stylesheet"),
            ("type", "text/css"),
        ),
    )


def _meta(*attrs) -> str:
    return _element("meta", attrs)


def meta(request: PageRequest) -> str:
    """Common meta tags plus Open Graph and Twitter card tags."""
    tags = [
        _meta(("charset", "utf-8")),
        _meta(("name", "viewport"), ("content", "width=device-width, initial-scale=1")),
        _element("title", (), _escape(request.title)),
    ]
    if request.description:
        tags.append(_meta(("name", "description"), ("content", request.description)))
    if request.keywords:
        tags.append(_meta(("name", "keywords"), ("content", ", ".join(request.keywords))))

    if request.og_title:
        tags.append(_meta(("property", "og:title"), ("content", request.og_title)))
    if request.og_description:
        tags.append(_meta(("property", "og:description"), ("content", request.og_description)))
    tags.append(_meta(("property", "og:type"), ("content", "website")))
    if request.og_image_url:
        tags.append(_meta(("property", "og:image"), ("content", request.og_image_url)))

    tags.append(_meta(("name", "twitter:card"), ("content", "summary_large_image")))
    if request.og_title:
        tags.append(_meta(("name", "twitter:title"), ("content", request.og_title)))
    if request.og_description:
        tags.append(_meta(("name", "twitter:description"), ("content", request.og_description)))
    if request.og_image_url:
        tags.append(_meta(("name", "twitter:image"), ("content", request.og_image_url)))
    return "".join(tags)


def base_layout(request: PageRequest, content: str) -> str:
    """Wrap already-rendered content in the full HTML document."""
    head = _element("head", (), meta(request), stylesheet(request), scripts())
    body = _element(
        "body",
        (
            ("class", "min-h-svh bg-main text-text font-mono cursor-pointer"),
            ("onclick", "document.documentElement.classList.toggle('dark')"),
        ),
        _element(
            "div",
            (("class", "absolute top-6 left-6 z-10"),),
            _element(
                "p",
                (("class", "text-sm font-medium text-muted"),),
                _escape(request.config.base.title),
            ),
        ),
        content,
        _element(
            "div",
            (("class", "absolute bottom-6 right-6 z-10"),),
            _element(
                "p",
                (("class", "text-xs text-accent opacity-40 italic hover:opacity-70 transition-opacity"),),
                _escape("this wasn't requested either"),
            ),
        ),
    )
    return "<!doctype html>" + _element("html", (("lang", "en"),), head, body)


def counter_content(count: str, message: str, subtext: str) -> str:
    return _element(
        "div",
        (("class", "space-y-8 sm:space-y-12"),),
        _element(
            "div",
            (("class", "space-y-6"),),
            _element(
                "h2",
                (
                    ("class", "text-6xl sm:text-4xl lg:text-[12rem] xl:text-[14rem] "
                              "font-black tracking-tighter leading-none"),
                    ("x-data", "counterAnim($el.dataset.count)"),
                    ("data-count", count),
                    ("x-init", "start()"),
                    ("x-text", "display"),
                ),
                _escape(count),
            ),
        ),
        _element(
            "div",
            (("class", "space-y-4 max-w-3xl mx-auto"),),
            _element(
                "h3",
                (("class", "text-2xl sm:text-3xl lg:text-4xl font-bold leading-tight"),),
                _escape(message),
            ),
        ),
        _element(
            "div",
            (("class", "max-w-2xl mx-auto"),),
            _element(
                "p",
                (("class", "text-base sm:text-lg opacity-70 leading-relaxed"),),
                _escape(subtext),
            ),
        ),
    )


def home(request: PageRequest, data: CounterData) -> str:
    """Fill the request's head data from the counter and render the home page."""
    base = request.config.base
    request.title = base.title
    request.description = base.description
    request.og_title = f"{data.count} {data.message} - {base.title}"
    request.og_description = data.subtext
    request.og_image_url = data.og_image_url

    return base_layout(
        request,
        _element(
            "main",
            (("class", "min-h-svh flex items-center justify-center px-8 py-16"),),
            _element(
                "div",
                (
                    ("id", "counter-container"),
                    ("class", "text-center w-full max-w-4xl lg:max-w-full mx-auto"),
                    ("hx-get", "/counter"),
                    ("hx-trigger", "every 8s"),
                    ("hx-swap", "innerHTML"),
                ),
                counter_content(data.count, data.message, data.subtext),
            ),
        ),
    )