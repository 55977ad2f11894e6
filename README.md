# whocares

A small Flask web application that tracks professional silence. It shows an
ever-changing counter of people who did not ask, with a randomly chosen
message and subtext. It also renders an Open Graph image (1200×630 PNG) for
each combination, so that shared links get a matching preview card.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
whocares
```

`whocares.web.main` loads the configuration, builds the application with
`create_app(Container())` and serves it with Flask's built-in server. The
command takes no options besides `--help`. By default it listens on
`localhost:8080` and serves these routes:

- `/` – the full page, with meta tags and an Open Graph image URL
- `/counter` – just the counter fragment, which the page polls every 8 seconds
- `/public/<path>` and `/<path>` – files from the public directory

Requests to a path ending in `/` are redirected with a 301 to the same path
without it. When the client accepts gzip, responses are gzip-compressed. Every
response carries an `X-Request-ID` header: the incoming one if present,
otherwise a random one.

A `target` query parameter (`/?target=bob`) becomes part of the image cache
key, so each target gets its own preview card.

### What you need to provide

- **Message files.** At least `default.yml` or `default.yaml` in the
  messages directory. No message sets ship with the package, and without one
  every page request fails.
- **The `og` directory.** `<public_dir>/og` must exist. Images are saved there
  and the directory is not created for you.
- **A stylesheet.** The page links `/<public_dir>/css/main.css?v=<timestamp>`.
- **Fonts (optional).** JetBrains Mono fonts in the fonts directory:
  `JetBrainsMono-Bold.ttf`, `JetBrainsMono-ExtraBold.ttf` and
  `JetBrainsMono-Regular.ttf`. If none can be loaded, images are drawn with
  Pillow's built-in default font.

The page loads htmx and Alpine.js from a CDN. The counter heading refers to an
Alpine component `counterAnim`, which the package does not provide.

## Configuration

`whocares.config.load()` reads `config.yaml` (or `config.yml`) from the
current directory or from `./config`. Anything missing falls back to these
defaults:

```yaml
base:
  title: WhoCares.io
  description: Professional Silence Tracker
  base_url: https://whocares.io
server:
  port: 8080
  host: localhost
app:
  seed: 8000000
  refresh_interval: 60
  cache_duration: 3600
static:
  messages_dir: assets/messages
  fonts_dir: assets/fonts
  public_dir: public
```

Environment variables take precedence over the file. The name is `WHC_`
followed by the section and key, for example `WHC_SERVER_PORT=9000` or
`WHC_BASE_TITLE=Silence`.

For testing, `load(search_dirs, environ)` accepts its own directories and
environment mapping.

## Messages

A message set lives in `<messages_dir>/<variant>.yml` (or `.yaml`) and holds
three lists. Each list must be non-empty.

```yaml
primary:
  - people didn't ask
secondary:
  - and we kept it that way
footnote:
  - figures are approximate
```

`whocares.messages.Variant` has the members `DEFAULT`, `CORPO`, `SARCASTIC`
and `WHOLESOME`. `Messages.load_variant()` falls back to `default` when a
variant's file is missing. It raises `MessageLoadError` in these cases:

- the `default` file is missing;
- a file cannot be parsed;
- a list is empty.

`Messages.render_message(template, variables)` replaces each `{{key}}` with
the HTML-escaped value.

## Library use

```python
from whocares.counter import format_number
from whocares.og_utils import wrap_text, generate_cache_key, generate_sarcastic_filename

format_number(8123456)                       # '8,123,456'
wrap_text("some long message", 40)           # lines of at most 40 characters, joined by '\n'
generate_cache_key("8,000,000", "nobody asked", "")   # first 12 hex digits of an MD5
generate_sarcastic_filename("8,000,000", "bob")       # '<word>-bob-ignored.png'
```

Other modules:

- `whocares.og_render` – the `Generator` that draws and caches images, plus
  the drawing helpers (`draw_background`, `draw_counter`, `draw_message`,
  `draw_brand`) and `load_fonts`.
- `whocares.pages` – HTML rendering: `home`, `counter_content`,
  `base_layout` and `meta`.

## Cleaning up images

`whocares.cleaner.Cleaner(config).clean_old_images()` removes files below
`<public_dir>/og` that are older than `app.cache_duration` and returns how
many it removed. The age is compared in nanoseconds, so with the default
value practically every file counts as old.

`CronService(cleaner).start()` runs the cleaner every 10 minutes on a
background thread, and `stop()` ends it. The `whocares` command does not
start this service, so stale images stay until you run the cleaner yourself.