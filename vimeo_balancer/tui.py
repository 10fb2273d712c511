# tui.py

import logging
from logging import Handler, LogRecord
from pathlib import Path
from typing import Any, Mapping

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Footer, Header, Input, RichLog, Static, Switch

from .config import DEFAULT_CONFIG_PATH, AppConfig
from .logging_utils import get_logger
from .models import Selection


class TuiLogHandler(Handler):
    """A logging handler that writes records into a Textual RichLog widget."""

    def __init__(self, log_widget: RichLog):
        super().__init__()
        self._log_widget = log_widget

    def emit(self, record: LogRecord):
        try:
            raw = escape(record.getMessage())
            if record.levelno >= logging.ERROR:
                line = f"[bold red]ERROR[/bold red] {raw}"
            elif record.levelno >= logging.WARNING:
                line = f"[yellow]WARN[/yellow] {raw}"
            elif record.levelno >= logging.INFO:
                line = raw
            else:
                line = f"[dim]{raw}[/dim]"
            self._log_widget.write(line)
        except Exception:
            self.handleError(record)


class PreviewController:
    """Turns raw form values into a selection, independent of the widgets."""

    def __init__(self, config: AppConfig | None = None):
        self._config = config or AppConfig()
        self._log = get_logger()

    @property
    def config(self) -> AppConfig:
        return self._config

    def build_config_from_form(self, form: Mapping[str, Any]) -> AppConfig:
        config = AppConfig(
            videos=list(self._config.videos),
            autoplay=self._config.autoplay,
            generator=self._config.generator,
            ratio=self._config.ratio,
            framework=self._config.framework,
        )
        videos = str(form.get("videos") or "")
        ids = [v.strip() for v in videos.split(",") if v.strip()]
        if ids:
            config.videos = ids
        for key in ("generator", "ratio", "framework"):
            value = str(form.get(key) or "").strip()
            if value:
                setattr(config, key, value)
        if "autoplay" in form:
            config.autoplay = bool(form["autoplay"])
        return config

    def build_preview(self, form: Mapping[str, Any]) -> Selection:
        config = self.build_config_from_form(form)
        self._log.info(
            "Previewing generator %s over %d video(s)", config.generator, len(config.videos)
        )
        selection = config.build_selector().select(
            config.generator, ratio=config.ratio, framework=config.framework
        )
        self._config = config
        return selection


class PreviewApp(App):
    """A Textual UI for previewing the selected video URL and embed code."""

    CSS_PATH = "tui.css"
    TITLE = "Vimeo Embed Preview"
    BINDINGS = [
        ("d", "toggle_dark", "Toggle dark mode"),
        ("p", "preview", "Preview"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, config_path: Path | None = None):
        super().__init__()
        self._config_path = config_path or DEFAULT_CONFIG_PATH
        self._controller = PreviewController()

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="form"):
            yield Static("Video ids (comma-separated, slot order):", classes="label")
            yield Input(placeholder="76979871, 22439234, ...", id="videos")
            yield Static("Generator (index, static, random, weekday):", classes="label")
            yield Input(value="0", id="generator")
            with Horizontal(classes="input_container"):
                yield Input(placeholder="16by9", id="ratio")
                yield Input(value="bootstrap4", id="framework")
            with Container(classes="switch_container"):
                yield Switch(value=True, id="autoplay")
                yield Static("Autoplay", classes="switch_label")
            with Horizontal(id="actions_row"):
                yield Button("Preview", variant="primary", id="preview")
                yield Button("Save Config", id="save")
        with Container(id="output"):
            yield Static("", id="url_output")
            yield Static("", id="html_output")
            yield RichLog(id="log_view", auto_scroll=True, markup=True)
        yield Footer()

    def on_mount(self) -> None:
        log_widget = self.query_one(RichLog)
        root_logger = get_logger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        root_logger.addHandler(TuiLogHandler(log_widget))

        try:
            cfg = AppConfig.from_file(self._config_path)
        except ValueError as e:
            root_logger.error(f"Could not load {self._config_path}: {e}")
            cfg = AppConfig()
        self._controller = PreviewController(cfg)
        self.query_one("#videos", Input).value = ", ".join(cfg.videos)
        self.query_one("#generator", Input).value = cfg.generator
        self.query_one("#ratio", Input).value = cfg.ratio or ""
        self.query_one("#framework", Input).value = cfg.framework
        self.query_one("#autoplay", Switch).value = cfg.autoplay
        root_logger.info("TUI Initialized. Logging is redirected here.")

    def read_form(self) -> dict:
        return {
            key: self.query_one(f"#{key}", Input).value
            for key in ("videos", "generator", "ratio", "framework")
        } | {"autoplay": self.query_one("#autoplay", Switch).value}

    def action_preview(self) -> None:
        try:
            selection = self._controller.build_preview(self.read_form())
        except (ValueError, IndexError) as e:
            get_logger().error(str(e))
            return
        self.query_one("#url_output", Static).update(Text(selection.url))
        self.query_one("#html_output", Static).update(Text(selection.html or ""))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        bid = event.button.id
        if bid == "preview":
            self.action_preview()
        elif bid == "save":
            config = self._controller.build_config_from_form(self.read_form())
            try:
                config.save(self._config_path)
            except OSError as e:
                get_logger().error(f"Could not save config: {e}")
                return
            get_logger().info(f"Saved config to {self._config_path}")

