"""DemoAI - console entry point."""

from __future__ import annotations

import asyncio
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from demoai.console.state import Store
from demoai.shared.core.configuration import ConfigManager, LoggingConfig, SystemConfig, ValidationLevel
from demoai.shared.domain.auth import AuthMode
from demoai.shared.domain.navigation import AppScreen, DashboardTab
from demoai.shared.domain.sessions import SessionStatus

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

logger = logging.getLogger(__name__)
console = Console(highlight=False)

_LEVEL_STYLES = {"info": "cyan", "success": "green", "warning": "yellow", "error": "red"}
_STATUS_STYLES = {
    SessionStatus.ACTIVE: "blue",
    SessionStatus.COMPLETED: "green",
    SessionStatus.FAILED: "dark_orange",
}


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def configure_logging(log_config: LoggingConfig) -> None:
    """File handler gets everything at the configured level, console only warnings."""
    file_log_level = _level(log_config.level, logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)
    root_logger.handlers.clear()

    if log_config.file_logging:
        logs_dir = Path(log_config.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            logs_dir / "demoai.log",
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level(log_config.console_level, logging.WARNING))
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logger.info(f"Logging configured: dir={log_config.log_dir}, file={log_config.file_logging}")


def anchor_paths(config: SystemConfig, root: Path = PROJECT_ROOT) -> SystemConfig:
    """Resolve relative data paths against ``root`` instead of the working directory."""
    def _anchored(value: str) -> str:
        path = Path(value).expanduser()
        return str(path if path.is_absolute() else root / path)

    return config.model_copy(update={
        "settings": config.settings.model_copy(update={"storage_path": _anchored(config.settings.storage_path)}),
        "logging": config.logging.model_copy(update={"log_dir": _anchored(config.logging.log_dir)}),
    })


def load_config(config_dir: Optional[Path] = None) -> SystemConfig:
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")
    manager = ConfigManager(config_dir or Path(os.getenv("DEMOAI_CONFIG_DIR", PROJECT_ROOT / "config")))
    return anchor_paths(manager.get_config(ValidationLevel.LENIENT))


# --- Rendering ---

def render_notifications(store: Store) -> None:
    for note in store.notifications.drain():
        style = _LEVEL_STYLES.get(note.level, "white")
        text = f"[bold {style}]{note.title}[/bold {style}]"
        if note.description:
            text += f"  {note.description}"
        console.print(text)


def render_landing() -> None:
    console.print(Panel.fit(
        "[bold]Product demos, done by AI - 24/7[/bold]\n"
        "Create engaging product demonstrations with AI-powered voice navigation,\n"
        "real-time walkthroughs, and instant sharing capabilities.",
        title="DemoAI",
        border_style="magenta",
    ))


def render_dashboard(store: Store) -> None:
    app = store.app
    stats = app.stats()
    voice = "available" if app.voice_input_available else "not available in this runtime"
    console.print(Panel.fit(
        f"{app.greeting}\n"
        f"Total sessions: [bold]{stats.total}[/bold]   "
        f"Recording: [bold]{stats.active}[/bold]   "
        f"Avg. duration: [bold]{int(stats.average_duration_seconds) // 60}:"
        f"{int(stats.average_duration_seconds) % 60:02d}[/bold]   "
        f"Completion rate: [bold]{stats.completion_rate:.0%}[/bold]\n"
        f"Voice input: {voice}",
        title="Dashboard",
        border_style="blue",
    ))


def render_sessions(store: Store, query: str = "") -> None:
    sessions = store.app.search_sessions(query)
    table = Table(title="Recent Demo Sessions", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Date")
    table.add_column("Duration", justify="right")
    table.add_column("Status")
    table.add_column("Transcript")
    for index, session in enumerate(sessions, start=1):
        style = _STATUS_STYLES[session.status]
        table.add_row(
            str(index),
            session.title,
            session.created_at.strftime("%Y-%m-%d"),
            session.formatted_duration(),
            f"[{style}]{session.status.value}[/{style}]",
            session.transcript_status,
        )
    console.print(table if sessions else "[dim]No demo sessions yet.[/dim]")


def render_settings(store: Store) -> None:
    table = Table(title="Settings", box=box.SIMPLE)
    table.add_column("Category")
    table.add_column("Key")
    table.add_column("Value")
    for category, values in store.app.settings_snapshot().items():
        for key, value in values.items():
            table.add_row(category, key, repr(value))
    console.print(table)


# --- Screens ---

async def landing_screen(store: Store) -> bool:
    render_landing()
    choice = Prompt.ask("Action", choices=["start", "signin", "demo", "quit"], default="demo")
    if choice == "quit":
        return False
    if choice == "start":
        await store.app.get_started()
    elif choice == "signin":
        await store.app.sign_in()
    else:
        await store.app.try_demo()
    return True


async def auth_screen(store: Store) -> bool:
    app = store.app
    signing_up = app.navigator.auth_mode is AuthMode.SIGN_UP
    console.rule("Create Account" if signing_up else "Sign In")
    choice = Prompt.ask("Action", choices=["submit", "toggle", "demo", "back"], default="submit")
    if choice == "toggle":
        app.toggle_auth_mode()
        return True
    if choice == "demo":
        await app.try_demo()
        return True
    if choice == "back":
        await app.cancel_auth()
        return True

    email = Prompt.ask("Email")
    password = Prompt.ask("Password", password=True)
    confirm = Prompt.ask("Confirm password", password=True) if signing_up else None
    with console.status("Creating Account..." if signing_up else "Signing In..."):
        await app.submit_auth(email, password, confirm)
    return True


async def dashboard_screen(store: Store) -> bool:
    app = store.app
    if app.navigator.dashboard_tab is DashboardTab.SETTINGS:
        return await settings_tab(store)

    render_dashboard(store)
    render_sessions(store)
    active = app.sessions.active_session
    choices = ["stop", "fail"] if active else ["start"]
    choices += ["search", "settings", "logout"]
    choice = Prompt.ask("Action", choices=choices, default=choices[0])

    if choice == "start":
        title = Prompt.ask("Session title", default="") or None
        await app.start_session(title)
    elif choice == "stop" and active:
        await app.stop_session(active.id)
    elif choice == "fail" and active:
        await app.fail_session(active.id, Prompt.ask("Reason", default="Interrupted"))
    elif choice == "search":
        render_sessions(store, Prompt.ask("Search"))
    elif choice == "settings":
        app.select_tab(DashboardTab.SETTINGS)
    elif choice == "logout":
        await app.logout()
    return True


async def settings_tab(store: Store) -> bool:
    app = store.app
    render_settings(store)
    choice = Prompt.ask("Action", choices=["set", "save", "reset", "back"], default="set")
    if choice == "set":
        category = Prompt.ask("Category", choices=["voice", "integrations", "preferences"])
        key = Prompt.ask("Key")
        raw = Prompt.ask("Value")
        await app.update_setting(category, key, _parse_value(raw))
    elif choice == "save":
        await app.save_settings()
    elif choice == "reset":
        if Confirm.ask("Restore default settings?", default=False):
            await app.reset_settings()
    else:
        app.select_tab(DashboardTab.DASHBOARD)
    return True


def _parse_value(raw: str):
    lowered = raw.strip().lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


_SCREENS = {
    AppScreen.LANDING: landing_screen,
    AppScreen.AUTH: auth_screen,
    AppScreen.DASHBOARD: dashboard_screen,
}


async def run(store: Store) -> None:
    await store.initialize()
    keep_going = True
    while keep_going:
        keep_going = await _SCREENS[store.app.screen](store)
        await store.bus.wait_until_idle()
        render_notifications(store)
    console.print("[dim]Goodbye.[/dim]")


def main() -> None:
    config = load_config()
    configure_logging(config.logging)
    store = Store.build(config)
    try:
        asyncio.run(run(store))
    except (KeyboardInterrupt, EOFError):
        console.print()
        logger.info("Interrupted by user")


if __name__ == "__main__":
    main()
