"""Pytest plugin to capture HTML snapshots and screenshots on test failure."""

from datetime import datetime
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from rich.markup import escape

from ..config import Config, load_config
from ..steplog import console

# Fixtures that may hold a Playwright page
PAGE_FIXTURE_NAMES = ["page", "authenticated_page", "cart_page"]


def pytest_runtest_makereport(item, call):
    """Hook to execute after each test phase."""
    if call.when == "call" and call.excinfo is not None:
        page = find_page(item)
        if page is not None:
            capture_failure(item, page)


def find_page(item):
    """Return the first fixture value that looks like a Playwright page."""
    funcargs = getattr(item, "funcargs", {}) or {}
    for name in PAGE_FIXTURE_NAMES:
        candidate = funcargs.get(name)
        if candidate is not None and hasattr(candidate, "content"):
            return candidate
    return None


def failure_dir_for(item, config: Config) -> Path:
    """``failures/`` next to the test file, or under the cwd."""
    fspath = getattr(item, "path", None)
    base_dir = Path(fspath).parent if fspath else Path.cwd()
    return base_dir / config.artifacts.failure_dir_name


def snapshot_stem(item, now: datetime | None = None) -> str:
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    clean_name = item.name.replace("::", "_").replace("/", "_").replace("[", "_").replace("]", "")
    return f"{clean_name}_{timestamp}"


def capture_failure(item, page) -> Path | None:
    """Write page HTML (and a screenshot) for a failed test; return the HTML path."""
    config = load_config()
    failure_dir = failure_dir_for(item, config)
    stem = snapshot_stem(item)

    try:
        content = page.content()
    except PlaywrightError as e:
        console.print(f"[yellow]Could not read page content for {item.name}: {escape(str(e))}[/]")
        return None

    if not content:
        return None

    try:
        failure_dir.mkdir(parents=True, exist_ok=True)
        html_path = failure_dir / f"{stem}.html"
        html_path.write_text(content, encoding="utf-8")
    except OSError as e:
        console.print(f"[yellow]Could not save snapshot for {item.name}: {escape(str(e))}[/]")
        return None

    # Attach path to the item for reporting
    item.user_properties.append(("snapshot_path", str(html_path)))

    if config.artifacts.capture_screenshots:
        try:
            screenshot_path = failure_dir / f"{stem}.png"
            page.screenshot(path=str(screenshot_path))
            item.user_properties.append(("screenshot_path", str(screenshot_path)))
        except PlaywrightError as e:
            console.print(f"[yellow]Could not take screenshot for {item.name}: {escape(str(e))}[/]")

    return html_path
