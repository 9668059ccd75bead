from __future__ import annotations

import asyncio
import logging
import re
import shutil
from datetime import UTC, datetime
from pathlib import Path

_LOGGER = logging.getLogger(__name__)


class ArtifactManager:
    """Creates and manages diagnostic artifact files."""

    def __init__(self, root: str | Path = "artifacts") -> None:
        self.root = Path(root)
        self.screenshot_root = self.root / "screenshots"
        self.page_source_root = self.root / "page_sources"
        self._ensure_structure()

    def _ensure_structure(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        self.screenshot_root.mkdir(parents=True, exist_ok=True)
        self.page_source_root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def timestamp() -> str:
        return datetime.now(UTC).strftime("%Y%m%dT%H%M%S%fZ")

    def write_page_source(self, label: str, page_source: str, timestamp: str | None = None) -> Path:
        stamp = timestamp or self.timestamp()
        path = self.page_source_root / f"{stamp}_{_safe(label)}.html"
        path.write_text(page_source, encoding="utf-8")
        return path

    def screenshot_path(self, label: str, timestamp: str | None = None) -> Path:
        stamp = timestamp or self.timestamp()
        return self.screenshot_root / f"{stamp}_{_safe(label)}.png"

    def reset(self) -> Path:
        self._ensure_structure()
        for child in self.root.iterdir():
            if child.is_file() and child.name != ".gitkeep":
                child.unlink()
        for directory in (self.screenshot_root, self.page_source_root):
            self._clear_directory(directory)
        return self.root

    @staticmethod
    def _clear_directory(directory: Path) -> None:
        for child in directory.iterdir():
            if child.is_dir():
                shutil.rmtree(child)
            elif child.is_file() and child.name != ".gitkeep":
                child.unlink()


class ScreenshotOnFailure:
    """Failure hook saving a screenshot and the page source of a selenium driver."""

    def __init__(self, driver, artifact_manager: ArtifactManager, label: str = "timeout") -> None:
        self.driver = driver
        self.artifact_manager = artifact_manager
        self.label = label
        self.captured: list[Path] = []

    async def __call__(self) -> None:
        await asyncio.to_thread(self._capture)

    def _capture(self) -> None:
        timestamp = self.artifact_manager.timestamp()
        screenshot_path = self.artifact_manager.screenshot_path(self.label, timestamp)
        self.driver.save_screenshot(str(screenshot_path))
        page_path = self.artifact_manager.write_page_source(self.label, self.driver.page_source, timestamp)
        self.captured.extend([screenshot_path, page_path])
        _LOGGER.info("captured failure artifacts %s and %s", screenshot_path, page_path)

    def __str__(self) -> str:
        return f"screenshot on failure ({self.label})"


def _safe(label: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", label).strip("_") or "artifact"
