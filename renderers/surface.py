"""Rendering and input-capture surfaces the directory controller talks to."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

CLICK = "click"
KEYPRESS = "keypress"

Listener = Callable[..., None]


class RegionNotFoundError(LookupError):
    """Raised when a surface has no region with the requested identifier."""


class RenderSurface:
    """A page exposing named regions whose content can be replaced wholesale."""

    def get_region(self, region_id: str):
        raise NotImplementedError

    def replace_content(self, region_id: str, markup: str) -> None:
        raise NotImplementedError

    def get_markup(self, region_id: str) -> str:
        raise NotImplementedError


class MemorySurface(RenderSurface):
    """Keeps each region's markup as a plain string.

    With ``record_history`` set, every replacement is also appended to
    ``history`` so callers can see which regions a notification touched.
    """

    def __init__(self, region_ids: Iterable[str], record_history: bool = False):
        self.regions: Dict[str, str] = {region_id: "" for region_id in region_ids}
        self.record_history = record_history
        self.history: List[Tuple[str, str]] = []

    def get_region(self, region_id: str) -> str:
        try:
            return self.regions[region_id]
        except KeyError:
            raise RegionNotFoundError(region_id) from None

    def replace_content(self, region_id: str, markup: str) -> None:
        self.get_region(region_id)
        self.regions[region_id] = markup
        if self.record_history:
            self.history.append((region_id, markup))

    def get_markup(self, region_id: str) -> str:
        return self.get_region(region_id)


class SoupSurface(RenderSurface):
    """Backs the regions with elements of a parsed HTML document."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html, "html.parser")

    def get_region(self, region_id: str):
        element = self.soup.find(id=region_id)
        if element is None:
            raise RegionNotFoundError(region_id)
        return element

    def replace_content(self, region_id: str, markup: str) -> None:
        element = self.get_region(region_id)
        element.clear()
        fragment = BeautifulSoup(markup, "html.parser")
        for child in list(fragment.contents):
            element.append(child.extract())

    def get_markup(self, region_id: str) -> str:
        return self.get_region(region_id).decode_contents()

    def __str__(self) -> str:
        return str(self.soup)


class InputSurface:
    """Holds field values and fans click / key-press notifications out to listeners."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(values or {})
        self._listeners: Dict[str, List[Listener]] = {CLICK: [], KEYPRESS: []}

    def read_value(self, field_id: str) -> str:
        return self.values.get(field_id, "")

    def set_value(self, field_id: str, value: str) -> None:
        self.values[field_id] = value

    def subscribe(self, event: str, listener: Listener) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unknown notification type {event!r}")
        self._listeners[event].append(listener)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

    def click(self, target_id: str, **data: str) -> None:
        logger.debug("click on %s %s", target_id, data)
        for listener in list(self._listeners[CLICK]):
            listener(target_id, data)

    def press_key(self, target_id: str, key: str) -> None:
        logger.debug("key %s pressed in %s", key, target_id)
        for listener in list(self._listeners[KEYPRESS]):
            listener(target_id, key)
