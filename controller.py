"""Selection state and event handling for the resource directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from catalog import ALL_CATEGORY, CATEGORIES, RESOURCES, Resource
from renderers import cards, chips
from renderers.surface import CLICK, KEYPRESS, InputSurface, RenderSurface
from search import filter_resources

logger = logging.getLogger(__name__)

SEARCH_INPUT_ID = "search-input"
SEARCH_BUTTON_ID = "search-btn"
CHIP_TARGET = chips.CHIP_CLASS
SUBMIT_KEY = "Enter"


@dataclass
class SelectionState:
    active_category: str = ALL_CATEGORY
    search_query: str = ""


@dataclass(frozen=True)
class SelectCategory:
    category: str


@dataclass(frozen=True)
class Search:
    text: str


class DirectoryController:
    """Owns the selection state and keeps both page regions in sync with it.

    Notifications from the input surface are turned into ``SelectCategory`` or
    ``Search`` commands and run through :meth:`dispatch`. Each handler
    overwrites its state field before re-rendering, and regions are always
    replaced in full.
    """

    def __init__(
        self,
        surface: RenderSurface,
        inputs: InputSurface,
        resources: Iterable[Resource] = RESOURCES,
        categories: Iterable[str] = CATEGORIES,
        state: Optional[SelectionState] = None,
    ):
        self.surface = surface
        self.inputs = inputs
        self.resources = tuple(resources)
        self.categories = tuple(categories)
        self.state = state or SelectionState()
        if self.state.active_category not in self.categories:
            raise ValueError(f"Unknown category {self.state.active_category!r}")
        self.initialized = False
        self._chip_listeners: Dict[str, Callable[[], None]] = {}
        self._handlers: Dict[type, Callable] = {
            SelectCategory: self._select_category,
            Search: self._search,
        }

    def visible_resources(self) -> List[Resource]:
        return filter_resources(self.resources, self.state.active_category, self.state.search_query)

    def categories_markup(self) -> str:
        return chips.render_category_chips(self.categories, self.state.active_category)

    def render_categories(self) -> None:
        self.surface.replace_content(chips.REGION_ID, self.categories_markup())

        # One listener per rendered chip; the previous set goes away with the old markup.
        self._chip_listeners = {
            category: self._chip_listener(category) for category in self.categories
        }

    def render_resources(self) -> int:
        """Replace the resource region and return how many cards it shows."""

        visible = self.visible_resources()
        self.surface.replace_content(cards.REGION_ID, cards.render_resource_cards(visible))
        return len(visible)

    def dispatch(self, command) -> None:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command {command!r}")
        handler(command)

    def init(self) -> None:
        """Render both regions and start listening to the input surface."""

        if self.initialized:
            logger.warning("Directory already initialised; ignoring repeated init")
            return

        self.render_categories()
        self.render_resources()
        self.inputs.subscribe(CLICK, self._on_click)
        self.inputs.subscribe(KEYPRESS, self._on_keypress)
        self.initialized = True
        logger.info(
            "Directory initialised with %d resources in %d categories",
            len(self.resources),
            len(self.categories),
        )

    def submit_search(self) -> None:
        self.dispatch(Search(self.inputs.read_value(SEARCH_INPUT_ID)))

    def _chip_listener(self, category: str) -> Callable[[], None]:
        def listener() -> None:
            self.dispatch(SelectCategory(category))

        return listener

    def _select_category(self, command: SelectCategory) -> None:
        if command.category not in self.categories:
            raise ValueError(f"Unknown category {command.category!r}")

        self.state.active_category = command.category
        logger.info("Category selected: %s", command.category)
        self.render_categories()
        self.render_resources()

    def _search(self, command: Search) -> None:
        self.state.search_query = command.text
        matched = self.render_resources()
        logger.info("Search for '%s' matched %d resources", command.text, matched)

    def _on_click(self, target_id: str, data: Dict[str, str]) -> None:
        if target_id == SEARCH_BUTTON_ID:
            self.submit_search()
            return

        if target_id == CHIP_TARGET:
            listener = self._chip_listeners.get(data.get("category", ""))
            if listener is None:
                raise ValueError(f"Unknown category {data.get('category')!r}")
            listener()
            return

        logger.debug("Ignoring click on %s", target_id)

    def _on_keypress(self, target_id: str, key: str) -> None:
        if target_id == SEARCH_INPUT_ID and key == SUBMIT_KEY:
            self.submit_search()
        else:
            logger.debug("Ignoring key %s in %s", key, target_id)
