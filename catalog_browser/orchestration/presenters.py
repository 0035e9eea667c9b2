"""
Per-screen presenters: own the UI state, run the fetch, turn the outcome into
Loading / Success / Error.

Lifecycle: construct (state Loading, refresh() fires immediately) -> any number
of refresh() calls -> dispose(). Construction and refresh() must happen on the
thread running the event loop.

Overlapping refreshes: each refresh() bumps a generation number and cancels the
fetch it supersedes. A finished fetch publishes only when its generation is
still current and the presenter has not been disposed, so an older response can
never overwrite a newer one and nothing is published after dispose().
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generic, TypeVar

from catalog_browser.domains.errors import MissingParameterError
from catalog_browser.domains.models import (
    LOADING,
    Category,
    Error,
    Product,
    Success,
    UiState,
    error_message,
)
from catalog_browser.orchestration.scope import TaskScope
from catalog_browser.orchestration.state import StateStore
from catalog_browser.services.use_cases import (
    GetCategoriesUseCase,
    GetProductByIdUseCase,
    GetProductsByCategoryUseCase,
)
from catalog_browser.utils.logger import get_logger

logger = get_logger()

T = TypeVar("T")


class Presenter(Generic[T]):
    """Base presenter. Subclasses implement _load() and optionally _check_params()."""

    def __init__(self) -> None:
        self._state: StateStore[UiState[T]] = StateStore(LOADING)
        self._scope = TaskScope(type(self).__name__)
        self._generation = 0
        self._current: asyncio.Task[Any] | None = None
        self._disposed = False

    @property
    def state(self) -> StateStore[UiState[T]]:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _check_params(self) -> None:
        """Raise MissingParameterError when the screen cannot fetch yet."""

    def _load(self) -> Awaitable[T]:
        raise NotImplementedError

    def refresh(self) -> None:
        if self._disposed:
            return
        try:
            self._check_params()
        except MissingParameterError as e:
            # Left silent: the state stays as it was.
            logger.debug("%s: refresh skipped: %s", type(self).__name__, e)
            return

        self._generation += 1
        generation = self._generation
        if self._current is not None and not self._current.done():
            self._current.cancel()
        self._publish(LOADING)
        self._current = self._scope.launch(self._fetch(generation))

    async def _fetch(self, generation: int) -> None:
        try:
            data = await self._load()
        except asyncio.CancelledError:
            logger.debug("%s: fetch #%d cancelled", type(self).__name__, generation)
            raise
        except Exception as e:
            if self._is_current(generation):
                logger.warning("%s: fetch #%d failed: %s", type(self).__name__, generation, e)
                self._publish(Error(error_message(e)))
            else:
                logger.debug("%s: dropping stale failure of fetch #%d: %s", type(self).__name__, generation, e)
            return
        if self._is_current(generation):
            self._publish(Success(data))
        else:
            logger.debug("%s: dropping stale result of fetch #%d", type(self).__name__, generation)

    def _is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._generation

    def _publish(self, state: UiState[T]) -> None:
        logger.debug("%s -> %r", type(self).__name__, state)
        self._state.set(state)

    async def join(self) -> None:
        """Wait until the fetch started by the latest refresh() has finished."""
        await self._scope.join()

    def dispose(self) -> None:
        """Tear down: cancel in-flight work, close the state stream. Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        self._scope.cancel()
        self._state.close()


class CategoriesPresenter(Presenter[list[Category]]):
    def __init__(self, get_categories: GetCategoriesUseCase) -> None:
        super().__init__()
        self._get_categories = get_categories
        self.refresh()

    def _load(self) -> Awaitable[list[Category]]:
        return self._get_categories()


class CategoryProductsPresenter(Presenter[list[Product]]):
    def __init__(self, get_products: GetProductsByCategoryUseCase, category: str | None) -> None:
        super().__init__()
        self._get_products = get_products
        self._category = category or ""
        self.refresh()

    @property
    def category(self) -> str:
        return self._category

    def _check_params(self) -> None:
        if not self._category.strip():
            raise MissingParameterError("category")

    def _load(self) -> Awaitable[list[Product]]:
        return self._get_products(self._category)


class ProductDetailPresenter(Presenter[Product]):
    """Detail screen. select() reports True back to the screen that opened it."""

    def __init__(
        self,
        get_product: GetProductByIdUseCase,
        product_id: int | None,
        on_result: Callable[[bool], None] | None = None,
    ) -> None:
        super().__init__()
        self._get_product = get_product
        self._product_id = product_id
        self._on_result = on_result
        self.refresh()

    @property
    def product_id(self) -> int | None:
        return self._product_id

    def _check_params(self) -> None:
        if self._product_id is None:
            raise MissingParameterError("product_id")

    def _load(self) -> Awaitable[Product]:
        return self._get_product(self._product_id)

    def select(self) -> None:
        if self._on_result is not None:
            self._on_result(True)
