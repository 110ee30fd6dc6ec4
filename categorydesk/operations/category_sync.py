"""
CategoryDesk Client - Category Synchronization Module

Keeps the local category list consistent with the server collection.
Local state only ever changes after the server confirms an operation;
failures leave everything as it was and are logged.

Author: CategoryDesk Project
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..exceptions import CategoryDeskAPIError
from ..models import Category, CategoryDraft

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditCursor:
    """
    The category currently being edited.

    Attributes:
        position: Index into the category list when the edit began
        category_id: Id of that category
        revision: List revision when the edit began; any other mutation
                  of the list makes the position stale
    """
    position: int
    category_id: int
    revision: int


class CategorySynchronizer:
    """
    Owns the in-memory category list and syncs it with the server.

    Responsibilities:
    - Load the full list (replace, never merge)
    - Create categories and append the server-confirmed record
    - Track a single edit cursor and commit edits by id
    - Delete categories by id
    - Hold the add/update form draft

    All operations catch API errors, log them, record last_error and
    return False. Network calls run outside the state lock, so replies
    may complete in any order, but each completion applies atomically.
    """

    def __init__(self, api_client, on_change: Optional[Callable[[], None]] = None):
        """
        Initialize the synchronizer.

        Args:
            api_client: CategoryDeskAPI instance for server communication
            on_change: Optional callback invoked after local state changes
        """
        self.api = api_client
        self.on_change = on_change
        self.draft = CategoryDraft()
        self.last_error: Optional[str] = None
        self._categories: List[Category] = []
        self._edit_cursor: Optional[EditCursor] = None
        self._revision = 0
        self._lock = threading.RLock()

    # ==================== State Accessors ====================

    @property
    def categories(self) -> List[Category]:
        """Snapshot of the local list in display order."""
        with self._lock:
            return list(self._categories)

    @property
    def edit_cursor(self) -> Optional[EditCursor]:
        return self._edit_cursor

    @property
    def is_editing(self) -> bool:
        return self._edit_cursor is not None

    def _mutated(self):
        # Caller holds the lock
        self._revision += 1

    def _notify(self):
        if self.on_change:
            self.on_change()

    def _fail(self, action: str, error: Exception) -> bool:
        self.last_error = f"Failed to {action}: {error}"
        logger.error(self.last_error)
        return False

    def _index_of(self, category_id: int) -> Optional[int]:
        for index, category in enumerate(self._categories):
            if category.id == category_id:
                return index
        return None

    # ==================== Operations ====================

    def load(self) -> bool:
        """
        Fetch every category and replace the local list.

        On failure the previously loaded list stays in place.
        Any edit in progress is abandoned on success, together with its draft.

        Returns:
            True if the list was reloaded
        """
        logger.info("Loading categories from server")
        try:
            categories = self.api.list_categories()
        except CategoryDeskAPIError as e:
            return self._fail("fetch categories", e)

        with self._lock:
            self._categories = list(categories)
            if self._edit_cursor is not None:
                self._edit_cursor = None
                self.draft.reset()
            self._mutated()
        self.last_error = None
        logger.info(f"Loaded {len(categories)} categories")
        self._notify()
        return True

    def create(self, name: Optional[str] = None, description: Optional[str] = None) -> bool:
        """
        Create a category on the server and append the confirmed record.

        Args:
            name: Category name (defaults to the draft)
            description: Category description (defaults to the draft)

        Returns:
            True if created; the draft is cleared only then
        """
        if name is None:
            name = self.draft.name
        if description is None:
            description = self.draft.description

        logger.info(f"Creating category: {name}")
        try:
            created = self.api.create_category(name, description)
        except CategoryDeskAPIError as e:
            return self._fail("save category", e)

        with self._lock:
            self._categories.append(created)
            self._mutated()
            self.draft.reset()
        self.last_error = None
        logger.info(f"Category created with id {created.id}")
        self._notify()
        return True

    def begin_edit(self, position: int) -> bool:
        """
        Start editing the category at position.

        Copies its name and description into the draft, silently
        replacing any unsaved draft. Out-of-range positions are ignored.

        Returns:
            True if the edit cursor was set
        """
        with self._lock:
            if not 0 <= position < len(self._categories):
                logger.debug(f"Ignoring edit request for position {position}")
                return False
            category = self._categories[position]
            self._edit_cursor = EditCursor(position, category.id, self._revision)
            self.draft.name = category.name
            self.draft.description = category.description
        logger.debug(f"Editing category {category.id} at position {position}")
        self._notify()
        return True

    def cancel_edit(self):
        """Drop the edit cursor and the unsaved draft."""
        with self._lock:
            self._edit_cursor = None
            self.draft.reset()
        self._notify()

    def reset(self):
        """Forget the loaded list, the edit cursor and the draft."""
        with self._lock:
            self._categories = []
            self._edit_cursor = None
            self._mutated()
            self.draft.reset()
        self.last_error = None
        self._notify()

    def _resolve_cursor(self) -> Optional[int]:
        """
        Current list position of the edited category.

        Caller holds the lock. A cursor whose revision is out of date is
        re-resolved by id; None means the category is gone.
        """
        cursor = self._edit_cursor
        if cursor.revision == self._revision:
            return cursor.position
        return self._index_of(cursor.category_id)

    def commit_edit(self) -> bool:
        """
        Send the draft as an update of the category under the edit cursor.

        On success the draft's name and description are written into the
        local record (the id is kept; the response body is not used), and
        the cursor and draft are cleared. Without an edit cursor this is a
        no-op.

        Returns:
            True if the update was confirmed and applied
        """
        with self._lock:
            if self._edit_cursor is None:
                return False
            if self._resolve_cursor() is None:
                logger.warning(f"Category {self._edit_cursor.category_id} no longer in list - edit abandoned")
                self._edit_cursor = None
                return False
            category_id = self._edit_cursor.category_id
            name = self.draft.name
            description = self.draft.description

        logger.info(f"Updating category {category_id}")
        try:
            self.api.update_category(category_id, name, description)
        except CategoryDeskAPIError as e:
            return self._fail("update category", e)

        with self._lock:
            index = self._index_of(category_id)
            if index is not None:
                self._categories[index] = self._categories[index].model_copy(
                    update={"name": name, "description": description}
                )
                self._mutated()
            else:
                logger.warning(f"Category {category_id} removed before update completed")
            self._edit_cursor = None
            self.draft.reset()
        self.last_error = None
        logger.info(f"Category {category_id} updated")
        self._notify()
        return True

    def save(self) -> bool:
        """Add/Update button: commit the edit if one is active, else create from the draft."""
        if self.is_editing:
            return self.commit_edit()
        return self.create()

    def delete(self, category_id: int) -> bool:
        """
        Delete a category on the server, then drop it from the local list.

        Only the first record with a matching id is removed. An id that is
        not in the local list still triggers the remote call.
        If the deleted category was being edited, that edit is dropped.

        Returns:
            True if the server confirmed the deletion
        """
        logger.info(f"Deleting category {category_id}")
        try:
            self.api.delete_category(category_id)
        except CategoryDeskAPIError as e:
            return self._fail("delete category", e)

        with self._lock:
            index = self._index_of(category_id)
            if index is not None:
                del self._categories[index]
                self._mutated()
            if self._edit_cursor is not None and self._edit_cursor.category_id == category_id:
                self._edit_cursor = None
                self.draft.reset()
        self.last_error = None
        logger.info(f"Category {category_id} deleted")
        self._notify()
        return True
