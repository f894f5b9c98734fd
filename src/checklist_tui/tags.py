"""Tag entry: committed tags, the tag being typed, and a deletion highlight."""

from __future__ import annotations

from checklist_tui.text_buffer import TextBuffer


class TagEditor:
    """Edits a task's tag set.

    Tags are stored as a set; every index-based operation works against
    the sorted list, recomputed on each access.
    """

    def __init__(self, tags: set[str] | frozenset[str] = frozenset()) -> None:
        self.tags: set[str] = set(tags)
        self.typed = TextBuffer()
        self.highlighted_index: int | None = None
        self.is_highlighting = False

    @property
    def sorted_tags(self) -> list[str]:
        return sorted(self.tags)

    @property
    def highlighted_tag(self) -> str | None:
        if not self.is_highlighting or self.highlighted_index is None:
            return None
        ordered = self.sorted_tags
        if not ordered:
            return None
        return ordered[min(self.highlighted_index, len(ordered) - 1)]

    def commit_typed(self) -> bool:
        """Add the typed text as a tag. Returns False if nothing was typed."""
        tag = self.typed.content.strip()
        if not tag:
            return False
        self.tags.add(tag)
        self.typed.clear()
        return True

    # ── Highlight mode ──

    def enter_highlight(self) -> bool:
        if not self.tags:
            return False
        self.is_highlighting = True
        self.highlighted_index = self._clamp(self.highlighted_index or 0)
        return True

    def exit_highlight(self) -> None:
        self.is_highlighting = False

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self.tags) - 1))

    def highlight_left(self) -> None:
        if self.is_highlighting and self.highlighted_index is not None:
            self.highlighted_index = self._clamp(self.highlighted_index - 1)

    def highlight_right(self) -> None:
        if self.is_highlighting and self.highlighted_index is not None:
            self.highlighted_index = self._clamp(self.highlighted_index + 1)

    def delete_highlighted(self) -> str | None:
        """Remove the highlighted tag and return it."""
        tag = self.highlighted_tag
        if tag is None:
            return None
        self.tags.discard(tag)
        if not self.tags:
            self.highlighted_index = None
            self.is_highlighting = False
        else:
            self.highlighted_index = self._clamp(self.highlighted_index - 1)
        return tag
