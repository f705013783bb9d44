"""Ordered block container for one trip's draft."""

from typing import Iterable, List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from traveljournal.models.base import WireModel
from traveljournal.models.block import EditorBlock
from traveljournal.utils.logging import get_logger


logger = get_logger(__name__)


class IndexOutOfRangeError(IndexError):
    """Raised when an index-based mutation targets a position that doesn't exist.

    Attributes:
        index: The offending sequence position
        size: Number of blocks in the content at the time of the call
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Block index {index} out of range for content with {size} blocks")


class EditorContent(WireModel):
    """Aggregate root of a draft editing session (maps to DraftContentDto).

    Block ``order`` values are kept as contiguous integers starting at 0
    after every insert, remove, reorder and move. Append relies on
    ``next_order`` and never renumbers; update never touches order.

    Lookups and updates with an unknown id are silent no-ops so that a stale
    id from the UI racing a background refresh doesn't blow up.

    Not synchronised: callers must serialise concurrent edits.

    Example:
        >>> content = EditorContent()
        >>> content.append(EditorBlock.new_moment(title="A"))
        >>> content.append(EditorBlock.new_tip(title="B"))
        >>> content.next_order
        2
    """

    blocks: List[EditorBlock] = Field(
        default_factory=list,
        description="Blocks in display order"
    )

    @field_validator("blocks")
    @classmethod
    def copy_blocks(cls, v: List[EditorBlock]) -> List[EditorBlock]:
        """Take private copies so no two contents share a block."""
        return [block.model_copy(deep=True) for block in v]

    # Queries

    def block(self, block_id: UUID) -> Optional[EditorBlock]:
        """Return the block with the given id, or None."""
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    @property
    def next_order(self) -> int:
        """Order value for an appended block: max order + 1, or 0 when empty."""
        return max((block.order for block in self.blocks), default=-1) + 1

    @property
    def block_ids(self) -> List[UUID]:
        return [block.id for block in self.blocks]

    # Mutations

    def append(self, block: EditorBlock) -> None:
        """Append a copy of ``block`` with ``order = next_order``."""
        self.blocks.append(block.model_copy(update={"order": self.next_order}, deep=True))

    def insert(self, block: EditorBlock, index: int) -> None:
        """Insert a copy of ``block`` at sequence position ``index`` and reindex.

        ``index`` may equal ``len(blocks)`` (insert at end).

        Raises:
            IndexOutOfRangeError: If index is negative or past the end
        """
        if index < 0 or index > len(self.blocks):
            raise IndexOutOfRangeError(index, len(self.blocks))

        self.blocks.insert(index, block.model_copy(deep=True))
        self._reindex()

    def remove(self, block_id: UUID) -> None:
        """Remove the block with ``block_id`` if present, then reindex."""
        self.blocks = [block for block in self.blocks if block.id != block_id]
        self._reindex()

    def update(self, block: EditorBlock) -> None:
        """Replace the location and data of the stored block with the same id.

        The stored block keeps its type and current order. Unknown ids are
        ignored.
        """
        for index, existing in enumerate(self.blocks):
            if existing.id == block.id:
                self.blocks[index] = block.model_copy(
                    update={"order": existing.order, "type": existing.type}, deep=True
                )
                return

        logger.debug("editor_block_update_skipped", block_id=str(block.id))

    def reorder(self, block_ids: Iterable[UUID]) -> None:
        """Rebuild the sequence in the order of ``block_ids``.

        This redefines membership: ids with no matching block are skipped and
        any block whose id is not listed is dropped. Pass the complete id set
        to keep every block. A repeated id is taken once.
        """
        by_id = {block.id: block for block in self.blocks}
        reordered: List[EditorBlock] = []
        seen = set()

        for block_id in block_ids:
            block = by_id.get(block_id)
            if block is None or block_id in seen:
                continue
            seen.add(block_id)
            block.order = len(reordered)
            reordered.append(block)

        dropped = len(self.blocks) - len(reordered)
        if dropped:
            logger.warning("editor_reorder_dropped_blocks", dropped=dropped)

        self.blocks = reordered

    def move(self, from_index: int, to_index: int) -> None:
        """Move the block at ``from_index`` to ``to_index`` and reindex.

        Raises:
            IndexOutOfRangeError: If either index is not an existing position
        """
        size = len(self.blocks)
        for index in (from_index, to_index):
            if index < 0 or index >= size:
                raise IndexOutOfRangeError(index, size)

        if from_index == to_index:
            return

        block = self.blocks.pop(from_index)
        self.blocks.insert(to_index, block)
        self._reindex()

    def _reindex(self) -> None:
        for index, block in enumerate(self.blocks):
            block.order = index

    model_config = {"frozen": False}
