class ListNode:
    class Cons:
        def __init__(self, value, next):
            self.value = value
            self.next = next

    def __init__(self):
        self._cell = None

    @classmethod
    def from_iterable(cls, values):
        head = cls()
        position = head
        for value in values:
            position = position.insert(value)
        return head

    def _take(self):
        # Moves the cell into a fresh slot and leaves this one empty.
        taken = ListNode()
        taken._cell = self._cell
        self._cell = None
        return taken

    def is_empty(self):
        return self._cell is None

    @property
    def value(self):
        if self._cell is None:
            raise IndexError("value from empty list")
        return self._cell.value

    @property
    def next(self):
        if self._cell is None:
            raise IndexError("next from empty list")
        return self._cell.next

    def insert(self, value):
        """Insert ``value`` right after this position and return the new position."""
        if self._cell is None:
            self._cell = self.Cons(value, ListNode())
            return self
        node = ListNode()
        node._cell = self.Cons(value, self._cell.next)
        self._cell.next = node
        return node

    def delete(self):
        if self._cell is None:
            return
        self._cell = self._cell.next._cell

    def reverse(self):
        previous = ListNode()
        current = self._take()
        while current._cell is not None:
            following = current._cell.next
            current._cell.next = previous
            previous = current
            current = following
        self._cell = previous._cell

    def to_list(self):
        return list(self)

    def __iter__(self):
        cell = self._cell
        while cell is not None:
            yield cell.value
            cell = cell.next._cell

    def __len__(self):
        count = 0
        cell = self._cell
        while cell is not None:
            count += 1
            cell = cell.next._cell
        return count

    def __eq__(self, other):
        if not isinstance(other, ListNode):
            return NotImplemented
        mine, theirs = self._cell, other._cell
        while mine is not None and theirs is not None:
            if mine.value != theirs.value:
                return False
            mine, theirs = mine.next._cell, theirs.next._cell
        return mine is None and theirs is None

    __hash__ = None

    def __repr__(self):
        return f"ListNode.from_iterable({self.to_list()!r})"

    def __str__(self):
        return "".join(f"{value} -> " for value in self) + "Nil"
