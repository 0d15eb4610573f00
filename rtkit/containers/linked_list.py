from typing import Any, List, Optional, Iterable, Iterator, TypeVar, Generic
from weakref import ref, ReferenceType

from rtkit.errors import EmptyContainerError, InvalidArgument, StaleNodeError
from rtkit.util.token import Token
from rtkit.containers.base import Collection
from rtkit.containers.values import same_value


# -----------------------------------------------------------------------------


_T = TypeVar('_T')

_NIL = -1


class _Slot(Generic[_T]):
    __slots__ = ('value', 'prev', 'next', 'generation', 'handle')

    def __init__(self) -> 'None':
        self.value: 'Optional[_T]' = None
        self.prev = _NIL
        self.next = _NIL
        self.generation = 0
        self.handle: 'Optional[LinkedListNode[_T]]' = None


class LinkedListNode(Generic[_T]):
    """ Handle to an element of a `LinkedList`.

        A handle names a slot of the list's node storage together with the
        generation of that slot at the time the node was created. Removing
        the node (or clearing the list) moves the slot to a new generation,
        after which every use of the handle raises `StaleNodeError`.

        Handles are created by the list only; a live node always has exactly
        one handle object, so handles may be compared with `is`.
    """

    __slots__ = ('__list', '__owner', '__index', '__generation')

    def __init__(self, owner: 'LinkedList[_T]', index: 'int', generation: 'int') -> 'None':
        self.__list: 'ReferenceType[LinkedList[_T]]' = ref(owner)
        self.__owner = owner.token
        self.__index, self.__generation = index, generation

    @property
    def owner(self) -> 'Token':
        return self.__owner

    @property
    def index(self) -> 'int':
        return self.__index

    @property
    def generation(self) -> 'int':
        return self.__generation

    @property
    def list(self) -> 'Optional[LinkedList[_T]]':
        """ Returns the list the node was created by, or None when that list
            no longer exists.
        """
        return self.__list()

    @property
    def is_valid(self) -> 'bool':
        owner = self.__list()
        return owner is not None and owner._owns(self)

    @property
    def value(self) -> '_T':
        return self.__slot().value

    @value.setter
    def value(self, value: '_T') -> 'None':
        self.__slot().value = value

    @property
    def next(self) -> 'Optional[LinkedListNode[_T]]':
        return self.__live_list()._handle_at(self.__slot().next)

    @property
    def previous(self) -> 'Optional[LinkedListNode[_T]]':
        return self.__live_list()._handle_at(self.__slot().prev)

    def __live_list(self) -> 'LinkedList[_T]':
        owner = self.__list()
        if owner is None or not owner._owns(self):
            raise StaleNodeError("the node no longer belongs to a list")
        return owner

    def __slot(self) -> '_Slot[_T]':
        return self.__live_list()._slot_of(self)

    def __repr__(self) -> 'str':
        state = repr(self.value) if self.is_valid else "stale"
        return f"LinkedListNode({state})"


# -----------------------------------------------------------------------------


class LinkedList(Generic[_T], Collection[_T]):
    """ Doubly linked list with O(1) insertion and removal at a node.

        Nodes are stored in slots owned by the list and linked by slot index.
        Callers receive `LinkedListNode` handles; a handle is accepted only
        by the list that created it and only while its node is still linked.

        Invariants: `head` and `tail` are both `_NIL` exactly when the list
        is empty, and following `next` from `head` reaches `tail` after
        `count() - 1` steps (symmetrically for `prev`).
    """

    def __init__(self, values: 'Optional[Iterable[_T]]' = None) -> 'None':
        self.__token = Token("linked-list")
        self.__slots: 'List[_Slot[_T]]' = []
        self.__free: 'List[int]' = []
        self.__head = _NIL
        self.__tail = _NIL
        self.__size = 0
        if values is not None:
            for value in values:
                self.add_last(value)

    @property
    def token(self) -> 'Token':
        return self.__token

    @property
    def first(self) -> 'Optional[LinkedListNode[_T]]':
        return self._handle_at(self.__head)

    @property
    def last(self) -> 'Optional[LinkedListNode[_T]]':
        return self._handle_at(self.__tail)

    def clear(self) -> 'None':
        i = self.__head
        while i != _NIL:
            slot = self.__slots[i]
            i = slot.next
            self.__release(slot)
        self.__free = list(range(len(self.__slots) - 1, -1, -1))
        self.__head = self.__tail = _NIL
        self.__size = 0

    def count(self) -> 'int':
        return self.__size

    def iterate(self) -> 'Iterator[_T]':
        i = self.__head
        while i != _NIL:
            slot = self.__slots[i]
            i = slot.next
            yield slot.value

    def nodes(self) -> 'Iterator[LinkedListNode[_T]]':
        i = self.__head
        while i != _NIL:
            slot = self.__slots[i]
            i = slot.next
            yield slot.handle

    def __reversed__(self) -> 'Iterator[_T]':
        i = self.__tail
        while i != _NIL:
            slot = self.__slots[i]
            i = slot.prev
            yield slot.value

    def find(self, value: 'Any') -> 'Optional[LinkedListNode[_T]]':
        i = self.__head
        while i != _NIL:
            slot = self.__slots[i]
            if same_value(value, slot.value):
                return slot.handle
            i = slot.next
        return None

    def find_last(self, value: 'Any') -> 'Optional[LinkedListNode[_T]]':
        i = self.__tail
        while i != _NIL:
            slot = self.__slots[i]
            if same_value(value, slot.value):
                return slot.handle
            i = slot.prev
        return None

    def add_first(self, value: '_T') -> 'LinkedListNode[_T]':
        return self.__link(value, _NIL, self.__head)

    def add_last(self, value: '_T') -> 'LinkedListNode[_T]':
        return self.__link(value, self.__tail, _NIL)

    def add_after(self, node: 'LinkedListNode[_T]', value: '_T') -> 'LinkedListNode[_T]':
        i = self.__index_of(node)
        return self.__link(value, i, self.__slots[i].next)

    def add_before(self, node: 'LinkedListNode[_T]', value: '_T') -> 'LinkedListNode[_T]':
        i = self.__index_of(node)
        return self.__link(value, self.__slots[i].prev, i)

    def remove(self, value: 'Any') -> 'bool':
        node = self.find(value)
        if node is None:
            return False
        self.__unlink(node.index)
        return True

    def remove_node(self, node: 'LinkedListNode[_T]') -> 'None':
        self.__unlink(self.__index_of(node))

    def remove_first(self) -> '_T':
        if self.__size == 0:
            raise EmptyContainerError("linked list")
        return self.__unlink(self.__head)

    def remove_last(self) -> '_T':
        if self.__size == 0:
            raise EmptyContainerError("linked list")
        return self.__unlink(self.__tail)

    def _owns(self, node: 'LinkedListNode[_T]') -> 'bool':
        if node.owner is not self.__token:
            return False
        i = node.index
        return 0 <= i < len(self.__slots) and self.__slots[i].generation == node.generation \
            and self.__slots[i].handle is node

    def _slot_of(self, node: 'LinkedListNode[_T]') -> '_Slot[_T]':
        return self.__slots[node.index]

    def _handle_at(self, i: 'int') -> 'Optional[LinkedListNode[_T]]':
        return None if i == _NIL else self.__slots[i].handle

    def __index_of(self, node: 'LinkedListNode[_T]') -> 'int':
        if node.owner is not self.__token:
            raise InvalidArgument("the node belongs to a different linked list")
        if not self._owns(node):
            raise StaleNodeError("the node has been removed from the linked list")
        return node.index

    def __link(self, value: '_T', prev: 'int', next: 'int') -> 'LinkedListNode[_T]':
        if self.__free:
            i = self.__free.pop()
            slot = self.__slots[i]
        else:
            i = len(self.__slots)
            slot = _Slot()
            self.__slots.append(slot)
        slot.value, slot.prev, slot.next = value, prev, next
        slot.handle = LinkedListNode(self, i, slot.generation)

        if prev == _NIL:
            self.__head = i
        else:
            self.__slots[prev].next = i
        if next == _NIL:
            self.__tail = i
        else:
            self.__slots[next].prev = i
        self.__size += 1
        return slot.handle

    def __unlink(self, i: 'int') -> '_T':
        slot = self.__slots[i]
        prev, next = slot.prev, slot.next
        if prev == _NIL:
            self.__head = next
        else:
            self.__slots[prev].next = next
        if next == _NIL:
            self.__tail = prev
        else:
            self.__slots[next].prev = prev
        self.__size -= 1

        value = slot.value
        self.__release(slot)
        self.__free.append(i)
        return value

    @staticmethod
    def __release(slot: '_Slot[_T]') -> 'None':
        slot.value = None
        slot.prev = slot.next = _NIL
        slot.generation += 1
        slot.handle = None
