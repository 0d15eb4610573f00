from rtkit.containers.values import same_value, value_type, normalize_key, Comparable, compare_values
from rtkit.containers.base import Collection, ListLike, KeyValueCollection
from rtkit.containers.array_list import ArrayList
from rtkit.containers.queue import Queue
from rtkit.containers.stack import Stack
from rtkit.containers.linked_list import LinkedList, LinkedListNode
from rtkit.containers.dictionary import Dictionary, KeyValueEntry
