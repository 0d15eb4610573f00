from rtkit.errors import RuntimeKitError, IndexOutOfRange, EmptyContainerError, InvalidArgument, \
    StaleNodeError, DuplicateKeyError, KeyNotFoundError, ArithmeticOverflow, ArithmeticUnderflow, \
    IOFailure, FileNotFound, DirectoryNotFound, UnauthorizedAccess, UnsupportedOperation
from rtkit.containers import Collection, ListLike, KeyValueCollection, Comparable, \
    ArrayList, Queue, Stack, LinkedList, LinkedListNode, Dictionary, KeyValueEntry
