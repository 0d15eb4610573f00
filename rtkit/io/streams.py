from typing import Optional, Union
from abc import ABC, abstractmethod
import logging
import os

from rtkit.errors import InvalidArgument, IOFailure, UnsupportedOperation


logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# -----------------------------------------------------------------------------


class Stream(ABC):
    """ Sequence of bytes with a current position.

        Seek origins are the `os.SEEK_SET`, `os.SEEK_CUR` and `os.SEEK_END`
        constants. Streams are context managers that close themselves on exit.
    """

    DEFAULT_BUFFER_SIZE = 81920

    @property
    @abstractmethod
    def can_read(self) -> 'bool':
        pass

    @property
    @abstractmethod
    def can_write(self) -> 'bool':
        pass

    @property
    @abstractmethod
    def can_seek(self) -> 'bool':
        pass

    @property
    @abstractmethod
    def end_of_stream(self) -> 'bool':
        pass

    @property
    @abstractmethod
    def size(self) -> 'int':
        pass

    @abstractmethod
    def set_size(self, size: 'int') -> 'None':
        """ Truncates the stream, or extends it with zero bytes.
        """

    @property
    @abstractmethod
    def position(self) -> 'int':
        pass

    @position.setter
    def position(self, position: 'int') -> 'None':
        self.seek(position, os.SEEK_SET)

    @abstractmethod
    def seek(self, offset: 'int', whence: 'int' = os.SEEK_SET) -> 'int':
        pass

    @abstractmethod
    def read(self, length: 'int') -> 'bytes':
        pass

    @abstractmethod
    def write(self, data: 'BytesLike', length: 'int' = -1) -> 'int':
        """ Writes `data`, or only its first `length` bytes when `length` is
            not negative. Returns the number of bytes written.
        """

    @abstractmethod
    def flush(self) -> 'None':
        pass

    @abstractmethod
    def close(self) -> 'None':
        pass

    def copy_to(self, stream: 'Stream', buffer_size: 'int' = DEFAULT_BUFFER_SIZE) -> 'int':
        """ Copies the rest of this stream, from the current position, into
            `stream`. The position of `stream` is left after the copied data.
            Returns the number of bytes copied.
        """
        if buffer_size <= 0:
            raise InvalidArgument("buffer size must be greater than zero")
        self._ensure_can_read()
        stream._ensure_can_write()
        copied = 0
        while not self.end_of_stream:
            data = self.read(buffer_size)
            if len(data) == 0:
                break
            stream.write(data)
            copied += len(data)
        stream.flush()
        logger.debug("copied %d bytes from %r to %r", copied, self, stream)
        return copied

    def _ensure_can_read(self) -> 'None':
        if not self.can_read:
            raise UnsupportedOperation("the stream does not support reading")

    def _ensure_can_write(self) -> 'None':
        if not self.can_write:
            raise UnsupportedOperation("the stream does not support writing")

    def __enter__(self) -> 'Stream':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> 'None':
        self.close()


# -----------------------------------------------------------------------------


class MemoryStream(Stream):
    """ Stream kept in memory.

        Seeking past the end is allowed; a later write fills the gap with
        zero bytes.
    """

    def __init__(self, data: 'Optional[BytesLike]' = None) -> 'None':
        self.__buffer: 'Optional[bytearray]' = bytearray() if data is None else bytearray(data)
        self.__position = 0

    @property
    def closed(self) -> 'bool':
        return self.__buffer is None

    @property
    def can_read(self) -> 'bool':
        return not self.closed

    @property
    def can_write(self) -> 'bool':
        return not self.closed

    @property
    def can_seek(self) -> 'bool':
        return not self.closed

    @property
    def end_of_stream(self) -> 'bool':
        return self.__position >= len(self.__open())

    @property
    def size(self) -> 'int':
        return len(self.__open())

    def set_size(self, size: 'int') -> 'None':
        if size < 0:
            raise InvalidArgument("size cannot be negative")
        buffer = self.__open()
        if size < len(buffer):
            del buffer[size:]
        else:
            buffer.extend(bytes(size - len(buffer)))

    @property
    def position(self) -> 'int':
        self.__open()
        return self.__position

    @position.setter
    def position(self, position: 'int') -> 'None':
        self.seek(position, os.SEEK_SET)

    def seek(self, offset: 'int', whence: 'int' = os.SEEK_SET) -> 'int':
        buffer = self.__open()
        if whence == os.SEEK_SET:
            target = offset
        elif whence == os.SEEK_CUR:
            target = self.__position + offset
        elif whence == os.SEEK_END:
            target = len(buffer) + offset
        else:
            raise InvalidArgument(f"invalid seek origin {whence}")
        if target < 0:
            raise IOFailure(f"cannot seek to position {target}")
        self.__position = target
        return target

    def read(self, length: 'int') -> 'bytes':
        buffer = self.__open()
        if length < 0:
            raise InvalidArgument("length cannot be negative")
        start = self.__position
        data = bytes(buffer[start:start + length])
        self.__position = start + len(data)
        return data

    def read_line(self) -> 'bytes':
        """ Reads up to and including the next b'\\n', or to the end of the
            stream when no line feed follows. Reading at the end of the stream
            raises `IOFailure`.
        """
        buffer = self.__open()
        start = self.__position
        if start >= len(buffer):
            raise IOFailure("cannot read a line at the end of the stream")
        end = buffer.find(b'\n', start)
        end = len(buffer) if end < 0 else end + 1
        self.__position = end
        return bytes(buffer[start:end])

    def read_to_end(self) -> 'bytes':
        buffer = self.__open()
        start = self.__position
        self.__position = max(start, len(buffer))
        return bytes(buffer[start:])

    def write_line(self, data: 'BytesLike', length: 'int' = -1) -> 'int':
        """ Writes `data` (or its first `length` bytes) followed by
            `os.linesep`. The returned count includes the line terminator.
        """
        written = self.write(data, length)
        return written + self.write(os.linesep.encode())

    def write(self, data: 'BytesLike', length: 'int' = -1) -> 'int':
        buffer = self.__open()
        chunk = bytes(data) if length < 0 else bytes(data)[:length]
        start = self.__position
        if start > len(buffer):
            buffer.extend(bytes(start - len(buffer)))
        buffer[start:start + len(chunk)] = chunk
        self.__position = start + len(chunk)
        return len(chunk)

    def flush(self) -> 'None':
        self.__open()

    def close(self) -> 'None':
        self.__buffer = None

    def get_buffer(self) -> 'bytes':
        """ Returns the whole content regardless of the current position.
        """
        return bytes(self.__open())

    def write_to(self, stream: 'Stream', buffer_size: 'int' = Stream.DEFAULT_BUFFER_SIZE) -> 'int':
        """ Copies the whole content into `stream`.
        """
        self.position = 0
        return self.copy_to(stream, buffer_size)

    def __open(self) -> 'bytearray':
        if self.__buffer is None:
            raise IOFailure("cannot access a closed stream")
        return self.__buffer

    def __repr__(self) -> 'str':
        return "MemoryStream(closed)" if self.closed else f"MemoryStream({len(self.__buffer)} bytes)"


# -----------------------------------------------------------------------------


class NullStream(Stream):
    """ Stream without backing storage: reads return nothing, writes are
        discarded.
    """

    @property
    def can_read(self) -> 'bool':
        return True

    @property
    def can_write(self) -> 'bool':
        return True

    @property
    def can_seek(self) -> 'bool':
        return True

    @property
    def end_of_stream(self) -> 'bool':
        return True

    @property
    def size(self) -> 'int':
        return 0

    def set_size(self, size: 'int') -> 'None':
        pass

    @property
    def position(self) -> 'int':
        return 0

    @position.setter
    def position(self, position: 'int') -> 'None':
        pass

    def seek(self, offset: 'int', whence: 'int' = os.SEEK_SET) -> 'int':
        return 0

    def read(self, length: 'int') -> 'bytes':
        return b''

    def write(self, data: 'BytesLike', length: 'int' = -1) -> 'int':
        return 0

    def flush(self) -> 'None':
        pass

    def close(self) -> 'None':
        pass

    def copy_to(self, stream: 'Stream', buffer_size: 'int' = Stream.DEFAULT_BUFFER_SIZE) -> 'int':
        return 0

    def __repr__(self) -> 'str':
        return "NullStream()"
