from typing import Iterator, Union
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
import logging
import os
import shutil

from rtkit.errors import InvalidArgument, IOFailure, FileNotFound, DirectoryNotFound, UnauthorizedAccess
from rtkit.containers import ArrayList
from rtkit.io import path as paths


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------


@contextmanager
def os_errors(path: 'str') -> 'Iterator[None]':
    """ Translates `OSError` raised inside the block into the `IOFailure`
        family, keeping the message reported by the operating system.
    """
    try:
        yield
    except IOFailure:
        raise
    except FileNotFoundError as e:
        logger.warning("not found: %s (%s)", path, e.strerror)
        raise FileNotFound(e.strerror or str(e), path) from e
    except PermissionError as e:
        logger.warning("access denied: %s (%s)", path, e.strerror)
        raise UnauthorizedAccess(e.strerror or str(e), path) from e
    except OSError as e:
        logger.warning("I/O error on %s: %s", path, e)
        raise IOFailure(e.strerror or str(e), path) from e


# -----------------------------------------------------------------------------


class FileSystemInfo(ABC):
    """ Metadata and operations shared by files and directories.

        The object only remembers a path: whether something actually exists
        there is checked by each operation. Times are POSIX timestamps in
        seconds.
    """

    def __init__(self, path: 'str') -> 'None':
        self._reset(path)

    def _reset(self, path: 'str') -> 'None':
        self.__path = path
        self.__full_path = paths.get_full_path(path)

    @property
    def path(self) -> 'str':
        return self.__path

    @property
    def full_path(self) -> 'str':
        return self.__full_path

    @property
    def name(self) -> 'str':
        return paths.get_file_name(self.__full_path)

    @property
    def directory_name(self) -> 'str':
        return paths.get_directory_name(self.__full_path)

    @property
    def is_readable(self) -> 'bool':
        return os.access(self.__full_path, os.R_OK)

    @property
    def is_writable(self) -> 'bool':
        return os.access(self.__full_path, os.W_OK)

    @property
    def is_link(self) -> 'bool':
        return os.path.islink(self.__full_path)

    @property
    def last_modified_time(self) -> 'float':
        self._ensure_exists()
        with os_errors(self.__full_path):
            return os.stat(self.__full_path).st_mtime

    @last_modified_time.setter
    def last_modified_time(self, mtime: 'float') -> 'None':
        self._ensure_exists()
        with os_errors(self.__full_path):
            os.utime(self.__full_path, (os.stat(self.__full_path).st_atime, mtime))

    @property
    def last_access_time(self) -> 'float':
        self._ensure_exists()
        with os_errors(self.__full_path):
            return os.stat(self.__full_path).st_atime

    @last_access_time.setter
    def last_access_time(self, atime: 'float') -> 'None':
        self._ensure_exists()
        with os_errors(self.__full_path):
            os.utime(self.__full_path, (atime, os.stat(self.__full_path).st_mtime))

    @property
    def create_time(self) -> 'float':
        self._ensure_exists()
        with os_errors(self.__full_path):
            return os.stat(self.__full_path).st_ctime

    @abstractmethod
    def exists(self) -> 'bool':
        pass

    @abstractmethod
    def create(self) -> 'None':
        pass

    @abstractmethod
    def delete(self) -> 'None':
        pass

    @abstractmethod
    def copy_to(self, destination: 'str', overwrite: 'bool' = False) -> 'FileSystemInfo':
        pass

    @abstractmethod
    def move_to(self, destination: 'str', overwrite: 'bool' = False) -> 'None':
        pass

    def rename_to(self, new_name: 'str', overwrite: 'bool' = False) -> 'None':
        """ Renames the entry within its directory.
        """
        if new_name in ('', '.', '..') or any(paths.is_directory_separator(ch) for ch in new_name):
            raise InvalidArgument("the new name must be a valid file name")
        self.move_to(paths.join(self.directory_name, new_name), overwrite)

    def _ensure_exists(self) -> 'None':
        if not self.exists():
            raise FileNotFound("could not find file", self.__full_path)

    def _check_destination(self, destination: 'str', overwrite: 'bool') -> 'str':
        target = paths.get_full_path(destination)
        parent = paths.get_directory_name(target)
        if parent and not os.path.isdir(parent):
            raise DirectoryNotFound("could not find a part of the path", target)
        if os.path.exists(target) and not overwrite:
            raise IOFailure("destination already exists", target)
        return target

    def __eq__(self, other) -> 'bool':
        return type(self) is type(other) and self.full_path == other.full_path

    def __hash__(self) -> 'int':
        return hash((type(self), self.full_path))

    def __repr__(self) -> 'str':
        return f"{type(self).__name__}({self.__full_path!r})"


# -----------------------------------------------------------------------------


class FileInfo(FileSystemInfo):
    @property
    def extension(self) -> 'str':
        return paths.get_extension(self.full_path)

    @property
    def base_name(self) -> 'str':
        return paths.get_file_name_without_extension(self.full_path)

    @property
    def size(self) -> 'int':
        self._ensure_exists()
        with os_errors(self.full_path):
            return os.path.getsize(self.full_path)

    @property
    def is_executable(self) -> 'bool':
        return os.access(self.full_path, os.X_OK)

    def exists(self) -> 'bool':
        return os.path.isfile(self.full_path)

    def create(self) -> 'None':
        """ Creates an empty file, or updates the times of an existing one.
        """
        with os_errors(self.full_path):
            with open(self.full_path, 'ab'):
                pass
            os.utime(self.full_path)
        logger.debug("created file %s", self.full_path)

    def delete(self) -> 'None':
        self._ensure_exists()
        with os_errors(self.full_path):
            os.remove(self.full_path)
        logger.debug("deleted file %s", self.full_path)

    def copy_to(self, destination: 'str', overwrite: 'bool' = False) -> 'FileInfo':
        self._ensure_exists()
        target = self._check_destination(destination, overwrite)
        with os_errors(self.full_path):
            shutil.copy2(self.full_path, target)
        logger.debug("copied file %s to %s", self.full_path, target)
        return FileInfo(target)

    def move_to(self, destination: 'str', overwrite: 'bool' = False) -> 'None':
        """ Moves the file; afterwards this object refers to the new location.
        """
        self._ensure_exists()
        target = self._check_destination(destination, overwrite)
        with os_errors(self.full_path):
            os.replace(self.full_path, target)
        logger.debug("moved file %s to %s", self.full_path, target)
        self._reset(target)

    def read_bytes(self) -> 'bytes':
        self._ensure_exists()
        with os_errors(self.full_path):
            with open(self.full_path, 'rb') as f:
                return f.read()

    def read_text(self, encoding: 'str' = 'utf-8') -> 'str':
        """ Reads the file as text. Content that is not valid in `encoding`
            raises `IOFailure`.
        """
        data = self.read_bytes()
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.warning("cannot decode %s as %s: %s", self.full_path, encoding, e.reason)
            raise IOFailure(f"content is not valid {encoding}", self.full_path) from e

    def write_bytes(self, data: 'bytes') -> 'int':
        with os_errors(self.full_path):
            with open(self.full_path, 'wb') as f:
                return f.write(data)

    def write_text(self, text: 'str', encoding: 'str' = 'utf-8') -> 'int':
        return self.write_bytes(text.encode(encoding))


# -----------------------------------------------------------------------------


class DirectoryInfo(FileSystemInfo):
    def get_files(self) -> 'ArrayList[FileInfo]':
        return ArrayList(e for e in self.get_file_system_infos() if isinstance(e, FileInfo))

    def get_directories(self) -> 'ArrayList[DirectoryInfo]':
        return ArrayList(e for e in self.get_file_system_infos() if isinstance(e, DirectoryInfo))

    def get_file_system_infos(self) -> 'ArrayList[FileSystemInfo]':
        """ Lists the directory entries, sorted by name.
        """
        self._ensure_exists()
        entries: 'ArrayList[FileSystemInfo]' = ArrayList()
        with os_errors(self.full_path):
            for name in sorted(os.listdir(self.full_path)):
                entry = paths.join(self.full_path, name)
                entries.add(DirectoryInfo(entry) if os.path.isdir(entry) else FileInfo(entry))
        return entries

    def exists(self) -> 'bool':
        return os.path.isdir(self.full_path)

    def create(self) -> 'None':
        """ Creates the directory together with any missing parents.
        """
        with os_errors(self.full_path):
            os.makedirs(self.full_path, exist_ok=True)
        logger.debug("created directory %s", self.full_path)

    def delete(self, recursive: 'bool' = False) -> 'None':
        """ Deletes the directory. Without `recursive` the directory must be
            empty.
        """
        self._ensure_exists()
        with os_errors(self.full_path):
            if recursive:
                shutil.rmtree(self.full_path)
            else:
                os.rmdir(self.full_path)
        logger.debug("deleted directory %s", self.full_path)

    def copy_to(self, destination: 'str', overwrite: 'bool' = False,
                recursive: 'bool' = False) -> 'DirectoryInfo':
        """ Copies the files of the directory (and its subdirectories when
            `recursive` is set) to `destination`, creating it if needed.
        """
        self._ensure_exists()
        target = self._check_destination(destination, overwrite)
        copy = DirectoryInfo(target)
        copy.create()
        for entry in self.get_file_system_infos():
            child = paths.join(target, entry.name)
            if isinstance(entry, DirectoryInfo):
                if recursive:
                    entry.copy_to(child, overwrite, recursive)
            else:
                entry.copy_to(child, overwrite)
        logger.debug("copied directory %s to %s", self.full_path, target)
        return copy

    def move_to(self, destination: 'str', overwrite: 'bool' = False) -> 'None':
        """ Moves the whole directory tree; afterwards this object refers to
            the new location. With `overwrite`, an existing destination
            directory receives the moved entries.
        """
        self._ensure_exists()
        target = self._check_destination(destination, overwrite)
        if os.path.isdir(target):
            self.copy_to(target, True, True)
            self.delete(True)
        else:
            with os_errors(self.full_path):
                shutil.move(self.full_path, target)
        logger.debug("moved directory %s to %s", self.full_path, target)
        self._reset(target)


# -----------------------------------------------------------------------------


@dataclass
class FileStat:
    path: 'str'
    size: 'int'
    is_file: 'bool'
    is_directory: 'bool'
    is_link: 'bool'
    modified_time: 'float'
    access_time: 'float'
    create_time: 'float'


def info(path: 'str') -> 'FileSystemInfo':
    return DirectoryInfo(path) if os.path.isdir(path) else FileInfo(path)


def read_file(path: 'str') -> 'bytes':
    return FileInfo(path).read_bytes()


def write_file(path: 'str', data: 'Union[bytes, str]', encoding: 'str' = 'utf-8') -> 'int':
    f = FileInfo(path)
    return f.write_text(data, encoding) if isinstance(data, str) else f.write_bytes(data)


def list_directory(path: 'str') -> 'ArrayList[str]':
    return ArrayList(e.name for e in DirectoryInfo(path).get_file_system_infos())


def stat(path: 'str') -> 'FileStat':
    full_path = paths.get_full_path(path)
    with os_errors(full_path):
        st = os.stat(full_path)
    return FileStat(full_path, st.st_size, os.path.isfile(full_path), os.path.isdir(full_path),
                    os.path.islink(full_path), st.st_mtime, st.st_atime, st.st_ctime)


def copy(source: 'str', destination: 'str', overwrite: 'bool' = False) -> 'FileSystemInfo':
    entry = info(source)
    if isinstance(entry, DirectoryInfo):
        return entry.copy_to(destination, overwrite, recursive=True)
    return entry.copy_to(destination, overwrite)


def move(source: 'str', destination: 'str', overwrite: 'bool' = False) -> 'FileSystemInfo':
    entry = info(source)
    entry.move_to(destination, overwrite)
    return entry


def delete(path: 'str', recursive: 'bool' = False) -> 'None':
    entry = info(path)
    if isinstance(entry, DirectoryInfo):
        entry.delete(recursive)
    else:
        entry.delete()
