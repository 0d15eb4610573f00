from typing import Optional
import os

from rtkit.errors import InvalidArgument


# -----------------------------------------------------------------------------


class PathSyntax:
    """ Path string manipulation for one platform flavour.

        Nothing here touches the file system: all operations work on the
        path strings only. `posix` and `windows` are ready-made instances;
        `native` is the one matching the running interpreter.

        On Windows both '\\' and '/' separate directories, and roots may be
        a drive ("C:", "C:\\"), the current drive root ("\\") or a UNC share
        ("\\\\server\\share").
    """

    def __init__(self, separator: 'str', windows: 'bool') -> 'None':
        self.__separator, self.__windows = separator, windows

    @property
    def separator(self) -> 'str':
        return self.__separator

    @property
    def windows(self) -> 'bool':
        return self.__windows

    def is_directory_separator(self, ch: 'str') -> 'bool':
        if self.__windows:
            return ch == '\\' or ch == '/'
        return ch == self.__separator

    def ends_in_directory_separator(self, path: 'str') -> 'bool':
        return len(path) > 0 and self.is_directory_separator(path[-1])

    def get_directory_name(self, path: 'str') -> 'str':
        """ Returns everything before the last path component, without the
            trailing separators. Returns '' when `path` is empty, a root, or
            has a single component.
        """
        root_len = self.root_length(path)
        end = len(path)
        if end <= root_len:
            return ''
        while end > root_len:
            end -= 1
            if self.is_directory_separator(path[end]):
                break
        while end > root_len and self.is_directory_separator(path[end - 1]):
            end -= 1
        return path[:end]

    def get_file_name(self, path: 'str') -> 'str':
        root_len = self.root_length(path)
        for i in range(len(path) - 1, -1, -1):
            if i < root_len or self.is_directory_separator(path[i]):
                return path[i + 1:]
        return path

    def get_file_name_without_extension(self, path: 'str') -> 'str':
        name = self.get_file_name(path)
        dot = name.rfind('.')
        return name if dot < 0 else name[:dot]

    def has_extension(self, path: 'str') -> 'bool':
        """ True when the last component contains a period that is not its
            final character ('file.' has no extension, '.gitignore' has one).
        """
        last = len(path) - 1
        for i in range(last, -1, -1):
            ch = path[i]
            if ch == '.':
                return i != last
            if self.is_directory_separator(ch):
                break
        return False

    def get_extension(self, path: 'str') -> 'str':
        """ Returns the extension including its period, or '' if there is none.
        """
        last = len(path) - 1
        for i in range(last, -1, -1):
            ch = path[i]
            if ch == '.':
                return path[i:] if i != last else ''
            if self.is_directory_separator(ch):
                break
        return ''

    def change_extension(self, path: 'str', extension: 'Optional[str]') -> 'str':
        """ Replaces the extension of `path` (or appends one). The new
            extension may be given with or without its period; None removes
            the extension.
        """
        if len(path) == 0:
            return ''
        end = len(path)
        for i in range(len(path) - 1, -1, -1):
            ch = path[i]
            if ch == '.':
                end = i
                break
            if self.is_directory_separator(ch):
                break
        stem = path[:end]
        if extension is None:
            return stem
        if not extension.startswith('.'):
            extension = '.' + extension
        return stem + extension

    def is_path_rooted(self, path: 'str') -> 'bool':
        return self.root_length(path) > 0

    def get_path_root(self, path: 'str') -> 'str':
        return path[:self.root_length(path)]

    def combine(self, *paths: 'str') -> 'str':
        """ Concatenates `paths`, inserting separators where needed. When an
            argument is rooted, everything before it is discarded.
        """
        start = len(paths)
        while start > 0:
            start -= 1
            if self.is_path_rooted(paths[start]):
                break
        return self.join(*paths[start:])

    def join(self, *paths: 'str') -> 'str':
        """ Concatenates `paths`, inserting separators where needed. Unlike
            `combine`, rooted arguments get no special treatment.
        """
        result = []
        for i, path in enumerate(paths):
            if len(path) == 0:
                continue
            result.append(path)
            if i + 1 < len(paths) and not self.ends_in_directory_separator(path):
                result.append(self.__separator)
        return ''.join(result)

    def normalize(self, path: 'str') -> 'str':
        """ Replaces every separator with the canonical one and collapses
            repeated separators. The leading pair of a UNC path is kept.
        """
        prefix = ''
        if self.__windows and len(path) >= 2 and self.is_directory_separator(path[0]) \
                and self.is_directory_separator(path[1]):
            prefix, path = self.__separator * 2, path[2:]
        result = []
        for i, ch in enumerate(path):
            if self.is_directory_separator(ch):
                if i + 1 < len(path) and self.is_directory_separator(path[i + 1]):
                    continue
                ch = self.__separator
            result.append(ch)
        return prefix + ''.join(result)

    def get_full_path(self, path: 'str', cwd: 'Optional[str]' = None) -> 'str':
        """ Returns the absolute form of `path` with '.' and '..' segments
            resolved. Relative paths are taken relative to `cwd` (the current
            directory by default). The file system is not consulted.
        """
        if len(path) == 0:
            raise InvalidArgument("path is empty")
        if '\0' in path:
            raise InvalidArgument("path contains illegal characters")
        if not self.is_path_rooted(path):
            path = self.join(os.getcwd() if cwd is None else cwd, path)
        path = self.normalize(path)
        resolved = self.__remove_dots(path, self.root_length(path))
        return self.__separator if len(resolved) == 0 else resolved

    def root_length(self, path: 'str') -> 'int':
        if self.__windows:
            return self.__windows_root_length(path)
        return 1 if len(path) >= 1 and path[0] == self.__separator else 0

    def __windows_root_length(self, path: 'str') -> 'int':
        length = len(path)
        if length >= 1 and self.is_directory_separator(path[0]):
            if length >= 2 and self.is_directory_separator(path[1]):
                # UNC: skip "\\server\share"
                i, n = 2, 2
                while i < length:
                    if self.is_directory_separator(path[i]):
                        n -= 1
                        if n == 0:
                            break
                    i += 1
                return i
            return 1
        if length >= 2 and path[1] == ':':
            return 3 if length >= 3 and self.is_directory_separator(path[2]) else 2
        return 0

    def __remove_dots(self, path: 'str', root_len: 'int') -> 'str':
        length = len(path)
        skip = root_len
        # "/.." and "/." right after the root are segments too
        if skip > 0 and self.is_directory_separator(path[skip - 1]):
            skip -= 1
        canonical = path[:skip]

        i = skip
        while i < length:
            ch = path[i]
            if self.is_directory_separator(ch) and i + 1 < length:
                if path[i + 1] == '.' and (i + 2 == length or self.is_directory_separator(path[i + 2])):
                    i += 2
                    continue
                if i + 2 < length and path[i + 1] == '.' and path[i + 2] == '.' \
                        and (i + 3 == length or self.is_directory_separator(path[i + 3])):
                    s = len(canonical) - 1
                    while s >= skip:
                        if self.is_directory_separator(canonical[s]):
                            # keep the root separator when ".." is the final segment
                            canonical = canonical[:s + 1 if i + 3 >= length and s == skip else s]
                            break
                        s -= 1
                    if s < skip:
                        canonical = canonical[:skip]
                    i += 3
                    continue
            canonical += ch
            i += 1

        if skip != root_len and len(canonical) < root_len:
            canonical += path[root_len - 1]
        return canonical

    def __repr__(self) -> 'str':
        return f"PathSyntax({self.__separator!r}, windows={self.__windows})"


# -----------------------------------------------------------------------------


posix = PathSyntax('/', False)
windows = PathSyntax('\\', True)
native = windows if os.sep == '\\' else posix

is_directory_separator = native.is_directory_separator
ends_in_directory_separator = native.ends_in_directory_separator
get_directory_name = native.get_directory_name
get_file_name = native.get_file_name
get_file_name_without_extension = native.get_file_name_without_extension
has_extension = native.has_extension
get_extension = native.get_extension
change_extension = native.change_extension
is_path_rooted = native.is_path_rooted
get_path_root = native.get_path_root
combine = native.combine
join = native.join
normalize = native.normalize
get_full_path = native.get_full_path
