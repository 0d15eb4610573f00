from rtkit.io import path
from rtkit.io.path import PathSyntax
from rtkit.io.streams import Stream, MemoryStream, NullStream
from rtkit.io.filesystem import FileSystemInfo, FileInfo, DirectoryInfo, FileStat, \
    read_file, write_file, list_directory, stat, copy, move, delete
